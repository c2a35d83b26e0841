from fastapi import APIRouter

from .endpoints.catalog import router as catalog_router
from .endpoints.health import router as health_router
from .endpoints.match import router as match_router
from .endpoints.members import router as members_router
from .endpoints.visibility import router as visibility_router

api_router = APIRouter()


@api_router.get("/")
async def root():
    return {"message": "Match API is running"}


api_router.include_router(health_router)
api_router.include_router(match_router)
api_router.include_router(visibility_router)
api_router.include_router(members_router)
api_router.include_router(catalog_router)
