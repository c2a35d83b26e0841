from fastapi import APIRouter
from pydantic import BaseModel

from app.models.match import AccessDecision
from app.models.member import MemberProfile
from app.services.matching.visibility import VisibilityPolicy

router = APIRouter(tags=["visibility"])


class AccessRequest(BaseModel):
    viewer: MemberProfile | None = None
    target: MemberProfile | None = None


@router.post("/visibility", response_model=AccessDecision)
async def check_access(payload: AccessRequest) -> AccessDecision:
    return VisibilityPolicy.access_for(payload.viewer, payload.target)


@router.get("/visibility/requirements")
async def unlock_requirements() -> dict[str, list[str]]:
    return {"requirements": VisibilityPolicy.locked_requirements()}
