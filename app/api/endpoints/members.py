from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from app.models.member import MemberProfile
from app.services.matching.directory import DirectoryEntry, search_members

router = APIRouter(prefix="/members", tags=["members"])


class SearchRequest(BaseModel):
    viewer: MemberProfile | None = None
    members: list[MemberProfile] = Field(default_factory=list)
    venue: str | None = Field(default=None, description="Home venue id, or 'all'")
    query: str | None = Field(default=None, description="Matched against name, company and catch copy")


class SearchResponse(BaseModel):
    members: list[DirectoryEntry]


@router.post("/search", response_model=SearchResponse)
async def search(payload: SearchRequest) -> SearchResponse:
    try:
        entries = search_members(payload.viewer, payload.members, venue=payload.venue, query=payload.query)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Member search failed: {e}")
        raise HTTPException(status_code=500, detail="Member search failed")
    return SearchResponse(members=entries)
