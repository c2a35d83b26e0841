from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import AliasChoices, BaseModel, Field

from app.core.config import settings
from app.models.match import MatchResult, ScoredMember
from app.models.member import MemberProfile
from app.services.matching.scorer import match_scorer

router = APIRouter(prefix="/match", tags=["match"])


class ScoreRequest(BaseModel):
    viewer: MemberProfile | None = Field(default=None, description="Member looking at the profile")
    other: MemberProfile | None = Field(default=None, description="Member being scored")


class RecommendRequest(BaseModel):
    viewer: MemberProfile | None = Field(default=None, description="Member receiving recommendations")
    candidates: list[MemberProfile] = Field(default_factory=list, description="Already-fetched candidate profiles")
    limit: int | None = Field(
        default=None,
        ge=0,
        le=settings.MAX_RECOMMENDATION_LIMIT,
        description="Maximum number of results (defaults to DEFAULT_RECOMMENDATION_LIMIT)",
    )
    exclude_ids: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("exclude_ids", "excludeIds"),
        description="Members to leave out, e.g. those already sent an interest",
    )


class RecommendResponse(BaseModel):
    results: list[ScoredMember]


@router.post("/score", response_model=MatchResult)
async def score_match(payload: ScoreRequest) -> MatchResult:
    return match_scorer.score(payload.viewer, payload.other)


@router.post("/recommend", response_model=RecommendResponse)
async def recommend_members(payload: RecommendRequest) -> RecommendResponse:
    limit = settings.DEFAULT_RECOMMENDATION_LIMIT if payload.limit is None else payload.limit
    try:
        results = match_scorer.recommend(payload.viewer, payload.candidates, limit, payload.exclude_ids)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to build recommendations: {e}")
        raise HTTPException(status_code=500, detail="Failed to build recommendations")

    viewer_id = payload.viewer.member_id if payload.viewer else None
    logger.info(f"Recommended {len(results)}/{len(payload.candidates)} members for {viewer_id}")
    return RecommendResponse(results=results)
