from fastapi import APIRouter, Query

from app.core.constants import INDUSTRIES, TAGS_GIVE, TAGS_WANT, VENUES
from app.models.rank import RankInfo, RankProgress, rank_progress, rank_table

router = APIRouter(tags=["catalog"])


@router.get("/ranks", response_model=list[RankInfo])
async def list_ranks() -> list[RankInfo]:
    return rank_table()


@router.get("/ranks/progress", response_model=RankProgress)
async def get_rank_progress(
    rank: str = Query(default="WHITE", description="Current rank; unknown values count as WHITE"),
    score: int = Query(default=0, description="Accumulated rank points"),
) -> RankProgress:
    return rank_progress(rank, score)


@router.get("/venues")
async def list_venues() -> dict[str, list]:
    return {"venues": VENUES}


@router.get("/tags")
async def list_tags() -> dict[str, list[str]]:
    return {"want": TAGS_WANT, "give": TAGS_GIVE, "industries": INDUSTRIES}
