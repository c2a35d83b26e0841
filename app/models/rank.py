from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Rank(str, Enum):
    """
    Ordered membership tier.

    Declaration order is privilege order: WHITE < BLUE < SILVER < GOLD < DIAMOND < PLATINUM.
    Both match scoring and profile visibility read ranks through this table only.
    """

    WHITE = "WHITE"
    BLUE = "BLUE"
    SILVER = "SILVER"
    GOLD = "GOLD"
    DIAMOND = "DIAMOND"
    PLATINUM = "PLATINUM"

    @classmethod
    def parse(cls, value: Any) -> "Rank":
        """Resolve any input to a rank. Anything but an exact tier name degrades to WHITE."""
        if isinstance(value, Rank):
            return value
        if isinstance(value, str):
            try:
                return cls(value)
            except ValueError:
                return cls.WHITE
        return cls.WHITE

    @property
    def order(self) -> int:
        return RANK_ORDER.index(self)

    @property
    def label(self) -> str:
        return RANK_LABELS[self]


RANK_ORDER: Final[list[Rank]] = list(Rank)

RANK_LABELS: Final[dict[Rank, str]] = {
    Rank.WHITE: "ホワイト",
    Rank.BLUE: "ブルー",
    Rank.SILVER: "シルバー",
    Rank.GOLD: "ゴールド",
    Rank.DIAMOND: "ダイヤモンド",
    Rank.PLATINUM: "プラチナ",
}

# Points a member needs to hold each rank
RANK_THRESHOLDS: Final[dict[Rank, int]] = {
    Rank.WHITE: 0,
    Rank.BLUE: 100,
    Rank.SILVER: 300,
    Rank.GOLD: 600,
    Rank.DIAMOND: 1000,
    Rank.PLATINUM: 2000,
}

# Bonus points a candidate's rank adds to a match score
RANK_MATCH_BONUS: Final[dict[Rank, int]] = {
    Rank.WHITE: 0,
    Rank.BLUE: 3,
    Rank.SILVER: 5,
    Rank.GOLD: 7,
    Rank.DIAMOND: 10,
    Rank.PLATINUM: 10,
}

# Lowest rank that can view profiles across venues
DETAIL_VIEW_RANK: Final[Rank] = Rank.GOLD


def rank_index(value: Any) -> int:
    """Ordinal position of a rank (0 = WHITE). Unknown values map to 0."""
    return Rank.parse(value).order


def is_gold_or_higher(value: Any) -> bool:
    return rank_index(value) >= DETAIL_VIEW_RANK.order


def match_bonus(value: Any) -> int:
    return RANK_MATCH_BONUS[Rank.parse(value)]


def next_rank(value: Any) -> Rank | None:
    idx = rank_index(value)
    if idx >= len(RANK_ORDER) - 1:
        return None
    return RANK_ORDER[idx + 1]


class RankInfo(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rank: Rank
    label: str
    threshold: int
    order: int


class RankProgress(BaseModel):
    """Where a member stands on the way to the next rank."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    rank: Rank
    label: str
    rank_score: int = 0
    next_rank: Rank | None = None
    next_threshold: int | None = None
    points_to_next: int = Field(default=0, ge=0)


def rank_table() -> list[RankInfo]:
    return [
        RankInfo(rank=rank, label=rank.label, threshold=RANK_THRESHOLDS[rank], order=rank.order)
        for rank in RANK_ORDER
    ]


def rank_progress(value: Any, rank_score: int | None = 0) -> RankProgress:
    """
    Compute progress towards the next rank.

    Args:
        value: Current rank (any form accepted by Rank.parse)
        rank_score: Accumulated points; None or negative counts as 0

    Returns:
        RankProgress; at the top rank next_rank is None and points_to_next is 0
    """
    current = Rank.parse(value)
    score = max(0, rank_score or 0)
    upcoming = next_rank(current)

    if upcoming is None:
        return RankProgress(rank=current, label=current.label, rank_score=score)

    threshold = RANK_THRESHOLDS[upcoming]
    return RankProgress(
        rank=current,
        label=current.label,
        rank_score=score,
        next_rank=upcoming,
        next_threshold=threshold,
        points_to_next=max(0, threshold - score),
    )
