from collections.abc import Iterable

from loguru import logger

from app.core.config import settings
from app.models.match import MatchResult, ScoredMember
from app.models.member import MemberProfile
from app.models.rank import match_bonus
from app.services.matching.constants import (
    GIVE_TAG_POINTS,
    INDUSTRY_POINTS,
    RANK_BONUS_MAX_POINTS,
    REASON_CAN_RECEIVE,
    REASON_HIGH_RANK,
    REASON_OTHER_WANTS,
    REASON_SAME_INDUSTRY,
    SCORE_MAX,
    SCORE_MIN,
    WANT_TAG_POINTS,
)
from app.services.matching.synergy import synergy_sentence
from app.services.matching.tags import TagMatcher, any_match, get_tag_matcher


def normalize_score(achieved: int, maximum: int) -> int:
    """
    Convert raw points into a 0-100 percentage.

    Rounds half up on integer arithmetic (62.5 -> 63) and returns 0 when
    there is nothing to normalize against.
    """
    if maximum <= 0:
        return 0
    percent = (200 * achieved + maximum) // (2 * maximum)
    return max(SCORE_MIN, min(SCORE_MAX, percent))


class MatchScorer:
    """
    Scores how well another member fits the viewer.

    Pure and stateless: the same pair of profiles always produces the same result.
    The tag matching heuristic is injected so it can be swapped without touching
    the point budget.
    """

    def __init__(self, matcher: TagMatcher | None = None):
        self.matcher = matcher or get_tag_matcher(settings.TAG_MATCH_STRATEGY)

    def score(self, viewer: MemberProfile | None, other: MemberProfile | None) -> MatchResult:
        """
        Compute the match between viewer and other from the viewer's perspective.

        Args:
            viewer: Member looking at the list / profile
            other: Candidate member

        Returns:
            MatchResult; the zero result when either profile is missing
        """
        if viewer is None or other is None:
            return MatchResult.empty()

        achieved = 0
        maximum = 0
        reasons: list[str] = []
        can_provide: list[str] = []
        can_receive: list[str] = []

        other_gives = other.give_tags or []
        other_wants = other.want_tags or []

        # 1. What the viewer wants that the other member gives
        for tag in viewer.want_tags or []:
            maximum += WANT_TAG_POINTS
            if any_match(tag, other_gives, self.matcher):
                achieved += WANT_TAG_POINTS
                can_receive.append(tag)
                reasons.append(REASON_CAN_RECEIVE.format(tag=tag))

        # 2. What the viewer gives that the other member wants
        for tag in viewer.give_tags or []:
            maximum += GIVE_TAG_POINTS
            if any_match(tag, other_wants, self.matcher):
                achieved += GIVE_TAG_POINTS
                can_provide.append(tag)
                reasons.append(REASON_OTHER_WANTS.format(tag=tag))

        # 3. Shared industry (exact label)
        maximum += INDUSTRY_POINTS
        other_industries = set(other.industries or [])
        if any(industry in other_industries for industry in viewer.industries or []):
            achieved += INDUSTRY_POINTS
            reasons.append(REASON_SAME_INDUSTRY)

        # 4. Candidate rank
        maximum += RANK_BONUS_MAX_POINTS
        bonus = match_bonus(other.rank)
        if bonus > 0:
            achieved += bonus
            reasons.append(REASON_HIGH_RANK)

        return MatchResult(
            score=normalize_score(achieved, maximum),
            reasons=reasons,
            can_provide=can_provide,
            can_receive=can_receive,
            synergy_sentence=synergy_sentence(viewer, other, can_provide, can_receive),
        )

    def recommend(
        self,
        viewer: MemberProfile | None,
        candidates: Iterable[MemberProfile | None],
        limit: int,
        exclude_ids: Iterable[str] | None = None,
    ) -> list[ScoredMember]:
        """
        Rank candidates for the viewer, best match first.

        The viewer itself (by member_id) and any member in exclude_ids are
        skipped. Ties keep the candidates' original order.
        """
        if viewer is None or limit <= 0:
            return []

        excluded = set(exclude_ids or [])
        scored: list[ScoredMember] = []
        for candidate in candidates or []:
            if candidate is None or candidate.member_id == viewer.member_id:
                continue
            if candidate.member_id in excluded:
                continue
            scored.append(ScoredMember(member=candidate, match=self.score(viewer, candidate)))

        # sorted() is stable, so equal scores stay in candidate order
        ranked = sorted(scored, key=lambda entry: entry.match.score, reverse=True)
        logger.debug(f"Scored {len(scored)} candidates for {viewer.member_id}, returning top {limit}")
        return ranked[:limit]


match_scorer = MatchScorer()
