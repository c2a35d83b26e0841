from app.models.match import AccessDecision
from app.models.member import MemberProfile
from app.models.rank import DETAIL_VIEW_RANK, is_gold_or_higher

REASON_SELF = "self"
REASON_ADMIN = "admin"
REASON_SAME_VENUE = "same_venue"
REASON_RANK = "rank"
REASON_UNLOCKED_VENUE = "unlocked_venue"
REASON_LOCKED = "locked"
REASON_MISSING_PROFILE = "missing_profile"


class VisibilityPolicy:
    """
    Decides whether a viewer may see a member's detailed profile or message them.

    Messaging and detail viewing share one rule so they can never disagree.
    Missing profiles are always denied.
    """

    @staticmethod
    def grant_reason(viewer: MemberProfile | None, target: MemberProfile | None) -> str:
        """Name of the first grant rule that applies, or a denial reason."""
        if viewer is None or target is None:
            return REASON_MISSING_PROFILE
        if viewer.member_id == target.member_id:
            return REASON_SELF
        if viewer.is_admin:
            return REASON_ADMIN
        if viewer.home_venue == target.home_venue:
            return REASON_SAME_VENUE
        if is_gold_or_higher(viewer.rank):
            return REASON_RANK
        if target.home_venue in (viewer.unlocked_venues or []):
            return REASON_UNLOCKED_VENUE
        return REASON_LOCKED

    @staticmethod
    def can_view_detail(viewer: MemberProfile | None, target: MemberProfile | None) -> bool:
        return VisibilityPolicy.grant_reason(viewer, target) not in (REASON_LOCKED, REASON_MISSING_PROFILE)

    @staticmethod
    def can_message(viewer: MemberProfile | None, target: MemberProfile | None) -> bool:
        return VisibilityPolicy.can_view_detail(viewer, target)

    @staticmethod
    def access_for(viewer: MemberProfile | None, target: MemberProfile | None) -> AccessDecision:
        reason = VisibilityPolicy.grant_reason(viewer, target)
        allowed = reason not in (REASON_LOCKED, REASON_MISSING_PROFILE)
        return AccessDecision(can_view_detail=allowed, can_message=allowed, reason=reason)

    @staticmethod
    def locked_requirements() -> list[str]:
        """Ways a viewer can unlock a member whose profile is hidden."""
        return [
            "Be a member of the same venue",
            f"Reach {DETAIL_VIEW_RANK.value} rank or higher",
            "Attend an event at the member's venue to unlock it",
        ]
