"""
Visibility policy tests.

Detail viewing and messaging share one rule; every grant condition is
exercised on its own and missing profiles are denied.
"""

import pytest

from app.models.member import MemberProfile
from app.models.rank import RANK_ORDER, Rank
from app.services.matching.visibility import VisibilityPolicy


def make_member(
    member_id: str,
    rank: str = "WHITE",
    home_venue: str = "osaka",
    unlocked_venues: list[str] | None = None,
    is_admin: bool = False,
) -> MemberProfile:
    """Helper to create test members."""
    return MemberProfile(
        member_id=member_id,
        rank=rank,
        home_venue=home_venue,
        unlocked_venues=unlocked_venues or [],
        is_admin=is_admin,
    )


class TestGrantRules:
    def test_self_access(self):
        member = make_member("m", home_venue="tokyo")
        assert VisibilityPolicy.can_view_detail(member, member) is True

    def test_admin_sees_everyone(self):
        admin = make_member("a", home_venue="osaka", is_admin=True)
        target = make_member("t", rank="PLATINUM", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(admin, target) is True
        assert VisibilityPolicy.access_for(admin, target).reason == "admin"

    def test_same_venue(self):
        viewer = make_member("v", home_venue="kobe")
        target = make_member("t", home_venue="kobe")

        assert VisibilityPolicy.can_view_detail(viewer, target) is True
        assert VisibilityPolicy.access_for(viewer, target).reason == "same_venue"

    def test_gold_sees_other_venues(self):
        viewer = make_member("v", rank="GOLD", home_venue="osaka")
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(viewer, target) is True
        assert VisibilityPolicy.access_for(viewer, target).reason == "rank"

    def test_silver_cannot_see_other_venues(self):
        viewer = make_member("v", rank="SILVER", home_venue="osaka")
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(viewer, target) is False

    def test_unlocked_venue(self):
        viewer = make_member("v", home_venue="osaka", unlocked_venues=["tokyo"])
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(viewer, target) is True
        assert VisibilityPolicy.access_for(viewer, target).reason == "unlocked_venue"

    def test_unrelated_white_member_is_locked(self):
        target = make_member("t", home_venue="osaka")
        colleague = make_member("c", home_venue="osaka")
        stranger = make_member("s", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(colleague, target) is True
        assert VisibilityPolicy.can_view_detail(stranger, target) is False
        assert VisibilityPolicy.access_for(stranger, target).reason == "locked"

    def test_unknown_rank_is_lowest(self):
        viewer = make_member("v", rank="EMPEROR", home_venue="osaka")
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(viewer, target) is False

    @pytest.mark.parametrize("rank", ["gold", "Platinum", " DIAMOND"])
    def test_miscased_rank_does_not_unlock_other_venues(self, rank):
        viewer = make_member("v", rank=rank, home_venue="osaka")
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_view_detail(viewer, target) is False
        assert VisibilityPolicy.can_message(viewer, target) is False
        assert VisibilityPolicy.access_for(viewer, target).reason == "locked"


class TestFailClosed:
    def test_missing_viewer(self):
        assert VisibilityPolicy.can_view_detail(None, make_member("t")) is False
        assert VisibilityPolicy.can_message(None, make_member("t")) is False

    def test_missing_target(self):
        assert VisibilityPolicy.can_view_detail(make_member("v"), None) is False
        assert VisibilityPolicy.access_for(make_member("v"), None).reason == "missing_profile"


class TestMessaging:
    @pytest.mark.parametrize("rank", [r.value for r in Rank])
    @pytest.mark.parametrize("unlocked", [[], ["tokyo"]])
    def test_message_follows_detail(self, rank, unlocked):
        viewer = make_member("v", rank=rank, home_venue="osaka", unlocked_venues=unlocked)
        target = make_member("t", home_venue="tokyo")

        assert VisibilityPolicy.can_message(viewer, target) == VisibilityPolicy.can_view_detail(viewer, target)

    def test_decision_carries_both_flags(self):
        decision = VisibilityPolicy.access_for(make_member("v", rank="DIAMOND"), make_member("t", home_venue="kobe"))

        assert decision.can_view_detail is True
        assert decision.can_message is True


class TestRankMonotonicity:
    def test_higher_ranks_keep_access(self):
        target = make_member("t", home_venue="tokyo")
        granted = False
        for rank in RANK_ORDER:
            allowed = VisibilityPolicy.can_view_detail(make_member("v", rank=rank.value), target)
            # once granted, never revoked by a higher rank
            assert allowed or not granted
            granted = granted or allowed
        assert granted


def test_locked_requirements_mention_gold():
    requirements = VisibilityPolicy.locked_requirements()

    assert len(requirements) == 3
    assert any("GOLD" in r for r in requirements)
