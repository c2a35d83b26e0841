from app.models.member import MemberProfile
from app.services.matching.directory import search_members


def make_member(member_id: str, home_venue: str, name: str = "", company_name: str = "", catch_copy: str = ""):
    return MemberProfile(
        member_id=member_id,
        home_venue=home_venue,
        name=name,
        company_name=company_name,
        catch_copy=catch_copy,
        bio="secret bio",
    )


MEMBERS = [
    make_member("a", "osaka", name="Sato", company_name="Sato Realty"),
    make_member("b", "tokyo", name="Suzuki", catch_copy="Marketing for startups"),
    make_member("c", "kobe", name="Takahashi", company_name="Kobe Foods"),
]


class TestSearchMembers:
    def test_no_filters_returns_all_in_order(self):
        viewer = make_member("v", "osaka")

        entries = search_members(viewer, MEMBERS)

        assert [e.member_id for e in entries] == ["a", "b", "c"]

    def test_venue_filter(self):
        viewer = make_member("v", "osaka")

        assert [e.member_id for e in search_members(viewer, MEMBERS, venue="tokyo")] == ["b"]
        assert len(search_members(viewer, MEMBERS, venue="all")) == 3

    def test_query_matches_name_company_and_catch_copy(self):
        viewer = make_member("v", "osaka")

        assert [e.member_id for e in search_members(viewer, MEMBERS, query="realty")] == ["a"]
        assert [e.member_id for e in search_members(viewer, MEMBERS, query="MARKETING")] == ["b"]
        assert [e.member_id for e in search_members(viewer, MEMBERS, query="taka")] == ["c"]

    def test_locked_entries_hide_profile(self):
        viewer = make_member("v", "osaka")

        entries = {e.member_id: e for e in search_members(viewer, MEMBERS)}

        assert entries["a"].can_view_detail is True
        assert entries["a"].profile is not None
        assert entries["b"].can_view_detail is False
        assert entries["b"].can_message is False
        assert entries["b"].profile is None
        assert entries["b"].venue_name == "東京"

    def test_missing_viewer_locks_everything(self):
        entries = search_members(None, MEMBERS)

        assert all(not e.can_view_detail and e.profile is None for e in entries)
