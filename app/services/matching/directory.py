from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from app.core.constants import ALL_VENUES, venue_name
from app.models.member import MemberProfile
from app.services.matching.visibility import VisibilityPolicy


class DirectoryEntry(BaseModel):
    """
    A member list card. The full profile is only attached when the viewer
    is allowed to see it.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    member_id: str
    name: str
    company_name: str
    rank: str
    rank_label: str
    home_venue: str
    venue_name: str
    can_view_detail: bool
    can_message: bool
    profile: MemberProfile | None = None


def _matches_query(member: MemberProfile, query: str) -> bool:
    needle = query.lower()
    return any(needle in (field or "").lower() for field in (member.name, member.company_name, member.catch_copy))


def to_entry(viewer: MemberProfile | None, member: MemberProfile) -> DirectoryEntry:
    access = VisibilityPolicy.access_for(viewer, member)
    return DirectoryEntry(
        member_id=member.member_id,
        name=member.name,
        company_name=member.company_name,
        rank=member.rank_level.value,
        rank_label=member.rank_level.label,
        home_venue=member.home_venue,
        venue_name=venue_name(member.home_venue),
        can_view_detail=access.can_view_detail,
        can_message=access.can_message,
        profile=member if access.can_view_detail else None,
    )


def search_members(
    viewer: MemberProfile | None,
    members: Iterable[MemberProfile | None],
    venue: str | None = None,
    query: str | None = None,
) -> list[DirectoryEntry]:
    """
    Filter the member directory and annotate each entry with the viewer's access.

    Args:
        viewer: Member browsing the directory (None means everything is locked)
        members: Already-fetched member profiles
        venue: Home venue filter; None or "all" disables it
        query: Case-insensitive text matched against name, company and catch copy

    Returns:
        Entries in input order
    """
    venue_filter = None if not venue or venue == ALL_VENUES else venue
    text = (query or "").strip()

    entries = []
    for member in members or []:
        if member is None:
            continue
        if venue_filter and member.home_venue != venue_filter:
            continue
        if text and not _matches_query(member, text):
            continue
        entries.append(to_entry(viewer, member))
    return entries
