from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator

from app.models.rank import Rank


def _alias(name: str, camel: str, *legacy: str) -> dict[str, Any]:
    # Accept snake_case, camelCase and the document-store field names; emit camelCase.
    return {
        "validation_alias": AliasChoices(name, camel, *legacy),
        "serialization_alias": camel,
    }


class MemberProfile(BaseModel):
    """
    A member record as fetched from the profile store.

    Read-only input to scoring and visibility checks. Missing lists are
    normalized to empty lists and rank is kept verbatim so that an unknown
    tier never fails validation (see rank_level).
    """

    model_config = ConfigDict(extra="ignore")

    member_id: str = Field(**_alias("member_id", "memberId", "userId"))
    rank: str = Field(default=Rank.WHITE.value, **_alias("rank", "rank", "rankBadge"))
    home_venue: str = Field(default="", **_alias("home_venue", "homeVenue", "homeVenueId"))
    unlocked_venues: list[str] = Field(
        default_factory=list, **_alias("unlocked_venues", "unlockedVenues", "unlockedVenueIds")
    )
    want_tags: list[str] = Field(default_factory=list, **_alias("want_tags", "wantTags"))
    give_tags: list[str] = Field(default_factory=list, **_alias("give_tags", "giveTags"))
    industries: list[str] = Field(default_factory=list, **_alias("industries", "industries"))
    is_admin: bool = Field(default=False, **_alias("is_admin", "isAdmin", "isAdminFlag"))

    # Display fields used by the member directory
    name: str = ""
    company_name: str = Field(default="", **_alias("company_name", "companyName"))
    title: str = ""
    catch_copy: str = Field(default="", **_alias("catch_copy", "catchCopy"))
    bio: str = ""
    avatar_url: str = Field(default="", **_alias("avatar_url", "avatarUrl"))
    rank_score: int = Field(default=0, **_alias("rank_score", "rankScore"))

    @field_validator("member_id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("rank", mode="before")
    @classmethod
    def _coerce_rank(cls, value: Any) -> str:
        if isinstance(value, Rank):
            return value.value
        if value is None:
            return Rank.WHITE.value
        return str(value)

    @field_validator("unlocked_venues", "want_tags", "give_tags", "industries", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            return [value]
        if not isinstance(value, (list, tuple, set)):
            return []
        return [str(v) for v in value if v is not None]

    @field_validator(
        "home_venue", "name", "company_name", "title", "catch_copy", "bio", "avatar_url", mode="before"
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @field_validator("is_admin", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("rank_score", mode="before")
    @classmethod
    def _coerce_score(cls, value: Any) -> int:
        try:
            return int(value or 0)
        except (TypeError, ValueError):
            return 0

    @model_validator(mode="after")
    def _include_home_venue(self) -> "MemberProfile":
        if self.home_venue and self.home_venue not in self.unlocked_venues:
            self.unlocked_venues.append(self.home_venue)
        return self

    @property
    def rank_level(self) -> Rank:
        """Parsed rank; unknown values are treated as WHITE."""
        return Rank.parse(self.rank)
