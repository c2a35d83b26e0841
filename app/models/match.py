from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.member import MemberProfile


class MatchResult(BaseModel):
    """
    Compatibility of another member, seen from the viewer's side.

    can_provide holds the viewer's give-tags the other member wants,
    can_receive holds the viewer's want-tags the other member gives.
    Lists keep the order in which the scoring rules fired.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    score: int = Field(default=0, ge=0, le=100)
    reasons: list[str] = Field(default_factory=list)
    can_provide: list[str] = Field(default_factory=list)
    can_receive: list[str] = Field(default_factory=list)
    synergy_sentence: str = ""

    @classmethod
    def empty(cls) -> "MatchResult":
        return cls()


class ScoredMember(BaseModel):
    member: MemberProfile
    match: MatchResult


class AccessDecision(BaseModel):
    """Outcome of a visibility check, with the rule that decided it."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    can_view_detail: bool
    can_message: bool
    reason: str
