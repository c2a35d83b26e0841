"""
Member matching.

Pure scoring and visibility rules evaluated on already-fetched member profiles.
Callers resolve both profiles and pass them in; nothing here reads session state.
"""

from app.services.matching.directory import DirectoryEntry, search_members
from app.services.matching.scorer import MatchScorer, match_scorer
from app.services.matching.tags import get_tag_matcher, substring_match, token_match
from app.services.matching.visibility import VisibilityPolicy

__all__ = [
    "MatchScorer",
    "VisibilityPolicy",
    "DirectoryEntry",
    "match_scorer",
    "search_members",
    "get_tag_matcher",
    "substring_match",
    "token_match",
]
