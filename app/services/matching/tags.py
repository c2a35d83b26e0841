import re
from collections.abc import Callable, Iterable

from loguru import logger

from app.services.matching.constants import TAG_TOKEN_SEPARATORS

TagMatcher = Callable[[str, str], bool]

_SPLIT = re.compile(TAG_TOKEN_SEPARATORS)


def substring_match(a: str, b: str) -> bool:
    """
    Case-insensitive, bidirectional substring test.

    "資金調達" matches "資金調達サポート" and vice versa. Empty or blank
    tags never match: an empty string would otherwise be contained in everything.
    Short tags are permissive ("IT" also hits "Digital").
    """
    if not a or not b or not a.strip() or not b.strip():
        return False
    left, right = a.lower(), b.lower()
    return left in right or right in left


def tokenize_tag(tag: str) -> set[str]:
    return {token for token in _SPLIT.split((tag or "").lower()) if token}


def token_match(a: str, b: str) -> bool:
    """Stricter matcher: the tags share at least one whole token."""
    left, right = tokenize_tag(a), tokenize_tag(b)
    if not left or not right:
        return False
    return bool(left & right)


MATCHERS: dict[str, TagMatcher] = {
    "substring": substring_match,
    "token": token_match,
}


def get_tag_matcher(name: str | None = None) -> TagMatcher:
    if not name:
        return substring_match
    matcher = MATCHERS.get(name.lower())
    if matcher is None:
        logger.warning(f"Unknown tag matcher '{name}', falling back to substring matching")
        return substring_match
    return matcher


def any_match(tag: str, candidates: Iterable[str], matcher: TagMatcher = substring_match) -> bool:
    return any(matcher(tag, other) for other in candidates)
