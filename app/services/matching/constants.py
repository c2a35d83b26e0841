from typing import Final

# Point budget. Every rule adds its weight to the maximum whether or not it fires,
# so the final score is a percentage of what this viewer could have achieved.
WANT_TAG_POINTS: Final[int] = 25  # per viewer want-tag
GIVE_TAG_POINTS: Final[int] = 25  # per viewer give-tag
INDUSTRY_POINTS: Final[int] = 10
RANK_BONUS_MAX_POINTS: Final[int] = 10  # denominator only; actual bonus comes from the rank table

SCORE_MIN: Final[int] = 0
SCORE_MAX: Final[int] = 100

# Reason templates
REASON_CAN_RECEIVE: Final[str] = "can receive/benefit from {tag}"
REASON_OTHER_WANTS: Final[str] = "other member wants {tag}"
REASON_SAME_INDUSTRY: Final[str] = "same industry"
REASON_HIGH_RANK: Final[str] = "high-rank member"

# Separators used by the token matcher
TAG_TOKEN_SEPARATORS: Final[str] = r"[\s・/／、,，&＆]+"
