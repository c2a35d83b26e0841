"""
Reference catalog shared across the application. Keep these simple and documented.
"""

from typing import Final

# Physical chapters. Member visibility is partly scoped by these ids.
VENUES: Final[list[dict[str, str]]] = [
    {"id": "osaka", "name": "大阪", "area": "関西"},
    {"id": "kobe", "name": "神戸", "area": "関西"},
    {"id": "tokyo", "name": "東京", "area": "関東"},
]

# Suggestions offered by the profile editor. Members may also enter free text.
INDUSTRIES: Final[list[str]] = [
    "IT・通信",
    "不動産",
    "建設",
    "金融",
    "コンサルティング",
    "人材",
    "広告・マーケティング",
    "製造",
    "小売",
    "飲食",
    "医療・福祉",
    "教育",
    "士業",
    "その他",
]

TAGS_WANT: Final[list[str]] = [
    "資金調達",
    "エンジニア採用",
    "営業パートナー",
    "新規事業",
    "M&A",
    "顧問",
    "広報",
    "マーケティング",
    "海外進出",
]

TAGS_GIVE: Final[list[str]] = [
    "営業代行",
    "システム開発",
    "Web制作",
    "SNS運用",
    "補助金申請",
    "税務相談",
    "法務相談",
    "オフィス仲介",
    "人材紹介",
]

# Venue filter value meaning "no filter"
ALL_VENUES: Final[str] = "all"


def venue_name(venue_id: str | None) -> str:
    """Display name for a venue id, falling back to the id itself."""
    if not venue_id:
        return ""
    for venue in VENUES:
        if venue["id"] == venue_id:
            return venue["name"]
    return venue_id
