from app.models.member import MemberProfile


def synergy_sentence(
    viewer: MemberProfile,
    other: MemberProfile,
    can_provide: list[str],
    can_receive: list[str],
) -> str:
    """
    One-line summary of why two members might want to meet.

    Picks the strongest available angle: a two-way exchange, then either
    direction alone, then a shared venue, then a generic fallback.
    """
    name = other.name or "this member"

    if can_receive and can_provide:
        return (
            f"{name} can help you with {can_receive[0]}, "
            f"and your {can_provide[0]} could be just what they need."
        )
    if can_receive:
        return f"{name} offers what you are looking for: {can_receive[0]}."
    if can_provide:
        return f"Your {can_provide[0]} could be a real help to {name}."
    if viewer.home_venue and viewer.home_venue == other.home_venue:
        return "You belong to the same venue, so you will have plenty of chances to meet in person."
    return "As fellow members, you are sure to find something in common."
