"""Formatting helpers for event cards and the user menu."""
from datetime import datetime, tzinfo
from typing import List, Optional, Tuple
from app.frontend.schemas import Identity

CARD_TAG_LIMIT = 3


def format_event_datetime(moment: datetime, tz: Optional[tzinfo] = None) -> str:
    """Format an event instant for a card, e.g. ``Sat, Jun 5, 2027 at 19:00``."""
    local = moment.astimezone(tz)
    return f"{local:%a, %b} {local.day}, {local.year} at {local:%H:%M}"


def visible_tags(tags: Optional[List[str]], limit: int = CARD_TAG_LIMIT) -> Tuple[List[str], int]:
    """Tags shown on a card and how many more are hidden behind ``+N``."""
    tags = tags or []
    return tags[:limit], max(len(tags) - limit, 0)


def user_initials(email: str) -> str:
    """Avatar initials: first two characters of the e-mail's local part."""
    return (email or "").split("@")[0][:2].upper()


def display_name(identity: Identity) -> str:
    """Name for the user menu, falling back to the e-mail's local part."""
    return identity.display_name or identity.email.split("@")[0]
