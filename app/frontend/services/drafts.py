"""Cleaning a draft and turning it into an insert record."""
from datetime import datetime
from typing import List
from app.frontend.schemas import EventDraft, EventInsert, SanitizedDraft
from app.frontend.services.sanitization import sanitize
from app.frontend.services.tags import process_tags, rejected_tags
from app.frontend.services.validation import combine_date_time, parse_attendee_limit

# Free-text fields that go through the sanitizer
SANITIZED_FIELDS = ("title", "description", "location", "organizer_name")

FIELD_LABELS = {
    "title": "title",
    "description": "description",
    "location": "location",
    "organizer_name": "organizer name",
}


def sanitize_draft(draft: EventDraft) -> SanitizedDraft:
    """
    Sanitize free-text fields and normalize the rest.

    Records the fields whose non-blank input was emptied by sanitization and
    the tags that were rejected outright, so the caller can tell the user
    their input was altered.
    """
    cleaned = {}
    emptied: List[str] = []
    for field in SANITIZED_FIELDS:
        raw = getattr(draft, field) or ""
        value = sanitize(raw)
        if raw.strip() and not value:
            emptied.append(field)
        cleaned[field] = value

    cleaned_draft = EventDraft(
        title=cleaned["title"],
        description=cleaned["description"] or None,
        date=(draft.date or "").strip(),
        time=(draft.time or "").strip(),
        location=cleaned["location"],
        max_attendees=(draft.max_attendees or "").strip() or None,
        organizer_name=cleaned["organizer_name"],
        organizer_email=(draft.organizer_email or "").strip().lower(),
        image_url=(draft.image_url or "").strip() or None,
        tags=process_tags(draft.tags),
    )
    return SanitizedDraft(
        draft=cleaned_draft,
        emptied_fields=tuple(emptied),
        rejected_tags=tuple(rejected_tags(draft.tags)),
    )


def sanitization_warnings(sanitized: SanitizedDraft) -> List[str]:
    """User-facing notes about content removed during sanitization."""
    warnings = [
        f"Some content in {FIELD_LABELS[field]} was removed because it was not allowed."
        for field in sanitized.emptied_fields
    ]
    if sanitized.rejected_tags:
        warnings.append(
            f"{len(sanitized.rejected_tags)} tag(s) were removed because they "
            "contained only disallowed content."
        )
    return warnings


def build_insert(draft: EventDraft, owner_id: str) -> EventInsert:
    """
    Build the insert record from a sanitized, validated draft.

    The form's date and time are local wall-clock values; the record carries
    a timezone-aware instant.
    """
    instant = datetime.fromisoformat(combine_date_time(draft.date, draft.time))
    if instant.tzinfo is None:
        instant = instant.astimezone()

    return EventInsert(
        title=draft.title,
        description=draft.description or None,
        date=instant,
        location=draft.location,
        max_attendees=parse_attendee_limit(draft.max_attendees) if draft.max_attendees else None,
        organizer_name=draft.organizer_name,
        organizer_email=draft.organizer_email,
        image_url=draft.image_url or None,
        tags=list(draft.tags) or None,
        owner_id=owner_id,
    )
