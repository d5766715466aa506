"""Field validators and the collect-all-errors record validator."""
import re
from datetime import datetime
from typing import Callable, List, Optional, Tuple, Union
from urllib.parse import urlparse
from app.frontend.schemas import EventDraft, ValidationResult

TITLE_MAX_LENGTH = 100
LOCATION_MAX_LENGTH = 200
ORGANIZER_NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
MIN_ATTENDEES = 1
MAX_ATTENDEES = 10000
MAX_YEARS_AHEAD = 2

# Loose sanity check, not RFC 5322
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

ATTENDEE_LIMIT_PATTERN = re.compile(r"[0-9]+")

ALLOWED_URL_SCHEMES = ("http", "https")

TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = f"Title must be at most {TITLE_MAX_LENGTH} characters"
DATE_REQUIRED = "Date is required"
DATE_OUT_OF_RANGE = f"Date must be in the future and within {MAX_YEARS_AHEAD} years"
TIME_REQUIRED = "Time is required"
LOCATION_REQUIRED = "Location is required"
LOCATION_TOO_LONG = f"Location must be at most {LOCATION_MAX_LENGTH} characters"
ORGANIZER_NAME_REQUIRED = "Organizer name is required"
ORGANIZER_NAME_TOO_LONG = f"Organizer name must be at most {ORGANIZER_NAME_MAX_LENGTH} characters"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email must be a valid address"
DESCRIPTION_TOO_LONG = f"Description must be at most {DESCRIPTION_MAX_LENGTH} characters"
IMAGE_URL_INVALID = "Image URL must be a valid http(s) URL"
MAX_ATTENDEES_OUT_OF_RANGE = (
    f"Maximum attendees must be between {MIN_ATTENDEES} and {MAX_ATTENDEES}"
)


def is_valid_email(email: Optional[str]) -> bool:
    """Check for a ``local@domain.tld`` shape."""
    return bool(email) and EMAIL_PATTERN.fullmatch(email) is not None


def add_years(moment: datetime, years: int) -> datetime:
    """Shift by calendar years; Feb 29 rolls over to Mar 1 in non-leap years."""
    try:
        return moment.replace(year=moment.year + years)
    except ValueError:
        return moment.replace(year=moment.year + years, month=3, day=1)


def parse_instant(value: Union[str, datetime]) -> Optional[datetime]:
    """Parse ``YYYY-MM-DDTHH:MM`` (or any ISO 8601 form); None when invalid."""
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(value.strip())
    except (AttributeError, ValueError):
        return None


def is_valid_future_date(value: Union[str, datetime], now: Optional[datetime] = None) -> bool:
    """
    True iff the instant is after now and at most two years ahead.

    Args:
        value: combined date/time string or datetime; naive values are local time
        now: reference instant, defaults to the current time

    Returns:
        Whether the instant is in the accepted window
    """
    instant = parse_instant(value)
    if instant is None:
        return False

    if now is None:
        now = datetime.now(instant.tzinfo) if instant.tzinfo else datetime.now()
    elif (now.tzinfo is None) != (instant.tzinfo is None):
        # Compare in local time when only one side carries an offset
        instant = instant.astimezone() if instant.tzinfo is None else instant
        now = now.astimezone() if now.tzinfo is None else now

    return now < instant <= add_years(now, MAX_YEARS_AHEAD)


def is_valid_url(url: Optional[str]) -> bool:
    """Empty is valid (optional field); otherwise require an absolute http(s) URL."""
    if not url:
        return True
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return (
        parsed.scheme in ALLOWED_URL_SCHEMES
        and bool(parsed.netloc)
        and not any(ch.isspace() for ch in parsed.netloc)
    )


def combine_date_time(date: Optional[str], time: Optional[str]) -> str:
    """Join form date and time; a missing time means midnight."""
    return f"{(date or '').strip()}T{(time or '').strip() or '00:00'}"


def parse_attendee_limit(value: Optional[str]) -> Optional[int]:
    """Integer value of the attendee field, or None unless it is plain ASCII digits."""
    text = (value or "").strip()
    if not ATTENDEE_LIMIT_PATTERN.fullmatch(text):
        return None
    return int(text)


def _blank(value: Optional[str]) -> bool:
    return not (value or "").strip()


def _longer_than(value: Optional[str], limit: int) -> bool:
    return not _blank(value) and len(value) > limit


def _attendees_out_of_range(value: Optional[str]) -> bool:
    if _blank(value):
        return False
    limit = parse_attendee_limit(value)
    return limit is None or not MIN_ATTENDEES <= limit <= MAX_ATTENDEES


Rule = Tuple[Callable[[EventDraft, Optional[datetime]], bool], str]

# Order is the order errors are reported in
RULES: List[Rule] = [
    (lambda d, now: _blank(d.title), TITLE_REQUIRED),
    (lambda d, now: _longer_than(d.title, TITLE_MAX_LENGTH), TITLE_TOO_LONG),
    (lambda d, now: _blank(d.date), DATE_REQUIRED),
    (
        lambda d, now: not _blank(d.date)
        and not is_valid_future_date(combine_date_time(d.date, d.time), now),
        DATE_OUT_OF_RANGE,
    ),
    (lambda d, now: _blank(d.time), TIME_REQUIRED),
    (lambda d, now: _blank(d.location), LOCATION_REQUIRED),
    (lambda d, now: _longer_than(d.location, LOCATION_MAX_LENGTH), LOCATION_TOO_LONG),
    (lambda d, now: _blank(d.organizer_name), ORGANIZER_NAME_REQUIRED),
    (lambda d, now: _longer_than(d.organizer_name, ORGANIZER_NAME_MAX_LENGTH), ORGANIZER_NAME_TOO_LONG),
    (lambda d, now: _blank(d.organizer_email), EMAIL_REQUIRED),
    (
        lambda d, now: not _blank(d.organizer_email) and not is_valid_email(d.organizer_email),
        EMAIL_INVALID,
    ),
    (lambda d, now: len(d.description or "") > DESCRIPTION_MAX_LENGTH, DESCRIPTION_TOO_LONG),
    (lambda d, now: not is_valid_url(d.image_url), IMAGE_URL_INVALID),
    (lambda d, now: _attendees_out_of_range(d.max_attendees), MAX_ATTENDEES_OUT_OF_RANGE),
]


def validate(draft: EventDraft, now: Optional[datetime] = None) -> ValidationResult:
    """Run every rule and collect all violations, in field order."""
    now = now or datetime.now()
    return ValidationResult(
        errors=tuple(message for violated, message in RULES if violated(draft, now))
    )
