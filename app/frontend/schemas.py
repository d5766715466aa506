"""Pydantic schemas for the client-side event pipeline."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional, Tuple
from datetime import datetime, timezone
import enum


class EventDraft(BaseModel):
    """Raw create-event form input, exactly as typed by the user."""
    title: str = ""
    description: Optional[str] = None
    date: str = Field("", description="Calendar date, YYYY-MM-DD")
    time: str = Field("", description="Wall-clock time, HH:MM")
    location: str = ""
    max_attendees: Optional[str] = Field(None, description="Numeric string, optional")
    organizer_name: str = ""
    organizer_email: str = ""
    image_url: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class ValidationResult(BaseModel):
    """Outcome of validating a draft. Immutable once built."""
    model_config = ConfigDict(frozen=True)

    errors: Tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.errors


class SanitizedDraft(BaseModel):
    """A draft after sanitization, with notes on what was stripped."""
    model_config = ConfigDict(frozen=True)

    draft: EventDraft
    emptied_fields: Tuple[str, ...] = ()
    rejected_tags: Tuple[str, ...] = ()


class Identity(BaseModel):
    """Authenticated user as seen by the client."""
    id: str
    email: str
    display_name: Optional[str] = None


class EventInsert(BaseModel):
    """Cleaned record handed to the insert API."""
    title: str
    description: Optional[str] = None
    date: datetime
    location: str
    max_attendees: Optional[int] = None
    organizer_name: str
    organizer_email: str
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    owner_id: str


class EventRecord(BaseModel):
    """Stored event as returned by the query API."""
    id: str
    title: str
    description: Optional[str] = None
    date: datetime
    location: str
    max_attendees: Optional[int] = None
    organizer_name: str
    organizer_email: Optional[str] = None
    image_url: Optional[str] = None
    tags: Optional[List[str]] = None
    owner_id: Optional[str] = None
    created_at: Optional[datetime] = None

    @field_validator("date")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        """The backend stores instants in UTC; naive values are UTC."""
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class SubmissionStatus(str, enum.Enum):
    """Outcome of a submission attempt."""
    CREATED = "created"
    VALIDATION_FAILED = "validation_failed"
    AUTH_REQUIRED = "auth_required"
    INSERT_FAILED = "insert_failed"
    IN_PROGRESS = "in_progress"


class SubmissionResult(BaseModel):
    """What the UI needs to show after a submission attempt."""
    status: SubmissionStatus
    errors: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    message: Optional[str] = None
    event: Optional[EventRecord] = None

    @property
    def ok(self) -> bool:
        return self.status == SubmissionStatus.CREATED


class FeedResult(BaseModel):
    """Events for the feed, plus an error message when loading failed."""
    events: List[EventRecord] = Field(default_factory=list)
    error: Optional[str] = None
