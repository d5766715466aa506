"""Event Pydantic schemas."""
from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
from datetime import datetime, timezone


class EventCreate(BaseModel):
    """Schema for inserting an event.

    Business rules live in the client pipeline. Missing values reach the
    table's NOT NULL constraints and come back as error code 23502.
    """
    title: Optional[str] = Field(None, description="Event title")
    description: Optional[str] = Field(None, description="Free-text description")
    date: Optional[datetime] = Field(None, description="Event start instant (ISO 8601)")
    location: Optional[str] = Field(None, description="Venue or address")
    max_attendees: Optional[int] = Field(None, description="Attendee cap")
    organizer_name: Optional[str] = Field(None, description="Organizer display name")
    organizer_email: Optional[str] = Field(None, description="Organizer contact e-mail")
    image_url: Optional[str] = Field(None, description="Cover image URL")
    tags: Optional[List[str]] = Field(None, description="Topic tags")
    owner_id: Optional[str] = Field(None, description="Id of the authenticated owner")

    @field_validator("date")
    @classmethod
    def normalize_to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        """Store instants in UTC; naive values are taken as UTC already."""
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc)
        return value


class Event(BaseModel):
    """Schema for event response."""
    model_config = ConfigDict(from_attributes=True)

    id: str
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
    created_at: datetime


class ApiError(BaseModel):
    """Structured error body carried in ``HTTPException.detail``."""
    code: str
    message: str
    details: Optional[str] = None
    hint: Optional[str] = None


class ErrorResponse(BaseModel):
    """Error response envelope as FastAPI serializes an ``HTTPException``."""
    detail: ApiError
