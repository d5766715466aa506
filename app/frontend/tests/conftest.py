"""Pytest configuration and fixtures for the client pipeline."""
import pytest
from datetime import datetime, timedelta
from typing import List, Optional
from app.frontend.auth import AuthContext
from app.frontend.client import BackendError
from app.frontend.schemas import EventDraft, EventInsert, EventRecord, Identity


class FakeBackendClient:
    """In-memory stand-in for BackendClient that records calls."""

    def __init__(self, events: Optional[List[EventRecord]] = None):
        self.events = list(events or [])
        self.inserted: List[EventInsert] = []
        self.insert_error: Optional[Exception] = None
        self.list_error: Optional[Exception] = None
        self.tokens: List[Optional[str]] = []
        self.signed_out: List[str] = []

    def list_events(self, skip: int = 0, limit: int = 100) -> List[EventRecord]:
        if self.list_error:
            raise self.list_error
        return list(self.events)

    def insert_event(self, record: EventInsert, token: Optional[str]) -> EventRecord:
        self.tokens.append(token)
        if self.insert_error:
            raise self.insert_error
        self.inserted.append(record)
        event = EventRecord(id=f"evt-{len(self.inserted)}", **record.model_dump())
        self.events.append(event)
        return event

    def sign_in(self, email: str, password: str):
        if password != "right":
            raise BackendError("Invalid login credentials", code="invalid_credentials", status_code=400)
        return {"access_token": "tok-1", "user": {"id": "user-1", "email": email}}

    def sign_up(self, email: str, password: str, display_name: Optional[str] = None):
        if email == "taken@example.com":
            raise BackendError("User already registered", code="23505", status_code=409)
        return {
            "access_token": "tok-2",
            "user": {"id": "user-2", "email": email, "display_name": display_name},
        }

    def sign_out(self, token: str) -> None:
        self.signed_out.append(token)

    def get_user(self, token: str) -> Identity:
        if token != "tok-1":
            raise BackendError("Authentication required", code="PGRST301", status_code=401)
        return Identity(id="user-1", email="ana@example.com")


@pytest.fixture
def fake_client():
    """Fake backend client."""
    return FakeBackendClient()


@pytest.fixture
def identity():
    """A signed-in user."""
    return Identity(id="user-1", email="ana@example.com", display_name="Ana Souza")


@pytest.fixture
def signed_in_auth(fake_client, identity):
    """Auth context with a user signed in."""
    return AuthContext(fake_client, user=identity, access_token="tok-1")


@pytest.fixture
def signed_out_auth(fake_client):
    """Auth context with nobody signed in."""
    return AuthContext(fake_client)


@pytest.fixture
def next_week():
    """A local datetime one week ahead, at 19:00."""
    return (datetime.now() + timedelta(days=7)).replace(hour=19, minute=0, second=0, microsecond=0)


@pytest.fixture
def valid_draft(next_week):
    """A draft that passes every rule."""
    return EventDraft(
        title="React Meetup São Paulo",
        description="Hooks, server components and pizza",
        date=next_week.date().isoformat(),
        time="19:00",
        location="Av. Paulista, 1000 - São Paulo/SP",
        max_attendees="50",
        organizer_name="Ana Souza",
        organizer_email="ana@example.com",
        image_url="https://example.com/react.png",
        tags=["React", "Frontend"],
    )
