"""Event query and insert API endpoints."""
import logging
from fastapi import APIRouter, Depends, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from typing import List
from app.backend.db.session import get_db
from app.backend.db.models import Event as EventModel, User
from app.backend.schemas.event import EventCreate, Event as EventSchema
from app.backend.core.security import get_current_user
from app.backend.services.errors import (
    api_error,
    error_responses,
    integrity_error_to_http,
    INSUFFICIENT_PRIVILEGE,
    NOT_FOUND,
)

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post(
    "/events",
    response_model=EventSchema,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(400, 401, 403, 409)
)
async def create_event(
    event: EventCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    """Insert a new event owned by the authenticated user."""
    # Row-level rule: a user may only insert rows they own
    if event.owner_id is not None and event.owner_id != current_user.id:
        raise api_error(
            status.HTTP_403_FORBIDDEN,
            INSUFFICIENT_PRIVILEGE,
            "new row violates row-level security policy for table \"events\""
        )

    db_event = EventModel(**event.model_dump())
    db.add(db_event)
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        http_exc = integrity_error_to_http(exc)
        logger.warning("Event insert rejected with code %s", http_exc.detail["code"])
        raise http_exc
    db.refresh(db_event)

    logger.info("Created event %s for user %s", db_event.id, current_user.id)
    return db_event


@router.get("/events", response_model=List[EventSchema])
async def list_events(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db)
):
    """List events ordered by date, earliest first."""
    events = (
        db.query(EventModel)
        .order_by(EventModel.date.asc())
        .offset(skip)
        .limit(limit)
        .all()
    )
    return events


@router.get("/events/{event_id}", response_model=EventSchema, responses=error_responses(404))
async def get_event(
    event_id: str,
    db: Session = Depends(get_db)
):
    """Get a specific event by ID."""
    event = db.query(EventModel).filter_by(id=event_id).first()
    if not event:
        raise api_error(
            status.HTTP_404_NOT_FOUND,
            NOT_FOUND,
            f"Event {event_id} not found"
        )
    return event
