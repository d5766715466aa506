"""SQLAlchemy 2.0 database models."""
from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, JSON, Text, UniqueConstraint
from sqlalchemy.orm import relationship, declarative_base
from datetime import datetime
import uuid


Base = declarative_base()


class User(Base):
    """Registered user model."""
    __tablename__ = "users"

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    display_name = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")
    events = relationship("Event", back_populates="owner")


class AuthSession(Base):
    """Bearer-token session issued at sign-in."""
    __tablename__ = "auth_sessions"

    token = Column(String, primary_key=True)
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    expires_at = Column(DateTime, nullable=False)

    # Relationships
    user = relationship("User", back_populates="sessions")


class Event(Base):
    """Community event model."""
    __tablename__ = "events"
    __table_args__ = (
        UniqueConstraint("title", "date", "location", name="uq_events_title_date_location"),
    )

    id = Column(String, primary_key=True, default=lambda: str(uuid.uuid4()))
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    location = Column(String(200), nullable=False)
    max_attendees = Column(Integer, nullable=True)
    organizer_name = Column(String(100), nullable=False)
    organizer_email = Column(String, nullable=False)
    image_url = Column(String, nullable=True)
    tags = Column(JSON, nullable=True)  # List of tag strings
    owner_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)

    # Relationships
    owner = relationship("User", back_populates="events")
