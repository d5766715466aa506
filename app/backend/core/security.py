"""Password hashing and bearer-token authentication."""
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta
from typing import Optional
from fastapi import Depends, Header, status
from sqlalchemy.orm import Session
from app.backend.core.config import settings
from app.backend.db.models import AuthSession, User
from app.backend.db.session import get_db
from app.backend.services.errors import api_error, JWT_INVALID

PBKDF2_ITERATIONS = 120_000


def hash_password(password: str, salt: Optional[str] = None) -> str:
    """Hash a password as ``salt$hexdigest`` using PBKDF2-SHA256."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.pbkdf2_hmac(
        "sha256", password.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ITERATIONS
    ).hex()
    return f"{salt}${digest}"


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored hash."""
    salt, _, expected = password_hash.partition("$")
    if not salt or not expected:
        return False
    candidate = hash_password(password, salt).partition("$")[2]
    return hmac.compare_digest(candidate, expected)


def create_session(user: User, db: Session) -> AuthSession:
    """Issue a new bearer token for a user."""
    session = AuthSession(
        token=secrets.token_urlsafe(32),
        user_id=user.id,
        expires_at=datetime.utcnow() + timedelta(hours=settings.session_ttl_hours)
    )
    db.add(session)
    db.commit()
    db.refresh(session)
    return session


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an ``Authorization: Bearer`` header value."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def resolve_session(token: Optional[str], db: Session) -> Optional[AuthSession]:
    """Find a live session for a token, or None."""
    if not token:
        return None
    session = db.query(AuthSession).filter_by(token=token).first()
    if not session or session.expires_at <= datetime.utcnow():
        return None
    return session


def get_current_user(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db)
) -> User:
    """FastAPI dependency returning the authenticated user or raising 401."""
    session = resolve_session(extract_bearer_token(authorization), db)
    if not session:
        raise api_error(
            status.HTTP_401_UNAUTHORIZED,
            JWT_INVALID,
            "Authentication required",
            hint="Sign in and send the access token as a bearer token"
        )
    return session.user
