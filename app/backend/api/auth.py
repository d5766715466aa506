"""Authentication API endpoints."""
import logging
from fastapi import APIRouter, Depends, Header, status
from sqlalchemy.orm import Session
from typing import Optional
from app.backend.db.session import get_db
from app.backend.db.models import User as UserModel, AuthSession
from app.backend.schemas.auth import SignUpRequest, SignInRequest, SessionToken, User as UserSchema
from app.backend.core.security import (
    create_session,
    extract_bearer_token,
    get_current_user,
    hash_password,
    verify_password,
)
from app.backend.services.errors import api_error, error_responses, UNIQUE_VIOLATION

router = APIRouter()
logger = logging.getLogger(__name__)


def _session_response(session: AuthSession) -> SessionToken:
    return SessionToken(
        access_token=session.token,
        expires_at=session.expires_at,
        user=UserSchema.model_validate(session.user)
    )


@router.post(
    "/auth/signup",
    response_model=SessionToken,
    status_code=status.HTTP_201_CREATED,
    responses=error_responses(409)
)
async def sign_up(
    request: SignUpRequest,
    db: Session = Depends(get_db)
):
    """Register a user and sign them in."""
    email = request.email.strip().lower()
    existing = db.query(UserModel).filter_by(email=email).first()
    if existing:
        raise api_error(
            status.HTTP_409_CONFLICT,
            UNIQUE_VIOLATION,
            "User already registered"
        )

    user = UserModel(
        email=email,
        password_hash=hash_password(request.password),
        display_name=request.display_name
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info("Registered user %s", user.id)
    return _session_response(create_session(user, db))


@router.post("/auth/signin", response_model=SessionToken, responses=error_responses(400))
async def sign_in(
    request: SignInRequest,
    db: Session = Depends(get_db)
):
    """Exchange e-mail and password for a bearer token."""
    user = db.query(UserModel).filter_by(email=request.email.strip().lower()).first()
    if not user or not verify_password(request.password, user.password_hash):
        raise api_error(
            status.HTTP_400_BAD_REQUEST,
            "invalid_credentials",
            "Invalid login credentials"
        )
    return _session_response(create_session(user, db))


@router.post("/auth/signout", status_code=status.HTTP_204_NO_CONTENT)
async def sign_out(
    authorization: Optional[str] = Header(None),
    db: Session = Depends(get_db)
):
    """Revoke the caller's bearer token. Unknown tokens are ignored."""
    token = extract_bearer_token(authorization)
    if token:
        db.query(AuthSession).filter_by(token=token).delete()
        db.commit()


@router.get("/auth/user", response_model=UserSchema, responses=error_responses(401))
async def current_user(user: UserModel = Depends(get_current_user)):
    """Return the user behind the bearer token."""
    return user
