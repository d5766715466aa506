"""Translation of database failures into structured API errors."""
from typing import Any, Dict, Optional, Union
from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError
from app.backend.schemas.event import ApiError, ErrorResponse


# Postgres SQLSTATE codes, as returned by the hosted backend
UNIQUE_VIOLATION = "23505"
NOT_NULL_VIOLATION = "23502"
FOREIGN_KEY_VIOLATION = "23503"
INSUFFICIENT_PRIVILEGE = "42501"
JWT_INVALID = "PGRST301"
NOT_FOUND = "PGRST116"


def api_error(
    status_code: int,
    code: str,
    message: str,
    details: Optional[str] = None,
    hint: Optional[str] = None
) -> HTTPException:
    """Build an HTTPException whose detail is an ``ApiError`` body."""
    return HTTPException(
        status_code=status_code,
        detail=ApiError(code=code, message=message, details=details, hint=hint).model_dump()
    )


def error_responses(*status_codes: int) -> Dict[Union[int, str], Dict[str, Any]]:
    """OpenAPI ``responses`` entries documenting the error body for each status."""
    return {code: {"model": ErrorResponse} for code in status_codes}


def integrity_error_code(exc: IntegrityError) -> str:
    """
    Classify an IntegrityError into a SQLSTATE code.

    Postgres drivers expose the code directly (``sqlstate`` on psycopg 3,
    ``pgcode`` on psycopg2). SQLite only reports a message, so fall back to
    matching its wording.
    """
    orig = getattr(exc, "orig", None)
    for attr in ("sqlstate", "pgcode"):
        code = getattr(orig, attr, None)
        if code:
            return code

    message = str(orig if orig is not None else exc).upper()
    if "UNIQUE" in message:
        return UNIQUE_VIOLATION
    if "NOT NULL" in message:
        return NOT_NULL_VIOLATION
    if "FOREIGN KEY" in message:
        return FOREIGN_KEY_VIOLATION
    return "23000"


def integrity_error_to_http(exc: IntegrityError) -> HTTPException:
    """Map an IntegrityError to the HTTP status and body the client expects."""
    code = integrity_error_code(exc)
    details = str(getattr(exc, "orig", exc))
    if code == UNIQUE_VIOLATION:
        return api_error(
            status.HTTP_409_CONFLICT,
            code,
            "duplicate key value violates unique constraint",
            details=details
        )
    if code == NOT_NULL_VIOLATION:
        return api_error(
            status.HTTP_400_BAD_REQUEST,
            code,
            "null value violates not-null constraint",
            details=details
        )
    return api_error(
        status.HTTP_400_BAD_REQUEST,
        code,
        "integrity constraint violation",
        details=details
    )
