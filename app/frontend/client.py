"""HTTP client for the Code Meet Hub backend (query, insert and auth APIs)."""
import enum
import logging
from typing import Any, Dict, List, Optional
import requests
from app.frontend.config import settings
from app.frontend.schemas import EventInsert, EventRecord, Identity

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Error response from the backend, carrying its classifiable code."""

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
        details: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details


class InsertErrorKind(str, enum.Enum):
    """Closed classification of insert failures."""
    UNIQUENESS_VIOLATION = "uniqueness_violation"
    REQUIRED_FIELD_MISSING = "required_field_missing"
    OTHER = "other"


# Postgres SQLSTATE codes returned by the insert API
INSERT_ERROR_CODES: Dict[str, InsertErrorKind] = {
    "23505": InsertErrorKind.UNIQUENESS_VIOLATION,
    "23502": InsertErrorKind.REQUIRED_FIELD_MISSING,
}


def classify_insert_error(code: Optional[str]) -> InsertErrorKind:
    """Translate a backend error code into an ``InsertErrorKind``."""
    return INSERT_ERROR_CODES.get(code or "", InsertErrorKind.OTHER)


def _error_from_response(response) -> BackendError:
    """Build a BackendError from a non-2xx response body."""
    code = None
    details = None
    message = f"Backend request failed with status {response.status_code}"
    try:
        body = response.json()
    except ValueError:
        body = None

    detail = body.get("detail", body) if isinstance(body, dict) else body
    if isinstance(detail, dict):
        code = detail.get("code")
        message = detail.get("message") or message
        details = detail.get("details")
    elif detail:
        details = str(detail)

    return BackendError(message, code=code, status_code=response.status_code, details=details)


class BackendClient:
    """
    Thin wrapper over the backend REST API.

    ``session`` may be any object with a requests-style ``request`` method,
    which lets tests route calls through FastAPI's TestClient.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[Any] = None
    ):
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_seconds
        self.session = session or requests.Session()

    def _request(
        self,
        method: str,
        endpoint: str,
        token: Optional[str] = None,
        json: Optional[Dict[str, Any]] = None,
        params: Optional[Dict[str, Any]] = None
    ):
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"Bearer {token}"

        response = self.session.request(
            method,
            f"{self.base_url}{endpoint}",
            json=json,
            params=params,
            headers=headers,
            timeout=self.timeout,
        )
        if response.status_code >= 400:
            error = _error_from_response(response)
            logger.debug("%s %s failed: %s %s", method, endpoint, error.status_code, error.code)
            raise error
        return response

    def list_events(self, skip: int = 0, limit: int = 100) -> List[EventRecord]:
        """Fetch stored events, ordered by date ascending."""
        response = self._request("GET", "/events", params={"skip": skip, "limit": limit})
        return [EventRecord.model_validate(item) for item in response.json()]

    def insert_event(self, record: EventInsert, token: Optional[str]) -> EventRecord:
        """Insert one event; raises BackendError with the backend's code on failure."""
        response = self._request(
            "POST", "/events", token=token, json=record.model_dump(mode="json")
        )
        return EventRecord.model_validate(response.json())

    def sign_up(self, email: str, password: str, display_name: Optional[str] = None) -> Dict[str, Any]:
        """Register and return the session payload."""
        payload = {"email": email, "password": password, "display_name": display_name}
        return self._request("POST", "/auth/signup", json=payload).json()

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """Sign in and return the session payload."""
        payload = {"email": email, "password": password}
        return self._request("POST", "/auth/signin", json=payload).json()

    def sign_out(self, token: str) -> None:
        """Revoke a session token."""
        self._request("POST", "/auth/signout", token=token)

    def get_user(self, token: str) -> Identity:
        """Resolve a session token to its user."""
        return Identity.model_validate(self._request("GET", "/auth/user", token=token).json())
