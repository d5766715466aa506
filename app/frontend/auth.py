"""Authentication context: who is signed in, if anyone."""
import logging
from typing import Any, Dict, Optional
import requests
from app.frontend.client import BackendClient, BackendError
from app.frontend.schemas import Identity

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid e-mail or password."
ALREADY_REGISTERED_MESSAGE = "An account with this e-mail already exists."
SIGN_UP_FAILED_MESSAGE = "Could not create the account. Check the details and try again."
UNREACHABLE_MESSAGE = "Could not reach the server. Please try again in a moment."


class AuthError(Exception):
    """Sign-in or sign-up failure with a message safe to show the user."""


class AuthContext:
    """Holds the current identity and session token for one browser session."""

    def __init__(
        self,
        client: BackendClient,
        user: Optional[Identity] = None,
        access_token: Optional[str] = None
    ):
        self.client = client
        self.user = user
        self.access_token = access_token
        self.loading = False

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None and bool(self.access_token)

    def _apply_session(self, payload: Dict[str, Any]) -> Identity:
        self.access_token = payload["access_token"]
        self.user = Identity.model_validate(payload["user"])
        return self.user

    def sign_in(self, email: str, password: str) -> Identity:
        """Sign in with e-mail and password."""
        self.loading = True
        try:
            payload = self.client.sign_in(email.strip(), password)
        except BackendError as exc:
            logger.info("Sign-in rejected: %s", exc.code)
            raise AuthError(INVALID_CREDENTIALS_MESSAGE) from exc
        except requests.RequestException as exc:
            logger.warning("Sign-in request failed: %s", exc)
            raise AuthError(UNREACHABLE_MESSAGE) from exc
        finally:
            self.loading = False
        return self._apply_session(payload)

    def sign_up(self, email: str, password: str, display_name: Optional[str] = None) -> Identity:
        """Create an account and sign in with it."""
        self.loading = True
        try:
            payload = self.client.sign_up(email.strip(), password, display_name or None)
        except BackendError as exc:
            logger.info("Sign-up rejected: %s", exc.code)
            if exc.status_code == 409:
                raise AuthError(ALREADY_REGISTERED_MESSAGE) from exc
            raise AuthError(SIGN_UP_FAILED_MESSAGE) from exc
        except requests.RequestException as exc:
            logger.warning("Sign-up request failed: %s", exc)
            raise AuthError(UNREACHABLE_MESSAGE) from exc
        finally:
            self.loading = False
        return self._apply_session(payload)

    def sign_out(self) -> None:
        """Forget the local session and revoke the token on the server."""
        token, self.access_token, self.user = self.access_token, None, None
        if not token:
            return
        try:
            self.client.sign_out(token)
        except (BackendError, requests.RequestException) as exc:
            # Local state is already cleared; the token expires on its own
            logger.warning("Could not revoke session token: %s", exc)

    def restore(self) -> Optional[Identity]:
        """Re-resolve the stored token; clears the session if it is no longer valid."""
        if not self.access_token:
            return None
        self.loading = True
        try:
            self.user = self.client.get_user(self.access_token)
        except BackendError:
            self.user, self.access_token = None, None
        except requests.RequestException as exc:
            logger.warning("Could not restore session: %s", exc)
        finally:
            self.loading = False
        return self.user
