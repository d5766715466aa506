"""Submission orchestrator: auth check, sanitize, validate, insert."""
import logging
from typing import Dict
import requests
from app.frontend.auth import AuthContext
from app.frontend.client import BackendClient, BackendError, InsertErrorKind, classify_insert_error
from app.frontend.schemas import EventDraft, Identity, SubmissionResult, SubmissionStatus
from app.frontend.services.drafts import build_insert, sanitization_warnings, sanitize_draft
from app.frontend.services.validation import validate

logger = logging.getLogger(__name__)

CREATED_MESSAGE = "Event created successfully! It is now listed on the platform."
AUTH_REQUIRED_MESSAGE = "Please sign in to create an event."
IN_PROGRESS_MESSAGE = "Your event is already being submitted."
VALIDATION_FAILED_MESSAGE = "Please fix the highlighted problems and try again."

INSERT_ERROR_MESSAGES: Dict[InsertErrorKind, str] = {
    InsertErrorKind.UNIQUENESS_VIOLATION: "An event with these details already exists.",
    InsertErrorKind.REQUIRED_FIELD_MISSING: "All required fields must be filled in.",
    InsertErrorKind.OTHER: "Could not create the event. Please try again in a moment.",
}


class EventSubmissionService:
    """
    Coordinates one create-event submission.

    Only one insert may be in flight at a time; ``busy`` is set for the whole
    attempt and always cleared when it ends, whatever the outcome.
    """

    def __init__(self, client: BackendClient, auth: AuthContext):
        self.client = client
        self.auth = auth
        self._busy = False

    @property
    def busy(self) -> bool:
        return self._busy

    def submit(self, draft: EventDraft) -> SubmissionResult:
        """
        Validate and insert a draft.

        Args:
            draft: raw form input

        Returns:
            SubmissionResult describing the outcome; never raises for
            validation, auth or backend failures
        """
        if self._busy:
            return SubmissionResult(status=SubmissionStatus.IN_PROGRESS, message=IN_PROGRESS_MESSAGE)

        identity = self.auth.user
        if identity is None:
            return SubmissionResult(status=SubmissionStatus.AUTH_REQUIRED, message=AUTH_REQUIRED_MESSAGE)

        self._busy = True
        try:
            return self._submit(draft, identity)
        finally:
            self._busy = False

    def _submit(self, draft: EventDraft, identity: Identity) -> SubmissionResult:
        sanitized = sanitize_draft(draft)
        warnings = sanitization_warnings(sanitized)

        result = validate(sanitized.draft)
        if not result.is_valid:
            logger.info("Event draft rejected with %d validation error(s)", len(result.errors))
            return SubmissionResult(
                status=SubmissionStatus.VALIDATION_FAILED,
                errors=list(result.errors),
                warnings=warnings,
                message=VALIDATION_FAILED_MESSAGE,
            )

        record = build_insert(sanitized.draft, owner_id=identity.id)
        try:
            event = self.client.insert_event(record, token=self.auth.access_token)
        except BackendError as exc:
            kind = classify_insert_error(exc.code)
            logger.warning(
                "Event insert failed (status=%s, code=%s, kind=%s): %s",
                exc.status_code, exc.code, kind.value, exc.message
            )
            return self._insert_failed(kind, warnings)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Event insert request failed: %s", exc)
            return self._insert_failed(InsertErrorKind.OTHER, warnings)
        except Exception:
            logger.exception("Unexpected error while inserting event")
            return self._insert_failed(InsertErrorKind.OTHER, warnings)

        logger.info("Created event %s", event.id)
        return SubmissionResult(
            status=SubmissionStatus.CREATED,
            warnings=warnings,
            message=CREATED_MESSAGE,
            event=event,
        )

    @staticmethod
    def _insert_failed(kind: InsertErrorKind, warnings) -> SubmissionResult:
        return SubmissionResult(
            status=SubmissionStatus.INSERT_FAILED,
            warnings=warnings,
            message=INSERT_ERROR_MESSAGES[kind],
        )
