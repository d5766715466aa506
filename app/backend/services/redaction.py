"""Redaction of personal data and credentials from log text."""
import re


class RedactionService:
    """Service for redacting e-mail addresses and tokens from text."""

    # Common email pattern
    EMAIL_PATTERN = re.compile(
        r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b'
    )

    # "Bearer <token>" as found in Authorization headers
    BEARER_PATTERN = re.compile(r'\bBearer\s+[A-Za-z0-9._~+/=-]+', re.IGNORECASE)

    # key=value pairs carrying secrets, as in query strings and form bodies
    SECRET_PATTERN = re.compile(
        r'\b(password|access_token|token)(=)([^\s,;&]+)',
        re.IGNORECASE
    )

    def redact_email(self, text: str) -> str:
        """Redact email addresses."""
        return self.EMAIL_PATTERN.sub('[EMAIL_REDACTED]', text)

    def redact_secrets(self, text: str) -> str:
        """Redact bearer tokens and password/token assignments."""
        result = self.BEARER_PATTERN.sub('Bearer [TOKEN_REDACTED]', text)
        return self.SECRET_PATTERN.sub(r'\1\2[REDACTED]', result)

    def redact_text(self, text: str) -> str:
        """Redact all sensitive values from text."""
        if not isinstance(text, str):
            return text

        result = self.redact_email(text)
        result = self.redact_secrets(result)
        return result
