"""
Error types for Gen-Form.

Every failure that reaches a caller of the orchestrator is one of the
five FormGenerationError subclasses below. ``status_code`` is a hint for
transport layers; the core never acts on it.
"""

from typing import Any


class FormGenerationError(Exception):
    """Base class for classified form generation failures."""

    kind = "form_generation_error"
    status_code = 500

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.message, "kind": self.kind}
        if self.details:
            payload["details"] = self.details
        return payload


class InvalidInputError(FormGenerationError):
    """The caller's prompt was empty or not text."""

    kind = "invalid_input"
    status_code = 400


class RateLimitedError(FormGenerationError):
    """The completion service kept rate limiting after every retry."""

    kind = "rate_limited"
    status_code = 429


class QuotaExceededError(FormGenerationError):
    """The completion service account has no quota left."""

    kind = "quota_exceeded"
    status_code = 402


class ServiceUnavailableError(FormGenerationError):
    """The completion service failed on the final attempt or is not configured."""

    kind = "service_unavailable"
    status_code = 500


class GenerationFailedError(FormGenerationError):
    """The model's output could not be turned into a valid schema."""

    kind = "generation_failed"
    status_code = 500

    def __init__(self, message: str, details: str | None = None, issues: list[str] | None = None):
        super().__init__(message, details)
        self.issues = issues or []


class ParseError(ValueError):
    """Raw model text did not contain decodable JSON."""

    def __init__(self, message: str, raw_text: str):
        super().__init__(message)
        self.message = message
        self.raw_text = raw_text
