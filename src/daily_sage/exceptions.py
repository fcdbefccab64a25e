"""
Custom exceptions for daily-sage.

Each exception carries a human-readable message, an error code used by the
web API, an HTTP status code and optional details for debugging.
"""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for consistent API error responses."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_TRANSITION = "INVALID_TRANSITION"
    NOT_AUTHENTICATED = "NOT_AUTHENTICATED"
    GENERATION_NOT_CONFIGURED = "GENERATION_NOT_CONFIGURED"
    NOT_FOUND = "NOT_FOUND"


class DailySageError(Exception):
    """Base exception for all daily-sage errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API response."""
        result: dict[str, Any] = {
            "error": {
                "code": self.code.value,
                "message": self.message,
            }
        }
        if self.details:
            result["error"]["details"] = self.details
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code.value}, message={self.message!r})"


class GenerationNotConfiguredError(DailySageError):
    """Raised when content generation is requested without an API key."""

    def __init__(self, message: str = "OPENAI_API_KEY not configured") -> None:
        super().__init__(
            message=message,
            code=ErrorCode.GENERATION_NOT_CONFIGURED,
            status_code=503,
            details={"configuration_missing": "openai_api_key"},
        )


class InvalidTransitionError(DailySageError):
    """Raised when an action is not valid in the current flow state."""

    def __init__(self, message: str, state: str | None = None) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_TRANSITION,
            status_code=409,
            details={"state": state} if state else None,
        )


class NotAuthenticatedError(DailySageError):
    """Raised when an action requires a signed-in identity."""

    def __init__(self, message: str = "Not signed in") -> None:
        super().__init__(
            message=message,
            code=ErrorCode.NOT_AUTHENTICATED,
            status_code=401,
        )


class NotFoundError(DailySageError):
    """Raised when a referenced record does not exist."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(
            message=f"{resource} '{identifier}' not found",
            code=ErrorCode.NOT_FOUND,
            status_code=404,
            details={"resource": resource, "id": identifier},
        )
