"""
Base exception classes for the iMall backend.

Each module should define its own exceptions that inherit from these bases.
This enables consistent error handling across the application: every base
carries the HTTP status the API layer renders it with.
"""

from typing import Optional, Any


class IMallError(Exception):
    """
    Base exception for all iMall errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for API responses."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class NotFoundError(IMallError):
    """Resource not found."""

    status_code = 404


class ValidationError(IMallError):
    """Input validation failed."""

    status_code = 400


class ConflictError(IMallError):
    """Resource already exists."""

    # The public contract reports conflicts as plain bad requests.
    status_code = 400


class AuthenticationError(IMallError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = 401


class AuthorizationError(IMallError):
    """Authorization failed (credentials present but not acceptable)."""

    status_code = 403


class InternalError(IMallError):
    """Unexpected failure. The message is safe to show to clients."""

    status_code = 500

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message, code="INTERNAL_ERROR")
