"""
Authentication module exceptions.

These exceptions are raised by the auth module and can be caught
by API error handlers to return appropriate HTTP responses.
"""

from shared.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InternalError,
    ValidationError,
)


class InvalidTokenError(AuthorizationError):
    """Raised when a token is malformed, tampered with or signed by another key."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, code="INVALID_TOKEN")


class ExpiredTokenError(InvalidTokenError):
    """Raised when a token is past its expiry."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)
        self.code = "TOKEN_EXPIRED"


class MissingTokenError(AuthenticationError):
    """Raised when no bearer token is provided."""

    def __init__(self, message: str = "Access token required"):
        super().__init__(message, code="MISSING_TOKEN")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when sign-in fails.

    Unknown email and wrong password share this exact message so callers
    cannot tell which one it was.
    """

    def __init__(self):
        super().__init__("Invalid email or password", code="INVALID_CREDENTIALS")


class TokenConfigurationError(InternalError):
    """
    Raised when no signing secret is configured.

    A server fault, so the client only sees the generic internal error.
    """

    def __init__(self):
        super().__init__()
        self.code = "AUTH_NOT_CONFIGURED"


class FieldValidationError(ValidationError):
    """Input validation failure for a single field (the first one found)."""

    def __init__(self, field: str, message: str):
        super().__init__(message, code="VALIDATION_ERROR", details={"field": field})
        self.field = field
