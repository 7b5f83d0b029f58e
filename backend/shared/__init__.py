"""
Shared infrastructure for the iMall backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: Models shared between modules (authenticated caller, envelopes)

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    IMallError,
    NotFoundError,
    ValidationError,
    ConflictError,
    AuthenticationError,
    AuthorizationError,
    InternalError,
)
from .models import AuthenticatedUser, ErrorResponse, SuccessResponse

__all__ = [
    "Settings",
    "get_settings",
    "IMallError",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InternalError",
    "AuthenticatedUser",
    "ErrorResponse",
    "SuccessResponse",
]
