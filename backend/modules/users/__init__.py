"""
Users module.

Holds user records and the storage contract the auth module builds on.

Public API:
- IUserStore: Interface for user storage
- InMemoryUserStore: Default in-process implementation
- UserRecord / UserResponse: Stored and redacted user views
- UserType: Closed set of account types
"""

from .interfaces import IUserStore
from .models import UserRecord, UserResponse, UserType, normalize_email
from .store import InMemoryUserStore
from .exceptions import (
    UserNotFoundError,
    DuplicateEmailError,
    ImmutableFieldError,
    InvalidFieldValueError,
)

__all__ = [
    # Interface
    "IUserStore",
    "InMemoryUserStore",
    # Models
    "UserRecord",
    "UserResponse",
    "UserType",
    "normalize_email",
    # Exceptions
    "UserNotFoundError",
    "DuplicateEmailError",
    "ImmutableFieldError",
    "InvalidFieldValueError",
]
