"""
Users module exceptions.
"""

from shared.exceptions import ConflictError, NotFoundError, ValidationError


class UserNotFoundError(NotFoundError):
    """Raised when no user exists for the given ID."""

    def __init__(self, user_id: str):
        super().__init__(
            "User not found",
            code="USER_NOT_FOUND",
            details={"user_id": user_id},
        )


class DuplicateEmailError(ConflictError):
    """Raised when an email is already registered (case-insensitive)."""

    def __init__(self, email: str):
        super().__init__(
            "Email already registered",
            code="DUPLICATE_EMAIL",
            details={"email": email},
        )


class ImmutableFieldError(ValidationError):
    """Raised when an update tries to change a field that is fixed at creation."""

    def __init__(self, field: str):
        super().__init__(
            f"Field cannot be updated: {field}",
            code="IMMUTABLE_FIELD",
            details={"field": field},
        )


class InvalidFieldValueError(ValidationError):
    """Raised when an update carries a value the record cannot hold."""

    def __init__(self, field: str):
        super().__init__(
            f"Invalid value for field: {field}",
            code="INVALID_FIELD_VALUE",
            details={"field": field},
        )
