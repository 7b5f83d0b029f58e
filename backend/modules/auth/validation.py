"""
Input validation for auth operations.

Each validator checks fields in order and raises on the first failure, so
the caller always gets a single message for the first bad field.
"""

from typing import Any

from email_validator import EmailNotValidError, validate_email

from modules.users.models import UserType

from .exceptions import FieldValidationError

NAME_TOO_SHORT = "Name must be at least {min_length} characters long"
INVALID_EMAIL = "Please provide a valid email address"
PASSWORD_TOO_SHORT = "Password must be at least {min_length} characters long"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_UNSUPPORTED = "Password contains unsupported characters"
USER_ID_REQUIRED = "User ID is required"
INVALID_USER_TYPE = "User type must be customer, vendor, or admin"


def validate_name(name: Any, min_length: int = 2) -> str:
    cleaned = name.strip() if isinstance(name, str) else ""
    if len(cleaned) < min_length:
        raise FieldValidationError("name", NAME_TOO_SHORT.format(min_length=min_length))
    return cleaned


def validate_email_address(email: Any) -> str:
    """Check the email's shape and return it trimmed, casing untouched."""
    cleaned = email.strip() if isinstance(email, str) else ""
    if not cleaned:
        raise FieldValidationError("email", INVALID_EMAIL)
    try:
        validate_email(cleaned, check_deliverability=False)
    except EmailNotValidError:
        raise FieldValidationError("email", INVALID_EMAIL)
    return cleaned


def validate_new_password(password: Any, min_length: int = 6) -> str:
    if not isinstance(password, str) or len(password) < min_length:
        raise FieldValidationError(
            "password", PASSWORD_TOO_SHORT.format(min_length=min_length)
        )
    try:
        password.encode("utf-8")
    except UnicodeEncodeError:
        raise FieldValidationError("password", PASSWORD_UNSUPPORTED)
    return password


def validate_sign_up(
    name: Any,
    email: Any,
    password: Any,
    min_name_length: int = 2,
    min_password_length: int = 6,
) -> tuple[str, str, str]:
    """Validate sign-up input. Returns (name, email, password) cleaned."""
    return (
        validate_name(name, min_name_length),
        validate_email_address(email),
        validate_new_password(password, min_password_length),
    )


def validate_sign_in(email: Any, password: Any) -> tuple[str, str]:
    cleaned_email = validate_email_address(email)
    if not isinstance(password, str) or not password:
        raise FieldValidationError("password", PASSWORD_REQUIRED)
    return cleaned_email, password


def validate_user_type(user_id: Any, user_type: Any) -> tuple[str, UserType]:
    if not isinstance(user_id, str) or not user_id.strip():
        raise FieldValidationError("userId", USER_ID_REQUIRED)
    return user_id.strip(), parse_user_type(user_type)


def parse_user_type(value: Any) -> UserType:
    """Accept a UserType or its exact string value; anything else fails."""
    if isinstance(value, UserType):
        return value
    try:
        return UserType(value)
    except (ValueError, TypeError):
        raise FieldValidationError("userType", INVALID_USER_TYPE)

