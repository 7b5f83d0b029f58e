"""
Client-side form checks.

These mirror the server rules so obvious mistakes are caught before a
request is made. Each returns ``{field: message}``; an empty dict means
the form is valid. Unlike the server, all fields are reported at once so
the screen can mark each input.
"""

import re
from typing import Optional

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

MIN_NAME_LENGTH = 2
MIN_PASSWORD_LENGTH = 6


def _email_error(email: str) -> Optional[str]:
    if not email.strip():
        return "Email is required"
    if not EMAIL_PATTERN.match(email.strip()):
        return "Please enter a valid email address"
    return None


def validate_sign_up_form(
    name: str,
    email: str,
    password: str,
    confirm_password: Optional[str] = None,
) -> dict[str, str]:
    """
    Check the sign-up form.

    ``confirm_password`` is only checked when given; screens without a
    confirmation field pass None.
    """
    errors: dict[str, str] = {}

    if not name.strip():
        errors["name"] = "Name is required"
    elif len(name.strip()) < MIN_NAME_LENGTH:
        errors["name"] = f"Name must be at least {MIN_NAME_LENGTH} characters"

    email_error = _email_error(email)
    if email_error:
        errors["email"] = email_error

    if not password:
        errors["password"] = "Password is required"
    elif len(password) < MIN_PASSWORD_LENGTH:
        errors["password"] = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

    if confirm_password is not None:
        if not confirm_password:
            errors["confirmPassword"] = "Please confirm your password"
        elif password != confirm_password:
            errors["confirmPassword"] = "Passwords do not match"

    return errors


def validate_sign_in_form(email: str, password: str) -> dict[str, str]:
    errors: dict[str, str] = {}

    email_error = _email_error(email)
    if email_error:
        errors["email"] = email_error

    if not password:
        errors["password"] = "Password is required"

    return errors


def validate_reset_form(email: str) -> dict[str, str]:
    if not email.strip():
        return {"email": "Please enter your email address first"}
    email_error = _email_error(email)
    return {"email": email_error} if email_error else {}


def first_error(errors: dict[str, str]) -> Optional[str]:
    """The message to show in an alert: the first field that failed."""
    return next(iter(errors.values()), None)
