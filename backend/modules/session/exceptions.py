"""
Session module exceptions.
"""

from typing import Optional

from shared.exceptions import IMallError


class AuthClientError(IMallError):
    """
    Raised by an auth client when the API call fails.

    ``message`` is the server's error text when it sent one, so it can be
    shown to the user as-is.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(
            message,
            code="AUTH_CLIENT_ERROR",
            details={"status_code": status_code},
        )
        self.status_code = status_code or 500


class NotSignedInError(IMallError):
    """Raised when an action needs a signed-in session and there is none."""

    status_code = 401

    def __init__(self):
        super().__init__("You need to sign in first", code="NOT_SIGNED_IN")
