"""
Authentication module interface.

Routes and other modules should depend on IAuthService, not the concrete
implementation. This enables testing with fakes.
"""

from typing import Any, Protocol, runtime_checkable

from shared.models import AuthenticatedUser
from modules.users.models import UserResponse

from .models import AuthResult, MessageResponse


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to other modules. Implementations must provide all these methods.
    """

    async def sign_up(self, name: Any, email: Any, password: Any) -> AuthResult:
        """
        Register a new account and issue a token.

        Raises:
            ValidationError: If a field fails validation (first failure wins)
            DuplicateEmailError: If the email is taken (case-insensitive)
        """
        ...

    async def sign_in(self, email: Any, password: Any) -> AuthResult:
        """
        Check credentials and issue a token.

        Raises:
            ValidationError: If the input is malformed
            InvalidCredentialsError: For an unknown email or a wrong password
        """
        ...

    async def set_user_type(self, user_id: Any, user_type: Any) -> UserResponse:
        """
        Record the account type chosen during onboarding.

        Raises:
            ValidationError: If the type is not customer, vendor or admin
            UserNotFoundError: If the user does not exist
        """
        ...

    async def reset_password(self, email: Any) -> MessageResponse:
        """
        Request a password reset.

        Succeeds identically whether or not the email is registered.
        """
        ...

    async def get_user(self, user_id: str) -> UserResponse:
        """
        Get the redacted view of a user.

        Raises:
            UserNotFoundError: If the user does not exist
        """
        ...

    async def validate_token(self, token: str) -> AuthenticatedUser:
        """
        Verify a bearer token and return the caller it identifies.

        Raises:
            MissingTokenError: If no token is given
            InvalidTokenError: If the token is invalid or expired
        """
        ...

    async def logout(self, user: AuthenticatedUser) -> MessageResponse:
        """End a session. Tokens stay valid until they expire."""
        ...
