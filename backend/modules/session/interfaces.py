"""
Session module interface.

SessionController talks to the backend only through IAuthClient, so tests
can drive it with a fake and the app can use the HTTP client.
"""

from typing import Protocol, runtime_checkable

from modules.auth.models import AuthResult
from modules.users.models import UserResponse, UserType


@runtime_checkable
class IAuthClient(Protocol):
    """Client-side contract for the auth API. Failures raise AuthClientError."""

    async def sign_up(self, name: str, email: str, password: str) -> AuthResult:
        ...

    async def sign_in(self, email: str, password: str) -> AuthResult:
        ...

    async def set_user_type(self, user_id: str, user_type: UserType) -> UserResponse:
        ...

    async def reset_password(self, email: str) -> str:
        """Returns the server's confirmation message."""
        ...

    async def logout(self, token: str) -> None:
        ...

    async def get_me(self, token: str) -> UserResponse:
        ...
