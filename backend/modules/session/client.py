"""
HTTP implementation of IAuthClient.

Speaks the /api/auth endpoints and turns every failure into an
AuthClientError carrying the server's error message.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import ValidationError
from modules.auth.models import AuthResult
from modules.auth.validation import parse_user_type
from modules.users.models import UserResponse, UserType

from .exceptions import AuthClientError
from .interfaces import IAuthClient

logger = logging.getLogger(__name__)

NETWORK_ERROR_MESSAGE = "Unable to reach the server. Please try again."
UNEXPECTED_RESPONSE_MESSAGE = "Unexpected response from the server"


class HttpAuthClient(IAuthClient):
    """
    Auth API client over httpx.

    Pass an ``httpx.AsyncClient`` to control transport (tests hand in one
    bound to the ASGI app); otherwise one is created for ``base_url``.
    """

    def __init__(
        self,
        base_url: str = "http://localhost:5000",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0,
        prefix: str = "/api/auth",
    ):
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._prefix = prefix

    async def sign_up(self, name: str, email: str, password: str) -> AuthResult:
        data = await self._request(
            "POST", "/signup", json={"name": name, "email": email, "password": password}
        )
        return _parse(AuthResult, data)

    async def sign_in(self, email: str, password: str) -> AuthResult:
        data = await self._request(
            "POST", "/signin", json={"email": email, "password": password}
        )
        return _parse(AuthResult, data)

    async def set_user_type(self, user_id: str, user_type: UserType) -> UserResponse:
        try:
            parsed = parse_user_type(user_type)
        except ValidationError as exc:
            raise AuthClientError(exc.message, exc.status_code) from exc

        data = await self._request(
            "POST",
            "/set-user-type",
            json={"userId": user_id, "userType": parsed.value},
        )
        return _parse(UserResponse, data.get("user"))

    async def reset_password(self, email: str) -> str:
        data = await self._request("POST", "/reset-password", json={"email": email})
        return str(data.get("message", ""))

    async def logout(self, token: str) -> None:
        await self._request("POST", "/logout", token=token)

    async def get_me(self, token: str) -> UserResponse:
        data = await self._request("GET", "/me", token=token)
        return _parse(UserResponse, data.get("user"))

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[dict[str, Any]] = None,
        token: Optional[str] = None,
    ) -> dict[str, Any]:
        headers = {"Authorization": f"Bearer {token}"} if token else None
        try:
            response = await self._client.request(
                method, f"{self._prefix}{path}", json=json, headers=headers
            )
        except httpx.HTTPError as exc:
            logger.warning("Auth request %s %s failed: %s", method, path, exc)
            raise AuthClientError(NETWORK_ERROR_MESSAGE) from exc

        try:
            data = response.json()
        except ValueError:
            data = None

        if not isinstance(data, dict):
            raise AuthClientError(UNEXPECTED_RESPONSE_MESSAGE, response.status_code)

        if response.is_error or data.get("success") is False:
            message = data.get("error") or data.get("message") or UNEXPECTED_RESPONSE_MESSAGE
            raise AuthClientError(str(message), response.status_code)

        return data


def _parse(model: Any, data: Any) -> Any:
    try:
        return model.model_validate(data)
    except PydanticValidationError as exc:
        raise AuthClientError(UNEXPECTED_RESPONSE_MESSAGE) from exc
