"""
Authentication service implementation.

Orchestrates sign-up, sign-in, onboarding and password reset on top of the
user store, the password hasher and the token manager.
"""

import asyncio
import logging
from datetime import timedelta
from typing import Any, Callable, Optional, TypeVar

from shared.config import Settings, get_settings
from shared.models import AuthenticatedUser
from modules.users.exceptions import DuplicateEmailError, UserNotFoundError
from modules.users.interfaces import IUserStore
from modules.users.models import UserRecord, UserResponse
from modules.users.store import InMemoryUserStore

from .exceptions import InvalidCredentialsError
from .interfaces import IAuthService
from .models import AuthResult, MessageResponse
from .passwords import PasswordHasher
from .tokens import TokenManager
from .validation import (
    validate_email_address,
    validate_sign_in,
    validate_sign_up,
    validate_user_type,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

RESET_PASSWORD_MESSAGE = "If the email exists, a password reset link has been sent"
LOGOUT_MESSAGE = "Logged out successfully"


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    The store is injected so tests can use a fake and production can swap in
    a persistent backend. Email uniqueness is enforced by the store's atomic
    create; the lookup beforehand only saves a wasted hash.
    """

    def __init__(
        self,
        store: IUserStore,
        hasher: PasswordHasher,
        tokens: TokenManager,
        min_name_length: int = 2,
        min_password_length: int = 6,
    ):
        self._store = store
        self._hasher = hasher
        self._tokens = tokens
        self._min_name_length = min_name_length
        self._min_password_length = min_password_length

    async def sign_up(self, name: Any, email: Any, password: Any) -> AuthResult:
        name, email, password = validate_sign_up(
            name,
            email,
            password,
            min_name_length=self._min_name_length,
            min_password_length=self._min_password_length,
        )

        if self._store.find_by_email(email) is not None:
            raise DuplicateEmailError(email)

        # Nothing is stored unless a token can be issued for it
        self._tokens.ensure_configured()

        password_hash = await _run_blocking(self._hasher.hash, password)
        user = self._store.create(name=name, email=email, password_hash=password_hash)

        logger.info("User signed up: %s", user.id)
        return self._issue(user)

    async def sign_in(self, email: Any, password: Any) -> AuthResult:
        email, password = validate_sign_in(email, password)

        user = self._store.find_by_email(email)
        if user is None:
            logger.debug("Sign-in failed: unknown email")
            raise InvalidCredentialsError()

        valid = await _run_blocking(self._hasher.verify, password, user.password_hash)
        if not valid:
            logger.debug("Sign-in failed: wrong password for %s", user.id)
            raise InvalidCredentialsError()

        logger.info("User signed in: %s", user.id)
        return self._issue(user)

    async def set_user_type(self, user_id: Any, user_type: Any) -> UserResponse:
        user_id, parsed_type = validate_user_type(user_id, user_type)

        if self._store.find_by_id(user_id) is None:
            raise UserNotFoundError(user_id)

        updated = self._store.update(user_id, user_type=parsed_type)
        if updated is None:
            # Deleted between the lookup and the update
            raise UserNotFoundError(user_id)

        logger.info("User %s set type to %s", user_id, parsed_type.value)
        return updated.to_response()

    async def reset_password(self, email: Any) -> MessageResponse:
        email = validate_email_address(email)

        if self._store.find_by_email(email) is None:
            logger.debug("Password reset requested for unknown email")
        else:
            # TODO: send the reset link once an email integration exists
            logger.info("Password reset requested for: %s", email)

        return MessageResponse(message=RESET_PASSWORD_MESSAGE)

    async def get_user(self, user_id: str) -> UserResponse:
        user = self._store.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user.to_response()

    async def validate_token(self, token: str) -> AuthenticatedUser:
        claims = self._tokens.verify(token)
        return AuthenticatedUser(
            id=claims.user_id,
            email=claims.email,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )

    async def logout(self, user: AuthenticatedUser) -> MessageResponse:
        logger.info("User logged out: %s", user.id)
        return MessageResponse(message=LOGOUT_MESSAGE)

    def _issue(self, user: UserRecord) -> AuthResult:
        token = self._tokens.issue(user.id, user.email)
        return AuthResult(user=user.to_response(), token=token)


async def _run_blocking(func: Callable[..., T], *args: Any) -> T:
    """Run CPU-bound work (bcrypt) off the event loop."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, func, *args)


def create_auth_service(
    settings: Optional[Settings] = None,
    store: Optional[IUserStore] = None,
) -> AuthService:
    """Build an AuthService from settings, with an in-memory store by default."""
    settings = settings or get_settings()
    return AuthService(
        store=store if store is not None else InMemoryUserStore(),
        hasher=PasswordHasher(rounds=settings.bcrypt_rounds),
        tokens=TokenManager(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expires_in=timedelta(days=settings.jwt_expires_in_days),
        ),
        min_name_length=settings.min_name_length,
        min_password_length=settings.min_password_length,
    )
