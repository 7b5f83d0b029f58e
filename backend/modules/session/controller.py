"""
Client session controller.

Owns the ClientSessionState, runs auth actions through an IAuthClient and
re-evaluates the navigation region after every change. Subscribers (the
navigation layer) are called synchronously with the new state and region.

Actions are async and not de-duplicated; disabling the trigger while one is
in flight is up to the caller. A result is only committed if the session
epoch is unchanged (no sign-out happened meanwhile) and the caller's
optional ``is_alive`` check still passes.
"""

import logging
from typing import Awaitable, Callable, Optional, TypeVar

from shared.exceptions import IMallError
from modules.auth.models import AuthResult
from modules.users.models import UserType

from .exceptions import NotSignedInError
from .forms import (
    first_error,
    validate_reset_form,
    validate_sign_in_form,
    validate_sign_up_form,
)
from .gate import navigator_for, region_for
from .interfaces import IAuthClient
from .models import ActionResult, ClientSessionState, NavigatorSpec, NavRegion

logger = logging.getLogger(__name__)

T = TypeVar("T")

Listener = Callable[[ClientSessionState, NavRegion], None]
LivenessCheck = Callable[[], bool]

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."


class _Stale(Exception):
    """The session moved on while a call was in flight."""


class SessionController:
    """Client-side auth state machine."""

    def __init__(self, client: IAuthClient):
        self._client = client
        self._state = ClientSessionState()
        self._epoch = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> ClientSessionState:
        return self._state

    @property
    def region(self) -> NavRegion:
        return region_for(self._state)

    @property
    def navigator(self) -> NavigatorSpec:
        return navigator_for(self.region)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener. Returns a function that unregisters it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def sign_up(
        self,
        name: str,
        email: str,
        password: str,
        confirm_password: Optional[str] = None,
        is_alive: Optional[LivenessCheck] = None,
    ) -> ActionResult:
        errors = validate_sign_up_form(name, email, password, confirm_password)
        if errors:
            return ActionResult.failed(first_error(errors), errors)

        return await self._authenticate(
            lambda: self._client.sign_up(name.strip(), email.strip(), password),
            is_alive,
        )

    async def sign_in(
        self,
        email: str,
        password: str,
        is_alive: Optional[LivenessCheck] = None,
    ) -> ActionResult:
        errors = validate_sign_in_form(email, password)
        if errors:
            return ActionResult.failed(first_error(errors), errors)

        return await self._authenticate(
            lambda: self._client.sign_in(email.strip(), password),
            is_alive,
        )

    async def set_user_type(
        self,
        user_type: UserType,
        is_alive: Optional[LivenessCheck] = None,
    ) -> ActionResult:
        """
        Finish onboarding.

        Once onboarded the session never goes back to pending, even if the
        type is changed again later.
        """
        user = self._state.user
        if not self._state.is_authenticated or user is None:
            return ActionResult.failed(NotSignedInError().message)

        try:
            updated = await self._call(
                lambda: self._client.set_user_type(user.id, user_type), is_alive
            )
        except _Stale:
            return ActionResult(success=True, committed=False)
        except IMallError as exc:
            return ActionResult.failed(exc.message)

        self._commit(
            self._state.model_copy(
                update={"user": updated, "has_completed_onboarding": True}
            )
        )
        return ActionResult.ok()

    async def reset_password(self, email: str) -> ActionResult:
        errors = validate_reset_form(email)
        if errors:
            return ActionResult.failed(first_error(errors), errors)

        try:
            message = await self._call(
                lambda: self._client.reset_password(email.strip()), None
            )
        except IMallError as exc:
            return ActionResult.failed(exc.message)
        return ActionResult.ok(message)

    async def sign_out(self) -> ActionResult:
        """
        Clear the session unconditionally.

        The server is told as a courtesy; its tokens stay valid until they
        expire, so a failed logout call does not matter.
        """
        token = self._state.token
        self._epoch += 1
        self._commit(ClientSessionState())

        if token:
            try:
                await self._client.logout(token)
            except IMallError as exc:
                logger.info("Server logout failed, continuing: %s", exc.message)
            except Exception:
                logger.exception("Server logout failed unexpectedly")
        return ActionResult.ok()

    async def _authenticate(
        self,
        action: Callable[[], Awaitable[AuthResult]],
        is_alive: Optional[LivenessCheck],
    ) -> ActionResult:
        try:
            result = await self._call(action, is_alive)
        except _Stale:
            return ActionResult(success=True, committed=False)
        except IMallError as exc:
            return ActionResult.failed(exc.message)

        self._commit(
            ClientSessionState(
                is_authenticated=True,
                has_completed_onboarding=result.user.user_type is not None,
                user=result.user,
                token=result.token,
            )
        )
        return ActionResult.ok()

    async def _call(
        self,
        action: Callable[[], Awaitable[T]],
        is_alive: Optional[LivenessCheck],
    ) -> T:
        """
        Run a client call and check the session is still current afterwards.

        Raises:
            IMallError: If the call failed (unexpected errors are wrapped)
            _Stale: If the session changed while the call was in flight
        """
        epoch = self._epoch
        try:
            value = await action()
        except IMallError:
            raise
        except Exception as exc:
            logger.exception("Auth action failed unexpectedly")
            raise IMallError(UNEXPECTED_ERROR_MESSAGE) from exc

        if epoch != self._epoch or (is_alive is not None and not is_alive()):
            logger.debug("Dropping auth result: session changed while in flight")
            raise _Stale()
        return value

    def _commit(self, state: ClientSessionState) -> None:
        self._state = state
        region = region_for(state)
        for listener in list(self._listeners):
            listener(state, region)
