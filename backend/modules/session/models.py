"""
Session module data models.

Client-side view of authentication: the session state the app holds after
talking to the API, and the navigation regions derived from it.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from modules.auth.models import SessionStage
from modules.users.models import UserResponse


class NavRegion(str, Enum):
    """Which set of screens the navigator exposes."""

    ONBOARDING_STACK = "onboarding_stack"
    USER_TYPE_SELECTION = "user_type_selection"
    MAIN_APP = "main_app"


class Screen(str, Enum):
    """Screen names, matching the navigator's route names."""

    INTRODUCTION = "Introduction"
    AUTH_SELECTION = "AuthSelection"
    SIGN_UP = "SignUp"
    SIGN_IN = "SignIn"
    USER_TYPE_SELECTION = "UserTypeSelection"
    MAIN_APP = "MainApp"


class NavigatorSpec(BaseModel):
    """Screens available in a region, in stack order."""

    model_config = ConfigDict(frozen=True)

    region: NavRegion
    screens: tuple[Screen, ...]
    gesture_enabled: bool = Field(
        default=True,
        description="Whether swipe-back is allowed between screens",
    )

    @property
    def initial_screen(self) -> Screen:
        return self.screens[0]


class ClientSessionState(BaseModel):
    """
    Transient auth state owned by the client.

    Rebuilt from server responses and discarded on sign-out. The user is
    always the redacted view.
    """

    model_config = ConfigDict(frozen=True)

    is_authenticated: bool = False
    has_completed_onboarding: bool = False
    user: Optional[UserResponse] = None
    token: Optional[str] = Field(default=None, repr=False)

    @property
    def stage(self) -> SessionStage:
        if not self.is_authenticated:
            return SessionStage.UNAUTHENTICATED
        if not self.has_completed_onboarding:
            return SessionStage.PENDING_ONBOARDING
        return SessionStage.ONBOARDED


class ActionResult(BaseModel):
    """
    Outcome of a user action, as shown to the user.

    ``committed`` is False when the server call succeeded but the session
    had moved on (signed out, screen left) so the result was dropped.
    """

    success: bool
    error: Optional[str] = None
    message: Optional[str] = None
    field_errors: dict[str, str] = Field(default_factory=dict)
    committed: bool = True

    @classmethod
    def ok(cls, message: Optional[str] = None) -> "ActionResult":
        return cls(success=True, message=message)

    @classmethod
    def failed(
        cls, error: str, field_errors: Optional[dict[str, str]] = None
    ) -> "ActionResult":
        return cls(success=False, error=error, field_errors=field_errors or {})
