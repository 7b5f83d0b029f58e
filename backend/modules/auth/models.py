"""
Authentication module data models.

Request bodies accept loosely typed input on purpose: the service runs the
field checks itself so the first failing field decides the error message.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.models import SuccessResponse
from modules.users.models import UserResponse


class SessionStage(str, Enum):
    """Where a signed-in user stands in onboarding."""

    UNAUTHENTICATED = "unauthenticated"
    PENDING_ONBOARDING = "pending_onboarding"
    ONBOARDED = "onboarded"

    @classmethod
    def for_user(cls, user: Optional[UserResponse]) -> "SessionStage":
        if user is None:
            return cls.UNAUTHENTICATED
        if user.user_type is None:
            return cls.PENDING_ONBOARDING
        return cls.ONBOARDED


class TokenClaims(BaseModel):
    """Decoded token payload."""

    sub: str = Field(..., description="Subject (user ID)")
    email: str = Field(..., description="User's email")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")

    model_config = ConfigDict(extra="ignore", frozen=True)

    @property
    def user_id(self) -> str:
        return self.sub

    @property
    def issued_at(self) -> datetime:
        return datetime.fromtimestamp(self.iat, tz=timezone.utc)

    @property
    def expires_at(self) -> datetime:
        return datetime.fromtimestamp(self.exp, tz=timezone.utc)


class SignUpRequest(BaseModel):
    name: Any = ""
    email: Any = ""
    password: Any = ""


class SignInRequest(BaseModel):
    email: Any = ""
    password: Any = ""


class SetUserTypeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id: Any = Field(default="", alias="userId")
    user_type: Any = Field(default=None, alias="userType")


class ResetPasswordRequest(BaseModel):
    email: Any = ""


class AuthResult(BaseModel):
    """Result of a successful sign-up or sign-in."""

    success: bool = True
    user: UserResponse
    token: str

    @property
    def stage(self) -> SessionStage:
        return SessionStage.for_user(self.user)


class UserEnvelope(BaseModel):
    """``{"success": true, "user": {...}}``"""

    success: bool = True
    user: UserResponse


class MessageResponse(SuccessResponse):
    message: str
