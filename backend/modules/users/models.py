"""
Users module data models.

UserRecord is the stored form and carries the password hash. Anything that
leaves the store for a client goes through UserResponse instead.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class UserType(str, Enum):
    """Account type chosen during onboarding."""

    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UserResponse(BaseModel):
    """
    Redacted view of a user record.

    Serialized with camelCase keys to match the wire format
    ({"id", "name", "email", "userType"}).
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    name: str
    email: str
    user_type: Optional[UserType] = Field(
        default=None,
        alias="userType",
        description="Unset until onboarding is completed",
    )


class UserRecord(BaseModel):
    """A stored user, including the password hash."""

    id: str = Field(..., description="Opaque, immutable identifier")
    name: str = Field(..., min_length=1)
    email: str = Field(..., description="Email with original casing preserved")
    password_hash: str = Field(..., repr=False)
    user_type: Optional[UserType] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @property
    def email_key(self) -> str:
        """Case-insensitive lookup key for the email."""
        return normalize_email(self.email)

    def to_response(self) -> UserResponse:
        """Return the redacted view (never includes the password hash)."""
        return UserResponse(
            id=self.id,
            name=self.name,
            email=self.email,
            user_type=self.user_type,
        )


def normalize_email(email: str) -> str:
    """Normalize an email for comparison. Display casing is kept elsewhere."""
    return email.strip().casefold()
