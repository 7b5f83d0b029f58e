"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from verified token claims and made available to route
    handlers via dependency injection.
    """

    id: str = Field(..., description="User ID from the token subject")
    email: str = Field(..., description="Email address the token was issued for")
    issued_at: Optional[datetime] = Field(None, description="Token issue time")
    expires_at: Optional[datetime] = Field(None, description="Token expiry time")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }


class SuccessResponse(BaseModel):
    """Minimal success envelope."""

    success: bool = True
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    """Uniform failure envelope returned by every endpoint."""

    success: bool = False
    error: str
