"""
Authentication module.

Handles credential checks, password hashing, token issuing/verification
and the onboarding user-type step.

Public API:
- IAuthService: Interface for auth operations
- AuthService / create_auth_service: Default implementation and factory
- PasswordHasher, TokenManager: Building blocks used by the service
- Auth exceptions: InvalidTokenError, ExpiredTokenError, etc.
"""

from .interfaces import IAuthService
from .models import AuthResult, MessageResponse, SessionStage, TokenClaims, UserEnvelope
from .passwords import PasswordHasher
from .tokens import TokenManager
from .service import AuthService, create_auth_service
from .exceptions import (
    InvalidTokenError,
    ExpiredTokenError,
    MissingTokenError,
    InvalidCredentialsError,
    TokenConfigurationError,
    FieldValidationError,
)

__all__ = [
    # Interface
    "IAuthService",
    "AuthService",
    "create_auth_service",
    "PasswordHasher",
    "TokenManager",
    # Models
    "AuthResult",
    "MessageResponse",
    "SessionStage",
    "TokenClaims",
    "UserEnvelope",
    # Exceptions
    "InvalidTokenError",
    "ExpiredTokenError",
    "MissingTokenError",
    "InvalidCredentialsError",
    "TokenConfigurationError",
    "FieldValidationError",
]
