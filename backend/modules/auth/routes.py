"""
Auth API endpoints.

Mounted under /api/auth. Domain errors raised by the service are rendered
by the handlers in api.errors; unexpected ones are turned into a 500 by the
per-route boundary.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.errors import internal_error_boundary
from api.middleware.auth import get_current_user
from shared.models import AuthenticatedUser, ErrorResponse

from .interfaces import IAuthService
from .models import (
    AuthResult,
    MessageResponse,
    ResetPasswordRequest,
    SetUserTypeRequest,
    SignInRequest,
    SignUpRequest,
    UserEnvelope,
)

router = APIRouter()

_ERRORS = {
    400: {"model": ErrorResponse},
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.post("/signup", response_model=AuthResult, status_code=201, responses=_ERRORS)
async def sign_up(
    request: SignUpRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """
    Create an account.

    The new user has no type yet; the client moves on to type selection.
    """
    with internal_error_boundary("Failed to create account"):
        return await service.sign_up(request.name, request.email, request.password)


@router.post("/signin", response_model=AuthResult, responses=_ERRORS)
async def sign_in(
    request: SignInRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResult:
    """Sign in with email and password."""
    with internal_error_boundary("Failed to sign in"):
        return await service.sign_in(request.email, request.password)


@router.post("/set-user-type", response_model=UserEnvelope, responses=_ERRORS)
async def set_user_type(
    request: SetUserTypeRequest,
    service: IAuthService = Depends(get_auth_service),
) -> UserEnvelope:
    """Record the account type picked during onboarding."""
    with internal_error_boundary("Failed to set user type"):
        user = await service.set_user_type(request.user_id, request.user_type)
    return UserEnvelope(user=user)


@router.post("/reset-password", response_model=MessageResponse, responses=_ERRORS)
async def reset_password(
    request: ResetPasswordRequest,
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """
    Request a password reset link.

    The response is the same whether or not the email is registered.
    """
    with internal_error_boundary("Failed to process password reset"):
        return await service.reset_password(request.email)


@router.post("/logout", response_model=MessageResponse, responses=_ERRORS)
async def logout(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> MessageResponse:
    """Log out. The token itself stays valid until it expires."""
    with internal_error_boundary("Failed to logout"):
        return await service.logout(user)


@router.get("/me", response_model=UserEnvelope, responses=_ERRORS)
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IAuthService = Depends(get_auth_service),
) -> UserEnvelope:
    """Get the signed-in user's profile."""
    with internal_error_boundary("Failed to fetch user"):
        profile = await service.get_user(user.id)
    return UserEnvelope(user=profile)
