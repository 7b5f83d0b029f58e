"""
Session module.

Client-side auth state and the navigation gate derived from it.

Public API:
- SessionController: Holds ClientSessionState and runs auth actions
- resolve_region / navigator_for: Pure mapping from auth state to screens
- IAuthClient / HttpAuthClient: Backend access for the controller
- Form validators mirroring the server rules
"""

from .models import ActionResult, ClientSessionState, NavigatorSpec, NavRegion, Screen
from .gate import navigator_for, region_for, resolve_region
from .interfaces import IAuthClient
from .client import HttpAuthClient
from .controller import SessionController
from .forms import validate_reset_form, validate_sign_in_form, validate_sign_up_form
from .exceptions import AuthClientError, NotSignedInError

__all__ = [
    # Models
    "ActionResult",
    "ClientSessionState",
    "NavigatorSpec",
    "NavRegion",
    "Screen",
    # Gate
    "navigator_for",
    "region_for",
    "resolve_region",
    # Controller and client
    "IAuthClient",
    "HttpAuthClient",
    "SessionController",
    # Forms
    "validate_reset_form",
    "validate_sign_in_form",
    "validate_sign_up_form",
    # Exceptions
    "AuthClientError",
    "NotSignedInError",
]
