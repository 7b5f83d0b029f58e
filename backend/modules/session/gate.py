"""
Session gate.

Maps auth state to the navigable region. Pure functions: same input, same
output, no side effects, so they can be re-run on every state change.
"""

from .models import ClientSessionState, NavigatorSpec, NavRegion, Screen

_NAVIGATORS = {
    NavRegion.ONBOARDING_STACK: NavigatorSpec(
        region=NavRegion.ONBOARDING_STACK,
        screens=(
            Screen.INTRODUCTION,
            Screen.AUTH_SELECTION,
            Screen.SIGN_UP,
            Screen.SIGN_IN,
        ),
    ),
    # One-way gate: no swiping back out of type selection
    NavRegion.USER_TYPE_SELECTION: NavigatorSpec(
        region=NavRegion.USER_TYPE_SELECTION,
        screens=(Screen.USER_TYPE_SELECTION,),
        gesture_enabled=False,
    ),
    NavRegion.MAIN_APP: NavigatorSpec(
        region=NavRegion.MAIN_APP,
        screens=(Screen.MAIN_APP,),
    ),
}


def resolve_region(is_authenticated: bool, has_completed_onboarding: bool) -> NavRegion:
    """
    Decide which region is reachable.

    (False, any)  -> onboarding stack
    (True, False) -> user type selection
    (True, True)  -> main app
    """
    if not is_authenticated:
        return NavRegion.ONBOARDING_STACK
    if not has_completed_onboarding:
        return NavRegion.USER_TYPE_SELECTION
    return NavRegion.MAIN_APP


def region_for(state: ClientSessionState) -> NavRegion:
    return resolve_region(state.is_authenticated, state.has_completed_onboarding)


def navigator_for(region: NavRegion) -> NavigatorSpec:
    return _NAVIGATORS[region]
