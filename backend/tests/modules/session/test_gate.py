import itertools

import pytest

from modules.session.gate import navigator_for, region_for, resolve_region
from modules.session.models import ClientSessionState, NavRegion, Screen
from modules.users.models import UserResponse


class TestResolveRegion:
    @pytest.mark.parametrize(
        "is_authenticated, has_completed_onboarding, expected",
        [
            (False, False, NavRegion.ONBOARDING_STACK),
            (False, True, NavRegion.ONBOARDING_STACK),
            (True, False, NavRegion.USER_TYPE_SELECTION),
            (True, True, NavRegion.MAIN_APP),
        ],
    )
    def test_all_boolean_pairs(self, is_authenticated, has_completed_onboarding, expected):
        assert resolve_region(is_authenticated, has_completed_onboarding) is expected

    def test_idempotent(self):
        """Repeated evaluation gives the same answer."""
        for pair in itertools.product([False, True], repeat=2):
            assert resolve_region(*pair) is resolve_region(*pair)

    def test_region_for_state_ignores_user(self):
        """Only the two flags matter."""
        user = UserResponse(id="u1", name="Jo", email="a@b.com")
        with_user = ClientSessionState(is_authenticated=True, user=user, token="t")
        without_user = ClientSessionState(is_authenticated=True)
        assert region_for(with_user) is region_for(without_user) is NavRegion.USER_TYPE_SELECTION


class TestNavigatorFor:
    def test_onboarding_stack(self):
        spec = navigator_for(NavRegion.ONBOARDING_STACK)
        assert spec.screens == (
            Screen.INTRODUCTION,
            Screen.AUTH_SELECTION,
            Screen.SIGN_UP,
            Screen.SIGN_IN,
        )
        assert spec.initial_screen is Screen.INTRODUCTION
        assert spec.gesture_enabled is True

    def test_user_type_selection_is_one_way(self):
        """Swipe-back is disabled on the type selection gate."""
        spec = navigator_for(NavRegion.USER_TYPE_SELECTION)
        assert spec.screens == (Screen.USER_TYPE_SELECTION,)
        assert spec.gesture_enabled is False

    def test_main_app(self):
        spec = navigator_for(NavRegion.MAIN_APP)
        assert spec.initial_screen is Screen.MAIN_APP

    def test_every_region_has_a_navigator(self):
        for region in NavRegion:
            assert navigator_for(region).region is region
