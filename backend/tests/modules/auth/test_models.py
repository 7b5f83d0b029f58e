import pytest

from modules.auth.models import (
    AuthResult,
    SessionStage,
    SetUserTypeRequest,
    SignUpRequest,
    TokenClaims,
)
from modules.users.models import UserResponse, UserType


class TestTokenClaims:
    def test_parse(self):
        claims = TokenClaims(sub="u1", email="a@b.com", iat=1704067200, exp=1704070800)
        assert claims.user_id == "u1"
        assert claims.issued_at.year == 2024
        assert (claims.expires_at - claims.issued_at).total_seconds() == 3600

    def test_extra_claims_ignored(self):
        claims = TokenClaims(sub="u1", email="a@b.com", iat=1, exp=2, userId="u1")
        assert claims.sub == "u1"


class TestSessionStage:
    def test_no_user(self):
        assert SessionStage.for_user(None) is SessionStage.UNAUTHENTICATED

    def test_pending(self):
        user = UserResponse(id="u1", name="Jo", email="a@b.com")
        assert SessionStage.for_user(user) is SessionStage.PENDING_ONBOARDING

    def test_onboarded(self):
        user = UserResponse(id="u1", name="Jo", email="a@b.com", user_type=UserType.VENDOR)
        assert SessionStage.for_user(user) is SessionStage.ONBOARDED


class TestRequests:
    def test_sign_up_defaults(self):
        """Missing fields become empty so the service reports them."""
        request = SignUpRequest()
        assert request.name == ""
        assert request.email == ""

    def test_set_user_type_wire_names(self):
        request = SetUserTypeRequest.model_validate({"userId": "u1", "userType": "admin"})
        assert request.user_id == "u1"
        assert request.user_type == "admin"


class TestAuthResult:
    def test_serialization(self):
        result = AuthResult(user=UserResponse(id="u1", name="Jo", email="a@b.com"), token="t")
        body = result.model_dump(by_alias=True)
        assert body["success"] is True
        assert body["token"] == "t"
        assert body["user"]["userType"] is None
        assert result.stage is SessionStage.PENDING_ONBOARDING
