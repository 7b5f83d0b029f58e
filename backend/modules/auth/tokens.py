"""
Token issuing and verification.

Tokens are HS256 JWTs signed with the process-wide secret. There is no
revocation list: expiry is the only way a token stops working, and
changing the secret invalidates every outstanding token.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional
import jwt

from .exceptions import (
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
    TokenConfigurationError,
)
from .models import TokenClaims


Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TokenManager:
    """
    Mints and checks bearer tokens.

    The clock is only used when issuing; verification checks ``exp``
    against the real time, so a token issued with a clock set far enough
    in the past is already expired.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=7),
        clock: Optional[Clock] = None,
    ):
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in
        self._clock = clock or _utc_now

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, user_id: str, email: str) -> str:
        """Sign a token for the given identity."""
        self.ensure_configured()
        now = self._clock()
        payload = {
            "sub": user_id,
            "userId": user_id,
            "email": email,
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: Optional[str]) -> TokenClaims:
        """
        Decode a token and return its claims.

        Raises:
            MissingTokenError: If no token was given
            ExpiredTokenError: If the token has expired
            InvalidTokenError: If the token is malformed or the signature fails
        """
        if not token:
            raise MissingTokenError()
        self.ensure_configured()

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidTokenError:
            raise InvalidTokenError()

        try:
            return TokenClaims(**payload)
        except (TypeError, ValueError):
            raise InvalidTokenError()

    def ensure_configured(self) -> None:
        """Raise TokenConfigurationError if there is no signing secret."""
        if not self._secret:
            raise TokenConfigurationError()
