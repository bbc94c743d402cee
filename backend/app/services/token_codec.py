"""
Hauge API — Bearer Token Codec
===============================

What:  Issues and verifies signed, self-contained bearer tokens (JWT, HS256).
How:   PyJWT encodes {sub, iat, exp}; verification checks signature and expiry.
Who:   Built once by create_app() and stored on app.state; read by the
       authentication dependency and by AuthService.

Token claims:
    sub: user id as a decimal string
    iat: issued-at (UTC epoch seconds)
    exp: iat + 24 hours by default

verify() never raises for a bad token. Malformed, tampered, expired or
subject-less tokens all come back as None; the caller maps that to 403.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional

import jwt

from app.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_EXPIRY = timedelta(hours=24)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """
    Signs and verifies user tokens with a process-wide secret.

    Instances hold only read-only configuration and are safe to share
    between concurrent requests.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = DEFAULT_EXPIRY,
        clock: Callable[[], datetime] = _utcnow,
    ):
        if not secret or not secret.strip():
            raise ConfigurationError("JWT_SECRET environment variable is required")
        self._secret = secret
        self._algorithm = algorithm
        self._expires_in = expires_in
        self._clock = clock

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(self, user_id: int) -> str:
        """Returns a signed token for user_id, expiring `expires_in` from now."""
        now = self._clock()
        payload: Dict[str, Any] = {
            "sub": str(int(user_id)),
            "iat": int(now.timestamp()),
            "exp": int((now + self._expires_in).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Optional[int]:
        """
        Returns the user id carried by a valid token, else None.

        Checked: signature, exp (required), sub (required, integer).
        """
        if not token:
            return None
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            logger.debug("Rejected expired token")
            return None
        except jwt.InvalidTokenError as e:
            logger.debug("Rejected invalid token: %s", type(e).__name__)
            return None

        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            logger.debug("Rejected token with non-integer subject")
            return None
