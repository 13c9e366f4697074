"""
Identity token issuance and verification (HS256 JWT).

A token carries the user id in the ``userId`` claim together with
``iat`` and ``exp``. The signing secret is fixed for the process lifetime.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import ExpiredSignatureError, JWTError, jwt

from todo_api.errors import ConfigurationError, InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(hours=1)


class TokenService:
    """Issues and verifies signed, time-bound identity tokens."""

    def __init__(
        self,
        secret: Optional[str],
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_LIFETIME,
    ):
        if not secret:
            raise ConfigurationError("JWT_SECRET must be set to issue tokens")
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    def issue(self, user_id: int, expires_delta: Optional[timedelta] = None) -> str:
        """Create a signed token for ``user_id``."""
        if expires_delta is None:
            expires_delta = self.lifetime

        now = datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "iat": now,
            "exp": now + expires_delta,
        }
        return jwt.encode(claims, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> int:
        """
        Decode ``token`` and return its user id.

        Raises:
            TokenExpiredError: the token is well-formed but expired.
            InvalidTokenError: the token is malformed, tampered with,
                signed with another key or lacks a user id.
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except ExpiredSignatureError as exc:
            raise TokenExpiredError() from exc
        except JWTError as exc:
            raise InvalidTokenError() from exc

        user_id = payload.get("userId")
        # bool is an int subclass
        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError()
        return user_id
