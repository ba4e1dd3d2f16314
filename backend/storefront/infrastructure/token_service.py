"""Token Service — signed, time-bounded bearer tokens carrying a user identity claim.

Invariants:
    - Stateless: no session table, no revocation list
    - Claims shape: {"user": {"id": <uuid>}, "iat": ..., "exp": ...}
    - verify maps every failure (signature, expiry, malformed, bad claim) to the
      same InvalidTokenError

Design Decisions:
    - PyJWT HS256 with a shared secret from settings
    - expires_in is a required argument: callers choose bounded or unbounded
      lifetime explicitly (None omits the exp claim)
    - Clock injectable for expiry tests
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from storefront.core.domain_types import UserId
from storefront.core.errors import InvalidTokenError

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issue and verify identity tokens."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        now: Callable[[], datetime] = _utcnow,
    ):
        self.secret = secret
        self.algorithm = algorithm
        self._now = now

    def issue(self, user_id: UserId, expires_in: timedelta | None) -> str:
        issued_at = self._now()
        payload: dict = {
            "user": {"id": str(user_id)},
            "iat": int(issued_at.timestamp()),
        }
        if expires_in is not None:
            payload["exp"] = int((issued_at + expires_in).timestamp())
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> UserId:
        try:
            # exp checked against the injected clock, not PyJWT's wall clock
            data = jwt.decode(
                token, self.secret, algorithms=[self.algorithm],
                options={"verify_exp": False, "verify_iat": False},
            )
            exp = data.get("exp")
            if exp is not None and self._now().timestamp() > float(exp):
                raise InvalidTokenError()
            return UserId(UUID(str(data["user"]["id"])))
        except InvalidTokenError:
            logger.info("Rejected expired token")
            raise
        except (jwt.PyJWTError, KeyError, TypeError, ValueError) as e:
            logger.info(f"Rejected token: {type(e).__name__}")
            raise InvalidTokenError()
