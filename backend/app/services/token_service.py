"""Token service — issues and verifies signed bearer tokens.

Tokens are HS256 JWTs carrying a single ``userId`` claim and an ``exp`` 24 hours
after issuance. Nothing is persisted; verification is signature + expiry only.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt

from app.errors import InvalidToken

logger = logging.getLogger(__name__)


class TokenService:
    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: timedelta = timedelta(hours=24)):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, user_id: str, now: Optional[datetime] = None) -> str:
        """Sign a token for ``user_id`` that expires ``expires_in`` after ``now``."""
        issued_at = now or datetime.now(timezone.utc)
        payload = {
            "userId": user_id,
            "iat": issued_at,
            "exp": issued_at + self.expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Return the user id carried by ``token`` or raise ``InvalidToken``."""
        try:
            claims = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "userId"]},
            )
        except jwt.PyJWTError as exc:
            logger.info("Rejected bearer token: %s", exc)
            raise InvalidToken() from exc

        user_id = claims["userId"]
        if not isinstance(user_id, str) or not user_id:
            raise InvalidToken()
        return user_id
