"""
Form nonces: signed tokens that tie a submitted form to the action and the
user it was rendered for.

A nonce is a short JWT carrying the action name and the user id. It is
rejected when the signature, action, user or expiry do not match.
"""

import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from euclid_mam.config import get_settings
from euclid_mam.logging_config import get_logger

logger = get_logger(__name__)

NONCE_TYPE = "nonce"


class NonceManager:
    """Create and verify action-bound form nonces."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        lifetime: Optional[timedelta] = None,
    ):
        settings = get_settings()
        self.secret_key = secret_key or settings.secret_key
        self.algorithm = algorithm or settings.algorithm
        self.lifetime = lifetime or timedelta(hours=settings.nonce_lifetime_hours)

    def create(self, action: str, user_id: Optional[int]) -> str:
        """
        Create a nonce for an action on behalf of a user.

        Anonymous visitors get nonces bound to user id 0.
        """
        now = datetime.now(timezone.utc)
        payload = {
            "act": action,
            "uid": user_id or 0,
            "iat": now,
            "exp": now + self.lifetime,
            "n": secrets.token_hex(4),
            "type": NONCE_TYPE,
        }
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def verify(self, nonce: Optional[str], action: str, user_id: Optional[int]) -> bool:
        """Return True when the nonce was issued for this action and user and has not expired."""
        if not nonce:
            return False

        try:
            payload = jwt.decode(nonce, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            logger.debug("Nonce failed to decode: %s", e)
            return False

        if payload.get("type") != NONCE_TYPE:
            return False
        if payload.get("act") != action:
            return False
        return payload.get("uid") == (user_id or 0)
