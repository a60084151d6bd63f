"""JWT access tokens for bearer authentication."""

import logging
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from mozuk.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

_ACCESS_TOKEN_TYPE = "access"


class TokenService:
    """Issues and verifies signed access tokens carrying the user id as ``sub``."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 1440):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._expire_minutes = expire_minutes

    def create_access_token(self, user_id: str, expires_delta: timedelta | None = None) -> str:
        expire = datetime.now(timezone.utc) + (
            expires_delta if expires_delta is not None else timedelta(minutes=self._expire_minutes)
        )
        payload = {"sub": user_id, "exp": expire, "type": _ACCESS_TOKEN_TYPE}
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)

    def decode_access_token(self, token: str) -> str:
        """Return the user id of a valid access token.

        Raises:
            AuthenticationError: if the token is malformed, expired, badly
                signed or not an access token.
        """
        try:
            payload = jwt.decode(token, self._secret_key, algorithms=[self._algorithm])
        except JWTError as exc:
            logger.warning("Rejected bearer token: %s", exc)
            raise AuthenticationError("Invalid token") from exc

        if payload.get("type") != _ACCESS_TOKEN_TYPE or not payload.get("sub"):
            logger.warning("Rejected bearer token: wrong type or missing subject")
            raise AuthenticationError("Invalid token")
        return str(payload["sub"])
