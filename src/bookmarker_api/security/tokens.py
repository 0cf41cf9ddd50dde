import logging
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt

logger = logging.getLogger(__name__)

USERNAME_CLAIM = "username"


class TokenService:
    """Issues and verifies signed tokens whose only identity claim is the username."""

    def __init__(self, secret_key: str, algorithm: str = "HS256", expire_minutes: int = 60) -> None:
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    def create_token(self, username: str) -> str:
        expire = datetime.now(UTC) + timedelta(minutes=self.expire_minutes)
        payload = {USERNAME_CLAIM: username, "exp": expire}
        return jwt.encode(payload, self.secret_key, algorithm=self.algorithm)

    def decode_token(self, token: str) -> dict[str, Any] | None:
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError:
            logger.debug("Rejected bearer token")
            return None
