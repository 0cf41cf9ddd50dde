"""
Identity and ownership checks.

``authenticate`` never fails: a missing or bad token just means an anonymous
caller. Route-level checks then decide whether that is acceptable. Every
rejection raises the same ``UnauthorizedError`` so a caller cannot tell a bad
token from a wrong user, which would leak whether an account exists.
"""

from dataclasses import dataclass

from bookmarker_api.errors import UnauthorizedError
from bookmarker_api.security.tokens import USERNAME_CLAIM, TokenService


@dataclass(frozen=True)
class Identity:
    username: str


class AccessGuard:
    def __init__(self, tokens: TokenService) -> None:
        self.tokens = tokens

    def authenticate(self, token: str | None) -> Identity | None:
        if not token or not token.strip():
            return None
        payload = self.tokens.decode_token(token.strip())
        if payload is None:
            return None
        username = payload.get(USERNAME_CLAIM)
        if not isinstance(username, str) or not username:
            return None
        return Identity(username=username)


def require_identity(identity: Identity | None) -> Identity:
    if identity is None:
        raise UnauthorizedError()
    return identity


def require_owner(identity: Identity | None, route_username: str) -> None:
    if identity is None or identity.username != route_username:
        raise UnauthorizedError()
