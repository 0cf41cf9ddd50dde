from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from bookmarker_api.config import Settings, get_settings
from bookmarker_api.security.access_guard import (
    AccessGuard,
    Identity,
    require_identity,
    require_owner,
)
from bookmarker_api.security.tokens import TokenService

bearer_scheme = HTTPBearer(auto_error=False)


def get_token_service(settings: Annotated[Settings, Depends(get_settings)]) -> TokenService:
    return TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.token_algorithm,
        expire_minutes=settings.access_token_expire_minutes,
    )


def get_access_guard(tokens: Annotated[TokenService, Depends(get_token_service)]) -> AccessGuard:
    return AccessGuard(tokens=tokens)


def get_identity(
    guard: Annotated[AccessGuard, Depends(get_access_guard)],
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)] = None,
) -> Identity | None:
    if credentials is None:
        return None
    return guard.authenticate(credentials.credentials)


def require_current_user(
    identity: Annotated[Identity | None, Depends(get_identity)],
) -> Identity:
    return require_identity(identity)


def require_route_owner(
    username: str,
    identity: Annotated[Identity | None, Depends(get_identity)],
) -> Identity:
    """Resolves the ``{username}`` path parameter and rejects anyone but its owner."""
    require_owner(identity, username)
    return require_identity(identity)
