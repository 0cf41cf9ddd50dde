from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookmarker_api.dependencies.auth import get_token_service, require_route_owner
from bookmarker_api.dependencies.users import get_user_service
from bookmarker_api.schemas.user import (
    TokenResponse,
    UserDeletedResponse,
    UserLogin,
    UserProfile,
    UserRegister,
    UserResponse,
    UserUpdate,
)
from bookmarker_api.security.tokens import TokenService
from bookmarker_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

OWNER_ONLY = [Depends(require_route_owner)]


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=TokenResponse,
    summary="Register",
    description="Creates an account and returns a bearer token for it.",
    responses={400: {"description": "Invalid payload or username already taken"}},
)
def register(
    payload: UserRegister,
    svc: Annotated[UserService, Depends(get_user_service)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenResponse:
    user = svc.register(payload)
    return TokenResponse(token=tokens.create_token(user.username))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in",
    responses={401: {"description": "Invalid username/password"}},
)
def login(
    payload: UserLogin,
    svc: Annotated[UserService, Depends(get_user_service)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> TokenResponse:
    user = svc.authenticate(payload.username, payload.password)
    return TokenResponse(token=tokens.create_token(user.username))


@router.get(
    "/{username}",
    response_model=UserProfile,
    dependencies=OWNER_ONLY,
    summary="Get user profile",
    description="Returns the profile and the volume ids of every saved book.",
    responses={401: {"description": "Not the owner"}, 404: {"description": "User not found"}},
)
def get_user(
    username: str,
    svc: Annotated[UserService, Depends(get_user_service)],
) -> UserProfile:
    return svc.get_profile(username)


@router.patch(
    "/{username}",
    response_model=UserResponse,
    dependencies=OWNER_ONLY,
    summary="Update user profile",
    responses={401: {"description": "Not the owner"}, 404: {"description": "User not found"}},
)
def update_user(
    username: str,
    payload: UserUpdate,
    svc: Annotated[UserService, Depends(get_user_service)],
) -> UserResponse:
    return UserResponse(user=svc.update(username, payload))


@router.delete(
    "/{username}",
    response_model=UserDeletedResponse,
    dependencies=OWNER_ONLY,
    summary="Delete user",
    description="Deletes the account with its saved books, reviews and ratings.",
    responses={401: {"description": "Not the owner"}, 404: {"description": "User not found"}},
)
def delete_user(
    username: str,
    svc: Annotated[UserService, Depends(get_user_service)],
) -> UserDeletedResponse:
    return UserDeletedResponse(deleted=svc.delete(username))
