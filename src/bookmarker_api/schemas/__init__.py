from bookmarker_api.schemas.user import (
    TokenResponse,
    UserDeletedResponse,
    UserLogin,
    UserProfile,
    UserRead,
    UserRegister,
    UserResponse,
    UserUpdate,
)

__all__ = [
    "TokenResponse",
    "UserDeletedResponse",
    "UserLogin",
    "UserProfile",
    "UserRead",
    "UserRegister",
    "UserResponse",
    "UserUpdate",
]
