from pydantic import BaseModel, ConfigDict, EmailStr, Field

from bookmarker_api.domain import Username


class UserRegister(BaseModel):
    username: Username = Field(description="Unique login name", examples=["reader1"])
    password: str = Field(min_length=1, max_length=128, description="Plain text password")
    email: EmailStr = Field(description="Contact email", examples=["r@x.com"])

    model_config = ConfigDict(extra="forbid")


class UserLogin(BaseModel):
    username: Username = Field(description="Login name", examples=["reader1"])
    password: str = Field(min_length=1, max_length=128, description="Plain text password")

    model_config = ConfigDict(extra="forbid")


class UserUpdate(BaseModel):
    email: EmailStr = Field(description="New contact email")

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int = Field(description="Internal user id", examples=[1])
    username: str = Field(description="Unique login name", examples=["reader1"])
    email: str = Field(description="Contact email", examples=["r@x.com"])

    model_config = ConfigDict(from_attributes=True)


class UserProfile(UserRead):
    saved_volume_ids: list[str] = Field(
        default_factory=list,
        description="Catalog volume ids the user has saved, in saving order",
        examples=[["sY7NE_F8yB0C"]],
    )


class TokenResponse(BaseModel):
    token: str = Field(description="Signed bearer token carrying the username claim")


class UserResponse(BaseModel):
    user: UserRead


class UserDeletedResponse(BaseModel):
    deleted: str = Field(description="Username of the removed account")
