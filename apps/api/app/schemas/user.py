"""User API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterUserRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    email: str | None = None
    password: str | None = None
    confirm_password: str | None = Field(default=None, alias="confirmPassword")


class RegisterUserResponse(BaseModel):
    message: str


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    token: str
    id: str
    name: str


class ChangeAvatarRequest(BaseModel):
    avatar: str | None = None


class User(BaseModel):
    """Public user representation; never carries the password hash."""

    id: str
    name: str
    email: str
    avatar: str | None = None
    created_at: datetime
