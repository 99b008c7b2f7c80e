"""Authentication schemas."""

from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from src.messages import ErrorMessages
from src.schemas.common import CamelModel


class UserRegister(CamelModel):
    """User registration request."""

    username: str = Field(..., max_length=256)
    email: EmailStr = Field(..., max_length=256)
    password: str = Field(..., max_length=128)

    @field_validator("username")
    @classmethod
    def validate_username(cls, value: str) -> str:
        value = value.strip()
        if len(value) < 3:
            raise ValueError(ErrorMessages.VALIDATION_USERNAME_MIN_LENGTH)
        return value

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError(ErrorMessages.VALIDATION_PASSWORD_MIN_LENGTH)
        return value


class UserLogin(CamelModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=256)
    password: str = Field(..., max_length=128)

    @field_validator("password")
    @classmethod
    def validate_password(cls, value: str) -> str:
        if not value:
            raise ValueError(ErrorMessages.VALIDATION_PASSWORD_REQUIRED)
        return value


class PasswordChange(CamelModel):
    """Change password request."""

    old_password: str = Field(..., max_length=128)
    new_password: str = Field(..., max_length=128)

    @field_validator("old_password")
    @classmethod
    def validate_old_password(cls, value: str) -> str:
        if not value:
            raise ValueError(ErrorMessages.VALIDATION_PASSWORD_OLD_REQUIRED)
        return value

    @field_validator("new_password")
    @classmethod
    def validate_new_password(cls, value: str) -> str:
        if len(value) < 6:
            raise ValueError(ErrorMessages.VALIDATION_PASSWORD_NEW_MIN_LENGTH)
        return value


class UserResponse(CamelModel):
    """Public user information (never includes the password hash)."""

    id: int
    username: str
    email: str


class UserProfileResponse(UserResponse):
    """Own profile, as returned by /auth/me."""

    created_at: datetime


class LoginResult(CamelModel):
    """Token plus basic user info returned on login."""

    token: str
    user: UserResponse
