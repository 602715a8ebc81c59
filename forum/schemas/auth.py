"""Authentication schemas."""

from datetime import datetime
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, StringConstraints, field_validator

Username = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=30)]


class RegisterRequest(BaseModel):
    """User registration request."""

    username: Username
    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=6, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class LoginRequest(BaseModel):
    """User login request."""

    email: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value


class UserResponse(BaseModel):
    """Public projection of a user."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class TokenClaims(BaseModel):
    """Identity decoded from a verified token."""

    id: int
    username: str
    issued_at: datetime | None = None
    expires_at: datetime | None = None


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class MeResponse(BaseModel):
    message: str
    user: TokenClaims
