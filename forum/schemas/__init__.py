"""Pydantic schemas for API requests and responses."""

from forum.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserResponse,
)
from forum.schemas.post import AuthorSummary, PostCreate, PostCreatedResponse, PostResponse

__all__ = [
    "RegisterRequest",
    "RegisterResponse",
    "LoginRequest",
    "LoginResponse",
    "MeResponse",
    "TokenClaims",
    "UserResponse",
    "PostCreate",
    "PostResponse",
    "PostCreatedResponse",
    "AuthorSummary",
]
