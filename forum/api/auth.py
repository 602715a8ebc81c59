"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_auth_service, get_current_claims
from forum.schemas.auth import (
    LoginRequest,
    LoginResponse,
    MeResponse,
    RegisterRequest,
    RegisterResponse,
    TokenClaims,
    UserResponse,
)
from forum.services.auth import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    user = auth_service.register(user_data)
    return RegisterResponse(
        message="User registered successfully!",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    token, user = auth_service.login(credentials)
    return LoginResponse(
        message="Login successful!",
        token=token,
        user=UserResponse.model_validate(user),
    )


@router.get("/me", response_model=MeResponse)
def get_me(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
):
    """Return the identity carried by the caller's token."""
    return MeResponse(message="Token verified successfully!", user=claims)
