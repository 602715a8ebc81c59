"""FastAPI dependencies for authentication and services."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from forum.database import get_db
from forum.errors import AuthenticationError
from forum.schemas.auth import TokenClaims
from forum.services.auth import AuthService
from forum.services.posts import PostService

security = HTTPBearer(auto_error=False)


def get_current_claims(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> TokenClaims:
    """Verify the bearer token and attach the decoded identity to the request."""
    token = credentials.credentials if credentials else None
    result = request.app.state.token_verifier.verify(token)

    if not result.is_valid:
        raise AuthenticationError(result.reason)

    request.state.user = result.claims
    return result.claims


def get_auth_service(
    request: Request,
    db: Annotated[Session, Depends(get_db)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(db, request.app.state.password_hasher, request.app.state.token_issuer)


def get_post_service(
    db: Annotated[Session, Depends(get_db)],
) -> PostService:
    """Get post service with dependencies."""
    return PostService(db)
