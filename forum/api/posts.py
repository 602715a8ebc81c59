"""Post API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status

from forum.api.dependencies import get_current_claims, get_post_service
from forum.schemas.auth import TokenClaims
from forum.schemas.post import PostCreate, PostCreatedResponse, PostResponse
from forum.services.posts import PostService

router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
def list_posts(
    post_service: Annotated[PostService, Depends(get_post_service)],
    category: str | None = None,
):
    """List posts newest first. Optional query: ?category=General"""
    posts = post_service.list_posts(category)
    return [PostResponse.model_validate(post) for post in posts]


@router.post("", response_model=PostCreatedResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_data: PostCreate,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Create a post authored by the token's user."""
    post = post_service.create_post(post_data, author_id=claims.id)
    return PostCreatedResponse(message="Post created.", post=PostResponse.model_validate(post))


@router.get("/categories", response_model=list[str])
def list_categories(
    post_service: Annotated[PostService, Depends(get_post_service)],
):
    """Distinct categories, with "All" at the top."""
    return post_service.list_categories()
