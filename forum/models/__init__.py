"""SQLAlchemy models."""

from forum.models.post import Post
from forum.models.user import User

__all__ = [
    "User",
    "Post",
]
