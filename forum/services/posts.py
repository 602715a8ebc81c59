"""Post listing and creation."""

import logging

from sqlalchemy.orm import Session, joinedload

from forum.errors import AuthenticationError, ValidationError
from forum.models.post import DEFAULT_CATEGORY, Post
from forum.models.user import User
from forum.schemas.post import PostCreate

logger = logging.getLogger(__name__)

ALL_CATEGORIES = "All"


class PostService:
    """Service for post queries and submission."""

    def __init__(self, db: Session):
        self.db = db

    def list_posts(self, category: str | None = None) -> list[Post]:
        """All posts, newest first, optionally restricted to one category."""
        query = self.db.query(Post).options(joinedload(Post.author))

        category = (category or "").strip()
        if category and category != ALL_CATEGORIES:
            query = query.filter(Post.category == category)

        return query.order_by(Post.created_at.desc(), Post.id.desc()).all()

    def create_post(self, data: PostCreate, author_id: int) -> Post:
        title = (data.title or "").strip()
        content = (data.content or "").strip()
        if not title or not content:
            raise ValidationError(
                "Title and content are required.",
                errors=[
                    {"field": name, "message": f"{name.capitalize()} is required."}
                    for name, value in (("title", title), ("content", content))
                    if not value
                ],
            )

        author = self.db.get(User, author_id)
        if author is None:
            raise AuthenticationError("User not found")

        post = Post(
            title=title,
            content=content,
            category=(data.category or "").strip() or DEFAULT_CATEGORY,
            author_id=author.id,
        )
        self.db.add(post)
        self.db.commit()
        self.db.refresh(post)

        logger.info(f"Post {post.id} created by {author.username} in '{post.category}'")
        return post

    def list_categories(self) -> list[str]:
        """Distinct categories in use, sorted, with "All" first."""
        rows = self.db.query(Post.category).distinct().all()
        categories = sorted(
            {category for (category,) in rows if category and category != ALL_CATEGORIES}
        )
        return [ALL_CATEGORIES, *categories]
