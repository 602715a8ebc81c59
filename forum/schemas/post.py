"""Post schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PostCreate(BaseModel):
    """Create a new post. The author comes from the verified token."""

    title: str | None = Field(None, max_length=255)
    content: str | None = None
    category: str | None = Field(None, max_length=100)


class AuthorSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str


class PostResponse(BaseModel):
    """Post response with the author resolved to a username.

    Timestamps go out as ``createdAt`` / ``updatedAt``; the browser client reads those keys.
    """

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    content: str
    category: str
    author: AuthorSummary
    created_at: datetime
    updated_at: datetime


class PostCreatedResponse(BaseModel):
    message: str
    post: PostResponse
