"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from forum.database import Base
from forum.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Registered forum member. The password digest never leaves the API."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(30), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

    # Relationships
    posts = relationship("Post", back_populates="author")
