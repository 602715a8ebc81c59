"""Registration and login."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from forum.errors import ConflictError, InvalidCredentialsError, ServerError
from forum.models.user import User
from forum.schemas.auth import LoginRequest, RegisterRequest
from forum.services.passwords import PasswordHasher
from forum.services.tokens import TokenIssuer

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "Email already registered."
USERNAME_TAKEN = "Username already taken."


class AuthService:
    """Service for account registration and credential checks."""

    def __init__(self, db: Session, hasher: PasswordHasher, issuer: TokenIssuer):
        self.db = db
        self.hasher = hasher
        self.issuer = issuer

    def get_user_by_email(self, email: str) -> User | None:
        """Get a user by email, ignoring case and surrounding whitespace."""
        normalized = email.strip().lower()
        return self.db.query(User).filter(func.lower(User.email) == normalized).first()

    def get_user_by_username(self, username: str) -> User | None:
        return self.db.query(User).filter(User.username == username.strip()).first()

    def _check_unique(self, email: str, username: str) -> None:
        if self.get_user_by_email(email):
            raise ConflictError(EMAIL_TAKEN, field="email")
        if self.get_user_by_username(username):
            raise ConflictError(USERNAME_TAKEN, field="username")

    def register(self, data: RegisterRequest) -> User:
        """Create a new user. Raises ConflictError naming the field that collided."""
        email = str(data.email).strip().lower()
        username = data.username.strip()

        self._check_unique(email, username)

        user = User(
            username=username,
            email=email,
            password_hash=self.hasher.hash(data.password),
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # A concurrent registration won the race on the unique index
            self.db.rollback()
            logger.warning(f"Unique constraint hit registering {username} ({email})")
            self._check_unique(email, username)
            raise ConflictError(EMAIL_TAKEN, field="email") from None
        self.db.refresh(user)

        logger.info(f"Registered new user: {user.username} ({user.email})")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Return the user for these credentials, or raise the generic login error."""
        user = self.get_user_by_email(email)
        if not user:
            raise InvalidCredentialsError()

        if not user.password_hash:
            logger.error(f"User {user.id} has no password hash")
            raise ServerError("Server configuration error. Please re-register.")

        if not self.hasher.verify(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    def login(self, data: LoginRequest) -> tuple[str, User]:
        """Authenticate and issue a token."""
        user = self.authenticate(data.email, data.password)
        token = self.issuer.issue(user.id, user.username)
        logger.info(f"{user.username} logged in")
        return token, user
