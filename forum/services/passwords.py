"""Password hashing and verification."""

import logging

from passlib.context import CryptContext
from passlib.exc import MissingBackendError

from forum.errors import HashingError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """bcrypt via passlib. Digests embed salt and cost, so verify needs nothing else."""

    def __init__(self, rounds: int = 10):
        self.context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password."""
        try:
            return self.context.hash(password)
        except (ValueError, TypeError, MissingBackendError) as e:
            logger.error(f"Password hashing failed: {e}")
            raise HashingError("Password hashing failed.") from e

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """Verify a password against its hash. A mismatch is False, never an error."""
        try:
            return self.context.verify(plain_password, hashed_password)
        except (ValueError, TypeError) as e:
            logger.warning(f"Unreadable password hash: {e}")
            return False
