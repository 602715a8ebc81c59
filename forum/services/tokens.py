"""JWT issuance and verification."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from enum import Enum

from jose import ExpiredSignatureError, JWTError, jwt

from forum.errors import ConfigurationError
from forum.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(days=1)


class TokenState(str, Enum):
    """Outcome of verifying one bearer token."""

    MISSING = "missing"
    MALFORMED = "malformed"
    EXPIRED = "expired"
    INVALID = "invalid"
    VALID = "valid"


REASONS = {
    TokenState.MISSING: "Not authorized, token missing",
    TokenState.MALFORMED: "Invalid token",
    TokenState.EXPIRED: "Token expired",
    TokenState.INVALID: "Invalid token",
}


@dataclass(frozen=True)
class VerificationResult:
    state: TokenState
    claims: TokenClaims | None = None

    @property
    def is_valid(self) -> bool:
        return self.state is TokenState.VALID

    @property
    def reason(self) -> str | None:
        return REASONS.get(self.state)


def _require_secret(secret: str | None) -> str:
    if not secret:
        raise ConfigurationError("JWT_SECRET is not configured")
    return secret


class TokenIssuer:
    """Signs identity claims into a time-limited token."""

    def __init__(self, secret: str | None, algorithm: str = "HS256", ttl: timedelta = DEFAULT_TTL):
        self.secret = _require_secret(secret)
        self.algorithm = algorithm
        self.ttl = ttl

    def issue(self, user_id: int, username: str, ttl: timedelta | None = None) -> str:
        """Create a JWT access token."""
        issued_at = datetime.now(UTC)
        to_encode = {
            "id": user_id,
            "username": username,
            "iat": issued_at,
            "exp": issued_at + (ttl if ttl is not None else self.ttl),
        }
        return jwt.encode(to_encode, self.secret, algorithm=self.algorithm)


class TokenVerifier:
    """Checks signature and expiry of a bearer token."""

    def __init__(self, secret: str | None, algorithm: str = "HS256"):
        self.secret = _require_secret(secret)
        self.algorithm = algorithm

    def verify(self, token: str | None) -> VerificationResult:
        if not token:
            return VerificationResult(TokenState.MISSING)

        try:
            jwt.get_unverified_header(token)
        except JWTError:
            return VerificationResult(TokenState.MALFORMED)

        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except ExpiredSignatureError:
            return VerificationResult(TokenState.EXPIRED)
        except JWTError as e:
            logger.info(f"JWT verification failed: {e}")
            return VerificationResult(TokenState.INVALID)

        user_id = payload.get("id")
        username = payload.get("username")
        if not isinstance(user_id, int) or not isinstance(username, str):
            return VerificationResult(TokenState.INVALID)

        claims = TokenClaims(
            id=user_id,
            username=username,
            issued_at=_from_timestamp(payload.get("iat")),
            expires_at=_from_timestamp(payload.get("exp")),
        )
        return VerificationResult(TokenState.VALID, claims)


def _from_timestamp(value) -> datetime | None:
    if isinstance(value, int | float):
        return datetime.fromtimestamp(value, UTC)
    return None
