"""Token issuer and verifier tests."""

from datetime import timedelta

import pytest
from jose import jwt

from forum.errors import ConfigurationError
from forum.services.tokens import TokenIssuer, TokenState, TokenVerifier

SECRET = "unit-secret"


@pytest.fixture
def issuer():
    return TokenIssuer(SECRET)


@pytest.fixture
def verifier():
    return TokenVerifier(SECRET)


def test_issued_token_verifies(issuer, verifier):
    result = verifier.verify(issuer.issue(7, "smokey"))
    assert result.state is TokenState.VALID
    assert result.is_valid
    assert result.reason is None
    assert result.claims.id == 7
    assert result.claims.username == "smokey"


def test_default_lifetime_is_one_day(issuer):
    claims = jwt.get_unverified_claims(issuer.issue(1, "a"))
    assert claims["exp"] - claims["iat"] == 24 * 60 * 60


def test_token_has_three_segments(issuer):
    assert len(issuer.issue(1, "a").split(".")) == 3


def test_missing_token(verifier):
    for token in (None, ""):
        result = verifier.verify(token)
        assert result.state is TokenState.MISSING
        assert result.reason == "Not authorized, token missing"


def test_malformed_token(verifier):
    result = verifier.verify("definitely not a jwt")
    assert result.state is TokenState.MALFORMED
    assert result.reason == "Invalid token"


def test_expired_token(issuer, verifier):
    result = verifier.verify(issuer.issue(1, "a", ttl=timedelta(seconds=-5)))
    assert result.state is TokenState.EXPIRED
    assert result.reason == "Token expired"
    assert result.claims is None


def test_wrong_secret_is_invalid_not_expired(verifier):
    token = TokenIssuer("another-secret").issue(1, "a")
    result = verifier.verify(token)
    assert result.state is TokenState.INVALID


def test_expired_with_wrong_secret_is_invalid(verifier):
    token = TokenIssuer("another-secret").issue(1, "a", ttl=timedelta(seconds=-5))
    assert verifier.verify(token).state is TokenState.INVALID


def test_tampered_payload_is_invalid(issuer, verifier):
    header, _, signature = issuer.issue(1, "a").split(".")
    forged = jwt.encode({"id": 2, "username": "admin"}, "whatever").split(".")[1]
    result = verifier.verify(f"{header}.{forged}.{signature}")
    assert result.state is TokenState.INVALID


def test_token_without_identity_is_invalid(verifier):
    token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")
    assert verifier.verify(token).state is TokenState.INVALID


@pytest.mark.parametrize("secret", [None, ""])
def test_missing_secret_is_a_configuration_error(secret):
    with pytest.raises(ConfigurationError):
        TokenIssuer(secret)
    with pytest.raises(ConfigurationError):
        TokenVerifier(secret)
