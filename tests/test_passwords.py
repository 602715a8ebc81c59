"""Password hasher tests."""

import pytest

from forum.errors import HashingError
from forum.services.passwords import PasswordHasher


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


def test_verify_matches_own_hash(hasher):
    digest = hasher.hash("hunter22")
    assert digest != "hunter22"
    assert hasher.verify("hunter22", digest) is True


def test_verify_rejects_other_password(hasher):
    assert hasher.verify("hunter22", hasher.hash("hunter23")) is False


def test_hash_is_salted(hasher):
    assert hasher.hash("same-password") != hasher.hash("same-password")


def test_digest_embeds_cost(hasher):
    digest = hasher.hash("pw")
    assert digest.startswith("$2b$04$")


def test_verify_unreadable_digest_is_false(hasher):
    assert hasher.verify("pw", "not-a-bcrypt-hash") is False


def test_hash_failure_raises_hashing_error(hasher):
    with pytest.raises(HashingError):
        hasher.hash(None)
