"""Unit tests for BcryptPasswordHasher."""

import pytest

from infrastructure.auth.passwords import BcryptPasswordHasher


@pytest.fixture(scope="module")
def hasher() -> BcryptPasswordHasher:
    return BcryptPasswordHasher(rounds=4)


def test_hash_then_verify(hasher: BcryptPasswordHasher):
    password_hash = hasher.hash("s3cret")

    assert password_hash != "s3cret"
    assert hasher.verify("s3cret", password_hash)


def test_wrong_password_fails(hasher: BcryptPasswordHasher):
    assert not hasher.verify("wrong", hasher.hash("s3cret"))


def test_each_hash_uses_a_fresh_salt(hasher: BcryptPasswordHasher):
    assert hasher.hash("same") != hasher.hash("same")


@pytest.mark.parametrize("stored", ["", "not-a-bcrypt-hash"])
def test_empty_or_unknown_hash_never_verifies(hasher: BcryptPasswordHasher, stored: str):
    assert hasher.verify("anything", stored) is False
