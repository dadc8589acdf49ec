"""Tests for bcrypt password hashing."""

from __future__ import annotations

import pytest

from sagus.core.errors import HashError
from sagus.core.hasher import BcryptHasher

TEXT = "Hello, World"


@pytest.fixture
def hasher():
    return BcryptHasher()


@pytest.mark.asyncio
async def test_hash_default_cost(hasher):
    hashed = await hasher.hash(TEXT)
    assert hashed.startswith("$2b$10$")
    assert len(hashed) == 60


@pytest.mark.asyncio
async def test_hash_custom_cost(hasher):
    hashed = await hasher.hash(TEXT, 8)
    assert hashed.startswith("$2b$08$")
    assert len(hashed) == 60


@pytest.mark.asyncio
async def test_hash_is_salted(hasher):
    first = await hasher.hash(TEXT, 4)
    second = await hasher.hash(TEXT, 4)
    assert first != second
    assert await hasher.verify(TEXT, first)
    assert await hasher.verify(TEXT, second)


@pytest.mark.asyncio
async def test_verify_rejects_other_text(hasher):
    hashed = await hasher.hash(TEXT, 4)
    assert await hasher.verify(TEXT + " ", hashed) is False


@pytest.mark.asyncio
async def test_verify_malformed_hash_is_false(hasher):
    assert await hasher.verify(TEXT, "not-a-bcrypt-hash") is False


@pytest.mark.asyncio
async def test_invalid_cost_raises(hasher):
    with pytest.raises(HashError):
        await hasher.hash(TEXT, 3)


def test_constructor_cost_is_default():
    hasher = BcryptHasher(cost=5)
    assert hasher.hash_sync(TEXT).startswith("$2b$05$")


def test_long_passwords_truncated_to_bcrypt_limit():
    hasher = BcryptHasher(cost=4)
    base = "x" * 72
    hashed = hasher.hash_sync(base + "tail")
    assert hasher.verify_sync(base, hashed)


def test_unicode_password_round_trip():
    hasher = BcryptHasher(cost=4)
    hashed = hasher.hash_sync("pässwörd")
    assert hasher.verify_sync("pässwörd", hashed)
    assert not hasher.verify_sync("passwort", hashed)
