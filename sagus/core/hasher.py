"""Password hashing with bcrypt."""

from __future__ import annotations

import asyncio
import logging
from typing import Protocol

import bcrypt

from sagus.core.errors import HashError

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
MAX_PASSWORD_BYTES = 72


class PasswordHasher(Protocol):
    async def hash(self, text: str, cost: int | None = None) -> str: ...

    async def verify(self, text: str, hashed: str) -> bool: ...


def _password_bytes(text: str) -> bytes:
    return text.encode("utf-8")[:MAX_PASSWORD_BYTES]


class BcryptHasher:
    """Default implementation: salted bcrypt, run in a worker thread."""

    def __init__(self, cost: int = 10) -> None:
        self._cost = cost

    @property
    def cost(self) -> int:
        return self._cost

    async def hash(self, text: str, cost: int | None = None) -> str:
        rounds = self._cost if cost is None else cost
        return await asyncio.to_thread(self.hash_sync, text, rounds)

    async def verify(self, text: str, hashed: str) -> bool:
        return await asyncio.to_thread(self.verify_sync, text, hashed)

    def hash_sync(self, text: str, cost: int | None = None) -> str:
        rounds = self._cost if cost is None else cost
        try:
            salt = bcrypt.gensalt(rounds)
        except ValueError as e:
            raise HashError(f"Invalid bcrypt cost: {rounds}") from e
        return bcrypt.hashpw(_password_bytes(text), salt).decode("ascii")

    def verify_sync(self, text: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(_password_bytes(text), hashed.encode("utf-8"))
        except ValueError:
            logger.debug("Unparseable bcrypt hash, reporting mismatch")
            return False
