"""
sagus - small helper functions for IDs, hashing, encryption and objects

Every function here delegates to the process-wide default Toolkit (or is a
pure helper). Build your own Toolkit when you need different defaults or
isolated ID state.

Example usage:
    import sagus

    uid = sagus.gen_uid("user-")
    token = sagus.gen_random(16, "base64")
    hashed = await sagus.hash_text("hunter2")
    payload = sagus.encrypt({"id": 1}, key)
    sagus.decrypt(payload, key)
"""

from __future__ import annotations

from typing import Any, Mapping

from sagus.config import (
    CipherConfig,
    CodecConfig,
    HashConfig,
    RandomConfig,
    ToolkitConfig,
)
from sagus.core.errors import (
    CipherError,
    EncodingError,
    HashError,
    InvalidKeyError,
    SagusError,
    SerializationError,
)
from sagus.core.objects import (
    is_valid,
    is_valid_object,
    iterate,
    pick_keys,
    remove_keys,
    trim_object,
)
from sagus.core.types import Encoding, EncryptedPayload, Entry, Namespace
from sagus.toolkit import (
    Toolkit,
    create_toolkit,
    get_default_toolkit,
    set_default_toolkit,
)

__version__ = "0.1.0"


def gen_uuid() -> str:
    """RFC4122 version-1 UUID."""
    return get_default_toolkit().gen_uuid()


def gen_uid(prefix: str = "", suffix: str = "") -> str:
    """Short process-unique ID built from interface, pid and time."""
    return get_default_toolkit().gen_uid(prefix, suffix)


def gen_auto_id(namespace: Namespace = "") -> int:
    """Next integer (from 0) in ``namespace``."""
    return get_default_toolkit().gen_auto_id(namespace)


def reset_auto_id(namespace: Namespace = "") -> None:
    get_default_toolkit().reset_auto_id(namespace)


def gen_random(size: int | None = None, encoding: Encoding | str | None = None) -> str:
    """``size`` random bytes (default 32) as text in ``encoding`` (default hex)."""
    return get_default_toolkit().gen_random(size, encoding)


async def hash_text(text: str, cost: int | None = None) -> str:
    """bcrypt hash of ``text``; the cost factor defaults to 10."""
    return await get_default_toolkit().hash_text(text, cost)


async def compare_hash(text: str, hashed: str) -> bool:
    return await get_default_toolkit().compare_hash(text, hashed)


def encode(value: Any, encoding: Encoding | str | None = None) -> str:
    """JSON-serialize ``value`` and render it in ``encoding`` (default base64)."""
    return get_default_toolkit().encode(value, encoding)


def decode(text: str, encoding: Encoding | str | None = None) -> Any:
    return get_default_toolkit().decode(text, encoding)


def encrypt(value: Any, key: bytes | str) -> EncryptedPayload:
    """AES-256-CTR encrypt ``value``; ``key`` must be 32 bytes."""
    return get_default_toolkit().encrypt(value, key)


def decrypt(payload: EncryptedPayload | Mapping[str, Any], key: bytes | str) -> Any:
    return get_default_toolkit().decrypt(payload, key)


__all__ = [
    # Version
    "__version__",
    # Identifiers
    "gen_uuid",
    "gen_uid",
    "gen_auto_id",
    "reset_auto_id",
    "gen_random",
    # Hashing
    "hash_text",
    "compare_hash",
    # Encoding / encryption
    "encode",
    "decode",
    "encrypt",
    "decrypt",
    # Objects
    "trim_object",
    "pick_keys",
    "remove_keys",
    "is_valid",
    "is_valid_object",
    "iterate",
    # Toolkit
    "Toolkit",
    "create_toolkit",
    "get_default_toolkit",
    "set_default_toolkit",
    # Config
    "ToolkitConfig",
    "RandomConfig",
    "CodecConfig",
    "HashConfig",
    "CipherConfig",
    # Types
    "Encoding",
    "EncryptedPayload",
    "Entry",
    "Namespace",
    # Errors
    "SagusError",
    "EncodingError",
    "SerializationError",
    "InvalidKeyError",
    "CipherError",
    "HashError",
]
