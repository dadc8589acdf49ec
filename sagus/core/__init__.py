"""Core primitives: identifiers, hashing, codecs, ciphers and object helpers."""

from sagus.core.cipher import AesCtrCipher, ValueCipher
from sagus.core.clock import Clock, SystemClock
from sagus.core.hasher import BcryptHasher, PasswordHasher
from sagus.core.id_generator import (
    AutoIdRegistry,
    IdGenerator,
    UniqueIdGenerator,
    UuidV1Generator,
)

__all__ = [
    "AesCtrCipher",
    "ValueCipher",
    "Clock",
    "SystemClock",
    "BcryptHasher",
    "PasswordHasher",
    "AutoIdRegistry",
    "IdGenerator",
    "UniqueIdGenerator",
    "UuidV1Generator",
]
