"""Core data types shared across sagus modules."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, NamedTuple, Union

from sagus.core.errors import CipherError


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Encoding(str, Enum):
    HEX = "hex"
    BASE64 = "base64"
    BASE64URL = "base64url"
    UTF8 = "utf8"
    LATIN1 = "latin1"
    ASCII = "ascii"
    UTF16LE = "utf16le"

    @classmethod
    def _missing_(cls, value: object) -> Encoding | None:
        if isinstance(value, str):
            name = value.strip().lower()
            name = _ENCODING_ALIASES.get(name, name)
            for member in cls:
                if member.value == name:
                    return member
        return None


_ENCODING_ALIASES: dict[str, str] = {
    "utf-8": "utf8",
    "binary": "latin1",
    "latin-1": "latin1",
    "ucs2": "utf16le",
    "ucs-2": "utf16le",
    "utf-16le": "utf16le",
}


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------

Namespace = Union[str, int]


# ---------------------------------------------------------------------------
# Cipher
# ---------------------------------------------------------------------------

@dataclass
class EncryptedPayload:
    iv: str  # base64
    encrypted_data: str  # base64

    def to_dict(self) -> dict[str, str]:
        return {"iv": self.iv, "encryptedData": self.encrypted_data}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> EncryptedPayload:
        iv = data.get("iv")
        encrypted = data.get("encryptedData", data.get("encrypted_data"))
        if not isinstance(iv, str) or not isinstance(encrypted, str):
            raise CipherError("Payload must carry string 'iv' and 'encryptedData'")
        return cls(iv=iv, encrypted_data=encrypted)


# ---------------------------------------------------------------------------
# Objects
# ---------------------------------------------------------------------------

class Entry(NamedTuple):
    key: Any
    value: Any
