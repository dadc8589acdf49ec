"""Text encodings, JSON serialization and random strings.

Values are serialized to compact JSON (the same text ``JSON.stringify``
produces for plain data), turned into UTF-8 bytes, and the bytes are then
rendered in one of the supported text encodings.
"""

from __future__ import annotations

import base64
import binascii
import json
import secrets
from typing import Any

from sagus.core.errors import EncodingError, SerializationError
from sagus.core.types import Encoding


def resolve_encoding(encoding: Encoding | str) -> Encoding:
    try:
        return Encoding(encoding)
    except ValueError as e:
        raise EncodingError(f"Unsupported encoding: {encoding!r}") from e


def _low_bytes(text: str) -> bytes:
    return bytes(ord(ch) & 0xFF for ch in text)


def bytes_to_text(data: bytes, encoding: Encoding | str) -> str:
    enc = resolve_encoding(encoding)
    if enc is Encoding.HEX:
        return data.hex()
    if enc is Encoding.BASE64:
        return base64.b64encode(data).decode("ascii")
    if enc is Encoding.BASE64URL:
        return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    if enc is Encoding.UTF8:
        return data.decode("utf-8", errors="replace")
    if enc is Encoding.LATIN1:
        return data.decode("latin-1")
    if enc is Encoding.ASCII:
        # high bit dropped, so non-ASCII bytes do not survive
        return bytes(b & 0x7F for b in data).decode("ascii")
    # UTF16LE: a trailing odd byte is ignored
    even = data[: len(data) - len(data) % 2]
    return even.decode("utf-16-le", errors="surrogatepass")


def text_to_bytes(text: str, encoding: Encoding | str) -> bytes:
    enc = resolve_encoding(encoding)
    try:
        if enc is Encoding.HEX:
            return bytes.fromhex(text)
        if enc is Encoding.BASE64:
            return base64.b64decode(text, validate=True)
        if enc is Encoding.BASE64URL:
            padded = text + "=" * (-len(text) % 4)
            return base64.b64decode(padded, altchars=b"-_", validate=True)
        if enc is Encoding.UTF8:
            return text.encode("utf-8")
        if enc in (Encoding.LATIN1, Encoding.ASCII):
            return _low_bytes(text)
        return text.encode("utf-16-le", errors="surrogatepass")
    except (binascii.Error, ValueError) as e:
        raise EncodingError(f"Invalid {enc.value} text: {e}") from e


def serialize(value: Any) -> str:
    try:
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Value is not JSON-serializable: {e}") from e


def deserialize(text: str) -> Any:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}") from e


def deserialize_bytes(data: bytes) -> Any:
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise SerializationError(f"Decoded bytes are not UTF-8: {e}") from e
    return deserialize(text)


def encode(value: Any, encoding: Encoding | str = Encoding.BASE64) -> str:
    """Serialize ``value`` to JSON and render its UTF-8 bytes in ``encoding``."""
    return bytes_to_text(serialize(value).encode("utf-8"), encoding)


def decode(text: str, encoding: Encoding | str = Encoding.BASE64) -> Any:
    """Reverse of :func:`encode`."""
    return deserialize_bytes(text_to_bytes(text, encoding))


def random_string(size: int = 32, encoding: Encoding | str = Encoding.HEX) -> str:
    """``size`` cryptographically random bytes rendered in ``encoding``."""
    return bytes_to_text(secrets.token_bytes(size), encoding)
