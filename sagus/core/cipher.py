"""Symmetric encryption of JSON values with AES-256-CTR."""

from __future__ import annotations

import os
from typing import Any, Mapping, Protocol, Union

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from sagus.core.codec import bytes_to_text, deserialize_bytes, serialize, text_to_bytes
from sagus.core.errors import CipherError, EncodingError, InvalidKeyError
from sagus.core.types import Encoding, EncryptedPayload

KEY_SIZE = 32
IV_SIZE = 16

SecretKey = Union[bytes, str]


class ValueCipher(Protocol):
    def encrypt(self, value: Any, key: SecretKey) -> EncryptedPayload: ...

    def decrypt(
        self, payload: EncryptedPayload | Mapping[str, Any], key: SecretKey
    ) -> Any: ...


class AesCtrCipher:
    """Default implementation: AES-256 in CTR mode, fresh random IV per call."""

    def _key_bytes(self, key: SecretKey) -> bytes:
        raw = key.encode("utf-8") if isinstance(key, str) else bytes(key)
        if len(raw) != KEY_SIZE:
            raise InvalidKeyError(
                f"Key must be exactly {KEY_SIZE} bytes, got {len(raw)}"
            )
        return raw

    def encrypt(self, value: Any, key: SecretKey) -> EncryptedPayload:
        raw_key = self._key_bytes(key)
        plaintext = serialize(value).encode("utf-8")
        iv = os.urandom(IV_SIZE)
        encryptor = Cipher(algorithms.AES(raw_key), modes.CTR(iv)).encryptor()
        ciphertext = encryptor.update(plaintext) + encryptor.finalize()
        return EncryptedPayload(
            iv=bytes_to_text(iv, Encoding.BASE64),
            encrypted_data=bytes_to_text(ciphertext, Encoding.BASE64),
        )

    def decrypt(
        self, payload: EncryptedPayload | Mapping[str, Any], key: SecretKey
    ) -> Any:
        raw_key = self._key_bytes(key)
        if not isinstance(payload, EncryptedPayload):
            payload = EncryptedPayload.from_dict(payload)
        try:
            iv = text_to_bytes(payload.iv, Encoding.BASE64)
            ciphertext = text_to_bytes(payload.encrypted_data, Encoding.BASE64)
        except EncodingError as e:
            raise CipherError(f"Malformed payload: {e}") from e
        if len(iv) != IV_SIZE:
            raise CipherError(f"IV must be {IV_SIZE} bytes, got {len(iv)}")
        decryptor = Cipher(algorithms.AES(raw_key), modes.CTR(iv)).decryptor()
        plaintext = decryptor.update(ciphertext) + decryptor.finalize()
        return deserialize_bytes(plaintext)

