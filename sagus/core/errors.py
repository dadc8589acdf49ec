"""Exception hierarchy for sagus."""


class SagusError(Exception):
    """Base exception."""


class EncodingError(SagusError):
    """Unknown encoding, or text that is not valid for its encoding."""


class SerializationError(SagusError):
    """Value cannot be serialized to JSON, or decoded bytes are not JSON."""


class InvalidKeyError(SagusError):
    """Cipher key has the wrong length."""


class CipherError(SagusError):
    """IV or ciphertext is malformed."""


class HashError(SagusError):
    """Password hashing parameters rejected by bcrypt."""
