"""Toolkit: wires the ID, hashing, codec and cipher components together."""

from __future__ import annotations

import logging
import threading
from typing import Any, Mapping

from sagus.config import ToolkitConfig
from sagus.core import codec
from sagus.core.cipher import AesCtrCipher, SecretKey, ValueCipher
from sagus.core.clock import Clock
from sagus.core.errors import InvalidKeyError
from sagus.core.hasher import BcryptHasher, PasswordHasher
from sagus.core.id_generator import (
    AutoIdRegistry,
    IdGenerator,
    UniqueIdGenerator,
    UuidV1Generator,
)
from sagus.core.types import Encoding, EncryptedPayload, Namespace

logger = logging.getLogger(__name__)


class Toolkit:
    """Holds the stateful generators and the configured defaults.

    Every component can be swapped; anything left out gets the default
    implementation.
    """

    def __init__(
        self,
        config: ToolkitConfig | None = None,
        *,
        clock: Clock | None = None,
        uid_generator: UniqueIdGenerator | None = None,
        uuid_generator: IdGenerator | None = None,
        auto_ids: AutoIdRegistry | None = None,
        hasher: PasswordHasher | None = None,
        cipher: ValueCipher | None = None,
    ) -> None:
        self._config = config or ToolkitConfig()
        self._uid_gen = uid_generator or UniqueIdGenerator(clock)
        self._uuid_gen = uuid_generator or UuidV1Generator()
        self._auto_ids = auto_ids or AutoIdRegistry()
        self._hasher = hasher or BcryptHasher(cost=self._config.hash.cost)
        self._cipher = cipher or AesCtrCipher()

    @property
    def config(self) -> ToolkitConfig:
        return self._config

    # ---- identifiers ----

    def gen_uuid(self) -> str:
        return self._uuid_gen.generate()

    def gen_uid(self, prefix: str = "", suffix: str = "") -> str:
        return self._uid_gen.generate(prefix, suffix)

    def gen_auto_id(self, namespace: Namespace = "") -> int:
        return self._auto_ids.next_id(namespace)

    def reset_auto_id(self, namespace: Namespace = "") -> None:
        self._auto_ids.reset(namespace)

    def gen_random(
        self, size: int | None = None, encoding: Encoding | str | None = None
    ) -> str:
        cfg = self._config.random
        return codec.random_string(
            cfg.size if size is None else size,
            encoding or cfg.encoding,
        )

    # ---- hashing ----

    async def hash_text(self, text: str, cost: int | None = None) -> str:
        return await self._hasher.hash(text, cost)

    async def compare_hash(self, text: str, hashed: str) -> bool:
        return await self._hasher.verify(text, hashed)

    # ---- encoding ----

    def encode(self, value: Any, encoding: Encoding | str | None = None) -> str:
        return codec.encode(value, encoding or self._config.codec.encoding)

    def decode(self, text: str, encoding: Encoding | str | None = None) -> Any:
        return codec.decode(text, encoding or self._config.codec.encoding)

    # ---- encryption ----

    def _secret_key(self, key: SecretKey | None) -> SecretKey:
        if key is not None:
            return key
        if self._config.cipher.secret_key is None:
            raise InvalidKeyError("No secret key given and none configured")
        return self._config.cipher.secret_key

    def encrypt(self, value: Any, key: SecretKey | None = None) -> EncryptedPayload:
        return self._cipher.encrypt(value, self._secret_key(key))

    def decrypt(
        self,
        payload: EncryptedPayload | Mapping[str, Any],
        key: SecretKey | None = None,
    ) -> Any:
        return self._cipher.decrypt(payload, self._secret_key(key))


def create_toolkit(config: ToolkitConfig | None = None) -> Toolkit:
    """One-line factory to create a Toolkit with all default components."""
    toolkit = Toolkit(config)
    logger.debug("Created sagus toolkit")
    return toolkit


_default_toolkit: Toolkit | None = None
_default_lock = threading.Lock()


def get_default_toolkit() -> Toolkit:
    """Process-wide toolkit behind the package-level functions."""
    global _default_toolkit
    with _default_lock:
        if _default_toolkit is None:
            _default_toolkit = create_toolkit()
        return _default_toolkit


def set_default_toolkit(toolkit: Toolkit | None) -> None:
    """Replace the process-wide toolkit; ``None`` drops it so it is rebuilt lazily."""
    global _default_toolkit
    with _default_lock:
        _default_toolkit = toolkit
