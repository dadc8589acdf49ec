"""Toolkit configuration models."""

from __future__ import annotations

from dataclasses import dataclass, field

from sagus.core.types import Encoding


@dataclass
class RandomConfig:
    size: int = 32
    encoding: Encoding = Encoding.HEX


@dataclass
class CodecConfig:
    encoding: Encoding = Encoding.BASE64


@dataclass
class HashConfig:
    cost: int = 10


@dataclass
class CipherConfig:
    secret_key: bytes | str | None = None  # used when a call passes no key


@dataclass
class ToolkitConfig:
    random: RandomConfig = field(default_factory=RandomConfig)
    codec: CodecConfig = field(default_factory=CodecConfig)
    hash: HashConfig = field(default_factory=HashConfig)
    cipher: CipherConfig = field(default_factory=CipherConfig)
