"""ID generation utilities.

Two families of identifiers live here:

* ``UuidV1Generator``: RFC4122 version-1 UUIDs from the standard library.
* ``UniqueIdGenerator``: short, process-local IDs built from the hardware
  address of the first usable network interface, the process id and a
  strictly increasing millisecond timestamp, all rendered in base-36.
  They are fast and compact but only unique within one generator; across
  processes uniqueness is best effort.

``AutoIdRegistry`` hands out per-namespace integer sequences.
"""

from __future__ import annotations

import itertools
import logging
import os
import re
import threading
import uuid
from typing import Iterator, Protocol

import psutil

from sagus.core.clock import Clock, SystemClock
from sagus.core.types import Namespace

logger = logging.getLogger(__name__)

_BASE36_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_NON_DIGITS = re.compile(r"\D+")


class IdGenerator(Protocol):
    def generate(self) -> str: ...


def to_base36(value: int) -> str:
    """Render an integer in lowercase base-36."""
    if value < 0:
        return "-" + to_base36(-value)
    if value == 0:
        return "0"
    digits: list[str] = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(_BASE36_DIGITS[rem])
    return "".join(reversed(digits))


def process_identity() -> str:
    return to_base36(os.getpid())


def interface_identity() -> str:
    """Base-36 token from the first non-zero hardware address, or ``""``.

    Interfaces and their addresses are scanned in enumeration order. Only
    the decimal digits of the address are kept and read as a base-10
    integer, which keeps the token short.
    """
    for name, addrs in psutil.net_if_addrs().items():
        for addr in addrs:
            if addr.family != psutil.AF_LINK or not addr.address:
                continue
            digits = _NON_DIGITS.sub("", addr.address)
            if not digits or int(digits) == 0:
                continue
            logger.debug(f"Using hardware address of interface {name!r} for UID prefix")
            return to_base36(int(digits))
    logger.debug("No usable hardware address found, UIDs rely on pid and time only")
    return ""


class UuidV1Generator:
    """Default UUID implementation: RFC4122 version 1."""

    def generate(self) -> str:
        return str(uuid.uuid1())


class UniqueIdGenerator:
    """Short process-local IDs: interface + process + base-36 unique time."""

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        process_id: str | None = None,
        interface_id: str | None = None,
    ) -> None:
        self._clock = clock or SystemClock()
        self._process_id = process_identity() if process_id is None else process_id
        self._interface_id = (
            interface_identity() if interface_id is None else interface_id
        )
        self._last_time = 0
        self._lock = threading.Lock()

    @property
    def process_id(self) -> str:
        return self._process_id

    @property
    def interface_id(self) -> str:
        return self._interface_id

    def unique_time(self) -> int:
        """Current time in ms, bumped past the previous value if needed."""
        with self._lock:
            now = self._clock.now_ms()
            if now > self._last_time:
                self._last_time = now
            else:
                self._last_time += 1
            return self._last_time

    def generate(self, prefix: str = "", suffix: str = "") -> str:
        core = self._interface_id + self._process_id + to_base36(self.unique_time())
        return f"{prefix}{core}{suffix}"


class AutoIdRegistry:
    """Independent counters starting at 0, one per namespace.

    Namespaces are keyed by ``str(namespace)``, so ``1`` and ``"1"`` share
    a counter.
    """

    def __init__(self) -> None:
        self._counters: dict[str, Iterator[int]] = {}
        self._lock = threading.Lock()

    def next_id(self, namespace: Namespace = "") -> int:
        key = str(namespace)
        with self._lock:
            counter = self._counters.get(key)
            if counter is None:
                counter = itertools.count()
                self._counters[key] = counter
            return next(counter)

    def reset(self, namespace: Namespace = "") -> None:
        with self._lock:
            self._counters.pop(str(namespace), None)

    def namespaces(self) -> list[str]:
        with self._lock:
            return list(self._counters)
