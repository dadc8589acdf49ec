"""Shared test fixtures."""

from __future__ import annotations

import pytest

from sagus.core.id_generator import UniqueIdGenerator
from sagus.toolkit import Toolkit, set_default_toolkit

SECRET_KEY = "bgW7Hekl97HFrwdhkj67hr67nh978GHH"


class FixedClock:
    """Clock that never advances."""

    def __init__(self, ms: int = 1_700_000_000_000):
        self._ms = ms

    def now_ms(self) -> int:
        return self._ms


class ScriptedClock:
    """Clock that replays a list of readings, then repeats the last one."""

    def __init__(self, readings: list[int]):
        self._readings = list(readings)
        self.calls = 0

    def now_ms(self) -> int:
        index = min(self.calls, len(self._readings) - 1)
        self.calls += 1
        return self._readings[index]


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def uid_generator(fixed_clock):
    return UniqueIdGenerator(fixed_clock, process_id="2s", interface_id="4fzzzxjz")


@pytest.fixture
def secret_key():
    return SECRET_KEY


@pytest.fixture
def toolkit():
    return Toolkit()


@pytest.fixture(autouse=True)
def fresh_default_toolkit():
    set_default_toolkit(None)
    yield
    set_default_toolkit(None)
