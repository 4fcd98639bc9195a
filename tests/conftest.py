from __future__ import annotations

import random

import pytest


class ScriptedSource:
    """Returns queued values and records every requested upper bound."""

    def __init__(self, values=None, default=None):
        self.values = list(values or [])
        self.default = default
        self.uppers: list[int] = []

    def randbelow(self, upper: int) -> int:
        self.uppers.append(upper)
        if self.values:
            return self.values.pop(0)
        if self.default == "max":
            return upper - 1
        return 0


class SeededSource:
    def __init__(self, seed: int):
        self._rng = random.Random(seed)

    def randbelow(self, upper: int) -> int:
        return self._rng.randrange(upper)


@pytest.fixture
def zero_source():
    return ScriptedSource()


@pytest.fixture
def max_source():
    return ScriptedSource(default="max")


@pytest.fixture
def seeded_source():
    return SeededSource(1234)


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    monkeypatch.setenv("PASSFORGE_HOME", str(tmp_path))
    return tmp_path
