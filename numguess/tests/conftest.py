"""
Pytest fixtures for numguess tests.
"""

import io
import random

import pytest

from ..console import Console, InputReader
from ..engine_core import GameRules, DEFAULT_RULES


class FixedRandom:
    """Random source that returns preset values in order, then repeats the last."""

    def __init__(self, *values: int):
        self.values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if len(self.values) > 1:
            return self.values.pop(0)
        return self.values[0]


@pytest.fixture
def rules() -> GameRules:
    """The game's fixed range."""
    return DEFAULT_RULES


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic random source."""
    return random.Random(42)


@pytest.fixture
def output() -> io.StringIO:
    """Captured console output."""
    return io.StringIO()


@pytest.fixture
def console(output) -> Console:
    """Console writing into the captured output."""
    return Console(output)


@pytest.fixture
def make_reader():
    """Build an InputReader over the given lines of input."""
    def _make(*lines: str) -> InputReader:
        text = "".join(f"{line}\n" for line in lines)
        return InputReader(io.StringIO(text))
    return _make
