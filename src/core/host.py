"""Capabilities the graph takes from its host: a clock and a random source."""
from __future__ import annotations
import random
import time
from typing import Callable, Protocol


class RandomSource(Protocol):
    """Anything with a random() returning floats in [0, 1).

    random.Random satisfies this; tests pass scripted sources.
    """

    def random(self) -> float: ...


Clock = Callable[[], float]


def monotonic_ms() -> float:
    """Monotonic wall time in milliseconds."""
    return time.monotonic() * 1000.0


def default_random() -> RandomSource:
    return random.Random()
