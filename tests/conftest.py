"""Shared fixtures: a recording draw surface, scripted randomness and a fake clock."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any

import pytest

from src.config import GraphConfig
from src.core.graph import RandomDirectionGraph


class ScriptedRandom:
    """Random source that replays fixed values, then a default forever."""

    def __init__(self, values: list[float] | None = None, default: float = 0.99) -> None:
        self.values = list(values or [])
        self.default = default
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self.values:
            return self.values.pop(0)
        return self.default


class FakeClock:
    """Manually advanced millisecond clock."""

    def __init__(self, now: float = 10_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@dataclass
class DrawCall:
    name: str
    args: tuple
    glow: Any = None


@dataclass
class RecordingSurface:
    """DrawSurface that records calls instead of drawing."""
    width: int = 800
    height: int = 600
    calls: list[DrawCall] = field(default_factory=list)
    glow: Any = None

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def fill_rect(self, rect, paint) -> None:
        self.calls.append(DrawCall("fill_rect", (rect, paint), self.glow))

    def stroke_path(self, points, paint, width, rounded=True) -> None:
        self.calls.append(DrawCall("stroke_path", (list(points), paint, width, rounded), self.glow))

    def fill_circle(self, center, radius, paint) -> None:
        self.calls.append(DrawCall("fill_circle", (center, radius, paint), self.glow))

    def set_glow(self, color, blur) -> None:
        self.glow = (color, blur)
        self.calls.append(DrawCall("set_glow", (color, blur)))

    def reset_glow(self) -> None:
        self.glow = None
        self.calls.append(DrawCall("reset_glow", ()))

    def named(self, name: str) -> list[DrawCall]:
        return [call for call in self.calls if call.name == name]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def graph(clock: FakeClock, surface: RecordingSurface) -> RandomDirectionGraph:
    """800x600 graph whose randomness never spawns particles."""
    return RandomDirectionGraph(
        800, 600, GraphConfig(),
        rng=ScriptedRandom([0.5]),  # Initial heading interval: 2000 ms
        clock=clock,
        surface=surface,
    )
