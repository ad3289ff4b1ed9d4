"""Trail buffer: the time-windowed point history of the graph."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator

from ..config import NEUTRAL_SPEED_VALUE, SEED_POINT_COUNT, SEED_POINT_SPACING


@dataclass(frozen=True)
class Point:
    """A single point in the trail."""
    x: float
    y: float
    value: float  # Speed input active when the point was produced
    t: float  # Host time (ms) when the point was created


class TrailBuffer:
    """Ordered point history, oldest first.

    Insertion order is chronological, so eviction only ever removes a
    prefix of the sequence.
    """

    def __init__(self, retention_window: float) -> None:
        self.retention_window = retention_window
        self._points: list[Point] = []

    def seed(
        self,
        x: float,
        y: float,
        now: float,
        count: int = SEED_POINT_COUNT,
        spacing: float = SEED_POINT_SPACING,
        value: float = NEUTRAL_SPEED_VALUE,
    ) -> None:
        """Stack `count` synthetic points at (x, y) so the first frame has a line.

        Timestamps step back from `now` by `spacing`; they are stored oldest
        first to keep the buffer chronological.
        """
        for i in range(count):
            self._points.append(Point(x=x, y=y, value=value, t=now - (count - 1 - i) * spacing))

    def append(self, point: Point) -> None:
        self._points.append(point)

    def prune(self, now: float) -> int:
        """Drop every point older than the retention window.

        Returns:
            Number of points removed
        """
        cutoff = now - self.retention_window
        expired = 0
        for point in self._points:
            if point.t >= cutoff:
                break
            expired += 1
        if expired:
            del self._points[:expired]
        return expired

    @property
    def last(self) -> Point:
        """Most recent point. The buffer is never empty once seeded."""
        return self._points[-1]

    def recent(self, count: int) -> list[Point]:
        """The newest `count` points, oldest first."""
        if count <= 0:
            return []
        return self._points[-count:]

    @property
    def points(self) -> tuple[Point, ...]:
        """Read-only snapshot for renderers and tests."""
        return tuple(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __getitem__(self, index: int) -> Point:
        return self._points[index]
