"""Motion step - appends one trail point per speed input."""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..config import NEUTRAL_SPEED_VALUE
from ..core.events import BounceEvent
from ..entities.trails import Point, TrailBuffer
from ..logging_setup import get_logger

if TYPE_CHECKING:
    from ..core.events import EventBus
    from ..entities.heading import HeadingController

logger = get_logger("motion")


def speed_multiplier(speed_value: float) -> float:
    """Scale factor for a raw speed input; the neutral value maps to 1."""
    return speed_value / NEUTRAL_SPEED_VALUE


def _hits_edge(coord: float, extent: float) -> bool:
    # Inclusive on both sides: a candidate sitting exactly on 0 counts as a hit
    return coord <= 0 or coord >= extent


def _clamp(coord: float, extent: float) -> float:
    return max(0.0, min(extent, coord))


class MotionStep:
    """Advances the trail head along the current heading.

    Creates the wandering line: each call moves one step from the last
    point, reflects the heading off viewport edges and evicts points
    older than the buffer's retention window.
    """

    def __init__(
        self,
        buffer: TrailBuffer,
        heading: HeadingController,
        event_bus: EventBus | None = None,
    ) -> None:
        self.buffer = buffer
        self.heading = heading
        self._event_bus = event_bus

    def advance(self, speed_value: float, now: float, width: float, height: float) -> Point:
        """Append the next point and prune expired ones.

        Args:
            speed_value: Raw speed input (0-100, 50 is neutral)
            now: Host time in ms
            width: Viewport width in pixels
            height: Viewport height in pixels

        Returns:
            The point that was appended
        """
        last = self.buffer.last
        multiplier = speed_multiplier(speed_value)
        dx, dy = self.heading.direction

        candidate_x = last.x + dx * multiplier
        candidate_y = last.y + dy * multiplier

        flip_x = _hits_edge(candidate_x, width)
        flip_y = _hits_edge(candidate_y, height)
        self.heading.reflect(flip_x, flip_y)

        point = Point(
            x=_clamp(candidate_x, width),
            y=_clamp(candidate_y, height),
            value=speed_value,
            t=now,
        )
        self.buffer.append(point)

        if flip_x or flip_y:
            self.heading.force_short_interval()
            logger.debug(
                "Bounced at (%.1f, %.1f) flip_x=%s flip_y=%s",
                point.x, point.y, flip_x, flip_y,
            )
            if self._event_bus:
                self._event_bus.publish(BounceEvent(
                    flip_x=flip_x,
                    flip_y=flip_y,
                    position=(point.x, point.y),
                    time=now,
                ))

        self.buffer.prune(now)
        return point
