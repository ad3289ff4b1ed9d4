"""Heading controller - the randomised direction state machine."""
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..config import BOUNCE_INTERVAL, INITIAL_INTERVAL_RANGE, REROLL_INTERVAL_RANGE
from ..core.events import HeadingChangedEvent
from ..logging_setup import get_logger

if TYPE_CHECKING:
    from ..core.events import EventBus
    from ..core.host import RandomSource

logger = get_logger("heading")


@dataclass
class HeadingState:
    """Current direction of travel and when it is next allowed to change."""
    dx: float = 1.0
    dy: float = 0.0
    last_change_time: float = 0.0
    next_interval: float = 0.0  # ms after last_change_time before a re-roll fires

    @property
    def direction(self) -> tuple[float, float]:
        return (self.dx, self.dy)


def _draw(rng: RandomSource, bounds: tuple[float, float]) -> float:
    low, high = bounds
    return low + rng.random() * (high - low)


class HeadingController:
    """Owns the heading and decides when it changes.

    Time is always passed in, so the controller can be stepped without a
    real clock.
    """

    def __init__(
        self,
        now: float,
        rng: RandomSource,
        event_bus: EventBus | None = None,
    ) -> None:
        self._rng = rng
        self._event_bus = event_bus
        self.state = HeadingState(
            dx=1.0,
            dy=0.0,
            last_change_time=now,
            next_interval=_draw(rng, INITIAL_INTERVAL_RANGE),
        )

    @property
    def direction(self) -> tuple[float, float]:
        return self.state.direction

    def set_direction(self, dx: float, dy: float) -> None:
        """Point the heading somewhere specific (used by hosts and tests)."""
        self.state.dx = dx
        self.state.dy = dy

    def maybe_reallocate_heading(self, now: float) -> bool:
        """Roll a new random heading if the current interval has elapsed.

        Returns:
            True if the heading changed
        """
        state = self.state
        if now - state.last_change_time <= state.next_interval:
            return False

        angle = self._rng.random() * math.pi * 2
        state.dx = math.cos(angle)
        state.dy = math.sin(angle)
        state.last_change_time = now
        state.next_interval = _draw(self._rng, REROLL_INTERVAL_RANGE)

        logger.debug(
            "Heading changed to (%.3f, %.3f); next change in %.0f ms",
            state.dx, state.dy, state.next_interval,
        )
        if self._event_bus:
            self._event_bus.publish(HeadingChangedEvent(
                direction=state.direction,
                interval=state.next_interval,
                time=now,
            ))
        return True

    def reflect(self, flip_x: bool, flip_y: bool) -> None:
        """Negate the flagged direction components. Magnitude is preserved."""
        if flip_x:
            self.state.dx = -self.state.dx
        if flip_y:
            self.state.dy = -self.state.dy

    def force_short_interval(self) -> None:
        """Make a re-roll due soon after a bounce.

        Only the interval changes; direction and last change time are kept.
        """
        self.state.next_interval = BOUNCE_INTERVAL
