"""Fixed-period timers driven by host time."""
from __future__ import annotations
from typing import Callable


class PeriodicTimer:
    """Calls a callback every `interval` ms of host time.

    The timer does not own a thread; the frame loop calls update() with the
    current time each frame. Like a browser interval, missed periods are not
    replayed: at most one call happens per update(), and a timer that fell
    more than a period behind resynchronises to now.
    """

    def __init__(self, interval: float, callback: Callable[[float], None], start: float) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self.interval = interval
        self._callback = callback
        self._next_fire = start + interval
        self._cancelled = False
        self.fire_count = 0

    def update(self, now: float) -> bool:
        """Fire the callback if a period has elapsed.

        Returns:
            True if the callback ran
        """
        if self._cancelled or now < self._next_fire:
            return False

        self._next_fire += self.interval
        if self._next_fire <= now:
            self._next_fire = now + self.interval

        self.fire_count += 1
        self._callback(now)
        return True

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def next_fire(self) -> float:
        return self._next_fire
