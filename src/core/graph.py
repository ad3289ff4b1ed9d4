"""Graph instance - the boundary between the trail engine and its host."""
from __future__ import annotations
from typing import TYPE_CHECKING

from ..config import GraphConfig, NEUTRAL_SPEED_VALUE
from ..entities.heading import HeadingController
from ..entities.trails import TrailBuffer
from ..logging_setup import get_logger
from ..systems.motion import MotionStep
from ..ui.renderer import TrailRenderer
from .events import ResizeEvent, TeardownEvent
from .host import default_random, monotonic_ms

if TYPE_CHECKING:
    from ..ui.surface import DrawSurface
    from .events import EventBus
    from .host import Clock, RandomSource

logger = get_logger("graph")


class RandomDirectionGraph:
    """A wandering trail that grows by one point per speed input.

    The host drives it through five entry points: speed input, frame ticks,
    heading polls, resizes and teardown. All of them run on the host's one
    thread, so nothing here is locked. Once torn down, every entry point is
    a no-op.
    """

    def __init__(
        self,
        width: float,
        height: float,
        config: GraphConfig | None = None,
        *,
        rng: RandomSource | None = None,
        clock: Clock | None = None,
        surface: DrawSurface | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.config = config or GraphConfig()
        self.width = width
        self.height = height
        self.surface = surface
        self.event_bus = event_bus
        self.speed_value = NEUTRAL_SPEED_VALUE
        self._rng = rng or default_random()
        self._clock = clock or monotonic_ms
        self._alive = True

        now = self._clock()
        self.buffer = TrailBuffer(self.config.retention_window)
        self.buffer.seed(width / 2, height / 2, now)
        self.heading = HeadingController(now, self._rng, event_bus)
        self.motion = MotionStep(self.buffer, self.heading, event_bus)
        self.renderer = TrailRenderer(self.buffer, self.config, self._rng)

        logger.info(
            "Graph created: %sx%s, retention %.0f ms, line width %s",
            width, height, self.config.retention_window, self.config.line_width,
        )

    @property
    def alive(self) -> bool:
        return self._alive

    def attach_surface(self, surface: DrawSurface | None) -> None:
        """Swap the surface frames are drawn on (e.g. after a window resize)."""
        if self._alive:
            self.surface = surface

    def on_speed_input(self, value: float) -> None:
        """Feed one speed-input event: advances the trail by one point."""
        if not self._alive:
            return
        self.speed_value = value
        self.motion.advance(value, self._clock(), self.width, self.height)

    def on_frame_tick(self, now: float) -> None:
        """Draw a frame. Without a surface this does nothing."""
        if not self._alive or self.surface is None:
            return
        self.renderer.render_frame(self.surface, now, self.width, self.height)

    def on_heading_poll(self, now: float) -> bool:
        """Periodic heading check.

        Returns:
            True if a new heading was rolled
        """
        if not self._alive:
            return False
        return self.heading.maybe_reallocate_heading(now)

    def on_resize(self, width: float, height: float) -> None:
        """Change the extents used for bouncing and drawing.

        Points already in the trail are left where they are.
        """
        if not self._alive:
            return
        self.width = width
        self.height = height
        logger.info("Viewport resized to %sx%s", width, height)
        if self.event_bus:
            self.event_bus.publish(ResizeEvent(width=width, height=height))

    def teardown(self) -> None:
        """Stop accepting input, ticks and polls. Safe to call twice."""
        if not self._alive:
            return
        self._alive = False
        self.surface = None
        logger.info("Graph torn down with %d points in the trail", len(self.buffer))
        if self.event_bus:
            self.event_bus.publish(TeardownEvent())
