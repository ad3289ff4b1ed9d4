"""Trail rendering: fade, gradient stroke, fading tail and particles."""
from __future__ import annotations
import math
from typing import TYPE_CHECKING, Iterator

from ..config import (
    BASE_HUE, HUE_AMPLITUDE, HUE_STEP, GRADIENT_HUE_SHIFT, GLOW_BLUR, FADE_COLOR,
    TAIL_MIN_POINTS, TAIL_LENGTH, TAIL_MAX_ALPHA,
    PARTICLE_WINDOW, PARTICLE_CHANCE, PARTICLE_MIN_RADIUS, PARTICLE_RADIUS_SPREAD,
    PARTICLE_HUE, PARTICLE_MAX_ALPHA,
)
from .paint import Color, LinearGradient

if TYPE_CHECKING:
    from ..config import GraphConfig
    from ..core.host import RandomSource
    from ..entities.trails import Point, TrailBuffer
    from .surface import DrawSurface


def display_hue(phase: float) -> float:
    """Hue swinging sinusoidally around the base hue as the phase advances."""
    return (BASE_HUE + math.sin(math.radians(phase)) * HUE_AMPLITUDE) % 360


def particle_alpha(normalized_age: float) -> float:
    """Particle opacity: 0.5 for a fresh point, fading to 0 at the retention edge."""
    return max(0.0, (1.0 - normalized_age) * PARTICLE_MAX_ALPHA)


def tail_segments(points: list[Point]) -> Iterator[tuple[Point, Point, float]]:
    """Segments of the fading tail with their normalised position.

    Yields (older, newer, alpha) for the newest TAIL_LENGTH points, where
    alpha runs from 0 at the oldest segment upwards. Nothing is yielded
    unless the trail holds more than TAIL_MIN_POINTS points.
    """
    count = len(points)
    if count <= TAIL_MIN_POINTS:
        return
    tail_length = min(TAIL_LENGTH, count)
    start = count - tail_length
    for i in range(start, count - 1):
        yield points[i], points[i + 1], (i - start) / tail_length


class TrailRenderer:
    """Paints the trail buffer onto a DrawSurface once per frame.

    The renderer never mutates the buffer; its only state is the hue phase
    that drives the colour cycle.
    """

    def __init__(self, buffer: TrailBuffer, config: GraphConfig, rng: RandomSource) -> None:
        self.buffer = buffer
        self.config = config
        self._rng = rng
        self.hue_phase = 0.0
        self.fade_paint = Color.from_rgba(*FADE_COLOR)

    def advance_hue(self) -> float:
        """Step the hue phase and return the hue to draw this frame with."""
        self.hue_phase = (self.hue_phase + HUE_STEP) % 360
        return display_hue(self.hue_phase)

    def build_gradient(self, hue: float, width: float, height: float) -> LinearGradient:
        gradient = LinearGradient(start=(0.0, 0.0), end=(width, height))
        gradient.add_stop(0.0, Color(hue, 100, 50, 0.6))
        gradient.add_stop(0.5, Color(hue + GRADIENT_HUE_SHIFT, 100, 70, 0.8))
        gradient.add_stop(1.0, Color(hue, 100, 50, 0.6))
        return gradient

    def render_frame(self, surface: DrawSurface, now: float, width: float, height: float) -> None:
        """Draw one frame.

        Args:
            surface: Target to paint on
            now: Host time in ms, used to age particles
            width: Viewport width in pixels
            height: Viewport height in pixels
        """
        # Translucent fill instead of a clear, so earlier frames ghost through
        surface.fill_rect((0, 0, width, height), self.fade_paint)

        points = list(self.buffer)
        if len(points) < 2:
            return

        hue = self.advance_hue()
        line_width = self.config.line_width

        # Main stroke with glow
        surface.set_glow(Color(hue, 100, 50, 0.5), GLOW_BLUR)
        surface.stroke_path(
            [(p.x, p.y) for p in points],
            self.build_gradient(hue, width, height),
            line_width,
            rounded=True,
        )
        surface.reset_glow()

        # Fading tail over the newest points
        for p1, p2, alpha in tail_segments(points):
            surface.stroke_path(
                [(p1.x, p1.y), (p2.x, p2.y)],
                Color(hue, 100, 50, alpha * TAIL_MAX_ALPHA),
                line_width * alpha,
            )

        self._render_particles(surface, now)

    def _render_particles(self, surface: DrawSurface, now: float) -> None:
        """Sparkle a few dots on the newest points; each has its own chance per frame."""
        window = self.config.retention_window
        for point in self.buffer.recent(PARTICLE_WINDOW):
            age = (now - point.t) / window
            if self._rng.random() >= PARTICLE_CHANCE:
                continue
            radius = self._rng.random() * PARTICLE_RADIUS_SPREAD + PARTICLE_MIN_RADIUS
            surface.fill_circle(
                (point.x, point.y),
                radius,
                Color(PARTICLE_HUE, 100, 70, particle_alpha(age)),
            )
