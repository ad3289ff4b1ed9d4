"""Drawing surfaces the renderer paints on."""
from __future__ import annotations
import math
from typing import Callable, Protocol, Sequence
import pygame

from ..config import GLOW_DOWNSCALE_DIVISOR, MIN_STROKE_WIDTH
from .paint import Color, Paint

Vec2 = tuple[float, float]


class DrawSurface(Protocol):
    """Primitive drawing operations the trail renderer needs from its host."""

    @property
    def size(self) -> tuple[int, int]: ...

    def fill_rect(self, rect: tuple[float, float, float, float], paint: Paint) -> None: ...

    def stroke_path(self, points: Sequence[Vec2], paint: Paint, width: float, rounded: bool = True) -> None: ...

    def fill_circle(self, center: Vec2, radius: float, paint: Paint) -> None: ...

    def set_glow(self, color: Color, blur: float) -> None: ...

    def reset_glow(self) -> None: ...


def _bounds(points: Sequence[Vec2], pad: float) -> pygame.Rect:
    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    left = math.floor(min(xs) - pad)
    top = math.floor(min(ys) - pad)
    right = math.ceil(max(xs) + pad)
    bottom = math.ceil(max(ys) + pad)
    return pygame.Rect(left, top, max(1, right - left), max(1, bottom - top))


def _draw_polyline(
    layer: pygame.Surface,
    points: Sequence[Vec2],
    paint: Paint,
    width: int,
    rounded: bool,
    offset: Vec2 = (0.0, 0.0),
) -> None:
    """Draw connected segments, each coloured by the paint at its midpoint.

    pygame writes RGBA straight into an SRCALPHA layer, so overlapping
    segments don't stack their alpha; the layer is composited once.
    """
    ox, oy = offset
    radius = width / 2
    for (x1, y1), (x2, y2) in zip(points, points[1:]):
        color = paint.rgba_at((x1 + x2) / 2, (y1 + y2) / 2)
        start = (x1 - ox, y1 - oy)
        end = (x2 - ox, y2 - oy)
        pygame.draw.line(layer, color, start, end, width)
        if rounded and width > 2:
            pygame.draw.circle(layer, color, end, radius)
    if rounded and width > 2:
        x0, y0 = points[0]
        pygame.draw.circle(layer, paint.rgba_at(x0, y0), (x0 - ox, y0 - oy), radius)


class PygameSurface:
    """DrawSurface backed by a pygame.Surface.

    Translucent primitives are drawn onto SRCALPHA layers and blitted, since
    pygame.draw does not blend. The glow is a bloom pass: the shape is drawn
    onto a shrunken layer and smoothscaled back up, which blurs it.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self._glow: tuple[Color, float] | None = None
        self._fill_cache: dict[tuple, pygame.Surface] = {}

    @property
    def size(self) -> tuple[int, int]:
        return self.target.get_size()

    def fill_rect(self, rect: tuple[float, float, float, float], paint: Paint) -> None:
        x, y, w, h = rect
        color = paint.rgba_at(x, y)
        key = (int(w), int(h), color)
        overlay = self._fill_cache.get(key)
        if overlay is None:
            overlay = pygame.Surface((max(1, int(w)), max(1, int(h))), pygame.SRCALPHA)
            overlay.fill(color)
            # Only the latest overlay is kept; the fade fill never changes between frames
            self._fill_cache = {key: overlay}
        self.target.blit(overlay, (int(x), int(y)))

    def stroke_path(self, points: Sequence[Vec2], paint: Paint, width: float, rounded: bool = True) -> None:
        if len(points) < 2 or width < MIN_STROKE_WIDTH:
            return
        line_width = max(1, int(round(width)))

        if self._glow:
            self._glow_pass(lambda layer, scale, glow_width: _draw_polyline(
                layer,
                [(x * scale, y * scale) for x, y in points],
                self._glow[0],
                glow_width,
                True,
            ), line_width)

        box = _bounds(points, line_width)
        layer = pygame.Surface(box.size, pygame.SRCALPHA)
        _draw_polyline(layer, points, paint, line_width, rounded, offset=box.topleft)
        self.target.blit(layer, box.topleft)

    def fill_circle(self, center: Vec2, radius: float, paint: Paint) -> None:
        if radius <= 0:
            return
        cx, cy = center
        color = paint.rgba_at(cx, cy)

        if self._glow:
            self._glow_pass(lambda layer, scale, glow_width: pygame.draw.circle(
                layer, self._glow[0].to_rgba(), (cx * scale, cy * scale), max(1.0, glow_width / 2),
            ), int(round(radius * 2)))

        size = int(math.ceil(radius * 2)) + 2
        layer = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(layer, color, (size / 2, size / 2), radius)
        self.target.blit(layer, (int(round(cx - size / 2)), int(round(cy - size / 2))))

    def set_glow(self, color: Color, blur: float) -> None:
        self._glow = (color, blur) if blur > 0 else None

    def reset_glow(self) -> None:
        self._glow = None

    @property
    def glow(self) -> tuple[Color, float] | None:
        return self._glow

    def _glow_pass(self, draw: Callable[[pygame.Surface, float, int], None], base_width: int) -> None:
        _, blur = self._glow  # type: ignore[misc]
        factor = max(1.0, blur / GLOW_DOWNSCALE_DIVISOR)
        width, height = self.size
        small_size = (max(1, int(width / factor)), max(1, int(height / factor)))
        small = pygame.Surface(small_size, pygame.SRCALPHA)
        glow_width = max(1, int(round((base_width + blur) / factor)))
        draw(small, 1 / factor, glow_width)
        blurred = pygame.transform.smoothscale(small, (width, height))
        self.target.blit(blurred, (0, 0))
