"""Paint styles: HSLA colours and linear gradients."""
from __future__ import annotations
import colorsys
from dataclasses import dataclass, field
from typing import Protocol

RGBA = tuple[int, int, int, int]


class Paint(Protocol):
    """Anything that can tell what colour to use at a surface position."""

    def rgba_at(self, x: float, y: float) -> RGBA: ...


def _alpha_byte(alpha: float) -> int:
    return int(round(max(0.0, min(1.0, alpha)) * 255))


@dataclass(frozen=True)
class Color:
    """An HSLA colour, in the units CSS uses.

    Hue is in degrees, saturation and lightness in percent, alpha in [0, 1].
    """
    hue: float
    saturation: float = 100.0
    lightness: float = 50.0
    alpha: float = 1.0

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, alpha: float = 1.0) -> Color:
        h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
        return cls(hue=h * 360, saturation=s * 100, lightness=l * 100, alpha=alpha)

    @classmethod
    def from_hex(cls, value: str, alpha: float = 1.0) -> Color:
        """Parse '#rrggbb' (or '#rgb')."""
        digits = value.lstrip('#')
        if len(digits) == 3:
            digits = ''.join(c * 2 for c in digits)
        if len(digits) != 6:
            raise ValueError(f"Not a hex colour: {value!r}")
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
        return cls.from_rgba(r, g, b, alpha)

    def with_alpha(self, alpha: float) -> Color:
        return Color(self.hue, self.saturation, self.lightness, alpha)

    def to_rgba(self) -> RGBA:
        r, g, b = colorsys.hls_to_rgb(
            (self.hue % 360) / 360,
            max(0.0, min(100.0, self.lightness)) / 100,
            max(0.0, min(100.0, self.saturation)) / 100,
        )
        return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), _alpha_byte(self.alpha))

    def rgba_at(self, x: float, y: float) -> RGBA:
        return self.to_rgba()


@dataclass
class LinearGradient:
    """Colour that varies along the axis from `start` to `end`.

    Positions are projected onto the axis; offsets outside [0, 1] take the
    nearest end stop.
    """
    start: tuple[float, float]
    end: tuple[float, float]
    stops: list[tuple[float, Color]] = field(default_factory=list)

    def add_stop(self, offset: float, color: Color) -> None:
        self.stops.append((max(0.0, min(1.0, offset)), color))
        self.stops.sort(key=lambda stop: stop[0])

    def offset_at(self, x: float, y: float) -> float:
        ax = self.end[0] - self.start[0]
        ay = self.end[1] - self.start[1]
        length_sq = ax * ax + ay * ay
        if length_sq == 0:
            return 0.0
        t = ((x - self.start[0]) * ax + (y - self.start[1]) * ay) / length_sq
        return max(0.0, min(1.0, t))

    def rgba_at(self, x: float, y: float) -> RGBA:
        if not self.stops:
            return (0, 0, 0, 0)

        t = self.offset_at(x, y)
        first_offset, first_color = self.stops[0]
        if t <= first_offset:
            return first_color.to_rgba()

        for (o1, c1), (o2, c2) in zip(self.stops, self.stops[1:]):
            if t <= o2:
                span = o2 - o1
                f = (t - o1) / span if span > 0 else 1.0
                rgba1 = c1.to_rgba()
                rgba2 = c2.to_rgba()
                return tuple(int(round(a + (b - a) * f)) for a, b in zip(rgba1, rgba2))  # type: ignore

        return self.stops[-1][1].to_rgba()
