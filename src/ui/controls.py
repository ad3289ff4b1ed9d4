"""On-screen speed control panel."""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable
import pygame

from ..config import COLORS, MAX_SPEED_VALUE, MIN_SPEED_VALUE, NEUTRAL_SPEED_VALUE
from .paint import Color


@dataclass
class SpeedSlider:
    """Panel with a 0-100 slider feeding the graph's speed input.

    Every change of value is one speed-input event: callbacks registered
    with on_change() fire once per distinct value.
    """
    x: int = 20
    y: int = 20
    width: int = 180
    height: int = 96
    title: str = "Random Graph"
    accent: Color = field(default_factory=lambda: Color.from_hex("#00ff00"))
    visible: bool = True
    value: int = int(NEUTRAL_SPEED_VALUE)
    dragging: bool = False
    _callbacks: list[Callable[[int], None]] = field(default_factory=list, init=False, repr=False)

    @property
    def track_rect(self) -> pygame.Rect:
        return pygame.Rect(self.x + 15, self.y + 44, self.width - 30, 8)

    def on_change(self, callback: Callable[[int], None]) -> None:
        self._callbacks.append(callback)

    def set_value(self, value: float) -> bool:
        """Clamp and store a new value.

        Returns:
            True if the value changed (and callbacks fired)
        """
        clamped = int(round(max(MIN_SPEED_VALUE, min(MAX_SPEED_VALUE, value))))
        if clamped == self.value:
            return False
        self.value = clamped
        for callback in self._callbacks:
            callback(clamped)
        return True

    def nudge(self, delta: int) -> bool:
        return self.set_value(self.value + delta)

    def toggle_visible(self) -> bool:
        """Show or hide the panel. Hiding it ends any drag in progress."""
        self.visible = not self.visible
        if not self.visible:
            self.dragging = False
        return self.visible

    def value_at(self, mouse_x: int) -> float:
        """Slider value under a horizontal mouse position."""
        track = self.track_rect
        fraction = (mouse_x - track.x) / max(1, track.width)
        fraction = max(0.0, min(1.0, fraction))
        return MIN_SPEED_VALUE + fraction * (MAX_SPEED_VALUE - MIN_SPEED_VALUE)

    def contains_point(self, x: int, y: int) -> bool:
        return (
            self.x <= x <= self.x + self.width and
            self.y <= y <= self.y + self.height
        )

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle a mouse event.

        Returns:
            True if the event was consumed by the slider
        """
        if event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self.dragging:
            self.dragging = False
            return True

        if not self.visible:
            return False

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.track_rect.inflate(0, 16).collidepoint(event.pos):
                self.dragging = True
                self.set_value(self.value_at(event.pos[0]))
                return True
            return self.contains_point(*event.pos)

        if event.type == pygame.MOUSEMOTION and self.dragging:
            self.set_value(self.value_at(event.pos[0]))
            return True

        return False

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        """Draw the panel."""
        if not self.visible:
            return

        accent = self.accent.with_alpha(1.0).to_rgba()[:3]
        border = self.accent.with_alpha(0.5).to_rgba()

        panel = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        pygame.draw.rect(panel, COLORS['ui_bg'], panel.get_rect(), border_radius=10)
        pygame.draw.rect(panel, border, panel.get_rect(), 1, border_radius=10)
        surface.blit(panel, (self.x, self.y))

        title_surf = font.render(self.title, True, accent)
        surface.blit(title_surf, (self.x + 15, self.y + 12))

        # Track and knob
        track = self.track_rect
        pygame.draw.rect(surface, COLORS['slider_track'], track, border_radius=4)
        fraction = (self.value - MIN_SPEED_VALUE) / (MAX_SPEED_VALUE - MIN_SPEED_VALUE)
        filled = pygame.Rect(track.x, track.y, int(track.width * fraction), track.height)
        pygame.draw.rect(surface, accent, filled, border_radius=4)
        knob_x = track.x + int(track.width * fraction)
        pygame.draw.circle(surface, COLORS['ui_text'], (knob_x, track.centery), 7)

        value_surf = font.render(f"Value: {self.value}", True, accent)
        surface.blit(value_surf, (self.x + 15, self.y + 66))
