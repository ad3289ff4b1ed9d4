"""Mouse/keyboard input handling."""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable
import pygame

if TYPE_CHECKING:
    from .controls import SpeedSlider

SPEED_NUDGE = 1  # Slider steps per arrow key press


class InputAction(Enum):
    """Input actions that can be triggered."""
    QUIT = "quit"
    RESIZE = "resize"


@dataclass
class InputState:
    """Current input state."""
    mouse_x: int = 0
    mouse_y: int = 0


class InputHandler:
    """Turns pygame events into input actions.

    Mouse events go to the speed slider first; whatever it doesn't consume
    is mapped to actions with registered callbacks.
    """

    def __init__(self, slider: SpeedSlider | None = None) -> None:
        self.slider = slider
        self.state = InputState()
        self._callbacks: dict[InputAction, list[Callable]] = {}

    def register_callback(self, action: InputAction, callback: Callable) -> None:
        """Register a callback for an input action."""
        self._callbacks.setdefault(action, []).append(callback)

    def _fire_action(self, action: InputAction, *args) -> None:
        for callback in self._callbacks.get(action, []):
            callback(*args)

    def process_events(self, events: list[pygame.event.Event]) -> bool:
        """Process pygame events.

        Returns:
            False if quit was requested, True otherwise
        """
        for event in events:
            if event.type == pygame.QUIT:
                self._fire_action(InputAction.QUIT)
                return False

            elif event.type == pygame.VIDEORESIZE:
                self._fire_action(InputAction.RESIZE, event.w, event.h)

            elif event.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self.state.mouse_x, self.state.mouse_y = event.pos
                if self.slider:
                    self.slider.handle_event(event)

            elif event.type == pygame.KEYDOWN:
                if not self._handle_key_down(event):
                    return False

        return True

    def _handle_key_down(self, event: pygame.event.Event) -> bool:
        if event.key in (pygame.K_ESCAPE, pygame.K_q):
            self._fire_action(InputAction.QUIT)
            return False

        if event.key in (pygame.K_RIGHT, pygame.K_UP, pygame.K_PLUS, pygame.K_EQUALS):
            if self.slider:
                self.slider.nudge(SPEED_NUDGE)

        elif event.key in (pygame.K_LEFT, pygame.K_DOWN, pygame.K_MINUS):
            if self.slider:
                self.slider.nudge(-SPEED_NUDGE)

        elif event.key in (pygame.K_TAB, pygame.K_h):
            if self.slider:
                self.slider.toggle_visible()

        return True
