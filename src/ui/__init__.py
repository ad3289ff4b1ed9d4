"""Pygame UI layer."""
from .paint import Color, LinearGradient
from .renderer import TrailRenderer
from .surface import DrawSurface, PygameSurface
from .controls import SpeedSlider
from .input import InputHandler, InputAction

__all__ = [
    'Color', 'LinearGradient', 'TrailRenderer', 'DrawSurface', 'PygameSurface',
    'SpeedSlider', 'InputHandler', 'InputAction',
]
