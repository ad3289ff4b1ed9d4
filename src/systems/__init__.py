"""Systems that mutate trail state."""
from .motion import MotionStep, speed_multiplier

__all__ = ["MotionStep", "speed_multiplier"]
