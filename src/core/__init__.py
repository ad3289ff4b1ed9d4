"""Core engine plumbing: events, host capabilities and timers."""
from .events import Event, EventBus, HeadingChangedEvent, BounceEvent, ResizeEvent, TeardownEvent
from .host import RandomSource, Clock, monotonic_ms, default_random
from .scheduler import PeriodicTimer

__all__ = [
    'Event', 'EventBus', 'HeadingChangedEvent', 'BounceEvent', 'ResizeEvent', 'TeardownEvent',
    'RandomSource', 'Clock', 'monotonic_ms', 'default_random',
    'PeriodicTimer',
]
