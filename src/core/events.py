"""Event bus for decoupled communication between the graph and its host."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable


@dataclass
class Event:
    """Base class for all events."""
    pass


@dataclass
class HeadingChangedEvent(Event):
    """Fired when the heading controller rolls a new random direction."""
    direction: tuple[float, float]
    interval: float  # ms until the next change becomes due
    time: float


@dataclass
class BounceEvent(Event):
    """Fired when a motion step reflects off one or both viewport edges."""
    flip_x: bool
    flip_y: bool
    position: tuple[float, float]  # Stored (clamped) position
    time: float


@dataclass
class ResizeEvent(Event):
    """Fired when the viewport extents change."""
    width: float
    height: float


@dataclass
class TeardownEvent(Event):
    """Fired once when a graph instance is torn down."""
    pass


EventHandler = Callable[[Event], None]


class EventBus:
    """Synchronous publish/subscribe hub.

    Handlers registered for a base class also receive its subclasses.
    Events published from inside a handler are queued and delivered by
    process_queue() instead of recursing.
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[EventHandler]] = {}
        self._queued_events: list[Event] = []
        self._processing: bool = False

    def subscribe(self, event_type: type[Event], handler: EventHandler) -> None:
        """Register a handler for an event type (and its subclasses)."""
        self._handlers.setdefault(event_type, []).append(handler)

    def unsubscribe(self, event_type: type[Event], handler: EventHandler) -> None:
        """Remove a handler; unknown handlers are ignored."""
        handlers = self._handlers.get(event_type)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def publish(self, event: Event) -> None:
        """Deliver an event to its subscribers, or queue it while dispatching."""
        if self._processing:
            self._queued_events.append(event)
            return

        self._processing = True
        try:
            self._dispatch(event)
        finally:
            self._processing = False
        self.process_queue()

    def _dispatch(self, event: Event) -> None:
        for registered_type, handlers in list(self._handlers.items()):
            if isinstance(event, registered_type):
                for handler in list(handlers):
                    handler(event)

    def process_queue(self) -> None:
        """Deliver events queued by handlers during an earlier dispatch."""
        if self._processing:
            return
        self._processing = True
        try:
            while self._queued_events:
                current_queue = self._queued_events
                self._queued_events = []
                for event in current_queue:
                    self._dispatch(event)
        finally:
            self._processing = False

    def has_subscribers(self, event_type: type[Event]) -> bool:
        return bool(self._handlers.get(event_type))

    def clear(self) -> None:
        """Drop all handlers and queued events."""
        self._handlers.clear()
        self._queued_events.clear()
