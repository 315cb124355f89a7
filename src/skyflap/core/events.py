"""
Event bus system for SKYFLAP.

Provides pub/sub messaging between the window, the game session and the
audio engine, plus a per-frame input queue.
"""

from dataclasses import dataclass, field
from typing import Any, Callable
from enum import Enum, auto
import asyncio
import logging
import time
from collections import defaultdict

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Built-in event types."""
    # Input events
    FLAP = auto()           # Jump key (jump while alive, restart when over)
    RESTART_CLICK = auto()  # Restart button clicked

    # Game events
    SCORE_CHANGED = auto()
    LEVEL_UP = auto()
    POWER_UP_COLLECTED = auto()
    GAME_OVER = auto()
    RESTARTED = auto()

    # System events
    TICK = auto()  # Frame tick
    SHUTDOWN = auto()


@dataclass
class Event:
    """
    Event data container.

    Attributes:
        type: Event type (EventType enum or custom string)
        data: Event payload
        source: Component that emitted the event
        timestamp: When event was created
    """
    type: EventType | str
    data: dict[str, Any] = field(default_factory=dict)
    source: str = "system"
    timestamp: float = field(default_factory=time.time)


Handler = Callable[[Event], None]


class EventBus:
    """
    Central event bus for component communication.

    Game events are emitted immediately. Input events are queued by the
    window and drained once per frame, before the tick, so every key press
    or click is applied between two simulation steps.
    """

    def __init__(self) -> None:
        self._handlers: dict[EventType | str, list[Handler]] = defaultdict(list)
        self._global_handlers: list[Handler] = []
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self._event_history: list[Event] = []
        self._history_limit = 100

    def subscribe(
        self,
        event_type: EventType | str,
        handler: Handler
    ) -> Callable[[], None]:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to listen for
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug(f"Handler subscribed to {event_type}")

        def unsubscribe() -> None:
            if handler in self._handlers[event_type]:
                self._handlers[event_type].remove(handler)
                logger.debug(f"Handler unsubscribed from {event_type}")

        return unsubscribe

    def subscribe_all(self, handler: Handler) -> Callable[[], None]:
        """Subscribe to all events. Returns an unsubscribe function."""
        self._global_handlers.append(handler)

        def unsubscribe() -> None:
            if handler in self._global_handlers:
                self._global_handlers.remove(handler)

        return unsubscribe

    def emit(self, event: Event) -> None:
        """Emit an event immediately."""
        self._add_to_history(event)
        self._dispatch(event)

    def queue_event(self, event: Event) -> None:
        """Queue an event for later processing."""
        self._queue.put_nowait(event)

    async def process_queue(self) -> None:
        """Dispatch all queued events in arrival order."""
        while not self._queue.empty():
            event = await self._queue.get()
            self._add_to_history(event)
            self._dispatch(event)
            self._queue.task_done()

    def _dispatch(self, event: Event) -> None:
        """Dispatch event to type and global handlers."""
        handlers = self._handlers.get(event.type, []) + self._global_handlers

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(f"Error in event handler: {e}")

    def _add_to_history(self, event: Event) -> None:
        """Add event to history, maintaining limit."""
        self._event_history.append(event)
        if len(self._event_history) > self._history_limit:
            self._event_history.pop(0)

    def get_history(
        self,
        event_type: EventType | str | None = None,
        limit: int = 10
    ) -> list[Event]:
        """Get recent events from history."""
        history = self._event_history
        if event_type is not None:
            history = [e for e in history if e.type == event_type]
        return history[-limit:]

    def clear_history(self) -> None:
        """Clear event history."""
        self._event_history.clear()


# Convenience functions for creating common events
def flap_event(source: str = "keyboard") -> Event:
    """Create a jump/restart key event."""
    return Event(EventType.FLAP, source=source)


def restart_click_event(source: str = "mouse") -> Event:
    """Create a restart button click event."""
    return Event(EventType.RESTART_CLICK, source=source)


def tick_event() -> Event:
    """Create a frame tick event."""
    return Event(EventType.TICK, source="window")
