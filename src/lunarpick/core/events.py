"""
Pub/Sub event bus for loose coupling between the selector and its UI.

Handlers are plain synchronous callables; every transition of the
selection runs to completion before the next one starts.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]


class EventBus:
    """
    Pub/Sub event bus for component communication.

    Usage:
        bus = EventBus()

        def on_months(names):
            month_picker.set_values(names)

        bus.subscribe(EventTypes.MONTH_LIST_CHANGED, on_months)
        bus.publish(EventTypes.MONTH_LIST_CHANGED, ["正月", "二月"])
    """

    def __init__(self):
        """Initialize the event bus."""
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, event_type: str, handler: Handler) -> Callable[[], None]:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Event type identifier (e.g., "selection.changed")
            handler: Callback function

        Returns:
            Unsubscribe function
        """
        self._handlers[event_type].append(handler)
        logger.debug("Handler subscribed to: %s", event_type)

        def unsubscribe():
            self.unsubscribe(event_type, handler)

        return unsubscribe

    def unsubscribe(self, event_type: str, handler: Handler) -> bool:
        """
        Unsubscribe a handler from an event type.

        Args:
            event_type: Event type identifier
            handler: Handler to remove

        Returns:
            True if handler was found and removed
        """
        try:
            self._handlers[event_type].remove(handler)
            logger.debug("Handler unsubscribed from: %s", event_type)
            return True
        except ValueError:
            return False

    def publish(self, event_type: str, data: Any = None) -> int:
        """
        Publish an event to all subscribed handlers.

        A failing handler is logged and does not stop the others.

        Args:
            event_type: Event type identifier
            data: Event data payload

        Returns:
            Number of handlers called
        """
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug("No handlers for event: %s", event_type)
            return 0

        logger.debug("Publishing %s to %d handlers", event_type, len(handlers))

        for handler in handlers:
            try:
                handler(data)
            except Exception as e:
                logger.error(
                    "Error in handler for %s: %s",
                    event_type,
                    e,
                    exc_info=True,
                )

        return len(handlers)

    def clear(self, event_type: str | None = None) -> None:
        """
        Clear all handlers for an event type, or all handlers if None.

        Args:
            event_type: Event type to clear, or None for all
        """
        if event_type:
            self._handlers.pop(event_type, None)
            logger.debug("Cleared handlers for: %s", event_type)
        else:
            self._handlers.clear()
            logger.debug("Cleared all event handlers")

    def get_handlers(self, event_type: str) -> list[Handler]:
        """Get all handlers for an event type."""
        return list(self._handlers.get(event_type, []))

    @property
    def event_types(self) -> set[str]:
        """Get all registered event types."""
        return {key for key, handlers in self._handlers.items() if handlers}

    def __repr__(self) -> str:
        total = sum(len(h) for h in self._handlers.values())
        return f"EventBus(handlers={total})"


class EventTypes:
    """Standard event type constants."""

    MONTH_LIST_CHANGED = "selection.month_list_changed"
    DAY_COUNT_CHANGED = "selection.day_count_changed"
    SELECTION_CHANGED = "selection.changed"
    SELECTION_CONFIRMED = "selection.confirmed"
