"""
Event Bus System

Provides publish/subscribe pattern for domain events.
Allows views and other components to react to editor state changes.

The editor runs on a single asyncio loop, so handlers are called
synchronously, in subscription order, on the publishing call stack.
"""
from typing import Dict, List, Callable, Union, Type

from trackcreator.application.events.events import DomainEvent
from trackcreator.utils.message import Log


class EventBus:
    """
    Event bus for publishing and subscribing to domain events.

    Usage:
        bus = EventBus()
        bus.subscribe("NotesChanged", handle_notes_changed)
        # Or with class:
        bus.subscribe(NotesChanged, handle_notes_changed)
        bus.publish(NotesChanged(song_id="...", data={...}))
    """

    def __init__(self):
        """Initialize event bus"""
        self._subscribers: Dict[str, List[Callable[[DomainEvent], None]]] = {}
        Log.debug("EventBus: Initialized")

    def _normalize_event_name(self, event_name_or_class: Union[str, Type[DomainEvent]]) -> str:
        """Convert event class or string to normalized string name."""
        if isinstance(event_name_or_class, str):
            return event_name_or_class
        elif hasattr(event_name_or_class, 'name'):
            return event_name_or_class.name
        return event_name_or_class.__name__

    def subscribe(self, event_name: Union[str, Type[DomainEvent]], handler: Callable[[DomainEvent], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_name: Name of the event type (e.g., "NotesChanged") or event class
            handler: Function to call when event is published
        """
        event_name = self._normalize_event_name(event_name)
        handlers = self._subscribers.setdefault(event_name, [])
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, event_name: Union[str, Type[DomainEvent]], handler: Callable[[DomainEvent], None]) -> None:
        """
        Unsubscribe from events of a specific type.

        Args:
            event_name: Name of the event type or event class
            handler: Handler function to remove
        """
        event_name = self._normalize_event_name(event_name)
        handlers = self._subscribers.get(event_name)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._subscribers[event_name]

    def publish(self, event: DomainEvent) -> None:
        """
        Publish a domain event to all subscribers.

        A failing handler is logged and does not stop the remaining handlers.

        Args:
            event: DomainEvent instance to publish
        """
        event_name = event.name
        # Copy so handlers may unsubscribe while being dispatched
        handlers = list(self._subscribers.get(event_name, []))
        if not handlers:
            return

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                Log.error(f"EventBus: Error in handler for '{event_name}': {e}")

    def get_subscriber_count(self, event_name: Union[str, Type[DomainEvent]]) -> int:
        """Get number of subscribers for an event type."""
        return len(self._subscribers.get(self._normalize_event_name(event_name), []))

    def clear(self) -> None:
        """Clear all subscribers"""
        self._subscribers.clear()
        Log.debug("EventBus: Cleared all subscribers")
