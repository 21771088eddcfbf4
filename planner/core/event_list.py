"""Top-level collection owning all events.

Event identity at this level differs from participants and items: names
are not required to be unique, and removal matches the name exactly,
case included.
"""

import logging
from collections.abc import Iterable, Iterator

from .event import Event
from .ports import EventDisplayPort

logger = logging.getLogger(__name__)


class EventList:
    """Ordered collection of events.

    Queries return snapshots; the backing list is never handed out.
    """

    def __init__(self, events: Iterable[Event] | None = None):
        """Initialize the list, optionally seeded with existing events.

        Args:
            events: Initial events in order. The iterable is copied.
        """
        self._events: list[Event] = list(events) if events is not None else []

    def add_event(self, name: str) -> Event:
        """Create an event with only a name and append it.

        No duplicate check is made; two events may share a name.

        Returns:
            The newly created Event.
        """
        event = Event(name)
        self._events.append(event)
        logger.debug("Event added", extra={"event": name})
        return event

    def insert_event(self, event: Event) -> None:
        """Append an already-built event, without a duplicate check."""
        self._events.append(event)
        logger.debug("Event inserted", extra={"event": event.name})

    def remove_event(self, name: str) -> bool:
        """Remove the first event whose name equals ``name`` exactly.

        Returns:
            True if an event was removed, False otherwise.
        """
        for index, event in enumerate(self._events):
            if event.name == name:
                del self._events[index]
                logger.debug("Event removed", extra={"event": name})
                return True
        return False

    def get_event(self, name: str) -> Event | None:
        """Return the first event whose name equals ``name`` exactly, or None."""
        for event in self._events:
            if event.name == name:
                return event
        return None

    def get_list(self) -> list[Event]:
        """Return a snapshot of the events in list order."""
        return list(self._events)

    @property
    def size(self) -> int:
        return len(self._events)

    def show(self, display: EventDisplayPort) -> None:
        """Send the current events to a display adapter."""
        display.show_events(self.get_list())

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[Event]:
        return iter(self.get_list())
