"""Stdout display adapter.

Implements EventDisplayPort by printing events to the terminal.
"""

import logging
from collections.abc import Sequence

from planner.core.event import Event
from planner.core.ports import EventDisplayPort

logger = logging.getLogger(__name__)


class StdoutEventDisplay(EventDisplayPort):
    """Prints events to stdout."""

    def __init__(self, verbose: bool = False):
        """Initialize stdout display adapter.

        Args:
            verbose: If True, print the full event description instead of
                just the name when listing events.
        """
        self.verbose = verbose

    def show_events(self, events: Sequence[Event]) -> None:
        """Print one line per event."""
        logger.debug(f"Displaying {len(events)} events")
        for event in events:
            print(self._format_event_line(event))

    def show_event(self, event: Event) -> None:
        """Print an event followed by its participants and items."""
        print(self._format_details(event))

    def _format_event_line(self, event: Event) -> str:
        if self.verbose:
            return event.describe()
        return event.name

    @staticmethod
    def _format_details(event: Event) -> str:
        lines = [event.describe()]

        if event.participants:
            lines.append("Participants:")
            for i, participant in enumerate(event.participants, 1):
                mark = "Y" if participant.present else "N"
                lines.append(
                    f"  {i}. {participant.name} / {participant.number} / "
                    f"{participant.email} / Present: {mark}"
                )

        if event.items:
            lines.append("Items:")
            for i, item in enumerate(event.items, 1):
                mark = "Y" if item.present else "N"
                lines.append(f"  {i}. {item.name} / Present: {mark}")

        return "\n".join(lines)
