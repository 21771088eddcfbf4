"""Port interfaces for the Planner event core.

These abstract base classes define the boundary between the core and
the adapters that present it. Implementations live in the adapters/
package.

The core never prints. Anything that should reach a console goes
through a driven port so that queries stay free of side effects.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from .event import Event


class EventDisplayPort(ABC):
    """Port for presenting events to a user.

    Adapters implementing this port render events to some output channel
    (terminal, log, UI). They receive snapshots and must not mutate the
    events they are given.
    """

    @abstractmethod
    def show_events(self, events: Sequence[Event]) -> None:
        """Present a list of events.

        Args:
            events: Events in list order. May be empty.
        """

    @abstractmethod
    def show_event(self, event: Event) -> None:
        """Present a single event with its participants and items."""
