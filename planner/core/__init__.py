"""Core domain logic for the Planner event core.

This package contains zero external dependencies. Display and wiring
are handled by the adapters package and planner.main.
"""

from .errors import DomainError, DuplicateEntityError, ErrorCode
from .event import Event
from .event_list import EventList
from .models import Item, Participant, Priority

__all__ = [
    "DomainError",
    "DuplicateEntityError",
    "ErrorCode",
    "Event",
    "EventList",
    "Item",
    "Participant",
    "Priority",
]
