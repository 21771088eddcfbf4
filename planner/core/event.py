"""Event aggregate: scalar fields plus owned participant and item collections.

An Event exclusively owns its participants and items. Within one event no
two participants (and no two items) share a case-insensitive name; adding a
clashing name raises DuplicateEntityError. Lookups that miss are not errors:
remove, update and mark operations report them by returning False.

Collections keep insertion order and are only ever handed out as snapshots,
so callers cannot mutate them behind the event's back.
"""

import logging
from collections.abc import Iterable
from datetime import datetime

from .errors import DuplicateEntityError
from .models import Item, Participant, Priority

logger = logging.getLogger(__name__)

# Year is padded separately: glibc strftime leaves %Y unpadded below 1000.
TIME_FORMAT = "%m-%d %H:%M"


class Event:
    """A scheduled activity with its participants and logistics items.

    Note: This class is intentionally mutable. Scalar fields are plain
    attributes with no validation; the nested collections are private and
    changed only through the methods below.
    """

    def __init__(
        self,
        name: str,
        time: datetime | None = None,
        venue: str = "",
        priority: Priority = Priority.LOW,
        done: bool = False,
    ):
        self.name = name
        self.time = time
        self.venue = venue
        self.priority = priority
        self.done = done
        self._participants: list[Participant] = []
        self._items: list[Item] = []

    # ------------------------------------------------------------------
    # Participants
    # ------------------------------------------------------------------

    def add_participant(
        self, name: str, number: str, email: str, present: bool = False
    ) -> Participant:
        """Append a new participant to this event.

        Args:
            name: Participant name, unique within the event ignoring case.
            number: Contact number (not validated).
            email: Email address (not validated).
            present: Initial attendance flag.

        Returns:
            The newly created Participant.

        Raises:
            DuplicateEntityError: If a participant with the same name exists.
        """
        if self.get_participant(name) is not None:
            logger.debug(
                "Rejected duplicate participant",
                extra={"event": self.name, "participant": name},
            )
            raise DuplicateEntityError("participant", name)

        participant = Participant(name, number, email, present)
        self._participants.append(participant)
        logger.debug(
            "Participant added", extra={"event": self.name, "participant": name}
        )
        return participant

    def remove_participant(self, name: str) -> bool:
        """Remove the participant with the given name, ignoring case.

        Returns:
            True if a participant was removed, False if none matched.
        """
        participant = self.get_participant(name)
        if participant is None:
            return False

        self._participants.remove(participant)
        logger.debug(
            "Participant removed", extra={"event": self.name, "participant": name}
        )
        return True

    def update_participant(self, name: str, number: str, email: str) -> bool:
        """Overwrite the contact details of the named participant in place.

        Returns:
            True if the participant was found and updated, False otherwise.
        """
        participant = self.get_participant(name)
        if participant is None:
            return False

        participant.number = number
        participant.email = email
        logger.debug(
            "Participant updated", extra={"event": self.name, "participant": name}
        )
        return True

    def mark_participant_by_name(self, name: str, present: bool) -> bool:
        """Set the attendance flag of the named participant.

        Marking is idempotent: marking an already-present participant
        present again still succeeds.

        Returns:
            True if the participant was found, False otherwise.
        """
        return self._mark(self.get_participant(name), present)

    def find_participants(self, query: str) -> list[Participant]:
        """Return participants whose name contains ``query``, ignoring case.

        The query is stripped of surrounding whitespace first. The result is
        a new list in insertion order; an empty list means no match.
        """
        needle = query.strip().lower()
        return [p for p in self._participants if needle in p.name.lower()]

    def get_participant(self, name: str) -> Participant | None:
        """Return the participant with the given name ignoring case, or None."""
        for participant in self._participants:
            if participant.has_name(name):
                return participant
        return None

    def set_participants(self, participants: Iterable[Participant]) -> None:
        """Replace the participant collection.

        Raises:
            DuplicateEntityError: If two of the given participants share a
                name. The current collection is left untouched in that case.
        """
        replacement: list[Participant] = []
        for participant in participants:
            if any(p.has_name(participant.name) for p in replacement):
                raise DuplicateEntityError("participant", participant.name)
            replacement.append(participant)
        self._participants = replacement

    @property
    def participants(self) -> tuple[Participant, ...]:
        """Snapshot of the participants in insertion order."""
        return tuple(self._participants)

    @property
    def participant_count(self) -> int:
        return len(self._participants)

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_item(self, name: str, present: bool = False) -> Item:
        """Append a new item to this event.

        Raises:
            DuplicateEntityError: If an item with the same name exists.
        """
        if self.get_item(name) is not None:
            logger.debug(
                "Rejected duplicate item", extra={"event": self.name, "item": name}
            )
            raise DuplicateEntityError("item", name)

        item = Item(name, present)
        self._items.append(item)
        logger.debug("Item added", extra={"event": self.name, "item": name})
        return item

    def remove_item(self, name: str) -> bool:
        """Remove the item with the given name, ignoring case.

        Returns:
            True if an item was removed, False if none matched.
        """
        item = self.get_item(name)
        if item is None:
            return False

        self._items.remove(item)
        logger.debug("Item removed", extra={"event": self.name, "item": name})
        return True

    def mark_item_by_name(self, name: str, present: bool) -> bool:
        """Set the presence flag of the named item.

        Returns:
            True if the item was found, False otherwise.
        """
        return self._mark(self.get_item(name), present)

    def get_item(self, name: str) -> Item | None:
        """Return the item with the given name ignoring case, or None."""
        for item in self._items:
            if item.has_name(name):
                return item
        return None

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the items in insertion order."""
        return tuple(self._items)

    @property
    def item_count(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Scalar fields
    # ------------------------------------------------------------------

    def update_event(
        self, name: str, time: datetime | None, venue: str, priority: Priority
    ) -> None:
        """Overwrite name, time, venue and priority together."""
        self.name = name
        self.time = time
        self.venue = venue
        self.priority = priority
        logger.debug("Event updated", extra={"event": name})

    def mark_done(self) -> None:
        self.done = True

    def mark_undone(self) -> None:
        self.done = False

    def mark_if_done(self) -> str:
        """Return ``"Y"`` if the event is done, ``"N"`` otherwise."""
        return "Y" if self.done else "N"

    def priority_string(self) -> str:
        return str(self.priority)

    def formatted_time(self) -> str:
        """Render the event time as ``yyyy-MM-dd HH:mm`` for display.

        An event without a time renders as the empty string.
        """
        if self.time is None:
            return ""
        return f"{self.time.year:04d}-{self.time.strftime(TIME_FORMAT)}"

    def describe(self) -> str:
        return (
            f"Event name: {self.name} / Event time: {self.formatted_time()} / "
            f"Event venue: {self.venue} / Event Priority: {self.priority} / "
            f"Done: {self.mark_if_done()}"
        )

    def __str__(self) -> str:
        return self.describe()

    def __repr__(self) -> str:
        return (
            f"Event(name={self.name!r}, time={self.time!r}, venue={self.venue!r}, "
            f"priority={self.priority!r}, done={self.done!r})"
        )

    @staticmethod
    def _mark(entity: Participant | Item | None, present: bool) -> bool:
        if entity is None:
            return False
        entity.present = present
        return True
