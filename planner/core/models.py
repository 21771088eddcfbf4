"""Leaf domain models for the Planner event core.

Participants and items have no lifecycle of their own: they are created
and destroyed only through the Event that owns them. Identity is the
name, compared case-insensitively by the owning Event.
"""

from enum import Enum
from functools import total_ordering


@total_ordering
class Priority(Enum):
    """Ordered classification of event importance."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3

    def __str__(self) -> str:
        return self.name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Priority):
            return NotImplemented
        return self.value < other.value

    @classmethod
    def from_string(cls, value: str) -> "Priority":
        """Parse a priority name such as ``"high"`` or ``" Medium "``.

        Raises:
            ValueError: If the text does not name a priority level.
        """
        key = value.strip().upper()
        try:
            return cls[key]
        except KeyError:
            raise ValueError(
                f"Unknown priority {value!r}, expected one of: "
                f"{', '.join(p.name.lower() for p in cls)}"
            ) from None


def names_match(left: str, right: str) -> bool:
    """Case-insensitive name equality used for participant and item identity."""
    return left.lower() == right.lower()


class Participant:
    """A person attending an event.

    The name is the identity key within the owning event and cannot be
    reassigned. Contact details and presence are free-form and mutable.
    """

    def __init__(self, name: str, number: str, email: str, present: bool = False):
        self._name = name
        self.number = number
        self.email = email
        self.present = present

    @property
    def name(self) -> str:
        return self._name

    def has_name(self, name: str) -> bool:
        return names_match(self._name, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Participant):
            return NotImplemented
        return (self._name, self.number, self.email, self.present) == (
            other._name,
            other.number,
            other.email,
            other.present,
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"Participant(name={self._name!r}, number={self.number!r}, "
            f"email={self.email!r}, present={self.present!r})"
        )


class Item:
    """A logistics item tracked for an event.

    Only the presence flag is mutable; the name is fixed at creation.
    """

    def __init__(self, name: str, present: bool = False):
        self._name = name
        self.present = present

    @property
    def name(self) -> str:
        return self._name

    def has_name(self, name: str) -> bool:
        return names_match(self._name, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return (self._name, self.present) == (other._name, other.present)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Item(name={self._name!r}, present={self.present!r})"
