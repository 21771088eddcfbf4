"""Tests for EventList.

Event names are not unique at this level and removal is case-sensitive,
unlike participant and item lookups inside an event.
"""

from datetime import datetime

import pytest

from planner.core.event import Event
from planner.core.event_list import EventList
from planner.core.models import Priority
from planner.tests.fakes import FakeEventDisplayPort


@pytest.fixture
def event_list() -> EventList:
    """EventList with two named events."""
    events = EventList()
    events.add_event("Meeting")
    events.add_event("Workshop")
    return events


def test_new_list_is_empty() -> None:
    events = EventList()
    assert events.size == 0
    assert events.get_list() == []


def test_seeded_list_copies_input() -> None:
    seed = [Event("A"), Event("B")]
    events = EventList(seed)
    seed.append(Event("C"))
    assert events.size == 2


def test_add_event_appends_named_event(event_list: EventList) -> None:
    event = event_list.add_event("Retro")

    assert event_list.size == 3
    assert event.name == "Retro"
    assert event.time is None
    assert event.done is False
    assert event_list.get_list()[-1] is event


def test_add_event_allows_duplicate_names(event_list: EventList) -> None:
    """Two events may share a name; both stay retrievable."""
    first = event_list.add_event("Party")
    second = event_list.add_event("Party")

    assert first is not second
    assert event_list.size == 4
    assert [e for e in event_list.get_list() if e.name == "Party"] == [first, second]


def test_insert_event(event_list: EventList) -> None:
    event = Event("Gala", datetime(2024, 6, 1, 19, 0), "Hall", Priority.HIGH, True)
    event_list.insert_event(event)
    assert event_list.get_event("Gala") is event


def test_remove_event_exact_name(event_list: EventList) -> None:
    assert event_list.remove_event("Meeting") is True
    assert [e.name for e in event_list] == ["Workshop"]


def test_remove_event_is_case_sensitive(event_list: EventList) -> None:
    """A name differing in case does not match."""
    assert event_list.remove_event("meeting") is False
    assert event_list.size == 2


def test_remove_missing_event_returns_false(event_list: EventList) -> None:
    assert event_list.remove_event("Retro") is False


def test_remove_event_removes_first_match_only(event_list: EventList) -> None:
    first = event_list.add_event("Party")
    second = event_list.add_event("Party")

    assert event_list.remove_event("Party") is True
    remaining = event_list.get_list()
    assert first not in remaining
    assert second in remaining


def test_get_event(event_list: EventList) -> None:
    assert event_list.get_event("Workshop").name == "Workshop"
    assert event_list.get_event("workshop") is None


def test_get_list_returns_snapshot(event_list: EventList) -> None:
    """Mutating the returned list does not change the event list."""
    snapshot = event_list.get_list()
    snapshot.clear()
    assert event_list.size == 2


def test_get_list_shares_event_objects(event_list: EventList) -> None:
    """Events in the snapshot are the owned events, not copies."""
    event_list.get_list()[0].add_item("Projector", False)
    assert event_list.get_event("Meeting").item_count == 1


def test_len_and_iteration(event_list: EventList) -> None:
    assert len(event_list) == 2
    assert [e.name for e in event_list] == ["Meeting", "Workshop"]


def test_show_sends_snapshot_to_display(event_list: EventList) -> None:
    display = FakeEventDisplayPort()
    event_list.show(display)

    assert display.get_last_shown_names() == ["Meeting", "Workshop"]
    assert event_list.size == 2


def test_get_list_has_no_display_side_effect(event_list: EventList, capsys) -> None:
    event_list.get_list()
    assert capsys.readouterr().out == ""
