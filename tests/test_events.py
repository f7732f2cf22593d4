import dataclasses

import pytest

from clubsim.events import (
    ClientArriveEvent,
    ClientAwaitEvent,
    ClientLeaveEvent,
    ErrorEvent,
    Event,
    ShutdownEvent,
    StationOccupyEvent,
)


def test_fixed_event_ids():
    assert ClientArriveEvent(600, "alice").event_id == 1
    assert ClientAwaitEvent(600, "alice").event_id == 3
    assert ErrorEvent(600, "NotOpenYet").event_id == 13
    assert ShutdownEvent(600).event_id == 0


def test_leave_event_keeps_given_id():
    event = ClientLeaveEvent(700, 11, "bob")
    assert (event.time, event.event_id, event.client) == (700, 11, "bob")


def test_occupy_event_fields():
    event = StationOccupyEvent(720, 2, "carol", 3)
    assert event.event_id == 2
    assert event.client == "carol"
    assert event.station_id == 3
    assert event.time == 720


def test_error_event_message():
    assert ErrorEvent(610, "PlaceIsBusy").message == "PlaceIsBusy"


@pytest.mark.parametrize(
    "event",
    [
        ClientArriveEvent(1, "a"),
        ClientAwaitEvent(1, "a"),
        ClientLeaveEvent(1, 4, "a"),
        ErrorEvent(1, "x"),
        StationOccupyEvent(1, 2, "a", 1),
        ShutdownEvent(1),
    ],
)
def test_all_are_events(event):
    assert isinstance(event, Event)
    assert event.time == 1


def test_events_are_immutable():
    event = ClientArriveEvent(600, "alice")
    with pytest.raises(dataclasses.FrozenInstanceError):
        event.client = "bob"
    assert event.client == "alice"
    assert event.time == 600


def test_equal_events_compare_equal():
    assert ClientArriveEvent(600, "alice") == ClientArriveEvent(600, "alice")
    assert ClientArriveEvent(600, "alice") != ClientAwaitEvent(600, "alice")