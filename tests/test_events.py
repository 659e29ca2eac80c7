"""Tests for gameplay events."""

from pondfrog.events import Event, EventKind
from pondfrog.geometry import Vector2


def test_event_kinds_have_wire_names():
    assert EventKind.CATCH.value == "catch"
    assert EventKind.MISS.value == "miss"


def test_event_as_dict():
    event = Event(EventKind.MISS, frame=12, fly_id=3, position=Vector2(1.5, 2.0))
    assert event.as_dict() == {
        "kind": "miss",
        "frame": 12,
        "fly_id": 3,
        "position": [1.5, 2.0],
    }


def test_events_compare_by_value():
    a = Event(EventKind.CATCH, 1, 0, Vector2(0.0, 0.0))
    b = Event(EventKind.CATCH, 1, 0, Vector2(0.0, 0.0))
    assert a == b
    assert hash(a) == hash(b)
