"""
Tests for overlap detection and multi-attendee availability
"""
from datetime import datetime

from models import Attendee, BusyInterval
from services.calendar_service import check_availability, find_conflicts, overlaps


def at(hour, minute=0):
    return datetime(2025, 7, 15, hour, minute)


def busy(start, end):
    return BusyInterval(start=start, end=end)


class TestOverlaps:

    def test_disjoint_intervals(self):
        assert not overlaps(at(10), at(11), busy(at(12), at(13)))
        assert not overlaps(at(14), at(15), busy(at(12), at(13)))

    def test_slot_inside_busy(self):
        assert overlaps(at(10, 15), at(10, 45), busy(at(10), at(11)))

    def test_busy_inside_slot(self):
        assert overlaps(at(10), at(12), busy(at(10, 30), at(11)))

    def test_partial_overlap(self):
        assert overlaps(at(10), at(11), busy(at(10, 30), at(11, 30)))
        assert overlaps(at(10, 30), at(11, 30), busy(at(10), at(11)))

    def test_touching_endpoints_collide(self):
        assert overlaps(at(9), at(10), busy(at(10), at(11)))
        assert overlaps(at(11), at(12), busy(at(10), at(11)))

    def test_identical_intervals(self):
        assert overlaps(at(10), at(11), busy(at(10), at(11)))


class TestFindConflicts:

    def test_returns_colliding_intervals_in_order(self):
        first = busy(at(9), at(10))
        second = busy(at(10, 30), at(11))
        unrelated = busy(at(15), at(16))
        attendee = Attendee(email="a@example.com", busy_intervals=[first, unrelated, second])

        assert find_conflicts(attendee, at(9, 30), at(10, 45)) == [first, second]

    def test_empty_calendar_has_no_conflicts(self):
        assert find_conflicts(Attendee(email="a@example.com"), at(10), at(11)) == []


class TestCheckAvailability:

    def test_requires_every_attendee_free(self):
        free = Attendee(email="free@example.com", busy_intervals=[busy(at(14), at(15))])
        blocking = busy(at(10), at(10, 30))
        taken = Attendee(email="busy@example.com", busy_intervals=[blocking])

        result = check_availability(at(10), at(11), [free, taken])

        assert result.accepted is False
        assert result.conflicts == {"busy@example.com": [blocking]}

    def test_all_free(self):
        attendees = [
            Attendee(email="a@example.com", busy_intervals=[busy(at(8), at(9, 30))]),
            Attendee(email="b@example.com"),
        ]
        result = check_availability(at(10), at(11), attendees)

        assert result.accepted is True
        assert result.conflicts == {}

    def test_no_attendees_is_accepted(self):
        assert check_availability(at(10), at(11), []).accepted is True
