"""
Pytest configuration and fixtures
"""
from datetime import datetime, timedelta

import pytest

from models import Attendee, BusyInterval, SchedulingPreferences


@pytest.fixture
def now():
    """Friday 2025-07-11 09:00; the horizon covers Mon 14th to Fri 18th"""
    return datetime(2025, 7, 11, 9, 0)


@pytest.fixture
def preferences():
    return SchedulingPreferences()


@pytest.fixture
def make_attendee():
    """Build an attendee from (start, minutes) busy blocks"""
    def _make(email, busy=()):
        return Attendee(
            email=email,
            busy_intervals=[
                BusyInterval(start=start, end=start + timedelta(minutes=minutes))
                for start, minutes in busy
            ],
        )
    return _make
