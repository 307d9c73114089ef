"""
Candidate slot generation over the scheduling horizon
"""
from datetime import datetime, timedelta, time
from typing import Iterator

from config import SCHEDULING_CONFIG
from models import CandidateSlot, SchedulingPreferences


def _decimal_hours(dt: datetime) -> float:
    return dt.hour + dt.minute / 60


def is_within_working_hours(start: datetime, end: datetime, preferences: SchedulingPreferences) -> bool:
    """Check that both ends of a slot fall inside working hours on the same day"""
    if end.date() != start.date():
        return False

    working_hours = preferences.working_hours
    return (
        working_hours.start_hour <= _decimal_hours(start) <= working_hours.end_hour
        and working_hours.start_hour <= _decimal_hours(end) <= working_hours.end_hour
    )


def generate_candidate_slots(
    duration_minutes: int,
    preferences: SchedulingPreferences,
    now: datetime,
) -> Iterator[CandidateSlot]:
    """Yield candidate slots day by day, then in preferred-time order.

    Day 0 (today) is never used and weekend days are skipped.
    """
    working_hours = preferences.working_hours
    if duration_minutes > (working_hours.end_hour - working_hours.start_hour) * 60:
        return

    duration = timedelta(minutes=duration_minutes)
    anchors = [time(*map(int, preferred.split(':'))) for preferred in preferences.preferred_times]

    for day in range(1, preferences.days_ahead + 1):
        current_date = (now + timedelta(days=day)).date()

        if current_date.weekday() in SCHEDULING_CONFIG['weekend_days']:
            continue

        for anchor in anchors:
            slot_start = datetime.combine(current_date, anchor)
            slot_end = slot_start + duration

            if is_within_working_hours(slot_start, slot_end, preferences):
                yield CandidateSlot(start=slot_start, end=slot_end)
