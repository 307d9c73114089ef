"""
Slot search pipeline: generate candidates, drop conflicts, score and rank
"""
import logging
from datetime import datetime
from typing import List, Optional, Union

import pytz

from models import Attendee, BusyInterval, SchedulingIntent, SchedulingPreferences, ScoredSlot
from services.calendar_service import check_availability
from services.slot_generator import generate_candidate_slots
from services.slot_scorer import calculate_confidence_score, rank_slots

logger = logging.getLogger(__name__)


def current_local_time(time_zone: str) -> datetime:
    """Current wall-clock time in the reference zone, as a naive datetime"""
    return datetime.now(pytz.timezone(time_zone)).replace(tzinfo=None)


def to_reference_frame(dt: datetime, time_zone: str) -> datetime:
    """Express an aware datetime as naive wall-clock time in the reference zone"""
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(pytz.timezone(time_zone)).replace(tzinfo=None)


class ScheduleCoordinatorAgent:
    """Runs the slot search for one request over a calendar snapshot"""

    def __init__(self, preferences: Optional[SchedulingPreferences] = None):
        self.preferences = preferences or SchedulingPreferences.from_config()

    def _normalize_busy_interval(self, busy: BusyInterval) -> BusyInterval:
        time_zone = self.preferences.time_zone
        start = to_reference_frame(busy.start, time_zone)
        end = to_reference_frame(busy.end, time_zone)
        # A DST fall-back can fold the wall-clock end onto or before the start;
        # keep the real elapsed length instead
        if end <= start:
            end = start + (busy.end - busy.start)
        return BusyInterval(start=start, end=end, summary=busy.summary)

    def _normalize_attendees(self, attendees: List[Attendee]) -> List[Attendee]:
        normalized = []
        for attendee in attendees:
            busy_intervals = [self._normalize_busy_interval(busy) for busy in attendee.busy_intervals]
            normalized.append(attendee.model_copy(update={'busy_intervals': busy_intervals}))
        return normalized

    def find_optimal_time_slots(
        self,
        request: Union[SchedulingIntent, int],
        attendees: Optional[List[Attendee]] = None,
        now: Optional[datetime] = None,
    ) -> List[ScoredSlot]:
        """Return up to max_results conflict-free slots, best first.

        `request` is either a parsed intent or a bare duration in minutes.
        When `attendees` is omitted the intent's own attendees are checked.
        """
        if isinstance(request, SchedulingIntent):
            duration_minutes = request.duration_minutes
            if attendees is None:
                attendees = request.attendees
        else:
            # Validates the duration the same way a parsed intent would
            duration_minutes = SchedulingIntent(duration_minutes=request).duration_minutes

        attendees = self._normalize_attendees(attendees or [])

        if now is None:
            now = current_local_time(self.preferences.time_zone)
        else:
            now = to_reference_frame(now, self.preferences.time_zone)

        scored: List[ScoredSlot] = []
        generated = 0

        for candidate in generate_candidate_slots(duration_minutes, self.preferences, now):
            generated += 1
            availability = check_availability(candidate.start, candidate.end, attendees)
            if not availability.accepted:
                continue

            scored.append(ScoredSlot(
                start=candidate.start,
                end=candidate.end,
                score=calculate_confidence_score(candidate.start, now),
                conflicts=availability.conflicts,
                attendee_count=len(attendees),
            ))

        ranked = rank_slots(scored, self.preferences.max_results)

        logger.info(
            "Slot search: %d candidates, %d conflict-free, returning %d for %d attendees",
            generated, len(scored), len(ranked), len(attendees),
        )
        return ranked


def find_optimal_time_slots(
    request: Union[SchedulingIntent, int],
    attendees: Optional[List[Attendee]] = None,
    preferences: Optional[SchedulingPreferences] = None,
    now: Optional[datetime] = None,
) -> List[ScoredSlot]:
    """Convenience function for a one-off slot search"""
    return ScheduleCoordinatorAgent(preferences).find_optimal_time_slots(request, attendees, now)
