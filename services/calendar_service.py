"""
Attendee calendar checks: interval overlap and multi-attendee availability
"""
import logging
from datetime import datetime
from typing import List, Dict

from models import Attendee, AvailabilityResult, BusyInterval

logger = logging.getLogger(__name__)


def overlaps(start: datetime, end: datetime, busy: BusyInterval) -> bool:
    """Closed-interval overlap test between a proposed slot and a busy interval.

    Touching endpoints count as a collision, so a slot ending exactly when a
    busy interval begins is reported as overlapping.
    """
    return (
        busy.start <= start <= busy.end
        or busy.start <= end <= busy.end
        or start <= busy.start <= end
    )


def find_conflicts(attendee: Attendee, start: datetime, end: datetime) -> List[BusyInterval]:
    """Return the attendee's busy intervals that collide with the slot"""
    return [busy for busy in attendee.busy_intervals if overlaps(start, end, busy)]


def check_availability(start: datetime, end: datetime, attendees: List[Attendee]) -> AvailabilityResult:
    """Check that every attendee is free for the slot.

    Attendees without busy intervals never block a slot.
    """
    conflicts: Dict[str, List[BusyInterval]] = {}

    for attendee in attendees:
        attendee_conflicts = find_conflicts(attendee, start, end)
        if attendee_conflicts:
            conflicts[attendee.email] = attendee_conflicts
            logger.debug(
                "%s busy for %s - %s (%d conflicts)",
                attendee.email, start.isoformat(), end.isoformat(), len(attendee_conflicts),
            )

    return AvailabilityResult(accepted=not conflicts, conflicts=conflicts)
