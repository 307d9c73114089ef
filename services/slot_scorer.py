"""
Confidence scoring and ranking of conflict-free slots
"""
from datetime import datetime, timedelta
from typing import List

from models import ScoredSlot

BASE_SCORE = 100
DEFAULT_LIMIT = 5


def calculate_confidence_score(start: datetime, now: datetime) -> int:
    """Score a slot start from time of day, weekday and distance from now"""
    score = BASE_SCORE

    # Prefer mid-morning and early afternoon
    hour = start.hour
    if 10 <= hour <= 11:
        score += 20
    elif 14 <= hour <= 15:
        score += 15
    elif 9 <= hour <= 16:
        score += 10
    else:
        score -= 20

    # Prefer Tuesday through Thursday
    weekday = start.weekday()
    if 1 <= weekday <= 3:
        score += 15
    elif weekday in (0, 4):
        score += 5

    # Floor division truncates toward the earlier day, not calendar-day difference
    days_from_now = (start - now) // timedelta(days=1)
    if 2 <= days_from_now <= 5:
        score += 10
    elif days_from_now == 1:
        score += 5

    return max(0, min(100, score))


def rank_slots(scored: List[ScoredSlot], limit: int = DEFAULT_LIMIT) -> List[ScoredSlot]:
    """Highest score first; equal scores keep their generation order"""
    return sorted(scored, key=lambda slot: slot.score, reverse=True)[:limit]
