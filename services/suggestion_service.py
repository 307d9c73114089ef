"""
Meeting suggestions, request summaries and slot display formatting
"""
from typing import List

from config import PARSER_CONFIG, SUGGESTION_CONFIG
from models import FormattedSlot, MeetingSuggestion, SchedulingIntent, ScoredSlot


def generate_meeting_suggestions(intent: SchedulingIntent) -> List[MeetingSuggestion]:
    """Advice on urgency, standup length and meeting size"""
    suggestions = []

    if intent.urgency == 'urgent':
        suggestions.append(MeetingSuggestion(
            type='time',
            message='Given the urgency, I recommend scheduling this within the next 24 hours.',
            action='prioritize_immediate_slots',
        ))

    if intent.meeting_type == 'standup' and intent.duration_minutes > SUGGESTION_CONFIG['max_standup_minutes']:
        suggestions.append(MeetingSuggestion(
            type='duration',
            message='Standups are typically more effective when kept to 15-30 minutes.',
            action='suggest_shorter_duration',
        ))

    if len(intent.attendees) > SUGGESTION_CONFIG['large_meeting_attendees']:
        suggestions.append(MeetingSuggestion(
            type='attendees',
            message='Large meetings can be less productive. Consider if all attendees are necessary.',
            action='review_attendee_list',
        ))

    return suggestions


def summarize_request(intent: SchedulingIntent) -> str:
    """Plain-language acknowledgement of a parsed request"""
    response = "I understand you'd like to schedule a meeting. "

    if intent.urgency == 'urgent':
        response += "Given the urgency, I'll prioritize finding immediate availability. "

    attendee_count = len(intent.attendees)
    if attendee_count > 0:
        plural = 's' if attendee_count > 1 else ''
        response += f"I'll check availability for {attendee_count} attendee{plural}. "

    if intent.duration_minutes != PARSER_CONFIG['default_duration_minutes']:
        response += f"I've noted this should be a {intent.duration_minutes}-minute meeting. "

    response += "Let me find the best available time slots for everyone."
    return response


def _ordinal(day: int) -> str:
    if 10 <= day % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(day % 10, 'th')
    return f"{day}{suffix}"


def _clock(dt) -> str:
    hour = dt.hour % 12 or 12
    return f"{hour}:{dt.minute:02d} {'AM' if dt.hour < 12 else 'PM'}"


def format_time_slot(slot: ScoredSlot) -> FormattedSlot:
    """Human-readable date and time range for a ranked slot"""
    return FormattedSlot(
        date=f"{slot.start.strftime('%A, %B')} {_ordinal(slot.start.day)}",
        time=f"{_clock(slot.start)} - {_clock(slot.end)}",
        duration=round((slot.end - slot.start).total_seconds() / 60),
        confidence=slot.score,
    )
