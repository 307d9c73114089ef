"""
Rule-based parser turning free-form scheduling requests into a SchedulingIntent
"""
import logging
import re
from datetime import date
from typing import Callable, List, Optional, Tuple, TypeVar

from config import PARSER_CONFIG
from models import Attendee, SchedulingIntent

logger = logging.getLogger(__name__)

T = TypeVar('T')

# (predicate, result) rules; the first predicate that holds wins
Rule = Tuple[Callable[[str], bool], Callable[[str], T]]

EMAIL_PATTERN = re.compile(r'\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b')

HOUR_PATTERN = re.compile(r'(\d{1,6})\s*(?:hour|hr|h)s?', re.IGNORECASE)
MINUTE_PATTERN = re.compile(r'(\d{1,6})\s*(?:minute|min|m)s?', re.IGNORECASE)
HALF_HOUR_PATTERN = re.compile(r'(?:half|30)\s*(?:hour|hr)', re.IGNORECASE)
QUARTER_PATTERN = re.compile(r'(?:quarter|15)\s*(?:minute|min)', re.IGNORECASE)

WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday']

MEETING_TYPE_KEYWORDS = [
    ('standup', ['standup', 'daily', 'scrum']),
    ('demo', ['demo', 'presentation', 'showcase']),
    ('interview', ['interview', 'screening', 'hiring']),
    ('review', ['review', 'feedback', 'retrospective']),
    ('planning', ['planning', 'strategy', 'roadmap']),
    ('general', ['meeting', 'call', 'discussion']),
]

URGENCY_KEYWORDS = [
    ('urgent', ['urgent', 'asap', 'immediately', 'emergency', 'critical']),
    ('high', ['important', 'priority', 'soon', 'quickly']),
]


def first_match(rules: List[Rule], text: str, default: T) -> T:
    """Evaluate rules in order and return the result of the first hit"""
    for predicate, result in rules:
        if predicate(text):
            return result(text)
    return default


def _contains(phrase: str) -> Callable[[str], bool]:
    return lambda text: phrase in text.lower()


def _contains_any(keywords: List[str]) -> Callable[[str], bool]:
    return lambda text: any(keyword in text.lower() for keyword in keywords)


def _matches(pattern: re.Pattern) -> Callable[[str], bool]:
    return lambda text: pattern.search(text) is not None


def _constant(value: T) -> Callable[[str], T]:
    return lambda text: value


def days_until_weekday(target_weekday: int, today: date) -> int:
    """Days until the next occurrence of target_weekday (Monday=0); never 0"""
    days_until = (target_weekday - today.weekday() + 7) % 7
    return 7 if days_until == 0 else days_until


class RequestParser:
    """Extracts duration, timeframe, attendees, meeting type and urgency"""

    def __init__(self, today: Optional[date] = None):
        self.today = today

        self.duration_rules: List[Rule] = [
            (_matches(HOUR_PATTERN), lambda text: int(HOUR_PATTERN.search(text).group(1)) * 60),
            (_matches(MINUTE_PATTERN), lambda text: int(MINUTE_PATTERN.search(text).group(1))),
            (_matches(HALF_HOUR_PATTERN), _constant(30)),
            (_matches(QUARTER_PATTERN), _constant(15)),
        ]

        self.meeting_type_rules: List[Rule] = [
            (_contains_any(keywords), _constant(meeting_type))
            for meeting_type, keywords in MEETING_TYPE_KEYWORDS
        ]

        self.urgency_rules: List[Rule] = [
            (_contains_any(keywords), _constant(urgency))
            for urgency, keywords in URGENCY_KEYWORDS
        ]

    def _timeframe_rules(self) -> List[Rule]:
        today = self.today or date.today()
        rules: List[Rule] = [
            (_contains('today'), _constant(0)),
            (_contains('tomorrow'), _constant(1)),
            (_contains('next week'), _constant(7)),
            (_contains('this week'), _constant(3)),
        ]
        for weekday, name in enumerate(WEEKDAYS):
            rules.append((_contains(name), _constant(days_until_weekday(weekday, today))))
        return rules

    def parse(self, text: str) -> SchedulingIntent:
        """Parse a free-form request; sparse input falls back to defaults"""
        text = text or ''

        intent = SchedulingIntent(
            duration_minutes=self.extract_duration(text),
            timeframe_days=self.extract_timeframe(text),
            attendees=self.extract_attendees(text),
            meeting_type=self.extract_meeting_type(text),
            urgency=self.extract_urgency(text),
        )

        logger.debug(
            "Parsed request: %d min, %d days, %d attendees, type=%s, urgency=%s",
            intent.duration_minutes, intent.timeframe_days, len(intent.attendees),
            intent.meeting_type, intent.urgency,
        )
        return intent

    def extract_duration(self, text: str) -> int:
        duration = first_match(self.duration_rules, text, PARSER_CONFIG['default_duration_minutes'])
        # "0 minutes" style input still has to yield a usable duration
        return duration if duration > 0 else PARSER_CONFIG['default_duration_minutes']

    def extract_timeframe(self, text: str) -> int:
        return first_match(self._timeframe_rules(), text, PARSER_CONFIG['default_timeframe_days'])

    def extract_attendees(self, text: str) -> List[Attendee]:
        return [Attendee(email=email) for email in EMAIL_PATTERN.findall(text)]

    def extract_meeting_type(self, text: str) -> str:
        return first_match(self.meeting_type_rules, text, 'general')

    def extract_urgency(self, text: str) -> str:
        return first_match(self.urgency_rules, text, 'normal')


def parse_scheduling_request(text: str, today: Optional[date] = None) -> SchedulingIntent:
    """Convenience function for request parsing"""
    return RequestParser(today=today).parse(text)
