import re
from datetime import datetime
from typing import List, Optional, Literal, Dict, Any

import pytz
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from config import get_default_preferences

MeetingType = Literal['standup', 'demo', 'interview', 'review', 'planning', 'general']
Urgency = Literal['urgent', 'high', 'normal']

_CLOCK_PATTERN = re.compile(r'^([01]?\d|2[0-3]):([0-5]\d)$')


def parse_clock(value: str) -> float:
    """Convert an HH:MM string to decimal hours"""
    match = _CLOCK_PATTERN.match(value)
    if not match:
        raise ValueError(f"'{value}' is not a valid HH:MM time")
    return int(match.group(1)) + int(match.group(2)) / 60


class BusyInterval(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime = Field(description="Busy period start")
    end: datetime = Field(description="Busy period end")
    summary: Optional[str] = Field(default=None, description="Event title, for display only")

    @model_validator(mode='after')
    def check_order(self):
        if self.start >= self.end:
            raise ValueError("busy interval start must be before end")
        return self


class Attendee(BaseModel):
    model_config = ConfigDict(frozen=True)

    email: str = Field(description="Attendee email address, used as identity key")
    name: str = Field(default='', description="Display label")
    busy_intervals: List[BusyInterval] = Field(default=[], description="Known calendar commitments")

    @model_validator(mode='before')
    @classmethod
    def derive_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get('name') and isinstance(data.get('email'), str):
            data = {**data, 'name': data['email'].split('@')[0]}
        return data


class SchedulingIntent(BaseModel):
    model_config = ConfigDict(frozen=True)

    duration_minutes: int = Field(default=60, gt=0, description="Meeting duration in minutes")
    timeframe_days: int = Field(default=3, ge=0, description="Days from now the request refers to")
    attendees: List[Attendee] = Field(default=[], description="Invited attendees")
    meeting_type: MeetingType = Field(default='general')
    urgency: Urgency = Field(default='normal')


class CandidateSlot(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: datetime
    end: datetime


class AvailabilityResult(BaseModel):
    accepted: bool = Field(description="True when every attendee is free")
    conflicts: Dict[str, List[BusyInterval]] = Field(default={}, description="Colliding intervals per attendee email")


class ScoredSlot(BaseModel):
    start: datetime = Field(description="Slot start")
    end: datetime = Field(description="Slot end")
    score: int = Field(ge=0, le=100, description="Confidence score 0-100")
    conflicts: Dict[str, List[BusyInterval]] = Field(default={}, description="Colliding intervals per attendee email")
    attendee_count: int = Field(default=0, ge=0, description="Number of attendees checked")


class WorkingHours(BaseModel):
    start: str = Field(default='09:00', description="Opening time, HH:MM")
    end: str = Field(default='17:00', description="Closing time, HH:MM")

    @field_validator('start', 'end')
    @classmethod
    def check_clock(cls, value: str) -> str:
        parse_clock(value)
        return value

    @model_validator(mode='after')
    def check_order(self):
        if self.start_hour >= self.end_hour:
            raise ValueError("working hours start must be before end")
        return self

    @property
    def start_hour(self) -> float:
        return parse_clock(self.start)

    @property
    def end_hour(self) -> float:
        return parse_clock(self.end)


class SchedulingPreferences(BaseModel):
    preferred_times: List[str] = Field(default=['09:00', '10:00', '11:00', '14:00', '15:00', '16:00'])
    days_ahead: int = Field(default=7, ge=0, description="Generation horizon in days")
    working_hours: WorkingHours = Field(default_factory=WorkingHours)
    time_zone: str = Field(default='America/New_York', description="Reference time zone")
    max_results: int = Field(default=5, ge=1, description="Number of ranked slots returned")

    @field_validator('preferred_times')
    @classmethod
    def check_preferred_times(cls, value: List[str]) -> List[str]:
        for item in value:
            parse_clock(item)
        return value

    @field_validator('time_zone')
    @classmethod
    def check_time_zone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"unknown time zone: {value}")
        return value

    @classmethod
    def from_config(cls, overrides: Dict[str, Any] = None) -> 'SchedulingPreferences':
        """Build preferences from config defaults, applying caller overrides"""
        data = get_default_preferences()
        data.update(overrides or {})
        return cls(**data)


class SlotSearchRequest(BaseModel):
    message: Optional[str] = Field(default=None, description="Free-form scheduling request")
    duration_minutes: Optional[int] = Field(default=None, gt=0, description="Overrides the parsed duration")
    attendees: List[Attendee] = Field(default=[], description="Attendees with their calendar snapshots")
    preferences: Dict[str, Any] = Field(default={}, description="SchedulingPreferences overrides")
    now: Optional[datetime] = Field(default=None, description="Reference time; defaults to the current time")


class MeetingSuggestion(BaseModel):
    type: Literal['time', 'duration', 'attendees']
    message: str
    action: str


class FormattedSlot(BaseModel):
    date: str = Field(description="e.g. 'Tuesday, October 20th'")
    time: str = Field(description="e.g. '10:00 AM - 10:30 AM'")
    duration: int = Field(description="Duration in minutes")
    confidence: int = Field(description="Confidence score 0-100")
