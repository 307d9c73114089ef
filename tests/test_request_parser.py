"""
Tests for rule-based request parsing
"""
from datetime import date

import pytest

from agents.request_parser import (
    RequestParser,
    days_until_weekday,
    first_match,
    parse_scheduling_request,
)

MONDAY = date(2025, 7, 14)
FRIDAY = date(2025, 7, 11)


class TestDuration:

    @pytest.mark.parametrize("text, expected", [
        ("Let's meet", 60),
        ("a 2 hour sync", 120),
        ("quick 15 minute check-in", 15),
        ("need 45 mins with the team", 45),
        ("grab half an hour", 60),
        ("a half hour chat", 30),
        ("a quarter minute", 15),
    ])
    def test_extract_duration(self, text, expected):
        assert parse_scheduling_request(text).duration_minutes == expected

    def test_hours_checked_before_minutes(self):
        assert parse_scheduling_request("1 hour and 30 minutes").duration_minutes == 60

    def test_zero_duration_falls_back_to_default(self):
        assert parse_scheduling_request("0 minutes please").duration_minutes == 60

    def test_very_long_number_reads_trailing_digits(self):
        intent = parse_scheduling_request("1" * 5000 + " hours")
        assert intent.duration_minutes == 111111 * 60


class TestTimeframe:

    def test_defaults_to_three_days(self):
        assert parse_scheduling_request("schedule something").timeframe_days == 3

    @pytest.mark.parametrize("text, expected", [
        ("meet tomorrow", 1),
        ("can we talk TODAY", 0),
        ("sometime next week", 7),
        ("sometime this week", 3),
    ])
    def test_relative_phrases(self, text, expected):
        assert parse_scheduling_request(text, today=MONDAY).timeframe_days == expected

    def test_weekday_resolves_to_next_occurrence(self):
        assert parse_scheduling_request("thursday works", today=MONDAY).timeframe_days == 3
        assert parse_scheduling_request("monday works", today=FRIDAY).timeframe_days == 3

    def test_same_weekday_means_next_week(self):
        assert parse_scheduling_request("see you monday", today=MONDAY).timeframe_days == 7

    def test_table_order_wins_over_weekday(self):
        assert parse_scheduling_request("tomorrow or friday", today=MONDAY).timeframe_days == 1

    def test_days_until_weekday(self):
        assert days_until_weekday(4, MONDAY) == 4
        assert days_until_weekday(0, MONDAY) == 7


class TestAttendees:

    def test_extracts_emails_in_order(self):
        intent = parse_scheduling_request("invite john@example.com and jane@example.com")
        assert [a.email for a in intent.attendees] == ["john@example.com", "jane@example.com"]
        assert [a.name for a in intent.attendees] == ["john", "jane"]
        assert all(a.busy_intervals == [] for a in intent.attendees)

    def test_no_emails_is_valid(self):
        assert parse_scheduling_request("just me").attendees == []

    def test_rejects_short_tld(self):
        assert parse_scheduling_request("ping bob@example.c").attendees == []


class TestClassification:

    def test_earlier_meeting_type_bucket_wins(self):
        assert parse_scheduling_request("daily standup demo").meeting_type == "standup"

    @pytest.mark.parametrize("text, expected", [
        ("product showcase", "demo"),
        ("candidate screening", "interview"),
        ("sprint retrospective", "review"),
        ("roadmap session", "planning"),
        ("quick call", "general"),
        ("catch up", "general"),
    ])
    def test_meeting_type(self, text, expected):
        assert parse_scheduling_request(text).meeting_type == expected

    @pytest.mark.parametrize("text, expected", [
        ("this is important but also URGENT", "urgent"),
        ("need this soon", "high"),
        ("whenever", "normal"),
    ])
    def test_urgency(self, text, expected):
        assert parse_scheduling_request(text).urgency == expected


class TestParser:

    def test_empty_text_uses_all_defaults(self):
        intent = RequestParser(today=MONDAY).parse("")
        assert intent.duration_minutes == 60
        assert intent.timeframe_days == 3
        assert intent.attendees == []
        assert intent.meeting_type == "general"
        assert intent.urgency == "normal"

    def test_first_match_returns_default_when_nothing_matches(self):
        rules = [(lambda text: False, lambda text: "never")]
        assert first_match(rules, "anything", "fallback") == "fallback"
