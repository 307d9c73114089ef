"""
Request payload cleanup and validation error responses for the API
"""
from datetime import datetime
from typing import Dict, Any, List

from pydantic import ValidationError


def sanitize_json_request(data: Dict[str, Any]) -> Dict[str, Any]:
    """Trim text fields and normalize attendee emails"""
    sanitized = dict(data)

    if isinstance(sanitized.get('message'), str):
        sanitized['message'] = sanitized['message'].strip()

    if isinstance(sanitized.get('attendees'), list):
        attendees = []
        for attendee in sanitized['attendees']:
            if isinstance(attendee, dict) and isinstance(attendee.get('email'), str):
                attendee = {**attendee, 'email': attendee['email'].strip().lower()}
            attendees.append(attendee)
        sanitized['attendees'] = attendees

    return sanitized


def format_validation_errors(error: ValidationError, prefix: str = '') -> List[str]:
    """One message per failing field, e.g. 'attendees.0.busy_intervals.1: ...'"""
    messages = []
    for item in error.errors():
        location = '.'.join(str(part) for part in item['loc'])
        if prefix:
            location = f"{prefix}.{location}" if location else prefix
        messages.append(f"{location}: {item['msg']}" if location else item['msg'])
    return messages


def create_error_response(errors: List[str]) -> Dict[str, Any]:
    """Create standardized error response"""
    return {
        "error": "Validation failed",
        "details": errors,
        "timestamp": datetime.now().isoformat(),
    }
