import os
from typing import Dict, Any, List


def _split_list(value: str) -> List[str]:
    return [item.strip() for item in value.split(',') if item.strip()]


# Slot search configuration
SCHEDULING_CONFIG = {
    'preferred_times': _split_list(os.getenv('PREFERRED_TIMES', '09:00,10:00,11:00,14:00,15:00,16:00')),
    'days_ahead': int(os.getenv('DAYS_AHEAD', '7')),
    'working_hours_start': os.getenv('WORKING_HOURS_START', '09:00'),
    'working_hours_end': os.getenv('WORKING_HOURS_END', '17:00'),
    'default_timezone': os.getenv('DEFAULT_TIMEZONE', 'America/New_York'),
    'max_results': int(os.getenv('MAX_RESULTS', '5')),
    'weekend_days': [5, 6],  # Saturday, Sunday
}

# Request parser fallbacks
PARSER_CONFIG = {
    'default_duration_minutes': 60,
    'default_timeframe_days': 3,
}

# Meeting suggestion thresholds
SUGGESTION_CONFIG = {
    'max_standup_minutes': int(os.getenv('MAX_STANDUP_MINUTES', '30')),
    'large_meeting_attendees': int(os.getenv('LARGE_MEETING_ATTENDEES', '8')),
}

# API Configuration
API_CONFIG = {
    'host': os.getenv('API_HOST', '0.0.0.0'),
    'port': int(os.getenv('API_PORT', '5000')),
    'debug': os.getenv('API_DEBUG', 'False').lower() == 'true',
}

# Logging Configuration
LOGGING_CONFIG = {
    'level': os.getenv('LOG_LEVEL', 'INFO'),
    'format': os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
    'file_path': os.getenv('LOG_FILE_PATH', ''),
    'max_file_size': int(os.getenv('LOG_MAX_FILE_SIZE', '10485760')),  # 10MB
    'backup_count': int(os.getenv('LOG_BACKUP_COUNT', '5')),
}


def get_config() -> Dict[str, Any]:
    """Get complete configuration dictionary"""
    return {
        'scheduling': SCHEDULING_CONFIG,
        'parser': PARSER_CONFIG,
        'suggestions': SUGGESTION_CONFIG,
        'api': API_CONFIG,
        'logging': LOGGING_CONFIG,
    }


def get_default_preferences() -> Dict[str, Any]:
    """Slot search preferences built from SCHEDULING_CONFIG"""
    return {
        'preferred_times': list(SCHEDULING_CONFIG['preferred_times']),
        'days_ahead': SCHEDULING_CONFIG['days_ahead'],
        'working_hours': {
            'start': SCHEDULING_CONFIG['working_hours_start'],
            'end': SCHEDULING_CONFIG['working_hours_end'],
        },
        'time_zone': SCHEDULING_CONFIG['default_timezone'],
        'max_results': SCHEDULING_CONFIG['max_results'],
    }


def _to_hours(value: str) -> float:
    hours, minutes = value.split(':')
    return int(hours) + int(minutes) / 60


def validate_config(config: Dict[str, Any] = None) -> List[str]:
    """Validate scheduling settings and return a list of errors"""
    scheduling = (config or get_config())['scheduling']
    errors = []

    # Check timezone
    import pytz
    try:
        pytz.timezone(scheduling['default_timezone'])
    except pytz.UnknownTimeZoneError:
        errors.append(f"Invalid timezone: {scheduling['default_timezone']}")

    # Check working hours
    try:
        if _to_hours(scheduling['working_hours_start']) >= _to_hours(scheduling['working_hours_end']):
            errors.append("Invalid working hours configuration")
    except ValueError:
        errors.append("Working hours must use HH:MM format")

    if scheduling['days_ahead'] < 0:
        errors.append("days_ahead cannot be negative")

    if scheduling['max_results'] < 1:
        errors.append("max_results must be at least 1")

    if not scheduling['preferred_times']:
        errors.append("At least one preferred time is required")

    return errors
