import logging
from datetime import datetime
from typing import List

from flask import Flask, request, jsonify
from pydantic import ValidationError

from agents.request_parser import parse_scheduling_request
from agents.schedule_coordinator import ScheduleCoordinatorAgent, to_reference_frame
from config import API_CONFIG, PARSER_CONFIG, validate_config
from models import Attendee, SchedulingIntent, SchedulingPreferences, SlotSearchRequest
from services.suggestion_service import format_time_slot, generate_meeting_suggestions, summarize_request
from utils.json_validator import create_error_response, format_validation_errors, sanitize_json_request
from utils.logger import setup_logging

logger = logging.getLogger(__name__)

app = Flask(__name__)


def _merge_attendees(parsed: List[Attendee], supplied: List[Attendee]) -> List[Attendee]:
    """Parsed attendees pick up supplied calendars by email; extra supplied attendees are appended"""
    calendars = {attendee.email: attendee for attendee in supplied}
    merged = [calendars.pop(attendee.email.lower(), attendee) for attendee in parsed]
    return merged + list(calendars.values())


def log_config_errors() -> List[str]:
    """Validate the active configuration and log each problem found"""
    errors = validate_config()
    for error in errors:
        logger.error(f"Configuration error: {error}")
    return errors


@app.route('/health', methods=['GET'])
def health():
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route('/parse', methods=['POST'])
def parse():
    """Parse a free-form request into an intent with suggestions"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    message = sanitize_json_request(data).get('message')
    if not isinstance(message, str):
        return jsonify(create_error_response(["message: Input should be a valid string"])), 400

    intent = parse_scheduling_request(message)
    logger.info(f"Parsed request: type={intent.meeting_type}, attendees={len(intent.attendees)}")

    return jsonify({
        "intent": intent.model_dump(mode='json'),
        "suggestions": [suggestion.model_dump() for suggestion in generate_meeting_suggestions(intent)],
        "summary": summarize_request(intent),
    })


@app.route('/slots', methods=['POST'])
def slots():
    """Find ranked conflict-free slots for a request and calendar snapshot"""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "No JSON data provided"}), 400

    try:
        body = SlotSearchRequest(**sanitize_json_request(data))
    except ValidationError as e:
        return jsonify(create_error_response(format_validation_errors(e))), 400

    try:
        preferences = SchedulingPreferences.from_config(body.preferences)
    except ValidationError as e:
        return jsonify(create_error_response(format_validation_errors(e, prefix='preferences'))), 400

    try:
        if body.message is not None:
            today = to_reference_frame(body.now, preferences.time_zone).date() if body.now else None
            parsed = parse_scheduling_request(body.message, today=today)
            intent = parsed.model_copy(update={
                'attendees': _merge_attendees(parsed.attendees, body.attendees),
                'duration_minutes': body.duration_minutes or parsed.duration_minutes,
            })
        else:
            intent = SchedulingIntent(
                duration_minutes=body.duration_minutes or PARSER_CONFIG['default_duration_minutes'],
                attendees=body.attendees,
            )

        ranked = ScheduleCoordinatorAgent(preferences).find_optimal_time_slots(intent, now=body.now)

        return jsonify({
            "slots": [
                {**slot.model_dump(mode='json'), "display": format_time_slot(slot).model_dump()}
                for slot in ranked
            ],
            "count": len(ranked),
            "intent": intent.model_dump(mode='json', exclude={'attendees'}),
        })

    except Exception as e:
        logger.exception(f"Error processing slot search: {e}")
        return jsonify({
            "error": str(e),
            "error_type": type(e).__name__,
        }), 500


if __name__ == '__main__':
    setup_logging()
    log_config_errors()
    app.run(host=API_CONFIG['host'], port=API_CONFIG['port'], debug=API_CONFIG['debug'])
