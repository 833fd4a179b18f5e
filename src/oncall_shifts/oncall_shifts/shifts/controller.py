from __future__ import annotations

from datetime import datetime, timezone

from flask import Flask, jsonify, request

from ..common.datetime_utils import format_minutes, minute_of_day, now_utc, parse_hhmm
from ..core.constants import MINUTES_PER_HOUR
from ..core.exceptions import ConfigError
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.shift_schedule_service

    def _requested_now() -> datetime:
        """``?at=HH:MM`` pins the instant to today (UTC); default is the clock."""
        now = now_utc()
        at = request.args.get("at")
        if not at:
            return now
        hours, minutes = divmod(parse_hhmm(at), MINUTES_PER_HOUR)
        return datetime(now.year, now.month, now.day, hours, minutes, tzinfo=timezone.utc)

    def _error(message: str, status: int):
        return jsonify({"error": message}), status

    @app.errorhandler(ConfigError)
    def handle_config_error(e: ConfigError):
        return _error(str(e), 500)

    @app.route("/api/shifts", methods=["GET"], endpoint="shifts_list")
    def shifts_list():
        shifts = service.load_shifts()
        return jsonify({"shifts": [s.to_dict() for s in shifts]})

    @app.route("/api/shifts/current", methods=["GET"], endpoint="shifts_current")
    def shifts_current():
        try:
            now = _requested_now()
        except ConfigError as e:
            return _error(f"Bad 'at' parameter: {e}", 400)

        shifts, current = service.get_current_shift(now=now)
        return jsonify(
            {
                "now": format_minutes(minute_of_day(now)),
                "current_index": current,
                "current": shifts[current].to_dict() if current >= 0 else None,
                "shifts": [s.to_dict() for s in shifts],
            }
        )

    @app.route("/api/shifts/next", methods=["GET"], endpoint="shifts_next")
    def shifts_next():
        try:
            now = _requested_now()
        except ConfigError as e:
            return _error(f"Bad 'at' parameter: {e}", 400)

        _, current, upcoming = service.current_and_next(now=now)
        return jsonify(
            {
                "now": format_minutes(minute_of_day(now)),
                "current_index": current,
                "next": upcoming.shift.to_dict() if upcoming else None,
                "minutes_until_start": upcoming.minutes_until_start if upcoming else None,
            }
        )
