"""Event Date/Time Enforcement — parses and validates event scheduling fields.

Invariants:
    - check_* functions are PURE: return error dict on violation, None on success
    - Parsed dates are timezone-aware UTC datetimes; naive input is read as UTC
    - End date may equal start date but never precede it
    - Times are "HH:MM" 24h strings; a range must end after it starts
"""

import re
from datetime import date, datetime, time, timezone

from app.core.domain_types import DateType, TimeMode

_TIME_PATTERN = re.compile(r"^([01]\d|2[0-3]):[0-5]\d$")


def parse_date(value: object) -> datetime | None:
    """ISO string / datetime / date -> aware UTC datetime, else None."""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str) and value.strip():
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_utc_midnight(value: datetime) -> datetime:
    return value.astimezone(timezone.utc).replace(
        hour=0, minute=0, second=0, microsecond=0,
    )


def derive_date_type(start: datetime, end: datetime | None) -> DateType:
    if end is None or to_utc_midnight(end) == to_utc_midnight(start):
        return DateType.SINGLE
    return DateType.DURATION


# --- Checks ------------------------------------------------------------------

def check_date_range(start: datetime | None, end: datetime | None) -> dict | None:
    """Start is mandatory; end, when present, must not precede start."""
    if start is None:
        return _error(
            "START_DATE_REQUIRED", "Start date is required for event", "startDate",
        )
    if end is not None and end < start:
        return _error(
            "END_BEFORE_START",
            "Finish date can not be earlier than start date",
            "endDate",
        )
    return None


def check_time_window(
    mode: TimeMode, start_time: str | None, end_time: str | None,
) -> dict | None:
    """Validate start/end time strings against the chosen time mode."""
    if mode == TimeMode.NONE:
        return None
    if not start_time:
        return _error(
            "START_TIME_REQUIRED", "Start time is required for this time mode", "startTime",
        )
    if not _TIME_PATTERN.match(start_time):
        return _error("INVALID_TIME", "Start time must be HH:MM", "startTime")
    if mode == TimeMode.START:
        return None
    if not end_time:
        return _error(
            "END_TIME_REQUIRED", "End time is required for a time range", "endTime",
        )
    if not _TIME_PATTERN.match(end_time):
        return _error("INVALID_TIME", "End time must be HH:MM", "endTime")
    # zero-padded HH:MM compares correctly as text
    if end_time <= start_time:
        return _error(
            "END_TIME_BEFORE_START",
            "End time must be later than start time",
            "endTime",
        )
    return None


def _error(code: str, message: str, field: str) -> dict:
    return {"error_code": code, "message": message, "field": field}
