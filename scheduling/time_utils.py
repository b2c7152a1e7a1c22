"""Helpers for parsing dates and formatting shift times."""

import math
import re
from datetime import date, datetime, timedelta
from typing import Optional, Union

from .errors import InvalidInputError

_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')
_MINUTE_EPSILON = 1e-6

# Matches plain "HH:MM" as well as stored display times like "08:00:00 -07:00"
_TIME_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})(?::\d{2})?(?:\s+[+-]\d{2,}:\d{2})?$')


def parse_date(value: Union[str, date]) -> date:
    """
    Parse a `YYYY-MM-DD` string into a date.

    Args:
        value: Date string, or a date which is returned unchanged

    Returns:
        The parsed date

    Raises:
        InvalidInputError: If the string is not a valid calendar date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not _DATE_PATTERN.fullmatch(value):
        raise InvalidInputError(f'invalid date {value!r}, expected YYYY-MM-DD')
    try:
        return datetime.strptime(value, '%Y-%m-%d').date()
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f'invalid date {value!r}, expected YYYY-MM-DD') from e


def parse_time(value: str) -> tuple[int, int]:
    """Split a time string into (hours, minutes)."""
    match = _TIME_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if match is None:
        raise InvalidInputError(f'invalid time {value!r}, expected HH:MM')

    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise InvalidInputError(f'invalid time {value!r}, expected HH:MM')
    return hours, minutes


def compute_end_time(start_time: str, duration_hours: float) -> str:
    """
    Add a duration to a start time and return the end time as `HH:MM`.

    The result wraps past midnight, so a 20 hour shift starting at 08:00
    ends at 04:00. Partial minutes are dropped, so 7.33 hours adds 439
    minutes.

    Args:
        start_time: Time of day as `HH:MM` (a stored display time is accepted too)
        duration_hours: Length of the shift in hours, may be fractional

    Returns:
        End time as `HH:MM`
    """
    hours, minutes = parse_time(start_time)
    start = datetime(2000, 1, 1, hours, minutes)
    if not math.isfinite(duration_hours):
        raise InvalidInputError(f'invalid duration {duration_hours!r}, expected a finite number of hours')

    # epsilon keeps 6.1 hours at 366 minutes instead of 365.99...
    end = start + timedelta(minutes=int(duration_hours * 60 + _MINUTE_EPSILON))
    return end.strftime('%H:%M')


def local_utc_offset_hours() -> int:
    """Whole hours between local time and UTC, truncated toward zero."""
    offset = datetime.now().astimezone().utcoffset()
    return int(offset.total_seconds() / 3600)


def format_display_time(time: str, utc_offset_hours: Optional[int] = None) -> str:
    """
    Turn `HH:MM` into the stored display form `HH:MM:SS -0H:00`.

    Only the magnitude of the offset is kept and the sign is always rendered
    as `-`, which is the format existing schedule output relies on.
    """
    hours, minutes = parse_time(time)
    if utc_offset_hours is None:
        utc_offset_hours = local_utc_offset_hours()
    return f'{hours:02d}:{minutes:02d}:00 -{abs(utc_offset_hours):02d}:00'


def format_duration(duration_hours: float) -> str:
    """Render 8.0 as '8' and 6.5 as '6.5'."""
    if float(duration_hours).is_integer():
        return str(int(duration_hours))
    return str(float(duration_hours))
