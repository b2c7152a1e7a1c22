"""Functions for rendering a schedule as text."""

from datetime import date, timedelta
from typing import Optional, Union

from .errors import InvalidInputError
from .models import Event, Shift
from .time_utils import format_duration, parse_date

NO_EVENTS_MESSAGE = 'No events in schedule.'
DELIMITER = ' | '


def format_shift_line(event: Event, shift: Shift) -> str:
    """Format one shift as a pipe-delimited schedule line."""
    return DELIMITER.join([
        f'Event {event.id}',
        f'Date: {shift.date.isoformat()}',
        f'Shift Time: {shift.start_time} - {shift.end_time}',
        f'{format_duration(shift.duration)} hrs',
        f'Employee {shift.employee_id}',
    ])


def find_shift_on_date(shifts: list[Shift], day: date) -> Optional[Shift]:
    for shift in shifts:
        if shift.date == day:
            return shift
    return None


def render_range(
    events: list[Event],
    ledger: dict[int, list[Shift]],
    start_date: Union[str, date],
    num_days: int,
) -> str:
    """
    Render every shift on `num_days` consecutive days starting at `start_date`.

    Days without shifts are skipped. When the whole window is empty only
    the no-events message is returned.

    Args:
        events: Events in store order, which sets the line order within a day
        ledger: Shift lists keyed by event id
        start_date: First day of the window (inclusive)
        num_days: Number of days in the window

    Returns:
        The rendered schedule text
    """
    first_day = parse_date(start_date)
    if num_days < 0:
        raise InvalidInputError('num_days cannot be negative')

    lines = [
        f'Printing the schedule for {first_day.isoformat()} to '
        f'{(first_day + timedelta(days=num_days)).isoformat()}'
    ]
    found_any = False

    for offset in range(num_days):
        day = first_day + timedelta(days=offset)
        day_lines = []

        for event in events:
            shift = find_shift_on_date(ledger.get(event.id, []), day)
            if shift is not None:
                day_lines.append(format_shift_line(event, shift))

        if not day_lines:
            continue

        found_any = True
        lines.append(f'{"=" * 10} {day.isoformat()} {"=" * 10}')
        lines.extend(day_lines)
        lines.append('')

    if not found_any:
        return NO_EVENTS_MESSAGE

    return '\n'.join(lines)


def render_full(events: list[Event], ledger: dict[int, list[Shift]]) -> str:
    """
    Render every event's shifts in ledger order.

    Each event gets a header line, one line per shift and a trailing blank line.
    """
    lines = []

    for event in events:
        lines.append(f'Printing the schedule for Event {event.id}')
        for shift in ledger.get(event.id, []):
            lines.append(format_shift_line(event, shift))
        lines.append('')

    return '\n'.join(lines)
