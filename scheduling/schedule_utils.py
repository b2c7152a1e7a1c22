"""Functions for generating and reconciling per-day shift lists."""

import logging
from datetime import date, timedelta
from typing import Optional, Union

from .errors import InvalidInputError, NotFoundError
from .models import Shift
from .time_utils import parse_date

logger = logging.getLogger(__name__)


def generate_shifts(
    start_date: Union[str, date],
    end_date: Optional[Union[str, date]],
    start_time: str,
    end_time: str,
    duration: float,
    employee_id: int,
    event_id: int,
) -> list[Shift]:
    """
    Generate one shift per calendar day for an event.

    Every shift shares the same times, duration, employee and event. When
    no end date is given, shifts run until December 31 of the start year.

    Args:
        start_date: First day to cover (inclusive)
        end_date: Last day to cover (inclusive), or None for year end
        start_time: Display formatted start time
        end_time: Display formatted end time
        duration: Shift length in hours
        employee_id: Employee assigned to every generated shift
        event_id: Event the shifts belong to

    Returns:
        Shifts ordered by ascending date

    Raises:
        InvalidInputError: If the range is malformed or produces no days
    """
    first_day = parse_date(start_date)
    last_day = parse_date(end_date) if end_date is not None else date(first_day.year, 12, 31)

    if last_day < first_day:
        raise InvalidInputError(
            f'end date {last_day.isoformat()} is before start date {first_day.isoformat()}'
        )

    shifts = []
    current_day = first_day

    while current_day <= last_day:
        shifts.append(Shift(
            event_id=event_id,
            employee_id=employee_id,
            start_time=start_time,
            end_time=end_time,
            duration=duration,
            date=current_day,
        ))
        current_day += timedelta(days=1)

    return shifts


def get_date_bounds(shifts: list[Shift]) -> tuple[date, date]:
    """Return the earliest and latest dates present in `shifts`."""
    if not shifts:
        raise InvalidInputError('cannot compute date bounds of an empty shift list')

    dates = [shift.date for shift in shifts]
    return min(dates), max(dates)


def merge_override_range(
    old_shifts: list[Shift],
    new_shifts: list[Shift],
    min_date: Optional[date] = None,
    max_date: Optional[date] = None,
) -> list[Shift]:
    """
    Reconcile a generated override range against an event's existing shifts.

    The override can sit anywhere relative to the existing range:

        min_date                         max_date     --> existing shifts
                  new_start     new_end               --> cover a leave
        new_start           new_end                   --> backfill earlier days
                  new_start                 new_end   --> extend the event

    Algorithm:
    1. New shifts whose date already exists become replacements. The rest
       are split into those before `min_date`, inside the existing range,
       and after `max_date`. Each is visited once.
    2. Walk the existing shifts in order, swapping in the replacement for
       every matching date and keeping the old one otherwise.
    3. Prepend the backfilled shifts, then append the new in-range shifts
       that matched no existing date, then the extension.

    The result holds exactly one shift per date over the union of both
    ranges and new shifts win on overlapping dates.

    Args:
        old_shifts: Current ledger entry for the event
        new_shifts: Override shifts produced by `generate_shifts`
        min_date: Earliest existing date, computed from `old_shifts` if None
        max_date: Latest existing date, computed from `old_shifts` if None

    Returns:
        A new merged list; neither input is modified
    """
    if not new_shifts:
        raise InvalidInputError('override produced no shifts to merge')

    if not old_shifts:
        return list(new_shifts)

    if min_date is None or max_date is None:
        bounds = get_date_bounds(old_shifts)
        min_date = bounds[0] if min_date is None else min_date
        max_date = bounds[1] if max_date is None else max_date

    backfill = []
    extension = []
    gap_fill = []
    replacements: dict[date, Shift] = {}
    old_dates = {shift.date for shift in old_shifts}

    # matching dates are replaced whatever the bounds say; bounds only order the rest
    for shift in new_shifts:
        if shift.date in old_dates:
            replacements[shift.date] = shift
        elif shift.date < min_date:
            backfill.append(shift)
        elif shift.date > max_date:
            extension.append(shift)
        else:
            gap_fill.append(shift)

    merged = [replacements.get(old_shift.date, old_shift) for old_shift in old_shifts]

    logger.debug(
        "Merged override: %d replaced, %d backfilled, %d gap days, %d extended",
        len(replacements), len(backfill), len(gap_fill), len(extension)
    )

    return backfill + merged + gap_fill + extension


def replace_shift_on_date(shifts: list[Shift], new_shift: Shift) -> list[Shift]:
    """
    Replace the shift that falls on `new_shift.date`, keeping its position.

    Args:
        shifts: Current ledger entry for the event
        new_shift: Replacement shift for a single day

    Returns:
        A new list with the one day swapped

    Raises:
        NotFoundError: If no existing shift falls on that date
    """
    updated = list(shifts)

    for i, shift in enumerate(updated):
        if shift.date == new_shift.date:
            updated[i] = new_shift
            return updated

    raise NotFoundError(
        f'event {new_shift.event_id} has no shift on {new_shift.date.isoformat()} to override'
    )
