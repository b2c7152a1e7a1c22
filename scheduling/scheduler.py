"""Scheduler service exposing the four schedule operations."""

import logging
from datetime import date
from typing import Optional, Union

import pydantic

from .config import SchedulerConfig
from .errors import InvalidDurationError, InvalidInputError, NotFoundError
from .models import Event, OverrideType, SchedulerState, Shift
from .render_utils import render_full, render_range
from .schedule_utils import (
    generate_shifts,
    get_date_bounds,
    merge_override_range,
    replace_shift_on_date,
)
from .time_utils import compute_end_time, format_display_time, parse_date

logger = logging.getLogger(__name__)

DateLike = Union[str, date]


class Scheduler:
    """
    Owns one SchedulerState and applies scheduling calls to it.

    Each call builds its complete result before touching the state, so a
    failing call leaves events and shifts exactly as they were. Calls are
    expected from a single thread.
    """

    def __init__(self, config: Optional[SchedulerConfig] = None, state: Optional[SchedulerState] = None):
        self.config = config if config is not None else SchedulerConfig()
        self.state = state if state is not None else SchedulerState()

    def build_event(self, event_id: int, start_time: str, duration: float) -> Event:
        """Create an event whose times are formatted for display."""
        end_time = compute_end_time(start_time, duration)
        offset = self.config.utc_offset_hours

        try:
            return Event(
                id=event_id,
                start_time=format_display_time(start_time, offset),
                end_time=format_display_time(end_time, offset),
                duration=duration,
            )
        except pydantic.ValidationError as e:
            raise InvalidInputError(f'invalid event: {e}') from e

    def schedule_event(
        self,
        employee_id: int,
        start_date: DateLike,
        end_date: Optional[DateLike],
        start_time: str,
        duration: float,
    ) -> Event:
        """
        Create an event and assign its daily shifts to one employee.

        Args:
            employee_id: Employee working every shift
            start_date: First day of the event
            end_date: Last day of the event, or None for the end of the start year
            start_time: Daily start time as `HH:MM`
            duration: Shift length in hours, at most the configured maximum

        Returns:
            The stored event

        Raises:
            InvalidDurationError: If the duration exceeds the configured maximum
            InvalidInputError: If a date, time or range is malformed
        """
        if duration > self.config.max_event_duration_hours:
            raise InvalidDurationError(
                f'Duration of an event must be less than or equal to '
                f'{self.config.max_event_duration_hours:g} hours.'
            )

        event = self.build_event(self.state.next_event_id, start_time, duration)
        shifts = self._generate(start_date, end_date, event, employee_id)

        self.state.events.append(event)
        self.state.shifts[event.id] = shifts
        self.state.next_event_id += 1

        logger.info(
            "Scheduled event %d for employee %d: %d shifts from %s to %s",
            event.id, employee_id, len(shifts),
            shifts[0].date.isoformat(), shifts[-1].date.isoformat()
        )
        return event

    def override_event(
        self,
        event_id: int,
        override_type: Union[OverrideType, str],
        override_employee_id: int,
        override_start_date: DateLike,
        new_end_date: Optional[DateLike] = None,
        new_start_time: Optional[str] = None,
        new_duration: Optional[float] = None,
    ) -> Event:
        """
        Reassign part of an event's shifts, optionally with new times.

        TODAY_ONLY replaces the single shift on `override_start_date`.
        TODAY_FORWARD regenerates `override_start_date` through `new_end_date`
        (or year end) and merges it into the existing shifts. Start time and
        duration default to the event's current values.

        Returns:
            The updated event

        Raises:
            NotFoundError: If the event does not exist, or a TODAY_ONLY date
                has no shift to replace
            InvalidInputError: If the mode, a date or a time is malformed
        """
        mode = self._coerce_override_type(override_type)

        event = self.state.get_event(event_id)
        if event is None:
            raise NotFoundError(f'event {event_id} does not exist in the system')

        duration = new_duration if new_duration is not None else event.duration
        start_time = new_start_time if new_start_time is not None else event.start_time

        modified_event = self.build_event(event_id, start_time, duration)
        old_shifts = self.state.shifts.get(event_id, [])

        if mode is OverrideType.TODAY_FORWARD:
            new_shifts = self._generate(override_start_date, new_end_date, modified_event, override_employee_id)
            if old_shifts:
                min_date, max_date = get_date_bounds(old_shifts)
                updated_shifts = merge_override_range(old_shifts, new_shifts, min_date, max_date)
            else:
                updated_shifts = list(new_shifts)
        elif mode is OverrideType.TODAY_ONLY:
            if new_end_date is not None:
                logger.warning(
                    "Ignoring end date %s for TODAY_ONLY override of event %d",
                    new_end_date, event_id
                )
            new_shifts = self._generate(override_start_date, override_start_date, modified_event, override_employee_id)
            updated_shifts = replace_shift_on_date(old_shifts, new_shifts[0])
        else:
            raise InvalidInputError(f'unsupported override type {mode!r}')

        self.state.replace_event(modified_event)
        self.state.shifts[event_id] = updated_shifts

        logger.info(
            "Applied %s override to event %d for employee %d starting %s",
            mode.value, event_id, override_employee_id, new_shifts[0].date.isoformat()
        )
        return modified_event

    def render_range(self, start_date: DateLike, num_days: int) -> str:
        return render_range(self.state.events, self.state.shifts, start_date, num_days)

    def render_full(self) -> str:
        return render_full(self.state.events, self.state.shifts)

    def print_range(self, start_date: DateLike, num_days: int) -> None:
        print(self.render_range(start_date, num_days))

    def print_full(self) -> None:
        print(self.render_full())

    def _generate(
        self,
        start_date: DateLike,
        end_date: Optional[DateLike],
        event: Event,
        employee_id: int,
    ) -> list[Shift]:
        try:
            return generate_shifts(
                start_date=start_date,
                end_date=end_date,
                start_time=event.start_time,
                end_time=event.end_time,
                duration=event.duration,
                employee_id=employee_id,
                event_id=event.id,
            )
        except pydantic.ValidationError as e:
            raise InvalidInputError(f'invalid shift: {e}') from e

    @staticmethod
    def _coerce_override_type(override_type: Union[OverrideType, str]) -> OverrideType:
        try:
            return OverrideType(override_type)
        except ValueError as e:
            raise InvalidInputError(f'unknown override type {override_type!r}') from e
