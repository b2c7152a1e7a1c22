"""Daily shift scheduling with overrides and text rendering."""

from .config import SchedulerConfig
from .errors import (
    SchedulerError,
    InvalidInputError,
    InvalidDurationError,
    NotFoundError
)
from .models import Event, Shift, OverrideType, SchedulerState
from .time_utils import (
    parse_date,
    compute_end_time,
    format_display_time,
    format_duration
)
from .schedule_utils import (
    generate_shifts,
    get_date_bounds,
    merge_override_range,
    replace_shift_on_date
)
from .render_utils import NO_EVENTS_MESSAGE, format_shift_line, render_range, render_full
from .scheduler import Scheduler

__all__ = [
    'SchedulerConfig',
    'SchedulerError',
    'InvalidInputError',
    'InvalidDurationError',
    'NotFoundError',
    'Event',
    'Shift',
    'OverrideType',
    'SchedulerState',
    'parse_date',
    'compute_end_time',
    'format_display_time',
    'format_duration',
    'generate_shifts',
    'get_date_bounds',
    'merge_override_range',
    'replace_shift_on_date',
    'NO_EVENTS_MESSAGE',
    'format_shift_line',
    'render_range',
    'render_full',
    'Scheduler'
]
