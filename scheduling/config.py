"""Runtime settings for the scheduler."""

import os
from typing import Optional

import pydantic


class SchedulerConfig(pydantic.BaseModel):
    max_event_duration_hours: float = 24.0
    # None means use the machine's local offset when formatting times
    utc_offset_hours: Optional[int] = None
    log_level: str = 'INFO'

    @pydantic.field_validator('max_event_duration_hours')
    @classmethod
    def validate_max_duration(cls, v: float) -> float:
        if v <= 0:
            raise ValueError('max_event_duration_hours must be greater than 0')
        return v

    @pydantic.field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def from_env(cls) -> 'SchedulerConfig':
        """Build a config from SCHEDULER_* environment variables."""
        offset = os.getenv('SCHEDULER_UTC_OFFSET_HOURS')
        return cls(
            max_event_duration_hours=float(os.getenv('SCHEDULER_MAX_EVENT_DURATION_HOURS', '24')),
            utc_offset_hours=int(offset) if offset not in (None, '') else None,
            log_level=os.getenv('SCHEDULER_LOG_LEVEL', 'INFO'),
        )
