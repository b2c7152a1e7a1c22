"""Data model for events, shifts and the in-memory scheduler state."""

import datetime
import math
from enum import Enum
from typing import Optional

import pydantic


class OverrideType(str, Enum):
    TODAY_ONLY = 'TODAY_ONLY'
    TODAY_FORWARD = 'TODAY_FORWARD'


class Event(pydantic.BaseModel):
    id: int
    start_time: str
    end_time: str
    duration: float

    @pydantic.field_validator('id')
    @classmethod
    def validate_id(cls, v: int) -> int:
        if v < 1:
            raise ValueError('event id must be positive')
        return v

    @pydantic.field_validator('duration')
    @classmethod
    def validate_duration(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError('duration must be a finite number greater than 0')
        return v


class Shift(pydantic.BaseModel):
    event_id: int
    employee_id: int
    start_time: str
    end_time: str
    duration: float
    date: datetime.date

    @pydantic.field_validator('employee_id')
    @classmethod
    def validate_employee_id(cls, v: int) -> int:
        if v < 0:
            raise ValueError('employee_id cannot be negative')
        return v

    @pydantic.field_validator('duration')
    @classmethod
    def validate_duration(cls, v: float) -> float:
        if not math.isfinite(v) or v <= 0:
            raise ValueError('duration must be a finite number greater than 0')
        return v


class SchedulerState(pydantic.BaseModel):
    """Event store, shift ledger and id counter for one scheduler."""

    events: list[Event] = []
    shifts: dict[int, list[Shift]] = {}
    next_event_id: int = 1

    def get_event(self, event_id: int) -> Optional[Event]:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    def replace_event(self, modified_event: Event) -> None:
        """Swap the stored event that shares the id of `modified_event`."""
        for i, event in enumerate(self.events):
            if event.id == modified_event.id:
                self.events[i] = modified_event
                return
