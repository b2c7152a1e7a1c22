"""Error types raised by the scheduling core."""


class SchedulerError(Exception):
    """Base class for all scheduling errors."""


class InvalidInputError(SchedulerError, ValueError):
    """Malformed date, time, mode or range arguments."""


class InvalidDurationError(SchedulerError, ValueError):
    """A new event asked for more hours than a day allows."""


class NotFoundError(SchedulerError, LookupError):
    """An override referenced an event or date that does not exist."""
