from .core import I32, I64, U32, U64, UNIT_NAMES, Count, UnitName, count
from .duration import Duration
from .errors import DurationError, DurationOverflowError, NegativeDurationError
from .units import (
    Unit,
    days,
    hours,
    microseconds,
    milliseconds,
    minutes,
    nanoseconds,
    seconds,
    weeks,
)

__all__ = [
    "Duration",
    "Count",
    "U64",
    "U32",
    "I64",
    "I32",
    "count",
    "Unit",
    "UnitName",
    "UNIT_NAMES",
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
    "DurationError",
    "NegativeDurationError",
    "DurationOverflowError",
]
