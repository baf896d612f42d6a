from dataclasses import dataclass
from datetime import timedelta
from typing import Any, ClassVar

from duration_extender.errors import DurationOverflowError, NegativeDurationError
from duration_extender.util import (
    MICROS_PER_SEC,
    MILLIS_PER_SEC,
    NANOS_PER_MICRO,
    NANOS_PER_MILLI,
    NANOS_PER_SEC,
    U64_MAX,
)

_MAX_TOTAL_NANOS = U64_MAX * NANOS_PER_SEC + (NANOS_PER_SEC - 1)
_TIMEDELTA_MAX_MICROS = (
    timedelta.max.days * 86400 + timedelta.max.seconds
) * MICROS_PER_SEC + timedelta.max.microseconds


def _require_u64(value: Any, what: str) -> int:
    """Validate that value is a plain int in the unsigned 64-bit range."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"{what} must be an int.\nGot {type(value).__name__!r}: {value!r}"
        )
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{what} must be within 0..{U64_MAX}.\nGot: {value}")
    return value


def _require_factor(factor: Any) -> int:
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise TypeError(
            f"Duration can only be scaled by an int.\n"
            f"Got {type(factor).__name__!r}: {factor!r}"
        )
    return factor


def _require_duration(other: Any) -> "Duration":
    if not isinstance(other, Duration):
        raise TypeError(
            f"Expected a Duration.\n"
            f"Got {type(other).__name__!r}: {other!r}\n"
            f"Hint: Convert counts first, e.g. U64(5).seconds()"
        )
    return other


def _format_decimal(whole: int, fraction: int, width: int) -> str:
    if fraction == 0:
        return str(whole)
    digits = str(fraction).zfill(width).rstrip("0")
    return f"{whole}.{digits}"


@dataclass(frozen=True, kw_only=True, order=True)
class Duration:
    """A non-negative span of time held as whole seconds plus nanoseconds.

    ``secs`` covers the full unsigned 64-bit range and ``nanos`` is always
    below one second, so every value has exactly one representation and
    ordering compares ``(secs, nanos)``.
    """

    secs: int = 0
    nanos: int = 0

    ZERO: ClassVar["Duration"]
    MAX: ClassVar["Duration"]
    SECOND: ClassVar["Duration"]
    MILLISECOND: ClassVar["Duration"]
    MICROSECOND: ClassVar["Duration"]
    NANOSECOND: ClassVar["Duration"]

    def __post_init__(self) -> None:
        _require_u64(self.secs, "Duration secs")
        if isinstance(self.nanos, bool) or not isinstance(self.nanos, int):
            raise TypeError(
                f"Duration nanos must be an int.\n"
                f"Got {type(self.nanos).__name__!r}: {self.nanos!r}"
            )
        if not 0 <= self.nanos < NANOS_PER_SEC:
            raise ValueError(
                f"Duration nanos must be within 0..{NANOS_PER_SEC - 1}.\n"
                f"Got: {self.nanos}\n"
                f"Hint: Use Duration.new(secs, nanos) to carry whole seconds"
            )

    @classmethod
    def new(cls, secs: int, nanos: int) -> "Duration":
        """Build a duration, carrying whole seconds out of ``nanos``."""
        _require_u64(secs, "secs")
        _require_u64(nanos, "nanos")
        carry, nanos = divmod(nanos, NANOS_PER_SEC)
        if secs + carry > U64_MAX:
            raise DurationOverflowError("overflow in Duration.new")
        return cls(secs=secs + carry, nanos=nanos)

    @classmethod
    def from_secs(cls, secs: int) -> "Duration":
        return cls(secs=_require_u64(secs, "seconds"))

    @classmethod
    def from_millis(cls, millis: int) -> "Duration":
        secs, rem = divmod(_require_u64(millis, "milliseconds"), MILLIS_PER_SEC)
        return cls(secs=secs, nanos=rem * NANOS_PER_MILLI)

    @classmethod
    def from_micros(cls, micros: int) -> "Duration":
        secs, rem = divmod(_require_u64(micros, "microseconds"), MICROS_PER_SEC)
        return cls(secs=secs, nanos=rem * NANOS_PER_MICRO)

    @classmethod
    def from_nanos(cls, nanos: int) -> "Duration":
        secs, rem = divmod(_require_u64(nanos, "nanoseconds"), NANOS_PER_SEC)
        return cls(secs=secs, nanos=rem)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Convert a non-negative timedelta, keeping microsecond precision."""
        if delta < timedelta(0):
            raise NegativeDurationError(f"duration cannot be negative: got {delta!r}")
        return cls(
            secs=delta.days * 86400 + delta.seconds,
            nanos=delta.microseconds * NANOS_PER_MICRO,
        )

    @classmethod
    def _from_total_nanos(cls, total: int) -> "Duration | None":
        if not 0 <= total <= _MAX_TOTAL_NANOS:
            return None
        secs, nanos = divmod(total, NANOS_PER_SEC)
        return cls(secs=secs, nanos=nanos)

    def as_secs(self) -> int:
        return self.secs

    def as_millis(self) -> int:
        return self.as_nanos() // NANOS_PER_MILLI

    def as_micros(self) -> int:
        return self.as_nanos() // NANOS_PER_MICRO

    def as_nanos(self) -> int:
        return self.secs * NANOS_PER_SEC + self.nanos

    def as_secs_f64(self) -> float:
        return self.secs + self.nanos / NANOS_PER_SEC

    def subsec_millis(self) -> int:
        return self.nanos // NANOS_PER_MILLI

    def subsec_micros(self) -> int:
        return self.nanos // NANOS_PER_MICRO

    def subsec_nanos(self) -> int:
        return self.nanos

    def is_zero(self) -> bool:
        return self.secs == 0 and self.nanos == 0

    def to_timedelta(self) -> timedelta:
        """Convert to a timedelta, truncating below one microsecond.

        Raises:
            DurationOverflowError: If the span is longer than ``timedelta.max``
        """
        micros = self.as_micros()
        if micros > _TIMEDELTA_MAX_MICROS:
            raise DurationOverflowError(
                f"duration {self} does not fit in a timedelta "
                f"(max {timedelta.max})"
            )
        return timedelta(microseconds=micros)

    def checked_add(self, other: "Duration") -> "Duration | None":
        """Add, or return None if the sum exceeds ``Duration.MAX``."""
        total = self.as_nanos() + _require_duration(other).as_nanos()
        return self._from_total_nanos(total)

    def checked_sub(self, other: "Duration") -> "Duration | None":
        """Subtract, or return None if the result would be negative."""
        total = self.as_nanos() - _require_duration(other).as_nanos()
        return self._from_total_nanos(total)

    def checked_mul(self, factor: int) -> "Duration | None":
        """Scale, or return None if the result is negative or past the maximum."""
        return self._from_total_nanos(self.as_nanos() * _require_factor(factor))

    def saturating_add(self, other: "Duration") -> "Duration":
        result = self.checked_add(other)
        return Duration.MAX if result is None else result

    def saturating_sub(self, other: "Duration") -> "Duration":
        result = self.checked_sub(other)
        return Duration.ZERO if result is None else result

    def saturating_mul(self, factor: int) -> "Duration":
        """Scale, clamping negative factors to zero and overflow to the maximum."""
        if _require_factor(factor) < 0:
            return Duration.ZERO
        result = self.checked_mul(factor)
        return Duration.MAX if result is None else result

    def __add__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            raise DurationOverflowError("overflow when adding durations")
        return result

    def __sub__(self, other: Any) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        result = self.checked_sub(other)
        if result is None:
            raise DurationOverflowError("overflow when subtracting durations")
        return result

    def __mul__(self, factor: Any) -> "Duration":
        if isinstance(factor, bool) or not isinstance(factor, int):
            return NotImplemented
        if factor < 0:
            raise NegativeDurationError(
                f"duration cannot be scaled by a negative factor: got {factor}"
            )
        result = self.checked_mul(factor)
        if result is None:
            raise DurationOverflowError("overflow when multiplying duration by scalar")
        return result

    __rmul__ = __mul__

    def __str__(self) -> str:
        """Compact human-friendly form, e.g. ``300s``, ``1.5s``, ``250ms``."""
        if self.secs > 0:
            return _format_decimal(self.secs, self.nanos, 9) + "s"
        if self.nanos >= NANOS_PER_MILLI:
            whole, rem = divmod(self.nanos, NANOS_PER_MILLI)
            return _format_decimal(whole, rem, 6) + "ms"
        if self.nanos >= NANOS_PER_MICRO:
            whole, rem = divmod(self.nanos, NANOS_PER_MICRO)
            return _format_decimal(whole, rem, 3) + "µs"
        return f"{self.nanos}ns"


Duration.ZERO = Duration()
Duration.MAX = Duration(secs=U64_MAX, nanos=NANOS_PER_SEC - 1)
Duration.SECOND = Duration(secs=1)
Duration.MILLISECOND = Duration(nanos=NANOS_PER_MILLI)
Duration.MICROSECOND = Duration(nanos=NANOS_PER_MICRO)
Duration.NANOSECOND = Duration(nanos=1)
