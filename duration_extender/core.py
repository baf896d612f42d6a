import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar, Literal, get_args

from typing_extensions import override

from duration_extender.duration import Duration
from duration_extender.errors import DurationOverflowError, NegativeDurationError
from duration_extender.util import (
    I32_MAX,
    I32_MIN,
    I64_MAX,
    I64_MIN,
    U32_MAX,
    U64_MAX,
    UNIT_SECONDS,
    checked_mul,
)

logger = logging.getLogger(__name__)

UnitName = Literal[
    "nanoseconds",
    "microseconds",
    "milliseconds",
    "seconds",
    "minutes",
    "hours",
    "days",
    "weeks",
]
UNIT_NAMES: tuple[UnitName, ...] = get_args(UnitName)


@dataclass(frozen=True)
class Count(ABC):
    """An integer count of time units held in a fixed-width integer kind.

    Subclasses pick the width and signedness. Every conversion runs on the
    64-bit kind of matching signedness (see ``widen``), so a 32-bit count
    converts to exactly the same duration, or fails with exactly the same
    error, as the equal 64-bit count.

    Signed counts may hold negative values, but converting one raises
    ``NegativeDurationError``. Whole-second units multiply with an overflow
    check and raise ``DurationOverflowError`` past the u64 seconds range.
    """

    value: int

    bits: ClassVar[int]
    signed: ClassVar[bool]
    lower: ClassVar[int]
    upper: ClassVar[int]

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"{type(self).__name__} value must be an int.\n"
                f"Got {type(self.value).__name__!r}: {self.value!r}"
            )
        if not self.min_value() <= self.value <= self.max_value():
            raise ValueError(
                f"{type(self).__name__} value must be within "
                f"{self.min_value()}..{self.max_value()}.\n"
                f"Got: {self.value}"
                + self._range_hint()
            )

    @classmethod
    def min_value(cls) -> int:
        return cls.lower

    @classmethod
    def max_value(cls) -> int:
        return cls.upper

    @classmethod
    def _range_hint(cls) -> str:
        if cls.bits == 64:
            return ""
        wide = "I64" if cls.signed else "U64"
        return f"\nHint: Use {wide} for values outside the {cls.bits}-bit range"

    @abstractmethod
    def widen(self) -> "Count":
        """Return the 64-bit count of matching signedness."""
        pass

    def __int__(self) -> int:
        return self.value

    def _magnitude(self, unit: UnitName) -> int:
        if self.value < 0:
            logger.debug("Rejected negative count: %d %s", self.value, unit)
            raise NegativeDurationError(
                f"duration cannot be negative: got {self.value} {unit}"
            )
        return self.value

    def _scaled(self, unit: UnitName) -> Duration:
        wide = self.widen()
        secs = checked_mul(wide._magnitude(unit), UNIT_SECONDS[unit])
        if secs is None:
            logger.debug("Rejected overflowing count: %d %s", wide.value, unit)
            raise DurationOverflowError(
                f"duration value {wide.value} {unit} overflows u64 seconds capacity"
            )
        return Duration.from_secs(secs)

    def nanoseconds(self) -> Duration:
        return Duration.from_nanos(self.widen()._magnitude("nanoseconds"))

    def microseconds(self) -> Duration:
        return Duration.from_micros(self.widen()._magnitude("microseconds"))

    def milliseconds(self) -> Duration:
        return Duration.from_millis(self.widen()._magnitude("milliseconds"))

    def seconds(self) -> Duration:
        return self._scaled("seconds")

    def minutes(self) -> Duration:
        return self._scaled("minutes")

    def hours(self) -> Duration:
        return self._scaled("hours")

    def days(self) -> Duration:
        """Fixed 86,400-second days.

        Calendar days and DST transitions are not accounted for.
        """
        return self._scaled("days")

    def weeks(self) -> Duration:
        """Fixed 604,800-second weeks.

        Calendar weeks and DST transitions are not accounted for.
        """
        return self._scaled("weeks")

    def to(self, unit: UnitName) -> Duration:
        """Convert using the unit operation named by ``unit``."""
        return getattr(self, check_unit(unit))()


@dataclass(frozen=True)
class U64(Count):
    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = False
    lower: ClassVar[int] = 0
    upper: ClassVar[int] = U64_MAX

    @override
    def widen(self) -> "U64":
        return self


@dataclass(frozen=True)
class U32(Count):
    bits: ClassVar[int] = 32
    signed: ClassVar[bool] = False
    lower: ClassVar[int] = 0
    upper: ClassVar[int] = U32_MAX

    @override
    def widen(self) -> U64:
        return U64(self.value)


@dataclass(frozen=True)
class I64(Count):
    bits: ClassVar[int] = 64
    signed: ClassVar[bool] = True
    lower: ClassVar[int] = I64_MIN
    upper: ClassVar[int] = I64_MAX

    @override
    def widen(self) -> "I64":
        return self


@dataclass(frozen=True)
class I32(Count):
    bits: ClassVar[int] = 32
    signed: ClassVar[bool] = True
    lower: ClassVar[int] = I32_MIN
    upper: ClassVar[int] = I32_MAX

    @override
    def widen(self) -> I64:
        return I64(self.value)


def count(value: "int | Count") -> Count:
    """Coerce a plain int to a count kind.

    Existing counts pass through unchanged. Negative ints become ``I64`` so
    that converting them reports a negative duration; everything else becomes
    ``U64``.
    """
    if isinstance(value, Count):
        return value
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            f"Expected an int or Count.\n"
            f"Got {type(value).__name__!r}: {value!r}\n"
            f"Hint: Wrap fixed-width values explicitly, e.g. U32(5).minutes()"
        )
    return I64(value) if value < 0 else U64(value)


def check_unit(unit: Any) -> UnitName:
    if unit not in UNIT_NAMES:
        raise ValueError(
            f"Unknown time unit: {unit!r}\n"
            f"Expected one of: {', '.join(UNIT_NAMES)}"
        )
    return unit
