"""Utility constants and helpers for duration_extender.

Time unit constants represent durations in seconds.
These are shared by every integer kind so all conversions agree.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800

# Sub-second resolution
NANOS_PER_SEC = 1_000_000_000
NANOS_PER_MILLI = 1_000_000
NANOS_PER_MICRO = 1_000
MILLIS_PER_SEC = 1_000
MICROS_PER_SEC = 1_000_000

# Integer width limits
U32_MAX = 2**32 - 1
U64_MAX = 2**64 - 1
I32_MIN = -(2**31)
I32_MAX = 2**31 - 1
I64_MIN = -(2**63)
I64_MAX = 2**63 - 1

UNIT_SECONDS = {
    "seconds": SECOND,
    "minutes": MINUTE,
    "hours": HOUR,
    "days": DAY,
    "weeks": WEEK,
}


def checked_mul(left: int, right: int) -> int | None:
    """Multiply two non-negative ints, or return None if the product exceeds u64."""
    product = left * right
    if product > U64_MAX:
        return None
    return product
