"""Exception hierarchy for duration conversion."""


class DurationError(Exception):
    """Base exception for duration conversion errors."""


class NegativeDurationError(DurationError, ValueError):
    """Raised when a signed count below zero is converted to a duration."""


class DurationOverflowError(DurationError, OverflowError):
    """Raised when a duration would exceed the u64 seconds range."""
