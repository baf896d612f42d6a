from typing import Any

from duration_extender.core import Count, UnitName, check_unit, count
from duration_extender.duration import Duration


class Unit:
    """A named time unit that turns counts into durations.

    ``minutes(5)``, ``5 * minutes`` and ``minutes * 5`` all build a five-minute
    duration.
    Plain ints go through ``count()``; fixed-width counts keep their kind.
    """

    def __init__(self, name: UnitName):
        self.name: UnitName = check_unit(name)

    def __call__(self, value: "int | Count") -> Duration:
        return count(value).to(self.name)

    def __mul__(self, value: Any) -> Duration:
        if isinstance(value, bool) or not isinstance(value, (int, Count)):
            return NotImplemented
        return self(value)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"Unit({self.name!r})"


nanoseconds: Unit = Unit("nanoseconds")
microseconds: Unit = Unit("microseconds")
milliseconds: Unit = Unit("milliseconds")
seconds: Unit = Unit("seconds")
minutes: Unit = Unit("minutes")
hours: Unit = Unit("hours")
days: Unit = Unit("days")
weeks: Unit = Unit("weeks")
