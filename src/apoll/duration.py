r"""Immutable duration value type used by the poll interval strategies.

This module provides the ``Duration`` class, a comparable and hashable
time span with a distinguished ``FOREVER`` value meaning "no time
limit", and the ``TimeUnit`` enum used to express durations.
"""

from __future__ import annotations

__all__ = [
    "FIVE_HUNDRED_MILLISECONDS",
    "FIVE_SECONDS",
    "FOREVER",
    "ONE_HUNDRED_MILLISECONDS",
    "ONE_MILLISECOND",
    "ONE_MINUTE",
    "ONE_SECOND",
    "TEN_SECONDS",
    "TWO_HUNDRED_MILLISECONDS",
    "TWO_SECONDS",
    "ZERO",
    "Duration",
    "TimeUnit",
]

import math
from datetime import timedelta
from enum import Enum
from functools import total_ordering


class TimeUnit(Enum):
    """Time units supported by ``Duration``.

    The value of each member is the number of milliseconds in one unit.
    """

    NANOSECONDS = 1e-6
    MICROSECONDS = 1e-3
    MILLISECONDS = 1.0
    SECONDS = 1_000.0
    MINUTES = 60_000.0
    HOURS = 3_600_000.0
    DAYS = 86_400_000.0


@total_ordering
class Duration:
    """Non-negative time span expressed as a value and a ``TimeUnit``.

    Two durations are equal when they represent the same span, whatever
    the unit they were created with. The special value ``FOREVER``
    represents an unbounded duration; it compares greater than any
    finite duration.

    Args:
        value: The amount of time, in ``unit``. Must be non-negative.
        unit: The unit of ``value``. Defaults to milliseconds.

    Raises:
        ValueError: If ``value`` is negative or NaN.

    Example:
        ```pycon
        >>> from apoll.duration import Duration, TimeUnit
        >>> Duration(1, TimeUnit.SECONDS) == Duration(1000)
        True
        >>> Duration(500) * 2
        Duration(1000, MILLISECONDS)
        >>> Duration.FOREVER.is_forever
        True

        ```
    """

    __slots__ = ("_millis", "_unit", "_value")

    FOREVER: Duration

    def __init__(self, value: float, unit: TimeUnit = TimeUnit.MILLISECONDS) -> None:
        if math.isnan(value):
            msg = "duration value cannot be NaN"
            raise ValueError(msg)
        if value < 0:
            msg = f"duration value must be non-negative, got {value}"
            raise ValueError(msg)
        self._value = value
        self._unit = unit
        self._millis = value * unit.value

    @property
    def value(self) -> float:
        """The amount of time, expressed in ``unit``."""
        return self._value

    @property
    def unit(self) -> TimeUnit:
        """The unit of ``value``."""
        return self._unit

    @property
    def is_forever(self) -> bool:
        """``True`` if this duration is the unbounded ``FOREVER`` value."""
        return math.isinf(self._millis)

    @property
    def is_zero(self) -> bool:
        return self._millis == 0

    def to_millis(self) -> float:
        return self._millis

    def to_seconds(self) -> float:
        """Return this duration in seconds, ``math.inf`` for ``FOREVER``."""
        return self._millis / TimeUnit.SECONDS.value

    def to_timedelta(self) -> timedelta:
        """Convert this duration to a ``datetime.timedelta``.

        Raises:
            ValueError: If this duration is ``FOREVER``.
        """
        if self.is_forever:
            msg = "Cannot convert a duration of length 'forever' to a timedelta"
            raise ValueError(msg)
        return timedelta(milliseconds=self._millis)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Duration:
        return cls(delta.total_seconds() * TimeUnit.SECONDS.value)

    @classmethod
    def of_seconds(cls, value: float) -> Duration:
        return cls(value, TimeUnit.SECONDS)

    def multiply(self, factor: float) -> Duration:
        """Return this duration multiplied by ``factor``.

        Raises:
            ValueError: If ``factor`` is negative.
        """
        if factor < 0:
            msg = f"Cannot multiply a duration by a negative factor, got {factor}"
            raise ValueError(msg)
        if self.is_forever:
            return self
        return Duration(self._value * factor, self._unit)

    def divide(self, divisor: float) -> Duration:
        """Return this duration divided by ``divisor``.

        Raises:
            ValueError: If ``divisor`` is zero or negative.
        """
        if divisor <= 0:
            msg = f"Cannot divide a duration by a non-positive divisor, got {divisor}"
            raise ValueError(msg)
        if self.is_forever:
            return self
        return Duration(self._value / divisor, self._unit)

    def plus(self, other: Duration) -> Duration:
        """Return the sum of this duration and ``other``."""
        if self.is_forever or other.is_forever:
            return Duration.FOREVER
        if self._unit is other._unit:
            return Duration(self._value + other._value, self._unit)
        return Duration(self._millis + other._millis)

    def minus(self, other: Duration) -> Duration:
        """Return this duration minus ``other``.

        ``FOREVER`` minus any finite duration is still ``FOREVER``.

        Raises:
            ValueError: If ``other`` is ``FOREVER`` or larger than this
                duration.
        """
        if other.is_forever:
            msg = "Cannot subtract a duration of length 'forever'"
            raise ValueError(msg)
        if self.is_forever:
            return self
        if other._millis > self._millis:
            msg = f"Cannot subtract {other!r} from the shorter {self!r}"
            raise ValueError(msg)
        if self._unit is other._unit:
            return Duration(self._value - other._value, self._unit)
        return Duration(self._millis - other._millis)

    def __mul__(self, factor: float) -> Duration:
        return self.multiply(factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Duration:
        return self.divide(divisor)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.minus(other)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Duration):
            return NotImplemented
        return self._millis == other._millis

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self._millis < other._millis

    def __hash__(self) -> int:
        return hash(self._millis)

    def _display_value(self) -> float:
        return int(self._value) if float(self._value).is_integer() else self._value

    def __repr__(self) -> str:
        if self.is_forever:
            return "Duration.FOREVER"
        return f"{self.__class__.__qualname__}({self._display_value()}, {self._unit.name})"

    def __str__(self) -> str:
        if self.is_forever:
            return "forever"
        return f"{self._display_value()} {self._unit.name.lower()}"


Duration.FOREVER = Duration(math.inf)

ZERO = Duration(0)
ONE_MILLISECOND = Duration(1)
ONE_HUNDRED_MILLISECONDS = Duration(100)
TWO_HUNDRED_MILLISECONDS = Duration(200)
FIVE_HUNDRED_MILLISECONDS = Duration(500)
ONE_SECOND = Duration(1, TimeUnit.SECONDS)
TWO_SECONDS = Duration(2, TimeUnit.SECONDS)
FIVE_SECONDS = Duration(5, TimeUnit.SECONDS)
TEN_SECONDS = Duration(10, TimeUnit.SECONDS)
ONE_MINUTE = Duration(1, TimeUnit.MINUTES)
FOREVER = Duration.FOREVER
