r"""Fibonacci poll interval strategy."""

from __future__ import annotations

__all__ = ["FibonacciPollInterval", "fibonacci"]

from apoll.duration import Duration, TimeUnit
from apoll.exceptions import InvalidConfigurationError
from apoll.pollinterval.base import BasePollInterval


class FibonacciPollInterval(BasePollInterval):
    """Fibonacci poll interval strategy.

    Calculates the interval as: fibonacci(poll_count + offset) in ``unit``,
    with fibonacci(0) = 0 and fibonacci(1) = 1.

    The Fibonacci sequence (0, 1, 1, 2, 3, 5, 8, 13, ...) grows more
    gradually than a doubling sequence. The ``offset`` skips the first
    values of the sequence.

    Args:
        offset: Number of Fibonacci values to skip (default: 0). Must be
            non-negative.
        unit: The unit of the generated intervals (default: milliseconds).

    Example:
        ```pycon
        >>> from apoll.duration import TimeUnit
        >>> from apoll.pollinterval import FibonacciPollInterval
        >>> interval = FibonacciPollInterval(unit=TimeUnit.SECONDS)
        >>> [interval.next(count, None).value for count in range(1, 7)]
        [1, 1, 2, 3, 5, 8]
        >>> FibonacciPollInterval(offset=2).next(1, None)
        Duration(2, MILLISECONDS)

        ```
    """

    def __init__(self, offset: int = 0, unit: TimeUnit = TimeUnit.MILLISECONDS) -> None:
        if offset < 0:
            msg = f"offset must be non-negative, got {offset}"
            raise InvalidConfigurationError(msg)
        if unit is None:
            msg = "Time unit cannot be None"
            raise InvalidConfigurationError(msg)

        self.offset = offset
        self.unit = unit

    @staticmethod
    def _fibonacci(n: int) -> int:
        """Calculate the nth Fibonacci number (0-indexed).

        Args:
            n: The position in the Fibonacci sequence (0-indexed).

        Returns:
            The nth Fibonacci number.
        """
        if n <= 0:
            return 0
        a, b = 0, 1
        for _ in range(n - 1):
            a, b = b, a + b
        return b

    def next(self, poll_count: int, previous_duration: Duration | None) -> Duration:  # noqa: ARG002
        """Calculate the Fibonacci poll interval.

        Args:
            poll_count: The number of polls made so far.
            previous_duration: The previous interval (unused).

        Returns:
            fibonacci(poll_count + offset) in ``unit``.
        """
        return Duration(self._fibonacci(poll_count + self.offset), self.unit)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FibonacciPollInterval):
            return NotImplemented
        return self.offset == other.offset and self.unit is other.unit

    def __hash__(self) -> int:
        return hash((self.offset, self.unit))

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(offset={self.offset}, unit={self.unit.name})"


def fibonacci(offset: int = 0, unit: TimeUnit = TimeUnit.MILLISECONDS) -> FibonacciPollInterval:
    """Create a ``FibonacciPollInterval``.

    Args:
        offset: Number of Fibonacci values to skip.
        unit: The unit of the generated intervals.

    Returns:
        A new ``FibonacciPollInterval``.
    """
    return FibonacciPollInterval(offset, unit)
