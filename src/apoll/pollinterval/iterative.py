r"""Iterative poll interval strategy."""

from __future__ import annotations

__all__ = ["IterativeFunction", "IterativePollInterval", "iterative"]

from collections.abc import Callable
from typing import TypeAlias

from apoll.duration import ONE_HUNDRED_MILLISECONDS, Duration
from apoll.exceptions import InvalidConfigurationError
from apoll.pollinterval.base import BasePollInterval

IterativeFunction: TypeAlias = Callable[[Duration], Duration]


class IterativePollInterval(BasePollInterval):
    """Poll interval generated by a function and a start duration.

    Each interval is computed by applying ``function`` to the previous
    interval. The first interval is ``function(start_duration)``. The
    function is free to do anything with the duration and its result is
    returned as is.

    The strategy holds no state between calls: the caller must feed the
    previous result back as ``previous_duration`` to follow the sequence.

    Args:
        function: The function mapping the previous duration to the next
            one.
        start_duration: The duration the function is applied to when there
            is no previous duration (default: 100 milliseconds). Cannot be
            ``FOREVER``.

    Raises:
        InvalidConfigurationError: If ``function`` or ``start_duration`` is
            ``None``, or if ``start_duration`` is ``FOREVER``.

    Example:
        ```pycon
        >>> from apoll.duration import FIVE_HUNDRED_MILLISECONDS
        >>> from apoll.pollinterval import IterativePollInterval
        >>> interval = IterativePollInterval(lambda d: d * 2, FIVE_HUNDRED_MILLISECONDS)
        >>> first = interval.next(1, None)
        >>> first
        Duration(1000, MILLISECONDS)
        >>> interval.next(2, first)
        Duration(2000, MILLISECONDS)

        ```
    """

    def __init__(
        self,
        function: IterativeFunction,
        start_duration: Duration = ONE_HUNDRED_MILLISECONDS,
    ) -> None:
        if function is None:
            msg = "Function cannot be None"
            raise InvalidConfigurationError(msg)
        if start_duration is None:
            msg = "Start duration cannot be None"
            raise InvalidConfigurationError(msg)
        if start_duration.is_forever:
            msg = "Cannot use a poll interval of length 'forever'"
            raise InvalidConfigurationError(msg)

        self._function = function
        self._start_duration = start_duration

    @property
    def function(self) -> IterativeFunction:
        return self._function

    @property
    def start_duration(self) -> Duration:
        return self._start_duration

    def next(self, poll_count: int, previous_duration: Duration | None) -> Duration:  # noqa: ARG002
        """Apply the function to the previous duration.

        Args:
            poll_count: The number of polls made so far (unused).
            previous_duration: The previous interval, or ``None`` to start
                from ``start_duration``.

        Returns:
            The function's result, unchanged.
        """
        return self._function(
            self._start_duration if previous_duration is None else previous_duration
        )

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, IterativePollInterval):
            return NotImplemented
        return (
            self._function == other._function and self._start_duration == other._start_duration
        )

    def __hash__(self) -> int:
        return 31 * hash(self._function) + hash(self._start_duration)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(function={self._function!r}, "
            f"start_duration={self._start_duration!r})"
        )


def iterative(
    function: IterativeFunction,
    start_duration: Duration = ONE_HUNDRED_MILLISECONDS,
) -> IterativePollInterval:
    """Create an ``IterativePollInterval``.

    Args:
        function: The function mapping the previous duration to the next
            one.
        start_duration: The start duration (initial function value).

    Returns:
        A new ``IterativePollInterval``.

    Example:
        ```pycon
        >>> from apoll.duration import ONE_SECOND
        >>> from apoll.pollinterval import iterative
        >>> iterative(lambda d: d + ONE_SECOND).next(1, None)
        Duration(1100, MILLISECONDS)

        ```
    """
    return IterativePollInterval(function, start_duration)
