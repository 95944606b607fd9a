r"""Fixed poll interval strategy."""

from __future__ import annotations

__all__ = ["FixedPollInterval", "fixed"]

from typing import TYPE_CHECKING

from apoll.exceptions import InvalidConfigurationError
from apoll.pollinterval.base import BasePollInterval

if TYPE_CHECKING:
    from apoll.duration import Duration


class FixedPollInterval(BasePollInterval):
    """Constant/fixed poll interval strategy.

    Returns the same duration for every poll, regardless of the poll count
    or the previous duration.

    Args:
        duration: The fixed duration to wait between polls.

    Raises:
        InvalidConfigurationError: If ``duration`` is ``None`` or
            ``FOREVER``.

    Example:
        ```pycon
        >>> from apoll.duration import ONE_SECOND
        >>> from apoll.pollinterval import FixedPollInterval
        >>> interval = FixedPollInterval(ONE_SECOND)
        >>> interval.next(1, None)
        Duration(1, SECONDS)
        >>> interval.next(10, ONE_SECOND)
        Duration(1, SECONDS)

        ```
    """

    def __init__(self, duration: Duration) -> None:
        if duration is None:
            msg = "Duration cannot be None"
            raise InvalidConfigurationError(msg)
        if duration.is_forever:
            msg = "Cannot use a poll interval of length 'forever'"
            raise InvalidConfigurationError(msg)

        self.duration = duration

    def next(self, poll_count: int, previous_duration: Duration | None) -> Duration:  # noqa: ARG002
        return self.duration

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FixedPollInterval):
            return NotImplemented
        return self.duration == other.duration

    def __hash__(self) -> int:
        return hash(self.duration)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration!r})"


def fixed(duration: Duration) -> FixedPollInterval:
    """Create a ``FixedPollInterval``.

    Args:
        duration: The fixed duration to wait between polls.

    Returns:
        A new ``FixedPollInterval``.
    """
    return FixedPollInterval(duration)
