r"""Abstract base class for poll interval strategies."""

from __future__ import annotations

__all__ = ["BasePollInterval"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apoll.duration import Duration


class BasePollInterval(ABC):
    """Abstract base class for poll interval strategies.

    A poll interval strategy determines how long to wait before the next
    evaluation of a polled condition based on the poll count and the
    duration used before the previous evaluation.
    """

    @abstractmethod
    def next(self, poll_count: int, previous_duration: Duration | None) -> Duration:
        """Calculate the duration to wait before the next poll.

        Args:
            poll_count: The number of polls made so far. Strategies are
                free to ignore it.
            previous_duration: The duration returned by the previous call,
                or ``None`` if no poll interval has been used yet.

        Returns:
            The duration to wait before the next poll.
        """
