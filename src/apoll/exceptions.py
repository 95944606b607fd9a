r"""Define the exceptions raised by apoll."""

from __future__ import annotations

__all__ = ["ConditionTimeoutError", "InvalidConfigurationError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apoll.duration import Duration


class InvalidConfigurationError(ValueError):
    r"""Exception raised when a poll interval or polling configuration is
    invalid.

    It is always raised synchronously when the object is created, never
    later when it is used.

    Example:
        ```pycon
        >>> from apoll.exceptions import InvalidConfigurationError
        >>> raise InvalidConfigurationError("Function cannot be None")  # doctest: +SKIP

        ```
    """


class ConditionTimeoutError(TimeoutError):
    r"""Exception raised when a condition is not satisfied within the
    configured timeout.

    Args:
        message: Descriptive error message.
        timeout: The timeout that elapsed.
        poll_count: Number of times the condition was evaluated.
        alias: Optional name of the condition, used in messages.
        last_error: The last ignored exception raised by the condition,
            if any.

    Example:
        ```pycon
        >>> from apoll.duration import ONE_SECOND
        >>> from apoll.exceptions import ConditionTimeoutError
        >>> error = ConditionTimeoutError("Condition was not fulfilled", ONE_SECOND, 3)
        >>> error.poll_count
        3

        ```
    """

    def __init__(
        self,
        message: str,
        timeout: Duration,
        poll_count: int,
        alias: str | None = None,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.timeout = timeout
        self.poll_count = poll_count
        self.alias = alias
        self.last_error = last_error
