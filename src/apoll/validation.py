r"""Parameter validation utilities for condition polling.

This module provides validation functions for polling parameters to
ensure they meet the required constraints before being used by the
polling loop.
"""

from __future__ import annotations

__all__ = ["validate_poll_params"]

from apoll.duration import Duration
from apoll.exceptions import InvalidConfigurationError
from apoll.pollinterval.base import BasePollInterval


def validate_poll_params(
    timeout: Duration,
    poll_interval: BasePollInterval,
    poll_delay: Duration | None = None,
) -> None:
    """Validate polling parameters.

    Args:
        timeout: Maximum time to wait for the condition. Must be a
            non-zero ``Duration``; ``FOREVER`` disables the timeout.
        poll_interval: Strategy computing the delay between polls.
        poll_delay: Optional delay before the first poll. Must be a finite
            ``Duration`` if provided.

    Raises:
        InvalidConfigurationError: If any parameter is invalid.

    Example:
        ```pycon
        >>> from apoll.duration import ONE_SECOND, TEN_SECONDS
        >>> from apoll.pollinterval import FixedPollInterval
        >>> from apoll.validation import validate_poll_params
        >>> validate_poll_params(TEN_SECONDS, FixedPollInterval(ONE_SECOND))
        >>> validate_poll_params(TEN_SECONDS, FixedPollInterval(ONE_SECOND), ONE_SECOND)

        ```
    """
    if not isinstance(timeout, Duration):
        msg = f"timeout must be a Duration, got {timeout!r}"
        raise InvalidConfigurationError(msg)
    if timeout.is_zero:
        msg = "timeout must be greater than zero"
        raise InvalidConfigurationError(msg)
    if not isinstance(poll_interval, BasePollInterval):
        msg = f"poll_interval must be a BasePollInterval, got {poll_interval!r}"
        raise InvalidConfigurationError(msg)
    if poll_delay is not None:
        if not isinstance(poll_delay, Duration):
            msg = f"poll_delay must be a Duration, got {poll_delay!r}"
            raise InvalidConfigurationError(msg)
        if poll_delay.is_forever:
            msg = "Cannot use a poll delay of length 'forever'"
            raise InvalidConfigurationError(msg)
