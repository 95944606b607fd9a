r"""Configuration dataclass and defaults for condition polling.

This module provides the default polling settings and a dataclass-based
configuration object shared by ``wait_until``, ``wait_until_async``, and
the HTTP polling helpers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_POLL_DELAY",
    "DEFAULT_POLL_INTERVAL",
    "DEFAULT_TIMEOUT",
    "PollConfig",
]

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any

from apoll.duration import ONE_HUNDRED_MILLISECONDS, TEN_SECONDS
from apoll.pollinterval import FixedPollInterval
from apoll.validation import validate_poll_params

if TYPE_CHECKING:
    from collections.abc import Callable

    from apoll.callbacks import PollInfo
    from apoll.duration import Duration
    from apoll.pollinterval import BasePollInterval


# Default maximum time to wait for a condition
DEFAULT_TIMEOUT = TEN_SECONDS

# Default interval between two polls
DEFAULT_POLL_INTERVAL = FixedPollInterval(ONE_HUNDRED_MILLISECONDS)

# Default delay before the first poll (None means poll immediately)
DEFAULT_POLL_DELAY = None


@dataclass
class PollConfig:
    """Configuration for condition polling.

    Args:
        timeout: Maximum time to wait for the condition. ``FOREVER``
            disables the timeout.
        poll_interval: Strategy computing the delay between polls.
        poll_delay: Optional delay before the first poll.
        alias: Optional name of the condition, used in logs and errors.
        ignore_exceptions: Exception types raised by the condition that
            are treated as "not satisfied yet" instead of propagated.
        on_poll: Optional callback invoked after each unsatisfied poll.

    Raises:
        InvalidConfigurationError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from apoll.config import PollConfig
        >>> from apoll.duration import ONE_SECOND
        >>> config = PollConfig()
        >>> config.timeout
        Duration(10, SECONDS)
        >>> merged = config.merge(timeout=ONE_SECOND)
        >>> merged.timeout
        Duration(1, SECONDS)
        >>> config.timeout  # Original unchanged
        Duration(10, SECONDS)

        ```
    """

    timeout: Duration = DEFAULT_TIMEOUT
    poll_interval: BasePollInterval = field(default_factory=lambda: DEFAULT_POLL_INTERVAL)
    poll_delay: Duration | None = DEFAULT_POLL_DELAY
    alias: str | None = None
    ignore_exceptions: tuple[type[Exception], ...] = ()
    on_poll: Callable[[PollInfo], None] | None = None

    def __post_init__(self) -> None:
        validate_poll_params(
            timeout=self.timeout,
            poll_interval=self.poll_interval,
            poll_delay=self.poll_delay,
        )

    def merge(self, **overrides: Any) -> PollConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new PollConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)
