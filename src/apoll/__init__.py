r"""apoll - Wait for conditions with pluggable poll interval strategies.

This package provides a polling loop that evaluates a condition until it
is satisfied or a timeout elapses, waiting between evaluations for a
duration computed by a poll interval strategy.

Key Features:
    - Immutable ``Duration`` value type with a ``FOREVER`` sentinel
    - Poll interval strategies: Iterative, Fixed, Fibonacci, and custom
    - Synchronous and asynchronous polling loops with timeouts
    - Ignored exceptions and an ``on_poll`` callback for observability
    - Helpers to poll HTTP endpoints with httpx

Example:
    ```pycon
    >>> from apoll import wait_until
    >>> from apoll.duration import FIVE_HUNDRED_MILLISECONDS, TEN_SECONDS
    >>> from apoll.pollinterval import iterative
    >>> # Poll intervals of 1000ms, 2000ms, 4000ms, ...
    >>> interval = iterative(lambda d: d * 2, FIVE_HUNDRED_MILLISECONDS)
    >>> wait_until(lambda: True, timeout=TEN_SECONDS, poll_interval=interval)
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "ConditionTimeoutError",
    "Duration",
    "InvalidConfigurationError",
    "PollConfig",
    "__version__",
    "wait_for_status",
    "wait_for_status_async",
    "wait_until",
    "wait_until_async",
]

from importlib.metadata import PackageNotFoundError, version

from apoll.config import PollConfig
from apoll.duration import Duration
from apoll.exceptions import ConditionTimeoutError, InvalidConfigurationError
from apoll.http import wait_for_status, wait_for_status_async
from apoll.poller import wait_until, wait_until_async

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
