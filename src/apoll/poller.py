r"""Polling loop that waits until a condition is satisfied.

This module provides ``wait_until`` and ``wait_until_async``, which
evaluate a condition repeatedly, waiting between evaluations for the
duration computed by the configured poll interval strategy, until the
condition returns a truthy value or the timeout elapses.
"""

from __future__ import annotations

__all__ = ["wait_until", "wait_until_async"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from apoll.callbacks import invoke_on_poll
from apoll.config import PollConfig
from apoll.duration import Duration, TimeUnit
from apoll.exceptions import ConditionTimeoutError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


def _describe(condition: Callable[..., Any], alias: str | None) -> str:
    if alias is not None:
        return f"'{alias}'"
    return getattr(condition, "__qualname__", repr(condition))


def _elapsed_since(start_time: float) -> Duration:
    return Duration(max(time.monotonic() - start_time, 0.0), TimeUnit.SECONDS)


class _PollLoop:
    """Bookkeeping shared by the sync and async polling loops.

    It holds the poll count and the previous interval, which is fed back
    to the poll interval strategy so it can follow its sequence.
    """

    def __init__(self, condition: Callable[..., Any], config: PollConfig) -> None:
        self.config = config
        self.name = _describe(condition, config.alias)
        self.poll_count = 0
        self.previous_interval: Duration | None = None
        self.last_error: Exception | None = None
        self.start_time = time.monotonic()

    def record_error(self, exc: Exception) -> None:
        self.last_error = exc
        logger.debug(
            f"Condition {self.name} raised ignored {type(exc).__name__} "
            f"on poll {self.poll_count}: {exc}"
        )

    def record_not_fulfilled(self) -> None:
        self.last_error = None

    def record_success(self) -> None:
        logger.debug(f"Condition {self.name} was fulfilled after {self.poll_count} poll(s)")

    def next_sleep(self) -> float:
        """Compute the time to sleep before the next poll.

        Returns:
            The sleep time in seconds, capped to the remaining time.

        Raises:
            ConditionTimeoutError: If the timeout has elapsed.
        """
        timeout = self.config.timeout
        elapsed = _elapsed_since(self.start_time)
        if not timeout.is_forever and elapsed >= timeout:
            self._raise_timeout()

        interval = self.config.poll_interval.next(self.poll_count, self.previous_interval)
        self.previous_interval = interval
        invoke_on_poll(
            self.config.on_poll,
            alias=self.config.alias,
            poll_count=self.poll_count,
            elapsed=elapsed,
            next_interval=interval,
            last_error=self.last_error,
        )

        sleep_time = interval
        if not timeout.is_forever:
            remaining = timeout.minus(elapsed)
            if sleep_time > remaining:
                logger.debug(f"Capping poll interval from {interval} to the remaining {remaining}")
                sleep_time = remaining
        elif sleep_time.is_forever:
            logger.debug(
                f"Poll interval of condition {self.name} is forever and the timeout is forever, "
                "the sleep before the next poll cannot complete"
            )
        logger.debug(f"Condition {self.name} not fulfilled yet, waiting {sleep_time} before next poll")
        return sleep_time.to_seconds()

    def _raise_timeout(self) -> None:
        timeout = self.config.timeout
        msg = f"Condition {self.name} was not fulfilled within {timeout}"
        if self.last_error is not None:
            msg = f"{msg} (last error: {type(self.last_error).__name__}: {self.last_error})"
        logger.debug(f"{msg} after {self.poll_count} poll(s)")
        raise ConditionTimeoutError(
            msg,
            timeout=timeout,
            poll_count=self.poll_count,
            alias=self.config.alias,
            last_error=self.last_error,
        ) from self.last_error


def wait_until(
    condition: Callable[[], T],
    config: PollConfig | None = None,
    **overrides: Any,
) -> T:
    """Wait until a condition returns a truthy value.

    The condition is evaluated immediately (or after ``poll_delay``), then
    again after each poll interval, until it returns a truthy value or the
    timeout elapses. The sleep before the last evaluation is capped so it
    happens when the timeout is reached.

    Args:
        condition: Callable taking no argument. Its first truthy result is
            returned.
        config: Optional polling configuration. Defaults to ``PollConfig()``.
        **overrides: ``PollConfig`` fields overriding ``config`` (for
            example ``timeout`` or ``poll_interval``). ``None`` values are
            ignored.

    Returns:
        The first truthy value returned by ``condition``.

    Raises:
        ConditionTimeoutError: If the condition is not fulfilled within the
            timeout.
        InvalidConfigurationError: If the configuration is invalid.
        Exception: Any exception raised by ``condition`` that is not listed
            in ``ignore_exceptions``, or raised by the poll interval.
        OverflowError: If both the timeout and a poll interval are
            ``FOREVER``, raised by the sleep call.

    Example:
        ```pycon
        >>> from apoll import wait_until
        >>> from apoll.duration import ONE_SECOND
        >>> wait_until(lambda: 42, timeout=ONE_SECOND)
        42

        ```
    """
    config = (config or PollConfig()).merge(**overrides)
    loop = _PollLoop(condition, config)
    if config.poll_delay is not None and not config.poll_delay.is_zero:
        time.sleep(config.poll_delay.to_seconds())

    while True:
        loop.poll_count += 1
        try:
            result = condition()
        except config.ignore_exceptions as exc:
            loop.record_error(exc)
        else:
            if result:
                loop.record_success()
                return result
            loop.record_not_fulfilled()
        time.sleep(loop.next_sleep())


async def wait_until_async(
    condition: Callable[[], Awaitable[T]],
    config: PollConfig | None = None,
    **overrides: Any,
) -> T:
    """Wait until an async condition returns a truthy value.

    This is the asynchronous version of ``wait_until``: the condition is
    awaited and ``asyncio.sleep()`` is used between polls, allowing other
    tasks to run while waiting.

    Args:
        condition: Async callable taking no argument. Its first truthy
            result is returned.
        config: Optional polling configuration. Defaults to ``PollConfig()``.
        **overrides: ``PollConfig`` fields overriding ``config``.

    Returns:
        The first truthy value returned by ``condition``.

    Raises:
        ConditionTimeoutError: If the condition is not fulfilled within the
            timeout.
        InvalidConfigurationError: If the configuration is invalid.
        Exception: Any exception raised by ``condition`` that is not listed
            in ``ignore_exceptions``, or raised by the poll interval.

    Note:
        If both the timeout and a poll interval are ``FOREVER``, the
        sleep before the next poll never completes.

    Example:
        ```pycon
        >>> import asyncio
        >>> from apoll import wait_until_async
        >>> async def is_ready():
        ...     return True
        ...
        >>> asyncio.run(wait_until_async(is_ready))
        True

        ```
    """
    config = (config or PollConfig()).merge(**overrides)
    loop = _PollLoop(condition, config)
    if config.poll_delay is not None and not config.poll_delay.is_zero:
        await asyncio.sleep(config.poll_delay.to_seconds())

    while True:
        loop.poll_count += 1
        try:
            result = await condition()
        except config.ignore_exceptions as exc:
            loop.record_error(exc)
        else:
            if result:
                loop.record_success()
                return result
            loop.record_not_fulfilled()
        await asyncio.sleep(loop.next_sleep())
