r"""Callback data structures for observing the polling loop.

The polling loop invokes the ``on_poll`` callback after each evaluation
that did not satisfy the condition, before waiting for the next poll.

Example:
    ```pycon
    >>> from apoll import wait_until
    >>> from apoll.callbacks import PollInfo
    >>> def log_poll(info: PollInfo) -> None:
    ...     print(f"Poll {info.poll_count}, next in {info.next_interval}")
    ...
    >>> wait_until(lambda: True, on_poll=log_poll)
    True

    ```
"""

from __future__ import annotations

__all__ = ["PollInfo", "invoke_on_poll"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from apoll.duration import Duration


@dataclass
class PollInfo:
    """Information passed to the on_poll callback.

    Attributes:
        alias: The name of the polled condition (if any).
        poll_count: The number of polls made so far (1-indexed).
        elapsed: Time spent since polling started.
        next_interval: The interval before the next poll.
        last_error: The ignored exception raised by the last evaluation
            (if any).
    """

    alias: str | None
    poll_count: int
    elapsed: Duration
    next_interval: Duration
    last_error: Exception | None


def invoke_on_poll(
    on_poll: Callable[[PollInfo], None] | None,
    *,
    alias: str | None,
    poll_count: int,
    elapsed: Duration,
    next_interval: Duration,
    last_error: Exception | None,
) -> None:
    """Invoke the on_poll callback if provided.

    Args:
        on_poll: Optional callback to invoke.
        alias: The name of the polled condition.
        poll_count: The number of polls made so far.
        elapsed: Time spent since polling started.
        next_interval: The interval before the next poll.
        last_error: The ignored exception raised by the last evaluation.
    """
    if on_poll is not None:
        on_poll(
            PollInfo(
                alias=alias,
                poll_count=poll_count,
                elapsed=elapsed,
                next_interval=next_interval,
                last_error=last_error,
            )
        )
