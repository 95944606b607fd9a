r"""Helpers to poll an HTTP endpoint until it returns an expected status.

These helpers are built on ``wait_until`` and ``wait_until_async`` and
use ``httpx`` to send the requests. Network errors
(``httpx.RequestError``) are treated as "not ready yet".
"""

from __future__ import annotations

__all__ = ["wait_for_status", "wait_for_status_async"]

import logging
from typing import Any

import httpx

from apoll.config import PollConfig
from apoll.poller import wait_until, wait_until_async

logger: logging.Logger = logging.getLogger(__name__)


def _normalize_status(status: int | tuple[int, ...]) -> tuple[int, ...]:
    if isinstance(status, int):
        return (status,)
    return tuple(status)


def _matches(response: httpx.Response, expected: tuple[int, ...], url: str, method: str) -> bool:
    if response.status_code in expected:
        return True
    logger.debug(
        f"{method} request to {url} returned status {response.status_code}, "
        f"waiting for {expected}"
    )
    return False


def wait_for_status(
    url: str,
    status: int | tuple[int, ...] = 200,
    *,
    client: httpx.Client | None = None,
    method: str = "GET",
    config: PollConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Poll a URL until the response has one of the expected statuses.

    Args:
        url: The URL to poll.
        status: Expected status code, or tuple of accepted status codes.
        client: Optional httpx.Client to use. If None, a new client is
            created and closed once polling ends.
        method: The HTTP method to send (default: "GET").
        config: Optional polling configuration. ``httpx.RequestError`` is
            always added to its ignored exceptions.
        **kwargs: Additional keyword arguments passed to
            ``client.request()``.

    Returns:
        The first response whose status is expected.

    Raises:
        ConditionTimeoutError: If no expected status was returned within
            the timeout.

    Example:
        ```pycon
        >>> from apoll.http import wait_for_status
        >>> response = wait_for_status("https://api.example.com/health")  # doctest: +SKIP

        ```
    """
    expected = _normalize_status(status)
    owns_client = client is None
    client = client or httpx.Client()
    poll_config = _with_request_error_ignored(config, url)

    def _condition() -> httpx.Response | None:
        response = client.request(method=method, url=url, **kwargs)
        return response if _matches(response, expected, url, method) else None

    try:
        return wait_until(_condition, poll_config)
    finally:
        if owns_client:
            client.close()


async def wait_for_status_async(
    url: str,
    status: int | tuple[int, ...] = 200,
    *,
    client: httpx.AsyncClient | None = None,
    method: str = "GET",
    config: PollConfig | None = None,
    **kwargs: Any,
) -> httpx.Response:
    """Poll a URL asynchronously until the response has one of the
    expected statuses.

    Args:
        url: The URL to poll.
        status: Expected status code, or tuple of accepted status codes.
        client: Optional httpx.AsyncClient to use. If None, a new client
            is created and closed once polling ends.
        method: The HTTP method to send (default: "GET").
        config: Optional polling configuration. ``httpx.RequestError`` is
            always added to its ignored exceptions.
        **kwargs: Additional keyword arguments passed to
            ``client.request()``.

    Returns:
        The first response whose status is expected.

    Raises:
        ConditionTimeoutError: If no expected status was returned within
            the timeout.
    """
    expected = _normalize_status(status)
    owns_client = client is None
    client = client or httpx.AsyncClient()
    poll_config = _with_request_error_ignored(config, url)

    async def _condition() -> httpx.Response | None:
        response = await client.request(method=method, url=url, **kwargs)
        return response if _matches(response, expected, url, method) else None

    try:
        return await wait_until_async(_condition, poll_config)
    finally:
        if owns_client:
            await client.aclose()


def _with_request_error_ignored(config: PollConfig | None, url: str) -> PollConfig:
    config = config or PollConfig()
    ignored = config.ignore_exceptions
    if httpx.RequestError not in ignored:
        ignored = (*ignored, httpx.RequestError)
    return config.merge(ignore_exceptions=ignored, alias=config.alias or url)
