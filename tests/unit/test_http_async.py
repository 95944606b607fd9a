r"""Unit tests for the asynchronous HTTP polling helper."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import httpx
import pytest

from apoll.config import PollConfig
from apoll.duration import ONE_SECOND, Duration
from apoll.exceptions import ConditionTimeoutError
from apoll.http import wait_for_status_async
from apoll.pollinterval import fixed

if TYPE_CHECKING:
    from tests.conftest import FakeClock

URL = "https://api.example.com/health"


def response(status_code: int) -> httpx.Response:
    return Mock(spec=httpx.Response, status_code=status_code)


@pytest.mark.asyncio
async def test_wait_for_status_async_retries_until_expected(
    fake_clock: FakeClock, mock_async_client: Mock
) -> None:
    ok = response(200)
    mock_async_client.request.side_effect = [
        httpx.ReadTimeout("timed out"),
        response(502),
        ok,
    ]
    config = PollConfig(poll_interval=fixed(Duration(500)))
    assert await wait_for_status_async(URL, client=mock_async_client, config=config) is ok
    assert mock_async_client.request.await_count == 3
    mock_async_client.aclose.assert_not_awaited()
    assert fake_clock.sleeps == [0.5, 0.5]


@pytest.mark.asyncio
async def test_wait_for_status_async_timeout(
    fake_clock: FakeClock, mock_async_client: Mock
) -> None:
    mock_async_client.request.return_value = response(503)
    config = PollConfig(timeout=ONE_SECOND, poll_interval=fixed(Duration(500)))
    with pytest.raises(ConditionTimeoutError, match=r"api.example.com/health"):
        await wait_for_status_async(URL, client=mock_async_client, config=config)
    assert mock_async_client.request.await_count == 3


@pytest.mark.asyncio
async def test_wait_for_status_async_creates_and_closes_client(
    fake_clock: FakeClock, mock_async_client: Mock
) -> None:
    mock_async_client.request.return_value = response(200)
    with patch("httpx.AsyncClient", return_value=mock_async_client):
        await wait_for_status_async(URL, method="HEAD")
    mock_async_client.request.assert_awaited_once_with(method="HEAD", url=URL)
    mock_async_client.aclose.assert_awaited_once_with()
