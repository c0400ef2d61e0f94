"""
Shared fixtures: mock transports and client factories.
"""

from typing import Any, Callable, List, Optional
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from riot_api import Client, Region


class SequenceHandler:
    """MockTransport handler replaying responses in order, repeating the last one."""

    def __init__(self, responses: List[Callable[[], httpx.Response]]):
        self.responses = responses
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        index = min(len(self.requests), len(self.responses)) - 1
        return self.responses[index]()


def make_transport(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """Wrap a handler into a transport the client can send through."""
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


def json_response(body: Any, status: int = 200) -> Callable[[], httpx.Response]:
    return lambda: httpx.Response(status, json=body)


def status_response(
    status: int, headers: Optional[dict] = None
) -> Callable[[], httpx.Response]:
    return lambda: httpx.Response(status, headers=headers)


def json_handler(body: Any, status: int = 200) -> SequenceHandler:
    return SequenceHandler([json_response(body, status)])


def status_handler(status: int) -> SequenceHandler:
    return SequenceHandler([status_response(status)])


def rate_limit_handler(body: Any, retry_after: str = "1") -> SequenceHandler:
    """First response is a 429, every following one succeeds."""
    return SequenceHandler(
        [status_response(429, {"Retry-After": retry_after}), json_response(body)]
    )


def unavailable_once_handler(body: Any) -> SequenceHandler:
    """First response is a 503, every following one succeeds."""
    return SequenceHandler([status_response(503), json_response(body)])


@pytest.fixture
def make_client():
    """Factory building a client on top of a mock handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> Client:
        return Client(Region.EUW1, "API_KEY", transport=make_transport(handler), **kwargs)

    return _make


@pytest.fixture
def mock_sleep():
    """Replace the retry sleeps with an AsyncMock."""
    with patch("riot_api.client.asyncio.sleep", new_callable=AsyncMock) as sleep:
        yield sleep


@pytest.fixture
def sample_summoner_data():
    """Sample summoner data for testing."""
    return {
        "id": "test-summoner-id",
        "accountId": "test-account-id",
        "puuid": "test-puuid-123",
        "name": "TestPlayer",
        "profileIconId": 1234,
        "revisionDate": 1234567890000,
        "summonerLevel": 100,
    }


def match_references(count: int, offset: int = 0) -> List[dict]:
    """Build ``count`` match list entries with consecutive game IDs."""
    return [
        {
            "gameId": 4000000000 + i,
            "platformId": "EUW1",
            "champion": 238,
            "queue": 420,
            "season": 13,
            "timestamp": 1710000000000 + i,
            "role": "SOLO",
            "lane": "MID",
        }
        for i in range(offset, offset + count)
    ]
