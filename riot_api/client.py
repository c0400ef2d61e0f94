"""Riot API client: request pipeline, retry policies and JSON decoding."""

import asyncio
import functools
from typing import Any, Optional, Type, TypeVar, Union

import httpx
import structlog
from pydantic import TypeAdapter, ValidationError
from pydantic_core import to_json

from .constants import Region
from .core.config import Settings, get_global_settings
from .endpoints import API_TOKEN_HEADER, API_URL_FORMAT, BASE_HOST, SCHEME
from .errors import RateLimitError, error_for_status
from .protocols import Transport
from .resources import (
    ChampionClient,
    ChampionMasteryClient,
    LeagueClient,
    MatchClient,
    SpectatorClient,
    StatusClient,
    SummonerClient,
    ThirdPartyCodeClient,
    TournamentClient,
)

T = TypeVar("T")

SERVICE_UNAVAILABLE_DELAY = 1


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


class Client:
    """Access to all Riot API endpoints of one region."""

    def __init__(
        self,
        region: Union[Region, str],
        api_key: str,
        transport: Optional[Transport] = None,
        logger: Optional[Any] = None,
        max_rate_limit_retries: Optional[int] = None,
    ):
        """
        Initialize Riot API client.

        Args:
            region: Platform host to send requests to
            api_key: Riot API key, sent with every request
            transport: Object with an async ``send(request)``; an owned
                ``httpx.AsyncClient`` is created if None
            logger: structlog logger to bind the client's context onto
            max_rate_limit_retries: Consecutive 429 retries allowed before
                raising RateLimitError (unbounded if None)
        """
        self.region = Region(region)
        self._api_key = api_key
        self._owns_transport = transport is None
        self.transport: Transport = transport or httpx.AsyncClient()
        self.max_rate_limit_retries = max_rate_limit_retries
        self.logger = (logger or structlog.get_logger(__name__)).bind(
            client="riot api", region=self.region.value
        )

        self.summoner = SummonerClient(self)
        self.champion = ChampionClient(self)
        self.champion_mastery = ChampionMasteryClient(self)
        self.league = LeagueClient(self)
        self.match = MatchClient(self)
        self.spectator = SpectatorClient(self)
        self.status = StatusClient(self)
        self.tournament = TournamentClient(self)
        self.third_party_code = ThirdPartyCodeClient(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Client":
        """Build a client from environment-backed settings."""
        settings = settings or get_global_settings()
        transport = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))
        client = cls(
            region=settings.riot_region,
            api_key=settings.riot_api_key.get_secret_value(),
            transport=transport,
            max_rate_limit_retries=settings.max_rate_limit_retries,
        )
        client._owns_transport = True
        return client

    async def __aenter__(self) -> "Client":
        """Async context manager entry."""
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport and isinstance(self.transport, httpx.AsyncClient):
            if not self.transport.is_closed:
                await self.transport.aclose()
                self.logger.info("Riot API client transport closed")

    # Decoding layer

    async def get_into(self, endpoint: str, target: Type[T]) -> T:
        """GET ``endpoint`` and decode the JSON body as ``target``."""
        log = self.logger.bind(method="get_into", endpoint=endpoint)
        response = await self._do_request("GET", endpoint)
        return self._decode(response, target, log)

    async def post_into(self, endpoint: str, body: Any, target: Type[T]) -> T:
        """POST ``body`` as JSON to ``endpoint`` and decode the response as ``target``."""
        log = self.logger.bind(method="post_into", endpoint=endpoint)
        response = await self._do_request("POST", endpoint, self._encode(body))
        return self._decode(response, target, log)

    async def put(self, endpoint: str, body: Any) -> None:
        """PUT ``body`` as JSON to ``endpoint``; the response body is ignored."""
        await self._do_request("PUT", endpoint, self._encode(body))

    @staticmethod
    def _encode(body: Any) -> bytes:
        return to_json(body, by_alias=True, exclude_none=True)

    @staticmethod
    def _decode(response: httpx.Response, target: Type[T], log: Any) -> T:
        try:
            return _adapter(target).validate_json(response.content)
        except ValidationError as e:
            log.error("Failed to decode response", error=str(e))
            raise

    # Request engine

    async def _do_request(
        self, method: str, endpoint: str, content: Optional[bytes] = None
    ) -> httpx.Response:
        """
        Send a request, applying the retry policies.

        A 503 is retried once after one second. A 429 sleeps for
        ``Retry-After`` seconds and starts the request over. Any other
        non-2xx status is raised as the matching RiotAPIError.

        Raises:
            RiotAPIError: For non-2xx responses
            httpx.HTTPError: For transport failures
        """
        log = self.logger.bind(method="do_request", endpoint=endpoint)
        rate_limited = 0

        while True:
            request = self._new_request(method, endpoint, content)
            log.debug("Sending request", http_method=method)
            response = await self._send(request, log)

            if response.status_code == 503:
                log.info("Service unavailable, retrying")
                await asyncio.sleep(SERVICE_UNAVAILABLE_DELAY)
                response = await self._send(request, log)

            if response.status_code == 429:
                seconds = self._retry_after_seconds(response, log)
                rate_limited += 1
                if (
                    self.max_rate_limit_retries is not None
                    and rate_limited > self.max_rate_limit_retries
                ):
                    log.error("Rate limit retries exhausted", retries=rate_limited - 1)
                    raise RateLimitError(
                        "Rate limit exceeded", status_code=429, retry_after=seconds
                    )
                log.info("Rate limited, waiting", seconds=seconds)
                await asyncio.sleep(seconds)
                continue

            if not 200 <= response.status_code <= 299:
                log.error("Error response", status_code=response.status_code)
                raise error_for_status(response.status_code)

            return response

    def _new_request(
        self, method: str, endpoint: str, content: Optional[bytes] = None
    ) -> httpx.Request:
        url = API_URL_FORMAT.format(
            scheme=SCHEME, region=self.region.value, base_host=BASE_HOST, endpoint=endpoint
        )
        headers = {API_TOKEN_HEADER: self._api_key, "Accept": "application/json"}
        if content is not None:
            headers["Content-Type"] = "application/json"
        return httpx.Request(method, url, headers=headers, content=content)

    async def _send(self, request: httpx.Request, log: Any) -> httpx.Response:
        try:
            return await self.transport.send(request)
        except httpx.HTTPError as e:
            log.error("Transport error", error=str(e))
            raise

    @staticmethod
    def _retry_after_seconds(response: httpx.Response, log: Any) -> int:
        value = response.headers.get("Retry-After")
        try:
            return int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError) as e:
            log.error("Invalid Retry-After header", retry_after=value)
            raise RateLimitError(
                f"invalid Retry-After header: {value!r}", status_code=429
            ) from e
