"""
Paginated streaming over windowed list endpoints.

A ``Stream`` runs one background task that walks an endpoint page by page
and pushes every item into a bounded queue. The consumer either awaits
``get()`` for raw ``StreamValue`` objects or iterates with ``async for``.
"""

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, List, Optional, Sequence, TypeVar

import structlog

from .errors import EndOfStream

logger = structlog.get_logger(__name__)

T = TypeVar("T")

PAGE_SIZE = 100
STREAM_BUFFER_SIZE = 100


@dataclass(frozen=True)
class StreamValue(Generic[T]):
    """One value on a stream: an item, or the terminal error."""

    item: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def end_of_stream(self) -> bool:
        """True when this value marks graceful exhaustion of the stream."""
        return isinstance(self.error, EndOfStream)


class Stream(Generic[T]):
    """Single-producer/single-consumer stream fed by a windowed fetch function.

    ``fetch_page(start, end)`` must return the items in ``[start, end)``.
    A page shorter than ``page_size`` ends the stream. Any exception raised
    by ``fetch_page`` is delivered as the last value and stops the producer.

    The producer is not cancelled when the consumer stops reading; it stays
    blocked on the full queue until ``task`` is cancelled.
    """

    def __init__(
        self,
        fetch_page: Callable[[int, int], Awaitable[Sequence[T]]],
        page_size: int = PAGE_SIZE,
        buffer_size: int = STREAM_BUFFER_SIZE,
        log: Optional[Any] = None,
    ) -> None:
        self._fetch_page = fetch_page
        self.page_size = page_size
        self._logger = log or logger
        self._queue: "asyncio.Queue[StreamValue[T]]" = asyncio.Queue(maxsize=buffer_size)
        self._finished = False
        self.task: asyncio.Task = asyncio.create_task(self._produce())

    async def _produce(self) -> None:
        start = 0
        while True:
            try:
                page = await self._fetch_page(start, start + self.page_size)
            except Exception as e:
                self._logger.debug("Stream fetch failed", start=start, error=str(e))
                await self._queue.put(StreamValue(error=e))
                return

            for item in page:
                await self._queue.put(StreamValue(item=item))

            if len(page) < self.page_size:
                await self._queue.put(StreamValue(error=EndOfStream()))
                return
            start += self.page_size

    async def get(self) -> StreamValue[T]:
        """Wait for the next value."""
        return await self._queue.get()

    def __aiter__(self) -> "Stream[T]":
        return self

    async def __anext__(self) -> T:
        if self._finished:
            raise StopAsyncIteration
        value = await self.get()
        if value.error is None:
            return value.item  # type: ignore[return-value]
        self._finished = True
        if value.end_of_stream:
            raise StopAsyncIteration
        raise value.error

    async def collect(self) -> List[T]:
        """Drain the stream into a list, raising the terminal error if any."""
        return [item async for item in self]
