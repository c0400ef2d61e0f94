"""Protocol definitions for the collaborators the client depends on."""

from abc import abstractmethod
from typing import Protocol, runtime_checkable

import httpx


@runtime_checkable
class Transport(Protocol):
    """Anything that can send a prepared request.

    ``httpx.AsyncClient`` satisfies this protocol; tests plug in an
    ``httpx.AsyncClient`` backed by ``httpx.MockTransport``.
    """

    @abstractmethod
    async def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return the response or raise a transport error."""
        ...
