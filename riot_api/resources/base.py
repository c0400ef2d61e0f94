"""Shared plumbing for the resource clients."""

import functools
from typing import TYPE_CHECKING, Any, Awaitable, Callable, TypeVar

if TYPE_CHECKING:
    from ..client import Client

R = TypeVar("R")


def logged_operation(
    func: Callable[..., Awaitable[R]]
) -> Callable[..., Awaitable[R]]:
    """
    Log a failed resource operation with its category and name, then re-raise.

    :example:
        @logged_operation
        async def get_by_id(self, summoner_id: str) -> Summoner:
            ...
    """
    operation_name = func.__name__

    @functools.wraps(func)
    async def wrapper(self: "ResourceClient", *args: Any, **kwargs: Any) -> R:
        try:
            return await func(self, *args, **kwargs)
        except Exception as e:
            self.logger.bind(method=operation_name).error(
                "Riot API operation failed",
                error_type=e.__class__.__name__,
                error=str(e),
            )
            raise

    return wrapper


class ResourceClient:
    """Groups the operations of one API resource on top of a Client."""

    category = ""

    def __init__(self, client: "Client"):
        self._client = client

    @property
    def logger(self) -> Any:
        """Client logger bound with this resource's category."""
        return self._client.logger.bind(category=self.category)
