"""Platform status."""

from .. import endpoints
from ..models import Status
from .base import ResourceClient, logged_operation


class StatusClient(ResourceClient):
    category = "status"

    @logged_operation
    async def get(self) -> Status:
        """Get the status of the region's services."""
        return await self._client.get_into(endpoints.GET_STATUS, Status)
