"""Third party verification codes."""

from .. import endpoints
from .base import ResourceClient, logged_operation


class ThirdPartyCodeClient(ResourceClient):
    category = "third party code"

    @logged_operation
    async def get(self, summoner_id: str) -> str:
        """Get the verification code the summoner entered in the client."""
        endpoint = endpoints.GET_THIRD_PARTY_CODE.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, str)
