"""Summoner lookups."""

from .. import endpoints
from ..models import Summoner
from .base import ResourceClient, logged_operation

IDENTIFICATION_NAME = "name"
IDENTIFICATION_ACCOUNT_ID = "account"
IDENTIFICATION_PUUID = "puuid"


class SummonerClient(ResourceClient):
    """Summoner endpoints."""

    category = "summoner"

    @logged_operation
    async def get_by_name(self, name: str) -> Summoner:
        """Get the summoner with the given summoner name."""
        return await self._get_by(IDENTIFICATION_NAME, name)

    @logged_operation
    async def get_by_account_id(self, account_id: str) -> Summoner:
        """Get the summoner with the given encrypted account ID."""
        return await self._get_by(IDENTIFICATION_ACCOUNT_ID, account_id)

    @logged_operation
    async def get_by_puuid(self, puuid: str) -> Summoner:
        """Get the summoner with the given PUUID."""
        return await self._get_by(IDENTIFICATION_PUUID, puuid)

    @logged_operation
    async def get_by_id(self, summoner_id: str) -> Summoner:
        """Get the summoner with the given encrypted summoner ID."""
        endpoint = endpoints.GET_SUMMONER_BY_SUMMONER_ID.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, Summoner)

    async def _get_by(self, by: str, value: str) -> Summoner:
        endpoint = endpoints.GET_SUMMONER_BY.format(by=by, value=value)
        return await self._client.get_into(endpoint, Summoner)
