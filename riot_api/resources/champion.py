"""Champion rotation and champion mastery."""

from typing import List

from .. import endpoints
from ..models import ChampionInfo, ChampionMastery
from .base import ResourceClient, logged_operation


class ChampionClient(ResourceClient):
    """Champion endpoints."""

    category = "champion"

    @logged_operation
    async def get_free_rotation(self) -> ChampionInfo:
        """Get the current free champion rotation."""
        return await self._client.get_into(endpoints.GET_FREE_CHAMPION_ROTATION, ChampionInfo)


class ChampionMasteryClient(ResourceClient):
    """Champion mastery endpoints."""

    category = "champion mastery"

    @logged_operation
    async def list(self, summoner_id: str) -> List[ChampionMastery]:
        """Get the masteries of all champions played by the summoner."""
        endpoint = endpoints.GET_CHAMPION_MASTERIES.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, List[ChampionMastery])

    @logged_operation
    async def get(self, summoner_id: str, champion_id: int) -> ChampionMastery:
        """Get the summoner's mastery of one champion."""
        endpoint = endpoints.GET_CHAMPION_MASTERY.format(
            summoner_id=summoner_id, champion_id=champion_id
        )
        return await self._client.get_into(endpoint, ChampionMastery)

    @logged_operation
    async def get_total(self, summoner_id: str) -> int:
        """Get the summoner's total mastery score, summed over all champions."""
        endpoint = endpoints.GET_CHAMPION_MASTERY_TOTAL_SCORE.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, int)
