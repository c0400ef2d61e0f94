"""Ranked leagues."""

from typing import List, Union

from .. import endpoints
from ..constants import Division, Queue, Tier
from ..models import LeagueItem, LeagueList
from .base import ResourceClient, logged_operation


def _value(v: Union[Queue, Tier, Division, str]) -> str:
    return v.value if hasattr(v, "value") else v


class LeagueClient(ResourceClient):
    """League endpoints."""

    category = "league"

    @logged_operation
    async def get_challenger(self, queue: Union[Queue, str]) -> LeagueList:
        """Get the Challenger league of the queue."""
        endpoint = endpoints.GET_CHALLENGER_LEAGUE.format(queue=_value(queue))
        return await self._client.get_into(endpoint, LeagueList)

    @logged_operation
    async def get_grandmaster(self, queue: Union[Queue, str]) -> LeagueList:
        """Get the Grandmaster league of the queue."""
        endpoint = endpoints.GET_GRANDMASTER_LEAGUE.format(queue=_value(queue))
        return await self._client.get_into(endpoint, LeagueList)

    @logged_operation
    async def get_master(self, queue: Union[Queue, str]) -> LeagueList:
        """Get the Master league of the queue."""
        endpoint = endpoints.GET_MASTER_LEAGUE.format(queue=_value(queue))
        return await self._client.get_into(endpoint, LeagueList)

    @logged_operation
    async def list_by_summoner(self, summoner_id: str) -> List[LeagueItem]:
        """Get the league entries of the summoner in every queue."""
        endpoint = endpoints.GET_LEAGUES_BY_SUMMONER.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, List[LeagueItem])

    @logged_operation
    async def list_players(
        self,
        queue: Union[Queue, str],
        tier: Union[Tier, str],
        division: Union[Division, str],
    ) -> List[LeagueItem]:
        """Get the entries of a queue, tier and division."""
        endpoint = endpoints.GET_LEAGUE_PLAYERS.format(
            queue=_value(queue), tier=_value(tier), division=_value(division)
        )
        return await self._client.get_into(endpoint, List[LeagueItem])

    @logged_operation
    async def get(self, league_id: str) -> LeagueList:
        """Get a league by its ID."""
        endpoint = endpoints.GET_LEAGUE.format(league_id=league_id)
        return await self._client.get_into(endpoint, LeagueList)
