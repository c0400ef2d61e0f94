"""Live games."""

from .. import endpoints
from ..models import FeaturedGames, GameInfo
from .base import ResourceClient, logged_operation


class SpectatorClient(ResourceClient):
    """Spectator endpoints."""

    category = "spectator"

    @logged_operation
    async def get_current(self, summoner_id: str) -> GameInfo:
        """Get the game the summoner is currently playing.

        Raises NotFoundError when the summoner is not in a game.
        """
        endpoint = endpoints.GET_CURRENT_GAME.format(summoner_id=summoner_id)
        return await self._client.get_into(endpoint, GameInfo)

    @logged_operation
    async def list_featured(self) -> FeaturedGames:
        """Get the games currently featured in the client."""
        return await self._client.get_into(endpoints.GET_FEATURED_GAMES, FeaturedGames)
