"""Tournament API.

Every creating call takes ``use_stub``; the stub endpoints accept the same
requests and return mock data, for developing against before a production
tournament key is granted.
"""

from typing import List

from .. import endpoints
from ..models import (
    LobbyEventList,
    ProviderRegistrationParameters,
    Tournament,
    TournamentCodeParameters,
    TournamentRegistrationParameters,
    TournamentUpdateParameters,
)
from .base import ResourceClient, logged_operation


class TournamentClient(ResourceClient):
    """Tournament endpoints."""

    category = "tournament"

    @logged_operation
    async def create_codes(
        self,
        tournament_id: int,
        count: int,
        parameters: TournamentCodeParameters,
        use_stub: bool = False,
    ) -> List[str]:
        """Create ``count`` codes for the tournament."""
        template = (
            endpoints.CREATE_STUB_TOURNAMENT_CODES
            if use_stub
            else endpoints.CREATE_TOURNAMENT_CODES
        )
        endpoint = template.format(count=count, tournament_id=tournament_id)
        return await self._client.post_into(endpoint, parameters, List[str])

    @logged_operation
    async def list_lobby_events(self, code: str, use_stub: bool = False) -> LobbyEventList:
        """Get the lobby events of the lobby created by a tournament code."""
        template = endpoints.GET_STUB_LOBBY_EVENTS if use_stub else endpoints.GET_LOBBY_EVENTS
        return await self._client.get_into(template.format(code=code), LobbyEventList)

    @logged_operation
    async def create_provider(
        self, parameters: ProviderRegistrationParameters, use_stub: bool = False
    ) -> int:
        """Register a tournament provider and return its ID."""
        endpoint = (
            endpoints.CREATE_STUB_TOURNAMENT_PROVIDER
            if use_stub
            else endpoints.CREATE_TOURNAMENT_PROVIDER
        )
        return await self._client.post_into(endpoint, parameters, int)

    @logged_operation
    async def create(
        self, parameters: TournamentRegistrationParameters, use_stub: bool = False
    ) -> int:
        """Register a tournament and return its ID."""
        endpoint = endpoints.CREATE_STUB_TOURNAMENT if use_stub else endpoints.CREATE_TOURNAMENT
        return await self._client.post_into(endpoint, parameters, int)

    @logged_operation
    async def get(self, code: str) -> Tournament:
        """Get the details of a tournament code."""
        return await self._client.get_into(endpoints.GET_TOURNAMENT.format(code=code), Tournament)

    @logged_operation
    async def update(self, code: str, parameters: TournamentUpdateParameters) -> None:
        """Update the settings of a tournament code."""
        await self._client.put(endpoints.UPDATE_TOURNAMENT.format(code=code), parameters)
