"""Matches, match lists and timelines."""

import dataclasses
from typing import List, Optional

from .. import endpoints
from ..filters import MatchFilter
from ..models import Match, Matchlist, MatchReference, MatchTimeline
from ..streaming import PAGE_SIZE, Stream
from .base import ResourceClient, logged_operation


class MatchClient(ResourceClient):
    """Match endpoints."""

    category = "match"

    @logged_operation
    async def get(self, match_id: int) -> Match:
        """Get a match by its ID."""
        endpoint = endpoints.GET_MATCH.format(match_id=match_id)
        return await self._client.get_into(endpoint, Match)

    @logged_operation
    async def list(
        self, account_id: str, match_filter: Optional[MatchFilter] = None
    ) -> Matchlist:
        """Get the matches played on the account, restricted by ``match_filter``."""
        query = match_filter.query_params() if match_filter else ""
        if query:
            query = "?" + query
        endpoint = endpoints.GET_MATCHES_BY_ACCOUNT.format(account_id=account_id, query=query)
        return await self._client.get_into(endpoint, Matchlist)

    def list_stream(
        self, account_id: str, match_filter: Optional[MatchFilter] = None
    ) -> Stream[MatchReference]:
        """
        Stream every match played on the account.

        Pages of 100 matches are requested until a page comes back short.
        The window is applied to a copy of ``match_filter``; its own
        ``begin_index``/``end_index`` are ignored.

        Must be called with a running event loop.
        """
        base_filter = match_filter or MatchFilter()
        log = self.logger.bind(method="list_stream", account_id=account_id)

        async def fetch_page(start: int, end: int) -> List[MatchReference]:
            window = dataclasses.replace(base_filter, begin_index=start, end_index=end)
            matchlist = await self.list(account_id, window)
            return matchlist.matches

        return Stream(fetch_page, page_size=PAGE_SIZE, log=log)

    @logged_operation
    async def get_timeline(self, match_id: int) -> MatchTimeline:
        """Get the timeline of a match. Not every match has one."""
        endpoint = endpoints.GET_MATCH_TIMELINE.format(match_id=match_id)
        return await self._client.get_into(endpoint, MatchTimeline)

    @logged_operation
    async def list_ids_by_tournament_code(self, tournament_code: str) -> List[int]:
        """Get the IDs of the matches played with a tournament code."""
        endpoint = endpoints.GET_MATCH_IDS_BY_TOURNAMENT_CODE.format(code=tournament_code)
        return await self._client.get_into(endpoint, List[int])

    @logged_operation
    async def get_for_tournament(self, match_id: int, tournament_code: str) -> Match:
        """Get a match played with a tournament code."""
        endpoint = endpoints.GET_MATCH_FOR_TOURNAMENT.format(
            match_id=match_id, code=tournament_code
        )
        return await self._client.get_into(endpoint, Match)
