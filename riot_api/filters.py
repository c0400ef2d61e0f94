"""Query filters for list endpoints."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class MatchFilter:
    """
    Optional query parameters for the match list endpoint.

    Times are epoch milliseconds. The API rejects index windows wider than
    100 matches.
    """

    champions: List[int] = field(default_factory=list)
    queues: List[int] = field(default_factory=list)
    seasons: List[int] = field(default_factory=list)
    end_time: Optional[int] = None
    begin_time: Optional[int] = None
    end_index: Optional[int] = None
    begin_index: Optional[int] = None

    def query_params(self) -> str:
        """Serialize the filter to a query string without the leading '?'."""
        params: list[str] = []
        params.extend(f"champion={int(c)}" for c in self.champions)
        params.extend(f"queue={int(q)}" for q in self.queues)
        params.extend(f"season={int(s)}" for s in self.seasons)

        if self.end_time is not None:
            params.append(f"endTime={self.end_time}")
        if self.begin_time is not None:
            params.append(f"beginTime={self.begin_time}")
        if self.end_index is not None:
            params.append(f"endIndex={self.end_index}")
        if self.begin_index is not None:
            params.append(f"beginIndex={self.begin_index}")

        return "&".join(params)
