"""
Riot API client package for League of Legends API integration.

This package provides an async HTTP client for the Riot API with
authentication, status code to error mapping, retry on rate limiting and
service unavailability, and streaming of paginated match lists.
"""

from .client import Client
from .constants import (
    Division,
    MapType,
    PickType,
    Queue,
    QueueType,
    Region,
    SpectatorType,
    Tier,
)
from .errors import (
    RiotAPIError,
    BadRequestError,
    UnauthorizedError,
    ForbiddenError,
    NotFoundError,
    MethodNotAllowedError,
    UnsupportedMediaTypeError,
    RateLimitError,
    InternalServerError,
    BadGatewayError,
    ServiceUnavailableError,
    GatewayTimeoutError,
    UnknownStatusError,
    EndOfStream,
    STATUS_TO_ERROR,
)
from .filters import MatchFilter
from .models import (
    ChampionInfo,
    ChampionMastery,
    FeaturedGames,
    GameInfo,
    LeagueItem,
    LeagueList,
    LobbyEventList,
    Match,
    Matchlist,
    MatchReference,
    MatchTimeline,
    ProviderRegistrationParameters,
    Status,
    Summoner,
    Tournament,
    TournamentCodeParameters,
    TournamentRegistrationParameters,
    TournamentUpdateParameters,
)
from .protocols import Transport
from .streaming import Stream, StreamValue

MatchStreamValue = StreamValue[MatchReference]

__all__ = [
    "Client",
    "Transport",
    # Constants
    "Division",
    "MapType",
    "PickType",
    "Queue",
    "QueueType",
    "Region",
    "SpectatorType",
    "Tier",
    # Errors
    "RiotAPIError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "MethodNotAllowedError",
    "UnsupportedMediaTypeError",
    "RateLimitError",
    "InternalServerError",
    "BadGatewayError",
    "ServiceUnavailableError",
    "GatewayTimeoutError",
    "UnknownStatusError",
    "EndOfStream",
    "STATUS_TO_ERROR",
    # Streaming
    "MatchFilter",
    "Stream",
    "StreamValue",
    "MatchStreamValue",
    # Models
    "ChampionInfo",
    "ChampionMastery",
    "FeaturedGames",
    "GameInfo",
    "LeagueItem",
    "LeagueList",
    "LobbyEventList",
    "Match",
    "Matchlist",
    "MatchReference",
    "MatchTimeline",
    "ProviderRegistrationParameters",
    "Status",
    "Summoner",
    "Tournament",
    "TournamentCodeParameters",
    "TournamentRegistrationParameters",
    "TournamentUpdateParameters",
]
