"""Resource clients, one per API resource, attached to ``Client``."""

from .base import ResourceClient
from .champion import ChampionClient, ChampionMasteryClient
from .league import LeagueClient
from .match import MatchClient
from .spectator import SpectatorClient
from .status import StatusClient
from .summoner import SummonerClient
from .third_party_code import ThirdPartyCodeClient
from .tournament import TournamentClient

__all__ = [
    "ResourceClient",
    "ChampionClient",
    "ChampionMasteryClient",
    "LeagueClient",
    "MatchClient",
    "SpectatorClient",
    "StatusClient",
    "SummonerClient",
    "ThirdPartyCodeClient",
    "TournamentClient",
]
