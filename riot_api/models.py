"""Pydantic models for Riot API request and response data."""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .constants import MapType, PickType, SpectatorType


# Summoner


class Summoner(BaseModel):
    """League of Legends summoner information."""

    id: str
    account_id: str = Field(..., alias="accountId")
    puuid: str
    name: str
    profile_icon_id: int = Field(0, alias="profileIconId")
    revision_date: int = Field(0, alias="revisionDate")
    summoner_level: int = Field(0, alias="summonerLevel")

    model_config = ConfigDict(populate_by_name=True)


# Champion


class ChampionInfo(BaseModel):
    """Current free champion rotation."""

    free_champion_ids: List[int] = Field(default_factory=list, alias="freeChampionIds")
    free_champion_ids_for_new_players: List[int] = Field(
        default_factory=list, alias="freeChampionIdsForNewPlayers"
    )
    max_new_player_level: int = Field(0, alias="maxNewPlayerLevel")

    model_config = ConfigDict(populate_by_name=True)


class ChampionMastery(BaseModel):
    """Mastery of one champion for one summoner."""

    champion_id: int = Field(..., alias="championId")
    summoner_id: Optional[str] = Field(None, alias="summonerId")
    champion_level: int = Field(0, alias="championLevel")
    champion_points: int = Field(0, alias="championPoints")
    champion_points_since_last_level: int = Field(0, alias="championPointsSinceLastLevel")
    champion_points_until_next_level: int = Field(0, alias="championPointsUntilNextLevel")
    chest_granted: bool = Field(False, alias="chestGranted")
    tokens_earned: int = Field(0, alias="tokensEarned")
    last_play_time: int = Field(0, alias="lastPlayTime")

    model_config = ConfigDict(populate_by_name=True)


# League


class MiniSeries(BaseModel):
    """Promotion series progress."""

    losses: int = 0
    progress: str = ""
    target: int = 0
    wins: int = 0


class LeagueItem(BaseModel):
    """One entry in a league."""

    summoner_id: str = Field(..., alias="summonerId")
    summoner_name: Optional[str] = Field(None, alias="summonerName")
    league_id: Optional[str] = Field(None, alias="leagueId")
    queue_type: Optional[str] = Field(None, alias="queueType")
    tier: Optional[str] = None
    rank: str = ""
    league_points: int = Field(0, alias="leaguePoints")
    wins: int = 0
    losses: int = 0
    veteran: bool = False
    inactive: bool = False
    fresh_blood: bool = Field(False, alias="freshBlood")
    hot_streak: bool = Field(False, alias="hotStreak")
    mini_series: Optional[MiniSeries] = Field(None, alias="miniSeries")

    model_config = ConfigDict(populate_by_name=True)


class LeagueList(BaseModel):
    """A ranked league with its entries."""

    league_id: str = Field(..., alias="leagueId")
    tier: str
    queue: str
    name: str = ""
    entries: List[LeagueItem] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


# Status


class Translation(BaseModel):
    """Localized status message."""

    locale: str = ""
    heading: str = ""
    content: str = ""


class Message(BaseModel):
    """Status incident update."""

    id: str
    author: str = ""
    content: str = ""
    severity: str = ""
    created_at: str = ""
    updated_at: str = ""
    translations: List[Translation] = Field(default_factory=list)


class Incident(BaseModel):
    """Service incident."""

    id: int
    active: bool = False
    created_at: str = ""
    updates: List[Message] = Field(default_factory=list)


class Service(BaseModel):
    """State of one platform service."""

    name: str
    slug: str = ""
    status: str = ""
    incidents: List[Incident] = Field(default_factory=list)


class Status(BaseModel):
    """Shard status for a region."""

    name: str
    slug: str = ""
    hostname: str = ""
    region_tag: str = ""
    locales: List[str] = Field(default_factory=list)
    services: List[Service] = Field(default_factory=list)


# Match


class MatchReference(BaseModel):
    """Entry in a match list."""

    game_id: int = Field(..., alias="gameId")
    platform_id: str = Field("", alias="platformId")
    champion: int = 0
    queue: int = 0
    season: int = 0
    timestamp: int = 0
    role: str = ""
    lane: str = ""

    model_config = ConfigDict(populate_by_name=True)


class Matchlist(BaseModel):
    """A window of matches played on an account."""

    matches: List[MatchReference] = Field(default_factory=list)
    start_index: int = Field(0, alias="startIndex")
    end_index: int = Field(0, alias="endIndex")
    total_games: int = Field(0, alias="totalGames")

    model_config = ConfigDict(populate_by_name=True)


class Player(BaseModel):
    """Player behind a match participant."""

    summoner_id: Optional[str] = Field(None, alias="summonerId")
    summoner_name: str = Field("", alias="summonerName")
    account_id: Optional[str] = Field(None, alias="accountId")
    current_account_id: Optional[str] = Field(None, alias="currentAccountId")
    platform_id: str = Field("", alias="platformId")
    profile_icon: int = Field(0, alias="profileIcon")

    model_config = ConfigDict(populate_by_name=True)


class ParticipantIdentity(BaseModel):
    """Maps a participant ID to a player."""

    participant_id: int = Field(..., alias="participantId")
    player: Optional[Player] = None

    model_config = ConfigDict(populate_by_name=True)


class ParticipantStats(BaseModel):
    """Subset of the per-participant end of game stats."""

    win: bool = False
    kills: int = 0
    deaths: int = 0
    assists: int = 0
    champ_level: int = Field(0, alias="champLevel")
    gold_earned: int = Field(0, alias="goldEarned")
    total_minions_killed: int = Field(0, alias="totalMinionsKilled")
    neutral_minions_killed: int = Field(0, alias="neutralMinionsKilled")
    vision_score: int = Field(0, alias="visionScore")
    total_damage_dealt_to_champions: int = Field(0, alias="totalDamageDealtToChampions")

    model_config = ConfigDict(populate_by_name=True)


class Participant(BaseModel):
    """Match participant."""

    participant_id: int = Field(..., alias="participantId")
    team_id: int = Field(..., alias="teamId")
    champion_id: int = Field(..., alias="championId")
    spell1_id: int = Field(0, alias="spell1Id")
    spell2_id: int = Field(0, alias="spell2Id")
    stats: Optional[ParticipantStats] = None

    model_config = ConfigDict(populate_by_name=True)


class TeamBan(BaseModel):
    """Champion banned by a team."""

    champion_id: int = Field(..., alias="championId")
    pick_turn: int = Field(0, alias="pickTurn")

    model_config = ConfigDict(populate_by_name=True)


class TeamStats(BaseModel):
    """Per-team match stats."""

    team_id: int = Field(..., alias="teamId")
    win: str = ""
    first_blood: bool = Field(False, alias="firstBlood")
    tower_kills: int = Field(0, alias="towerKills")
    baron_kills: int = Field(0, alias="baronKills")
    dragon_kills: int = Field(0, alias="dragonKills")
    bans: List[TeamBan] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class Match(BaseModel):
    """Complete match data."""

    game_id: int = Field(..., alias="gameId")
    platform_id: str = Field("", alias="platformId")
    game_creation: int = Field(0, alias="gameCreation")
    game_duration: int = Field(0, alias="gameDuration")
    queue_id: int = Field(0, alias="queueId")
    map_id: int = Field(0, alias="mapId")
    season_id: int = Field(0, alias="seasonId")
    game_version: str = Field("", alias="gameVersion")
    game_mode: str = Field("", alias="gameMode")
    game_type: str = Field("", alias="gameType")
    teams: List[TeamStats] = Field(default_factory=list)
    participants: List[Participant] = Field(default_factory=list)
    participant_identities: List[ParticipantIdentity] = Field(
        default_factory=list, alias="participantIdentities"
    )

    model_config = ConfigDict(populate_by_name=True)


class MatchPosition(BaseModel):
    """Position on the map."""

    x: int = 0
    y: int = 0


class MatchEvent(BaseModel):
    """Timeline event. Only the common fields are modeled."""

    type: str
    timestamp: int = 0
    participant_id: Optional[int] = Field(None, alias="participantId")
    killer_id: Optional[int] = Field(None, alias="killerId")
    victim_id: Optional[int] = Field(None, alias="victimId")
    item_id: Optional[int] = Field(None, alias="itemId")
    position: Optional[MatchPosition] = None

    model_config = ConfigDict(populate_by_name=True)


class MatchParticipantFrame(BaseModel):
    """Participant state at a timeline frame."""

    participant_id: int = Field(..., alias="participantId")
    level: int = 0
    xp: int = 0
    current_gold: int = Field(0, alias="currentGold")
    total_gold: int = Field(0, alias="totalGold")
    minions_killed: int = Field(0, alias="minionsKilled")
    jungle_minions_killed: int = Field(0, alias="jungleMinionsKilled")
    position: Optional[MatchPosition] = None

    model_config = ConfigDict(populate_by_name=True)


class MatchFrame(BaseModel):
    """One frame of a match timeline."""

    timestamp: int = 0
    participant_frames: Dict[str, MatchParticipantFrame] = Field(
        default_factory=dict, alias="participantFrames"
    )
    events: List[MatchEvent] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class MatchTimeline(BaseModel):
    """Timeline of a match."""

    frame_interval: int = Field(0, alias="frameInterval")
    frames: List[MatchFrame] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


# Spectator


class BannedChampion(BaseModel):
    """Champion banned in a running game."""

    champion_id: int = Field(..., alias="championId")
    team_id: int = Field(..., alias="teamId")
    pick_turn: int = Field(0, alias="pickTurn")

    model_config = ConfigDict(populate_by_name=True)


class Observer(BaseModel):
    """Spectator key of a running game."""

    encryption_key: str = Field("", alias="encryptionKey")

    model_config = ConfigDict(populate_by_name=True)


class CurrentGameParticipant(BaseModel):
    """Participant of a running game."""

    champion_id: int = Field(..., alias="championId")
    team_id: int = Field(..., alias="teamId")
    summoner_name: str = Field("", alias="summonerName")
    summoner_id: Optional[str] = Field(None, alias="summonerId")
    profile_icon_id: int = Field(0, alias="profileIconId")
    spell1_id: int = Field(0, alias="spell1Id")
    spell2_id: int = Field(0, alias="spell2Id")
    bot: bool = False

    model_config = ConfigDict(populate_by_name=True)


class GameInfo(BaseModel):
    """A game in progress."""

    game_id: int = Field(..., alias="gameId")
    platform_id: str = Field("", alias="platformId")
    game_type: str = Field("", alias="gameType")
    game_mode: str = Field("", alias="gameMode")
    map_id: int = Field(0, alias="mapId")
    game_start_time: int = Field(0, alias="gameStartTime")
    game_length: int = Field(0, alias="gameLength")
    game_queue_config_id: Optional[int] = Field(None, alias="gameQueueConfigId")
    observers: Optional[Observer] = None
    banned_champions: List[BannedChampion] = Field(
        default_factory=list, alias="bannedChampions"
    )
    participants: List[CurrentGameParticipant] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class FeaturedGames(BaseModel):
    """Games currently featured in the client."""

    game_list: List[GameInfo] = Field(default_factory=list, alias="gameList")
    client_refresh_interval: int = Field(0, alias="clientRefreshInterval")

    model_config = ConfigDict(populate_by_name=True)


# Tournament


class TournamentCodeParameters(BaseModel):
    """Parameters for creating tournament codes."""

    team_size: int = Field(..., alias="teamSize")
    pick_type: PickType = Field(..., alias="pickType")
    map_type: MapType = Field(..., alias="mapType")
    spectator_type: SpectatorType = Field(..., alias="spectatorType")
    allowed_summoner_ids: Optional[List[str]] = Field(None, alias="allowedSummonerIds")
    metadata: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class TournamentUpdateParameters(BaseModel):
    """Parameters for updating an existing tournament code."""

    pick_type: PickType = Field(..., alias="pickType")
    map_type: MapType = Field(..., alias="mapType")
    spectator_type: SpectatorType = Field(..., alias="spectatorType")
    allowed_summoner_ids: Optional[List[str]] = Field(None, alias="allowedSummonerIds")

    model_config = ConfigDict(populate_by_name=True)


class ProviderRegistrationParameters(BaseModel):
    """Parameters for registering a tournament provider.

    ``url`` receives the game result callbacks; ``region`` is the upper case
    region name (e.g. ``EUW``).
    """

    region: str
    url: str


class TournamentRegistrationParameters(BaseModel):
    """Parameters for registering a tournament."""

    provider_id: int = Field(..., alias="providerId")
    name: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class Tournament(BaseModel):
    """Details of a tournament code."""

    code: str
    id: int = 0
    provider_id: int = Field(0, alias="providerId")
    tournament_id: int = Field(0, alias="tournamentId")
    region: str = ""
    map: str = ""
    pick_type: str = Field("", alias="pickType")
    spectators: str = ""
    team_size: int = Field(0, alias="teamSize")
    lobby_name: str = Field("", alias="lobbyName")
    password: str = ""
    meta_data: Optional[str] = Field(None, alias="metaData")
    participants: List[str] = Field(default_factory=list)

    model_config = ConfigDict(populate_by_name=True)


class LobbyEvent(BaseModel):
    """Event in a tournament lobby."""

    event_type: str = Field(..., alias="eventType")
    summoner_id: str = Field("", alias="summonerId")
    timestamp: str = ""

    model_config = ConfigDict(populate_by_name=True)


class LobbyEventList(BaseModel):
    """Events of a tournament lobby."""

    event_list: List[LobbyEvent] = Field(default_factory=list, alias="eventList")

    model_config = ConfigDict(populate_by_name=True)
