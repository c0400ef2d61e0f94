"""Riot API host and endpoint templates.

Templates are formatted with ``str.format`` by the resource clients and
appended to ``https://<region>.api.riotgames.com``.
"""

SCHEME = "https"
BASE_HOST = "api.riotgames.com"
API_URL_FORMAT = "{scheme}://{region}.{base_host}{endpoint}"
API_TOKEN_HEADER = "X-Riot-Token"

ENDPOINT_BASE = "/lol"

# Summoner
SUMMONER_BASE = ENDPOINT_BASE + "/summoner/v4/summoners"
GET_SUMMONER_BY = SUMMONER_BASE + "/by-{by}/{value}"
GET_SUMMONER_BY_SUMMONER_ID = SUMMONER_BASE + "/{summoner_id}"

# Champion mastery
CHAMPION_MASTERY_BASE = ENDPOINT_BASE + "/champion-mastery/v4"
GET_CHAMPION_MASTERIES = CHAMPION_MASTERY_BASE + "/champion-masteries/by-summoner/{summoner_id}"
GET_CHAMPION_MASTERY = (
    CHAMPION_MASTERY_BASE
    + "/champion-masteries/by-summoner/{summoner_id}/by-champion/{champion_id}"
)
GET_CHAMPION_MASTERY_TOTAL_SCORE = CHAMPION_MASTERY_BASE + "/scores/by-summoner/{summoner_id}"

# Champion
GET_FREE_CHAMPION_ROTATION = ENDPOINT_BASE + "/platform/v3/champion-rotations"

# League
LEAGUE_BASE = ENDPOINT_BASE + "/league/v4"
GET_CHALLENGER_LEAGUE = LEAGUE_BASE + "/challengerleagues/by-queue/{queue}"
GET_GRANDMASTER_LEAGUE = LEAGUE_BASE + "/grandmasterleagues/by-queue/{queue}"
GET_MASTER_LEAGUE = LEAGUE_BASE + "/masterleagues/by-queue/{queue}"
GET_LEAGUES_BY_SUMMONER = LEAGUE_BASE + "/entries/by-summoner/{summoner_id}"
GET_LEAGUE_PLAYERS = LEAGUE_BASE + "/entries/{queue}/{tier}/{division}"
GET_LEAGUE = LEAGUE_BASE + "/leagues/{league_id}"

# Status
GET_STATUS = ENDPOINT_BASE + "/status/v3/shard-data"

# Match
MATCH_BASE = ENDPOINT_BASE + "/match/v4"
GET_MATCH = MATCH_BASE + "/matches/{match_id}"
GET_MATCHES_BY_ACCOUNT = MATCH_BASE + "/matchlists/by-account/{account_id}{query}"
GET_MATCH_TIMELINE = MATCH_BASE + "/timelines/by-match/{match_id}"
GET_MATCH_IDS_BY_TOURNAMENT_CODE = MATCH_BASE + "/matches/by-tournament-code/{code}/ids"
GET_MATCH_FOR_TOURNAMENT = MATCH_BASE + "/matches/{match_id}/by-tournament-code/{code}"

# Spectator
SPECTATOR_BASE = ENDPOINT_BASE + "/spectator/v4"
GET_CURRENT_GAME = SPECTATOR_BASE + "/active-games/by-summoner/{summoner_id}"
GET_FEATURED_GAMES = SPECTATOR_BASE + "/featured-games"

# Tournament
TOURNAMENT_BASE = ENDPOINT_BASE + "/tournament/v4"
CREATE_TOURNAMENT_CODES = TOURNAMENT_BASE + "/codes?count={count}&tournamentId={tournament_id}"
GET_TOURNAMENT = TOURNAMENT_BASE + "/codes/{code}"
UPDATE_TOURNAMENT = TOURNAMENT_BASE + "/codes/{code}"
GET_LOBBY_EVENTS = TOURNAMENT_BASE + "/lobby-events/by-code/{code}"
CREATE_TOURNAMENT_PROVIDER = TOURNAMENT_BASE + "/providers"
CREATE_TOURNAMENT = TOURNAMENT_BASE + "/tournaments"

# Tournament stub
TOURNAMENT_STUB_BASE = ENDPOINT_BASE + "/tournament-stub/v4"
CREATE_STUB_TOURNAMENT_CODES = (
    TOURNAMENT_STUB_BASE + "/codes?count={count}&tournamentId={tournament_id}"
)
GET_STUB_LOBBY_EVENTS = TOURNAMENT_STUB_BASE + "/lobby-events/by-code/{code}"
CREATE_STUB_TOURNAMENT_PROVIDER = TOURNAMENT_STUB_BASE + "/providers"
CREATE_STUB_TOURNAMENT = TOURNAMENT_STUB_BASE + "/tournaments"

# Third party code
GET_THIRD_PARTY_CODE = ENDPOINT_BASE + "/platform/v4/third-party-code/by-summoner/{summoner_id}"
