"""
Tests for data models.
"""

import pytest
from pydantic import ValidationError

from riot_api.constants import MapType, PickType, SpectatorType
from riot_api.models import (
    Match,
    Summoner,
    TournamentCodeParameters,
)


class TestSummoner:
    """Test cases for Summoner."""

    def test_field_alias(self):
        """Test camelCase JSON fields map to snake_case attributes."""
        summoner = Summoner(
            id="id", accountId="account", puuid="puuid", name="name", summonerLevel=30
        )

        assert summoner.account_id == "account"
        assert summoner.summoner_level == 30
        assert summoner.profile_icon_id == 0

    def test_populate_by_name(self):
        summoner = Summoner(id="id", account_id="account", puuid="puuid", name="name")
        assert summoner.account_id == "account"

    def test_missing_required(self):
        with pytest.raises(ValidationError):
            Summoner(id="id", puuid="puuid", name="name")

    def test_extra_fields_ignored(self):
        summoner = Summoner.model_validate(
            {"id": "id", "accountId": "a", "puuid": "p", "name": "n", "newField": 1}
        )
        assert not hasattr(summoner, "newField")


class TestMatch:
    """Test cases for Match."""

    def test_nested_models(self):
        match = Match.model_validate(
            {
                "gameId": 1,
                "participants": [
                    {
                        "participantId": 1,
                        "teamId": 100,
                        "championId": 238,
                        "stats": {"win": True, "kills": 5},
                    }
                ],
                "teams": [{"teamId": 100, "win": "Win", "bans": [{"championId": 1}]}],
            }
        )

        assert match.participants[0].stats.win is True
        assert match.teams[0].bans[0].champion_id == 1


class TestTournamentCodeParameters:
    """Test cases for request parameter serialization."""

    def test_dump_by_alias(self):
        parameters = TournamentCodeParameters(
            team_size=5,
            pick_type=PickType.ALL_RANDOM,
            map_type=MapType.HOWLING_ABYSS,
            spectator_type=SpectatorType.NONE,
            metadata="round 1",
        )

        assert parameters.model_dump(mode="json", by_alias=True, exclude_none=True) == {
            "teamSize": 5,
            "pickType": "ALL_RANDOM",
            "mapType": "HOWLING_ABYSS",
            "spectatorType": "NONE",
            "metadata": "round 1",
        }

    def test_invalid_pick_type(self):
        with pytest.raises(ValidationError):
            TournamentCodeParameters(
                team_size=5,
                pick_type="RANDOM",
                map_type=MapType.HOWLING_ABYSS,
                spectator_type=SpectatorType.NONE,
            )
