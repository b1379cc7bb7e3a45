"""
Tests for provider payload normalization.
"""

import pytest

from pinstats.core.ifpa_api.models import (
    IFPAPlayerDTO,
    IFPAPvpOpponentDTO,
    IFPAResultDTO,
)
from pinstats.core.matchplay_api.models import MatchPlayProfileDTO
from pinstats.features.stats import transformers


@pytest.fixture
def ifpa_player(ifpa_player_payload):
    return IFPAPlayerDTO.model_validate(ifpa_player_payload)


@pytest.fixture
def matchplay_profile(matchplay_profile_payload):
    return MatchPlayProfileDTO.model_validate(matchplay_profile_payload)


class TestIFPATransformers:
    """Test cases for IFPA normalization."""

    def test_player_to_stats(self, ifpa_player):
        """Numeric text is parsed and empty values become None."""
        stats = transformers.ifpa_player_to_stats(ifpa_player)

        assert stats.current_rank == 1234
        assert stats.current_points == 56.78
        assert stats.last_month_rank == 1300
        assert stats.last_year_rank is None
        assert stats.highest_rank == 999
        assert stats.ratings_value == 1500.5
        assert stats.efficiency_value == 25.5
        assert stats.total_events == 42
        assert stats.events_by_year == []

    def test_state_ranking_latest_open_nacs(self, ifpa_player):
        """The newest NACS open-system entry wins, other systems are ignored."""
        ranking = transformers.ifpa_state_ranking(ifpa_player)

        assert ranking is not None
        assert ranking.state == "Texas"
        assert ranking.rank == 12
        assert ranking.points == 20.25
        assert ranking.year == "2024"

    def test_state_ranking_absent(self):
        assert transformers.ifpa_state_ranking(IFPAPlayerDTO()) is None

    def test_missing_stats_block(self):
        """PHP-style empty arrays mean no stats, not an error."""
        player = IFPAPlayerDTO.model_validate(
            {"player_id": "1", "player_stats": [], "matchplay_events": [], "series": {}}
        )
        stats = transformers.ifpa_player_to_stats(player)

        assert stats.current_rank is None
        assert stats.state_ranking is None
        assert transformers.ifpa_matchplay_link(player) is None

    def test_open_system_key_fallback(self):
        """Older payloads name the open system MAIN."""
        player = IFPAPlayerDTO.model_validate(
            {"player_stats": {"system": {"MAIN": {"current_rank": "7"}}}}
        )
        assert transformers.ifpa_player_to_stats(player).current_rank == 7

    def test_identity(self, ifpa_player):
        identity = transformers.ifpa_identity(ifpa_player)
        assert identity.name == "Ada Flipper"
        assert identity.location == "Austin, TX"

    def test_identity_partial(self):
        identity = transformers.ifpa_identity(IFPAPlayerDTO(stateprov="TX"))
        assert identity.name is None
        assert identity.location == "TX"

    def test_matchplay_link_from_text(self, ifpa_player):
        assert transformers.ifpa_matchplay_link(ifpa_player) == 37737

    @pytest.mark.parametrize("raw", ["", "abc", "-5", None, "1.5"])
    def test_invalid_cross_link(self, raw):
        assert transformers.parse_cross_link(raw) is None

    def test_events_by_year(self):
        """Results group by year, points are rounded, newest year first."""
        results = [
            IFPAResultDTO(event_date="2024-03-01", current_points="10.123"),
            IFPAResultDTO(event_date="2024-06-01", current_points="5.001"),
            IFPAResultDTO(event_date="2023-01-01", current_points="1"),
            IFPAResultDTO(event_date="2023-02-01", current_points=""),
            IFPAResultDTO(event_date="", current_points="99"),
        ]

        by_year = transformers.ifpa_events_by_year(results)

        assert [entry.year for entry in by_year] == ["2024", "2023"]
        assert by_year[0].event_count == 2
        assert by_year[0].total_points == 15.12
        assert by_year[1].event_count == 2
        assert by_year[1].total_points == 1.0

    def test_pvp_summaries(self):
        """Opponents without games are dropped; most games first."""
        opponents = [
            IFPAPvpOpponentDTO(
                player_id="1", first_name="Bob", last_name="B", win_count="3",
                loss_count="1", tie_count="0",
            ),
            IFPAPvpOpponentDTO(player_id="2", first_name="Nobody"),
            IFPAPvpOpponentDTO(
                player_id="3", first_name="Carol", last_name="C", win_count="5",
                loss_count="5", tie_count="2",
            ),
            IFPAPvpOpponentDTO(player_id="4", first_name="Dave", tie_count="1"),
        ]

        summaries = transformers.ifpa_pvp_to_summaries(opponents)

        assert [s.name for s in summaries] == ["Carol C", "Bob B", "Dave"]
        assert summaries[0].total_games == 12
        assert summaries[1].win_rate == 0.75
        assert summaries[2].win_rate is None

    def test_pvp_limit(self):
        opponents = [
            IFPAPvpOpponentDTO(player_id=str(i), first_name=f"P{i}", win_count=str(i))
            for i in range(1, 15)
        ]
        summaries = transformers.ifpa_pvp_to_summaries(opponents, limit=10)
        assert len(summaries) == 10
        assert summaries[0].name == "P14"


class TestMatchPlayTransformers:
    """Test cases for Match Play normalization."""

    def test_profile_to_stats(self, matchplay_profile):
        stats = transformers.matchplay_profile_to_stats(matchplay_profile)

        assert stats.rating == 1650.0
        assert stats.rating_class == 2
        assert stats.grade == "A"
        assert stats.rd == 45.5
        assert stats.game_count == 500
        assert stats.win_count == 300
        assert stats.loss_count == 200
        assert stats.efficiency_percent == 60.1
        assert stats.tournament_play_count == 75

    def test_profile_without_rating(self):
        profile = MatchPlayProfileDTO.model_validate(
            {"user": {"userId": 1, "name": "New"}, "rating": [], "userCounts": None}
        )
        stats = transformers.matchplay_profile_to_stats(profile)

        assert stats.rating is None
        assert stats.grade is None
        assert stats.tournament_play_count is None

    @pytest.mark.parametrize(
        "rating_class, grade",
        [(1, "A+"), (2, "A"), (3, "B"), (4, "C"), (5, "D"), (7, "7"), (None, None)],
    )
    def test_grade_for_rating_class(self, rating_class, grade):
        assert transformers.grade_for_rating_class(rating_class) == grade

    def test_identity(self, matchplay_profile):
        identity = transformers.matchplay_identity(matchplay_profile)
        assert identity.name == "Ada Flipper"
        assert identity.location == "Austin, TX"

    def test_identity_name_fallback(self):
        profile = MatchPlayProfileDTO.model_validate(
            {"user": {"name": " ", "firstName": "Ada", "lastName": "Flipper"}}
        )
        identity = transformers.matchplay_identity(profile)
        assert identity.name == "Ada Flipper"
        assert identity.location is None

    def test_ifpa_link(self, matchplay_profile):
        assert transformers.matchplay_ifpa_link(matchplay_profile) == 67715

    def test_ifpa_link_absent(self):
        profile = MatchPlayProfileDTO.model_validate({"user": {"userId": 1}})
        assert transformers.matchplay_ifpa_link(profile) is None
