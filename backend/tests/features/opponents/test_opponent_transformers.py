"""
Tests for Match Play tournament normalization.
"""

import pytest

from pinstats.core.matchplay_api.models import (
    MatchPlayGameDTO,
    MatchPlayTournamentDTO,
    MatchPlayTournamentPlayerDTO,
)
from pinstats.features.opponents import transformers
from pinstats.features.opponents.models import EventSummary, GameParticipant


@pytest.mark.parametrize(
    "raw, expected",
    [(1, 1), ("3", 3), (2.0, 2), (0, None), (-1, None), (None, None), ("x", None)],
)
def test_parse_finish_position(raw, expected):
    assert transformers.parse_finish_position(raw) == expected


def test_tournament_to_summary():
    summary = transformers.tournament_to_summary(
        MatchPlayTournamentDTO(tournament_id=5, start_utc="2024-05-01T18:00:00Z")
    )
    assert summary == EventSummary(event_id=5, start_time="2024-05-01T18:00:00Z")


def test_tournament_without_start():
    summary = transformers.tournament_to_summary(MatchPlayTournamentDTO(tournament_id=5))
    assert summary.start_time == ""


def test_roster_entry_name_fallback():
    entry = transformers.roster_entry(
        MatchPlayTournamentPlayerDTO(player_id=9, name="  ", claimed_by=None)
    )
    assert entry.display_name == "Player 9"
    assert entry.claimed_by_global_id is None


def test_game_to_completed_game():
    """Ids and positions are zipped; missing ids are dropped."""
    game = MatchPlayGameDTO(
        game_id=100,
        status="Completed",
        player_ids=[10, None, 12],
        result_positions=["1", 3, None, 4],
    )

    completed = transformers.game_to_completed_game(game)

    assert completed.status == "completed"
    assert completed.is_countable is True
    assert completed.participants == (
        GameParticipant(local_player_id=10, finish_position=1),
        GameParticipant(local_player_id=12, finish_position=None),
    )


def test_bye_game_is_not_countable():
    game = MatchPlayGameDTO(game_id=1, status="completed", bye=True, player_ids=[1])
    assert transformers.game_to_completed_game(game).is_countable is False


def test_build_completed_event():
    summary = EventSummary(event_id=5, start_time="2024-05-01")
    event = transformers.build_completed_event(
        summary,
        [
            MatchPlayTournamentPlayerDTO(player_id=1, name="Ada", claimed_by=37737),
            MatchPlayTournamentPlayerDTO(player_id=2, name="Bob"),
        ],
        [MatchPlayGameDTO(game_id=100, status="completed", player_ids=[1, 2])],
    )

    assert event.event_id == 5
    assert event.roster_entry_for(37737).display_name == "Ada"
    assert event.roster_entry_for(1) is None
    assert len(event.games) == 1
