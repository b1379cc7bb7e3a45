"""Transformers from raw Match Play tournament DTOs to event domain models."""

from itertools import zip_longest
from typing import Any, Iterable, Optional

from pinstats.core.matchplay_api.models import (
    MatchPlayGameDTO,
    MatchPlayTournamentDTO,
    MatchPlayTournamentPlayerDTO,
)
from pinstats.utils.parsing import parse_int

from .models import (
    CompletedEvent,
    CompletedGame,
    EventSummary,
    GameParticipant,
    RosterEntry,
)


def parse_finish_position(value: Any) -> Optional[int]:
    """Finish positions are 1-based; anything else means no result recorded."""
    position = parse_int(value)
    if position is None or position <= 0:
        return None
    return position


def tournament_to_summary(tournament: MatchPlayTournamentDTO) -> EventSummary:
    return EventSummary(
        event_id=tournament.tournament_id, start_time=tournament.start_utc or ""
    )


def roster_entry(player: MatchPlayTournamentPlayerDTO) -> RosterEntry:
    return RosterEntry(
        local_player_id=player.player_id,
        display_name=(player.name or "").strip() or f"Player {player.player_id}",
        claimed_by_global_id=player.claimed_by,
    )


def game_to_completed_game(game: MatchPlayGameDTO) -> CompletedGame:
    """Zip the parallel ``player_ids`` / ``result_positions`` arrays."""
    participants = tuple(
        GameParticipant(
            local_player_id=player_id,
            finish_position=parse_finish_position(position),
        )
        for player_id, position in zip_longest(game.player_ids, game.result_positions)
        if player_id is not None
    )
    return CompletedGame(
        game_id=game.game_id,
        status=(game.status or "").lower(),
        is_bye=game.bye,
        started_at=game.started_at or None,
        participants=participants,
    )


def build_completed_event(
    summary: EventSummary,
    players: Iterable[MatchPlayTournamentPlayerDTO],
    games: Iterable[MatchPlayGameDTO],
) -> CompletedEvent:
    return CompletedEvent(
        event_id=summary.event_id,
        start_time=summary.start_time,
        roster=tuple(roster_entry(p) for p in players),
        games=tuple(game_to_completed_game(g) for g in games),
    )
