"""
Opponent history reconstruction.

Derives head-to-head win/loss records from raw tournament games: for every
completed, non-bye game the subject finished, each other finisher in that
game is a win (subject placed better), a loss (placed worse) or a tie.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

import structlog

from pinstats.utils.statistics import win_rate

from .models import CompletedEvent
from .schemas import OpponentRecord

if TYPE_CHECKING:
    from .gateway import EventHistoryGateway

logger = structlog.get_logger(__name__)

MAX_OPPONENTS = 10
DEFAULT_MAX_EVENTS = 5


@dataclass
class OpponentTally:
    """Running head-to-head counters for one opponent."""

    wins: int = 0
    losses: int = 0
    last_played: str = ""


def tally_event(
    tallies: Dict[str, OpponentTally], event: CompletedEvent, subject_id: int
) -> bool:
    """
    Accumulate one event's games into ``tallies`` (keyed by opponent name).

    Returns False when the subject has no claimed roster entry in the event,
    in which case nothing is recorded.
    """
    subject = event.roster_entry_for(subject_id)
    if subject is None:
        return False

    names = {entry.local_player_id: entry.display_name for entry in event.roster}
    subject_local_id = subject.local_player_id

    for game in event.games:
        if not game.is_countable:
            continue

        own = game.participant(subject_local_id)
        if own is None or own.finish_position is None:
            continue

        played_at = game.started_at or event.start_time or ""

        for other in game.participants:
            if other.local_player_id == subject_local_id:
                continue
            if other.finish_position is None:
                continue

            name = names.get(other.local_player_id) or f"Player {other.local_player_id}"
            tally = tallies.setdefault(name, OpponentTally())

            if own.finish_position < other.finish_position:
                tally.wins += 1
            elif own.finish_position > other.finish_position:
                tally.losses += 1

            # ISO-8601 strings order correctly as plain strings
            if played_at > tally.last_played:
                tally.last_played = played_at

    return True


def build_opponent_records(
    tallies: Dict[str, OpponentTally], limit: int = MAX_OPPONENTS
) -> List[OpponentRecord]:
    """Most recently encountered opponents first (stable for equal timestamps)."""
    records = [
        OpponentRecord(
            opponent_name=name,
            wins=tally.wins,
            losses=tally.losses,
            total_games=tally.wins + tally.losses,
            win_rate=win_rate(tally.wins, tally.losses),
            last_played=tally.last_played,
        )
        for name, tally in tallies.items()
    ]
    records.sort(key=lambda record: record.last_played, reverse=True)
    return records[:limit]


class OpponentHistoryService:
    """Reconstructs recent head-to-head records for a Match Play user."""

    def __init__(
        self, gateway: "EventHistoryGateway", max_opponents: int = MAX_OPPONENTS
    ):
        self._gateway = gateway
        self._max_opponents = max_opponents

    async def reconstruct(
        self, subject_id: int, max_events: int = DEFAULT_MAX_EVENTS
    ) -> List[OpponentRecord]:
        """
        Head-to-head records from the subject's last ``max_events`` events.

        An empty list means "no qualifying games". Failure to list events
        raises ``UpstreamError``; a failure for a single event only drops
        that event.

        Args:
            subject_id: Match Play user id
            max_events: How many recent completed events to scan

        Returns:
            At most ten records ordered by most recent encounter
        """
        summaries = await self._gateway.fetch_recent_events(subject_id, max_events)
        if not summaries:
            return []

        outcomes = await asyncio.gather(
            *(self._gateway.fetch_completed_event(summary) for summary in summaries),
            return_exceptions=True,
        )

        tallies: Dict[str, OpponentTally] = {}
        for summary, outcome in zip(summaries, outcomes):
            if isinstance(outcome, BaseException):
                if not isinstance(outcome, Exception):
                    raise outcome
                logger.warning(
                    "Skipping event, fetch failed",
                    subject_id=subject_id,
                    event_id=summary.event_id,
                    error=str(outcome),
                )
                continue

            if not tally_event(tallies, outcome, subject_id):
                logger.warning(
                    "Skipping event, subject not on roster",
                    subject_id=subject_id,
                    event_id=summary.event_id,
                )

        records = build_opponent_records(tallies, self._max_opponents)
        logger.info(
            "Opponent history reconstructed",
            subject_id=subject_id,
            events=len(summaries),
            opponents=len(tallies),
            returned=len(records),
        )
        return records
