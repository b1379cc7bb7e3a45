"""Domain models for completed Match Play events.

Local player ids are scoped to a single event and must not be compared
across events.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

COMPLETED_STATUS = "completed"


@dataclass(frozen=True)
class EventSummary:
    """A completed event the subject played in."""

    event_id: int
    start_time: str = ""


@dataclass(frozen=True)
class RosterEntry:
    """One player on an event roster."""

    local_player_id: int
    display_name: str
    claimed_by_global_id: Optional[int] = None


@dataclass(frozen=True)
class GameParticipant:
    """A player's seat in one game; lower finish position is better."""

    local_player_id: int
    finish_position: Optional[int] = None


@dataclass(frozen=True)
class CompletedGame:
    """One game of an event."""

    game_id: int
    status: str
    is_bye: bool = False
    started_at: Optional[str] = None
    participants: Tuple[GameParticipant, ...] = ()

    @property
    def is_countable(self) -> bool:
        """Completed, non-bye games are the only ones that feed history."""
        return self.status == COMPLETED_STATUS and not self.is_bye

    def participant(self, local_player_id: int) -> Optional[GameParticipant]:
        for participant in self.participants:
            if participant.local_player_id == local_player_id:
                return participant
        return None


@dataclass(frozen=True)
class CompletedEvent:
    """An event with its roster and full game list."""

    event_id: int
    start_time: str
    roster: Tuple[RosterEntry, ...] = ()
    games: Tuple[CompletedGame, ...] = field(default_factory=tuple)

    def roster_entry_for(self, global_id: int) -> Optional[RosterEntry]:
        """Roster entry claimed by the given Match Play user id."""
        for entry in self.roster:
            if entry.claimed_by_global_id == global_id:
                return entry
        return None
