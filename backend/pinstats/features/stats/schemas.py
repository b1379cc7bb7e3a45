"""Pydantic schemas for normalized provider statistics.

Snapshots are frozen: once a provider fetch has been normalized it is never
mutated. Every numeric field is optional because upstream may omit any of
them; absent means "not reported", never zero.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class IdentitySummary(BaseModel):
    """Display identity as reported by one provider."""

    name: Optional[str] = Field(None, description="Display name")
    location: Optional[str] = Field(None, description="City / region")

    model_config = ConfigDict(frozen=True)


class StateRanking(BaseModel):
    """Most recent NACS open-system state standing."""

    state: str
    rank: int
    points: float
    year: str

    model_config = ConfigDict(frozen=True)


class EventsByYear(BaseModel):
    """IFPA events and points grouped by calendar year."""

    year: str
    event_count: int
    total_points: float

    model_config = ConfigDict(frozen=True)


class PvpOpponentSummary(BaseModel):
    """IFPA head-to-head record against one opponent."""

    player_id: Optional[int] = None
    name: str
    wins: int
    losses: int
    ties: int
    total_games: int
    win_rate: Optional[float] = Field(
        None, description="wins / (wins + losses); None without decisive games"
    )

    model_config = ConfigDict(frozen=True)


class IFPAStats(BaseModel):
    """IFPA ranking snapshot (open ranking system)."""

    current_rank: Optional[int] = None
    current_points: Optional[float] = Field(None, description="Current WPPR points")
    last_month_rank: Optional[int] = None
    last_year_rank: Optional[int] = None
    highest_rank: Optional[int] = None
    ratings_value: Optional[float] = None
    efficiency_value: Optional[float] = None
    total_events: Optional[int] = None
    state_ranking: Optional[StateRanking] = None
    events_by_year: List[EventsByYear] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class MatchPlayStats(BaseModel):
    """Match Play rating snapshot."""

    rating: Optional[float] = None
    rating_class: Optional[int] = None
    grade: Optional[str] = Field(None, description="Letter grade for rating_class")
    rd: Optional[float] = Field(None, description="Rating deviation")
    game_count: Optional[int] = None
    win_count: Optional[int] = None
    loss_count: Optional[int] = None
    efficiency_percent: Optional[float] = None
    tournament_play_count: Optional[int] = None

    model_config = ConfigDict(frozen=True)


class IFPAPlayerSnapshot(BaseModel):
    """Everything one IFPA profile round-trip yields."""

    player_id: int
    identity: IdentitySummary
    stats: IFPAStats
    matchplay_id: Optional[int] = Field(None, description="Cross-linked Match Play id")

    model_config = ConfigDict(frozen=True)


class MatchPlayPlayerSnapshot(BaseModel):
    """Everything one Match Play profile round-trip yields."""

    user_id: int
    identity: IdentitySummary
    stats: MatchPlayStats
    ifpa_id: Optional[int] = Field(None, description="Cross-linked IFPA id")

    model_config = ConfigDict(frozen=True)


class IFPAProfile(BaseModel):
    """Single-provider IFPA view with the head-to-head list."""

    player: IFPAPlayerSnapshot
    pvp_opponents: Optional[List[PvpOpponentSummary]] = Field(
        None, description="Top opponents by games played; None if unavailable"
    )

    model_config = ConfigDict(frozen=True)
