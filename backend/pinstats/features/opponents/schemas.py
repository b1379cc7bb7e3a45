"""Pydantic schemas for reconstructed head-to-head records."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class OpponentRecord(BaseModel):
    """Aggregate head-to-head record against one opponent."""

    opponent_name: str = Field(..., description="Display name (dedup key)")
    wins: int = Field(..., ge=0)
    losses: int = Field(..., ge=0)
    total_games: int = Field(..., ge=0, description="Decisive games (wins + losses)")
    win_rate: Optional[float] = Field(
        None, description="wins / (wins + losses); None without decisive games"
    )
    last_played: str = Field(
        "", description="ISO-8601 timestamp of the most recent encounter"
    )

    model_config = ConfigDict(frozen=True)
