"""Pydantic schemas for the unified dashboard."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pinstats.core.schemas import utc_now
from pinstats.features.opponents.schemas import OpponentRecord
from pinstats.features.stats.schemas import IFPAStats, MatchPlayStats

UNKNOWN_PLAYER = "Unknown Player"


class PlayerIdentity(BaseModel):
    """Merged display identity plus the ids the dashboard was built for."""

    name: str = Field(UNKNOWN_PLAYER, description="Display name")
    location: Optional[str] = Field(None, description="City / region")
    ifpa_id: Optional[int] = Field(None, description="IFPA player id")
    matchplay_id: Optional[int] = Field(None, description="Match Play user id")

    model_config = ConfigDict(frozen=True)


class UnifiedDashboard(BaseModel):
    """
    Merged view of both providers.

    A provider block is present only when its fetch succeeded; a failed
    fetch leaves it ``None`` and fills the matching ``*_error`` field.
    ``recent_opponents`` is ``[]`` when reconstruction succeeded without
    qualifying games and ``None`` when it failed or was not attempted.
    """

    identity: PlayerIdentity
    ifpa: Optional[IFPAStats] = None
    matchplay: Optional[MatchPlayStats] = None
    recent_opponents: Optional[List[OpponentRecord]] = None
    recent_opponents_error: Optional[str] = None
    id_mismatch_warning: Optional[str] = None
    name_mismatch_warning: Optional[str] = None
    ifpa_error: Optional[str] = None
    matchplay_error: Optional[str] = None
    last_updated: datetime = Field(default_factory=utc_now)

    model_config = ConfigDict(frozen=True)
