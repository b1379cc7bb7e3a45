"""Provider stats feature: gateways, normalized schemas and the stats service."""

from .gateway import IFPAGateway, MatchPlayGateway
from .schemas import (
    IdentitySummary,
    IFPAStats,
    MatchPlayStats,
    IFPAPlayerSnapshot,
    IFPAProfile,
    MatchPlayPlayerSnapshot,
    PvpOpponentSummary,
    StateRanking,
    EventsByYear,
)
from .service import PlayerStatsService

__all__ = [
    "IFPAGateway",
    "MatchPlayGateway",
    "PlayerStatsService",
    "IdentitySummary",
    "IFPAStats",
    "MatchPlayStats",
    "IFPAPlayerSnapshot",
    "IFPAProfile",
    "MatchPlayPlayerSnapshot",
    "PvpOpponentSummary",
    "StateRanking",
    "EventsByYear",
]
