"""
Match Play Events API client package.

Provides a typed client for the public user profile endpoint and the
bearer-authenticated tournament, roster and game endpoints.
"""

from .client import MatchPlayClient
from .endpoints import MatchPlayEndpoints, MATCHPLAY_API_BASE
from .models import (
    MatchPlayUserDTO,
    MatchPlayRatingDTO,
    MatchPlayUserCountsDTO,
    MatchPlayProfileDTO,
    MatchPlayTournamentDTO,
    MatchPlayTournamentPlayerDTO,
    MatchPlayGameDTO,
)

__all__ = [
    "MatchPlayClient",
    "MatchPlayEndpoints",
    "MATCHPLAY_API_BASE",
    "MatchPlayUserDTO",
    "MatchPlayRatingDTO",
    "MatchPlayUserCountsDTO",
    "MatchPlayProfileDTO",
    "MatchPlayTournamentDTO",
    "MatchPlayTournamentPlayerDTO",
    "MatchPlayGameDTO",
]
