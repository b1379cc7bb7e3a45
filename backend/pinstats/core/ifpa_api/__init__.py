"""
IFPA API client package.

Provides a typed client for the IFPA player profile, results and
head-to-head endpoints.
"""

from .client import IFPAClient
from .endpoints import IFPAEndpoints, ResultSet, IFPA_API_BASE
from .models import (
    IFPAPlayerDTO,
    IFPAMatchPlayLinkDTO,
    IFPAPlayerStatsDTO,
    IFPASeriesEntryDTO,
    IFPAResultDTO,
    IFPAPvpOpponentDTO,
)

__all__ = [
    "IFPAClient",
    "IFPAEndpoints",
    "ResultSet",
    "IFPA_API_BASE",
    "IFPAPlayerDTO",
    "IFPAMatchPlayLinkDTO",
    "IFPAPlayerStatsDTO",
    "IFPASeriesEntryDTO",
    "IFPAResultDTO",
    "IFPAPvpOpponentDTO",
]
