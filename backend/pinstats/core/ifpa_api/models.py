"""Pydantic models for raw IFPA API response data.

The IFPA API sends most numbers as strings, so numeric fields are kept as
raw values here and parsed by the stats transformers.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

RawValue = Union[str, int, float, None]


class IFPAMatchPlayLinkDTO(BaseModel):
    """Cross-link from an IFPA profile to the Match Play account."""

    id: RawValue = None
    rating: RawValue = None
    rank: RawValue = None

    model_config = ConfigDict(extra="ignore")


class IFPAPlayerStatsDTO(BaseModel):
    """Ranking stats keyed by ranking system ("open", "OPEN", "MAIN", ...)."""

    system: Dict[str, Dict[str, Any]] = {}

    model_config = ConfigDict(extra="ignore")

    @field_validator("system", mode="before")
    @classmethod
    def empty_system(cls, v: Any) -> Any:
        # PHP-backed payloads encode an empty object as []
        return v if isinstance(v, dict) else {}


class IFPASeriesEntryDTO(BaseModel):
    """One championship-series standing (e.g. NACS state ranking)."""

    series_code: Optional[str] = None
    region_code: Optional[str] = None
    region_name: Optional[str] = None
    year: RawValue = None
    total_points: RawValue = None
    series_rank: RawValue = None
    system: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


class IFPAPlayerDTO(BaseModel):
    """IFPA player profile."""

    player_id: RawValue = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    city: Optional[str] = None
    stateprov: Optional[str] = None
    country_code: Optional[str] = None
    country_name: Optional[str] = None
    matchplay_events: Optional[IFPAMatchPlayLinkDTO] = None
    player_stats: Optional[IFPAPlayerStatsDTO] = None
    series: List[IFPASeriesEntryDTO] = []

    model_config = ConfigDict(extra="ignore")

    @field_validator("matchplay_events", "player_stats", mode="before")
    @classmethod
    def empty_object(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else None

    @field_validator("series", mode="before")
    @classmethod
    def empty_series(cls, v: Any) -> Any:
        return v if isinstance(v, list) else []


class IFPAResultDTO(BaseModel):
    """One event result from the results-history endpoint."""

    tournament_name: Optional[str] = None
    tournament_id: RawValue = None
    event_name: Optional[str] = None
    event_date: Optional[str] = None
    position: RawValue = None
    original_points: RawValue = None
    current_points: RawValue = None

    model_config = ConfigDict(extra="ignore")


class IFPAPvpOpponentDTO(BaseModel):
    """Head-to-head record against one opponent."""

    player_id: RawValue = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    win_count: RawValue = None
    loss_count: RawValue = None
    tie_count: RawValue = None
    current_rank: RawValue = None

    model_config = ConfigDict(extra="ignore")
