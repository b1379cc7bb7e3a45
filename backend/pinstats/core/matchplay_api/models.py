"""Pydantic models for raw Match Play API response data.

Match Play is inconsistent about casing (``userId`` on profiles,
``tournament_id`` on tournaments), so fields accept both spellings.
"""

from typing import Any, List, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

RawValue = Union[str, int, float, None]


class MatchPlayUserDTO(BaseModel):
    """Match Play user."""

    user_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("userId", "user_id")
    )
    name: Optional[str] = None
    first_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("firstName", "first_name")
    )
    last_name: Optional[str] = Field(
        None, validation_alias=AliasChoices("lastName", "last_name")
    )
    ifpa_id: RawValue = Field(None, validation_alias=AliasChoices("ifpaId", "ifpa_id"))
    location: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MatchPlayRatingDTO(BaseModel):
    """Glicko-style rating snapshot."""

    rating: RawValue = None
    rating_class: RawValue = Field(
        None, validation_alias=AliasChoices("ratingClass", "rating_class")
    )
    rd: RawValue = None
    game_count: RawValue = Field(
        None, validation_alias=AliasChoices("gameCount", "game_count")
    )
    win_count: RawValue = Field(
        None, validation_alias=AliasChoices("winCount", "win_count")
    )
    loss_count: RawValue = Field(
        None, validation_alias=AliasChoices("lossCount", "loss_count")
    )
    efficiency_percent: RawValue = Field(
        None, validation_alias=AliasChoices("efficiencyPercent", "efficiency_percent")
    )
    lower_bound: RawValue = Field(
        None, validation_alias=AliasChoices("lowerBound", "lower_bound")
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MatchPlayUserCountsDTO(BaseModel):
    """Aggregate counters for a user."""

    tournament_organized_count: RawValue = Field(
        None,
        validation_alias=AliasChoices(
            "tournamentOrganizedCount", "tournament_organized_count"
        ),
    )
    tournament_play_count: RawValue = Field(
        None,
        validation_alias=AliasChoices("tournamentPlayCount", "tournament_play_count"),
    )
    rating_period_count: RawValue = Field(
        None,
        validation_alias=AliasChoices("ratingPeriodCount", "rating_period_count"),
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MatchPlayProfileDTO(BaseModel):
    """Shape returned by ``GET /users/{id}``."""

    user: MatchPlayUserDTO
    rating: Optional[MatchPlayRatingDTO] = None
    user_counts: Optional[MatchPlayUserCountsDTO] = Field(
        None, validation_alias=AliasChoices("userCounts", "user_counts")
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("rating", "user_counts", mode="before")
    @classmethod
    def empty_object(cls, v: Any) -> Any:
        return v if isinstance(v, dict) else None


class MatchPlayTournamentDTO(BaseModel):
    """Tournament list entry."""

    tournament_id: int = Field(
        ..., validation_alias=AliasChoices("tournamentId", "tournament_id")
    )
    name: Optional[str] = None
    status: Optional[str] = None
    type: Optional[str] = None
    start_utc: Optional[str] = Field(
        None, validation_alias=AliasChoices("startUtc", "start_utc")
    )
    completed_at: Optional[str] = Field(
        None, validation_alias=AliasChoices("completedAt", "completed_at")
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MatchPlayTournamentPlayerDTO(BaseModel):
    """Roster entry; ``player_id`` is local to the tournament."""

    player_id: int = Field(..., validation_alias=AliasChoices("playerId", "player_id"))
    name: Optional[str] = None
    claimed_by: Optional[int] = Field(
        None, validation_alias=AliasChoices("claimedBy", "claimed_by")
    )
    ifpa_id: RawValue = Field(None, validation_alias=AliasChoices("ifpaId", "ifpa_id"))
    status: Optional[str] = None

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class MatchPlayGameDTO(BaseModel):
    """One game; ``player_ids[i]`` finished in ``result_positions[i]``."""

    game_id: int = Field(..., validation_alias=AliasChoices("gameId", "game_id"))
    tournament_id: Optional[int] = Field(
        None, validation_alias=AliasChoices("tournamentId", "tournament_id")
    )
    status: Optional[str] = None
    bye: bool = False
    started_at: Optional[str] = Field(
        None, validation_alias=AliasChoices("startedAt", "started_at")
    )
    player_ids: List[Optional[int]] = Field(
        default_factory=list, validation_alias=AliasChoices("playerIds", "player_ids")
    )
    result_positions: List[RawValue] = Field(
        default_factory=list,
        validation_alias=AliasChoices("resultPositions", "result_positions"),
    )

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    @field_validator("bye", mode="before")
    @classmethod
    def null_bye(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("player_ids", "result_positions", mode="before")
    @classmethod
    def null_list(cls, v: Any) -> Any:
        return [] if v is None else v
