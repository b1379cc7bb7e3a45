"""Single-provider endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from pinstats.core.dependencies import SettingsDep, rate_limit, wants_refresh
from pinstats.core.exceptions import ValidationError
from pinstats.core.schemas import ApiResponse
from pinstats.features.identity.service import parse_player_id
from pinstats.features.stats.dependencies import PlayerStatsServiceDep
from pinstats.features.stats.schemas import IFPAProfile, MatchPlayPlayerSnapshot

router = APIRouter(tags=["providers"])


def _player_id_or_default(
    raw: Optional[str], default: Optional[int], field: str
) -> int:
    player_id = parse_player_id(raw, field)
    if player_id is None:
        player_id = default
    if player_id is None:
        raise ValidationError(f"{field} is required", field=field)
    return player_id


@router.get(
    "/ifpa/me",
    response_model=ApiResponse[IFPAProfile],
    dependencies=[Depends(rate_limit("ifpa"))],
)
async def get_ifpa_player(
    service: PlayerStatsServiceDep,
    settings: SettingsDep,
    player_id: Optional[str] = Query(None, alias="playerId"),
    refresh: Optional[str] = Query(None),
) -> ApiResponse[IFPAProfile]:
    """IFPA profile, ranking stats and head-to-head list.

    Defaults to the configured player when ``playerId`` is omitted.
    """
    resolved_id = _player_id_or_default(
        player_id, settings.default_ifpa_player_id, "playerId"
    )
    profile, cached = await service.get_ifpa_profile(
        resolved_id, bypass_cache=wants_refresh(refresh)
    )
    return ApiResponse[IFPAProfile].ok(profile, cached=cached)


@router.get(
    "/matchplay/me",
    response_model=ApiResponse[MatchPlayPlayerSnapshot],
    dependencies=[Depends(rate_limit("matchplay"))],
)
async def get_matchplay_user(
    service: PlayerStatsServiceDep,
    settings: SettingsDep,
    user_id: Optional[str] = Query(None, alias="userId"),
    refresh: Optional[str] = Query(None),
) -> ApiResponse[MatchPlayPlayerSnapshot]:
    """Match Play profile and rating (defaults to the configured user)."""
    resolved_id = _player_id_or_default(
        user_id, settings.default_matchplay_user_id, "userId"
    )
    snapshot, cached = await service.get_matchplay_profile(
        resolved_id, bypass_cache=wants_refresh(refresh)
    )
    return ApiResponse[MatchPlayPlayerSnapshot].ok(snapshot, cached=cached)
