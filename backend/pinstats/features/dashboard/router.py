"""Unified dashboard endpoint."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from pinstats.core.dependencies import rate_limit, wants_refresh
from pinstats.core.schemas import ApiResponse
from pinstats.features.dashboard.dependencies import DashboardServiceDep
from pinstats.features.dashboard.schemas import UnifiedDashboard

router = APIRouter(tags=["dashboard"])


@router.get(
    "/combined/me",
    response_model=ApiResponse[UnifiedDashboard],
    dependencies=[Depends(rate_limit("combined"))],
)
async def get_combined_dashboard(
    service: DashboardServiceDep,
    ifpa_id: Optional[str] = Query(None, alias="ifpaId", description="IFPA player id"),
    matchplay_id: Optional[str] = Query(
        None, alias="matchPlayId", description="Match Play user id"
    ),
    refresh: Optional[str] = Query(None, description="'true' bypasses the cache"),
) -> ApiResponse[UnifiedDashboard]:
    """
    Combined IFPA + Match Play dashboard.

    At least one id is required; the other is resolved through the
    providers' cross-links when possible. A failing provider leaves its
    block empty instead of failing the request.

    Examples:
        GET /api/v1/combined/me?ifpaId=67715
        GET /api/v1/combined/me?ifpaId=67715&matchPlayId=37737&refresh=true
    """
    dashboard, cached = await service.get_dashboard(
        ifpa_id, matchplay_id, bypass_cache=wants_refresh(refresh)
    )
    return ApiResponse[UnifiedDashboard].ok(dashboard, cached=cached)
