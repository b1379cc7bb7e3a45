from typing import Annotated

from fastapi import Depends

from pinstats.core.dependencies import CacheStoreDep, SettingsDep
from pinstats.features.dashboard.service import DashboardService
from pinstats.features.identity.dependencies import IdentityResolverDep
from pinstats.features.opponents.dependencies import OpponentHistoryServiceDep
from pinstats.features.stats.dependencies import IFPAGatewayDep, MatchPlayGatewayDep


# Service dependency
def get_dashboard_service(
    ifpa_gateway: IFPAGatewayDep,
    matchplay_gateway: MatchPlayGatewayDep,
    opponent_service: OpponentHistoryServiceDep,
    identity_resolver: IdentityResolverDep,
    cache: CacheStoreDep,
    settings: SettingsDep,
) -> DashboardService:
    return DashboardService(
        ifpa_gateway,
        matchplay_gateway,
        opponent_service,
        identity_resolver,
        cache,
        cache_ttl=settings.dashboard_cache_ttl_seconds,
        recent_events_limit=settings.recent_events_limit,
    )


DashboardServiceDep = Annotated[DashboardService, Depends(get_dashboard_service)]
