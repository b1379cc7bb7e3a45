from typing import Annotated

from fastapi import Depends

from pinstats.core.dependencies import (
    CacheStoreDep,
    IFPAClientDep,
    MatchPlayClientDep,
    SettingsDep,
)
from pinstats.features.stats.gateway import IFPAGateway, MatchPlayGateway
from pinstats.features.stats.service import PlayerStatsService


# Gateway dependencies
def get_ifpa_gateway(client: IFPAClientDep) -> IFPAGateway:
    return IFPAGateway(client)


def get_matchplay_gateway(client: MatchPlayClientDep) -> MatchPlayGateway:
    return MatchPlayGateway(client)


IFPAGatewayDep = Annotated[IFPAGateway, Depends(get_ifpa_gateway)]
MatchPlayGatewayDep = Annotated[MatchPlayGateway, Depends(get_matchplay_gateway)]


# Service dependency
def get_player_stats_service(
    ifpa_gateway: IFPAGatewayDep,
    matchplay_gateway: MatchPlayGatewayDep,
    cache: CacheStoreDep,
    settings: SettingsDep,
) -> PlayerStatsService:
    return PlayerStatsService(
        ifpa_gateway,
        matchplay_gateway,
        cache,
        cache_ttl=settings.dashboard_cache_ttl_seconds,
    )


PlayerStatsServiceDep = Annotated[PlayerStatsService, Depends(get_player_stats_service)]
