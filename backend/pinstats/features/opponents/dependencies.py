from typing import Annotated

from fastapi import Depends

from pinstats.core.dependencies import MatchPlayClientDep
from pinstats.features.opponents.gateway import EventHistoryGateway
from pinstats.features.opponents.service import OpponentHistoryService


# Gateway dependency
def get_event_history_gateway(client: MatchPlayClientDep) -> EventHistoryGateway:
    return EventHistoryGateway(client)


EventHistoryGatewayDep = Annotated[
    EventHistoryGateway, Depends(get_event_history_gateway)
]


# Service dependency
def get_opponent_history_service(
    gateway: EventHistoryGatewayDep,
) -> OpponentHistoryService:
    return OpponentHistoryService(gateway)


OpponentHistoryServiceDep = Annotated[
    OpponentHistoryService, Depends(get_opponent_history_service)
]
