"""Opponent history feature: head-to-head reconstruction from game results."""

from .gateway import EventHistoryGateway
from .schemas import OpponentRecord
from .service import OpponentHistoryService

__all__ = [
    "EventHistoryGateway",
    "OpponentRecord",
    "OpponentHistoryService",
]
