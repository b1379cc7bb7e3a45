"""Gateway for Match Play tournament history used by opponent reconstruction."""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List

import structlog

from pinstats.core.decorators import upstream_error_handler
from pinstats.core.enums import Provider

from . import transformers
from .models import CompletedEvent, EventSummary

if TYPE_CHECKING:
    from pinstats.core.matchplay_api.client import MatchPlayClient

logger = structlog.get_logger(__name__)


class EventHistoryGateway:
    """Fetches completed events (roster + games) for a Match Play user."""

    def __init__(self, client: "MatchPlayClient"):
        self._client = client

    @upstream_error_handler(Provider.MATCHPLAY)
    async def fetch_recent_events(self, user_id: int, limit: int) -> List[EventSummary]:
        """Most recent completed events, newest first, at most ``limit``."""
        tournaments = await self._client.list_completed_tournaments(user_id, page=1)
        summaries = [transformers.tournament_to_summary(t) for t in tournaments[:limit]]
        logger.debug(
            "Recent completed events listed", user_id=user_id, count=len(summaries)
        )
        return summaries

    @upstream_error_handler(Provider.MATCHPLAY)
    async def fetch_completed_event(self, summary: EventSummary) -> CompletedEvent:
        """Roster and games of one event; both are required."""
        players, games = await asyncio.gather(
            self._client.get_tournament_players(summary.event_id),
            self._client.get_tournament_games(summary.event_id),
        )
        return transformers.build_completed_event(summary, players, games)
