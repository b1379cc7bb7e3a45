"""
Provider gateways - anti-corruption layer for IFPA and Match Play.

Each gateway turns raw API payloads into the normalized schemas in
``schemas.py``. Every public coroutine either returns a complete snapshot or
raises ``UpstreamError``; callers never see transport errors or partially
filled objects.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, List, Optional

import structlog

from pinstats.core.decorators import upstream_error_handler
from pinstats.core.enums import Provider
from pinstats.core.ifpa_api.endpoints import ResultSet
from pinstats.core.ifpa_api.models import IFPAResultDTO

from . import transformers
from .schemas import (
    IdentitySummary,
    IFPAPlayerSnapshot,
    IFPAStats,
    MatchPlayPlayerSnapshot,
    MatchPlayStats,
    PvpOpponentSummary,
)

if TYPE_CHECKING:
    from pinstats.core.ifpa_api.client import IFPAClient
    from pinstats.core.matchplay_api.client import MatchPlayClient

logger = structlog.get_logger(__name__)


class IFPAGateway:
    """Gateway for IFPA (provider A)."""

    def __init__(self, client: "IFPAClient"):
        """
        Initialize gateway with the IFPA API client.

        :param client: Low-level IFPA API client
        """
        self._client = client

    @upstream_error_handler(Provider.IFPA)
    async def fetch_player(self, player_id: int) -> IFPAPlayerSnapshot:
        """
        Fetch profile and result history concurrently and normalize them.

        The profile is required. The ACTIVE and NONACTIVE result sets only
        feed the events-by-year summary, so either may fail independently.
        """
        profile, *result_sets = await asyncio.gather(
            self._client.get_player(player_id),
            self._client.get_results(player_id, ResultSet.ACTIVE),
            self._client.get_results(player_id, ResultSet.NONACTIVE),
            return_exceptions=True,
        )
        if isinstance(profile, BaseException):
            raise profile

        results: List[IFPAResultDTO] = []
        for result_set, outcome in zip(ResultSet, result_sets):
            if isinstance(outcome, BaseException):
                logger.warning(
                    "IFPA result set unavailable",
                    player_id=player_id,
                    result_set=result_set.value,
                    error=str(outcome),
                )
                continue
            results.extend(outcome)

        events_by_year = transformers.ifpa_events_by_year(results)
        snapshot = IFPAPlayerSnapshot(
            player_id=player_id,
            identity=transformers.ifpa_identity(profile),
            stats=transformers.ifpa_player_to_stats(profile, events_by_year),
            matchplay_id=transformers.ifpa_matchplay_link(profile),
        )

        logger.debug(
            "IFPA player fetched",
            player_id=player_id,
            current_rank=snapshot.stats.current_rank,
            result_count=len(results),
        )
        return snapshot

    async def fetch_stats(self, player_id: int) -> IFPAStats:
        """Normalized ranking stats for an IFPA player."""
        snapshot = await self.fetch_player(player_id)
        return snapshot.stats

    @upstream_error_handler(Provider.IFPA)
    async def fetch_identity_summary(self, player_id: int) -> IdentitySummary:
        """Name and location from the IFPA profile."""
        profile = await self._client.get_player(player_id)
        return transformers.ifpa_identity(profile)

    @upstream_error_handler(Provider.IFPA)
    async def fetch_cross_link(self, player_id: int) -> Optional[int]:
        """Match Play user id linked on the IFPA profile, if any."""
        profile = await self._client.get_player(player_id)
        return transformers.ifpa_matchplay_link(profile)

    @upstream_error_handler(Provider.IFPA)
    async def fetch_pvp_opponents(
        self, player_id: int, limit: int = 10
    ) -> List[PvpOpponentSummary]:
        """
        Head-to-head records, top ``limit`` by total games.

        IFPA provides no timestamps here, so this is not a recency list.
        """
        opponents = await self._client.get_pvp(player_id)
        return transformers.ifpa_pvp_to_summaries(opponents, limit=limit)


class MatchPlayGateway:
    """Gateway for Match Play (provider B)."""

    def __init__(self, client: "MatchPlayClient"):
        """
        Initialize gateway with the Match Play API client.

        :param client: Low-level Match Play API client
        """
        self._client = client

    @upstream_error_handler(Provider.MATCHPLAY)
    async def fetch_player(self, user_id: int) -> MatchPlayPlayerSnapshot:
        """Fetch the public profile and normalize rating and counts."""
        profile = await self._client.get_user_profile(user_id)
        return MatchPlayPlayerSnapshot(
            user_id=user_id,
            identity=transformers.matchplay_identity(profile),
            stats=transformers.matchplay_profile_to_stats(profile),
            ifpa_id=transformers.matchplay_ifpa_link(profile),
        )

    async def fetch_stats(self, user_id: int) -> MatchPlayStats:
        """Normalized rating stats for a Match Play user."""
        snapshot = await self.fetch_player(user_id)
        return snapshot.stats

    async def fetch_identity_summary(self, user_id: int) -> IdentitySummary:
        """Name and location from the Match Play profile."""
        snapshot = await self.fetch_player(user_id)
        return snapshot.identity

    async def fetch_cross_link(self, user_id: int) -> Optional[int]:
        """IFPA player id linked on the Match Play profile, if any."""
        snapshot = await self.fetch_player(user_id)
        return snapshot.ifpa_id
