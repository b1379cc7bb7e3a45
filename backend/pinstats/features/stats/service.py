"""
Single-provider stats service.

Backs the ``/ifpa/me`` and ``/matchplay/me`` endpoints: one provider, one
cache entry per player, and upstream failures surfaced to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

import structlog

from pinstats.core.cache import FIFTEEN_MINUTES
from pinstats.core.exceptions import UpstreamError

from .schemas import IFPAProfile, MatchPlayPlayerSnapshot

if TYPE_CHECKING:
    from pinstats.core.cache import CacheStore

    from .gateway import IFPAGateway, MatchPlayGateway

logger = structlog.get_logger(__name__)


def ifpa_cache_key(player_id: int) -> str:
    return f"ifpa:player:{player_id}"


def matchplay_cache_key(user_id: int) -> str:
    return f"matchplay:user:{user_id}"


class PlayerStatsService:
    """Cached single-provider lookups."""

    def __init__(
        self,
        ifpa_gateway: "IFPAGateway",
        matchplay_gateway: "MatchPlayGateway",
        cache: "CacheStore",
        cache_ttl: float = FIFTEEN_MINUTES,
    ):
        self._ifpa = ifpa_gateway
        self._matchplay = matchplay_gateway
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def get_ifpa_profile(
        self, player_id: int, bypass_cache: bool = False
    ) -> Tuple[IFPAProfile, bool]:
        """
        IFPA snapshot plus head-to-head list.

        The snapshot is required (``UpstreamError`` propagates); the
        head-to-head list is optional and left ``None`` when it fails.

        Returns:
            ``(profile, cached)``
        """
        cache_key = ifpa_cache_key(player_id)
        if not bypass_cache:
            cached = self._cache.get(cache_key)
            if cached is not None:
                return cached, True

        player = await self._ifpa.fetch_player(player_id)

        pvp_opponents = None
        try:
            pvp_opponents = await self._ifpa.fetch_pvp_opponents(player_id)
        except UpstreamError as e:
            logger.warning(
                "IFPA head-to-head unavailable", player_id=player_id, error=str(e)
            )

        profile = IFPAProfile(player=player, pvp_opponents=pvp_opponents)
        self._cache.set(cache_key, profile, self._cache_ttl)
        return profile, False

    async def get_matchplay_profile(
        self, user_id: int, bypass_cache: bool = False
    ) -> Tuple[MatchPlayPlayerSnapshot, bool]:
        """Match Play snapshot; returns ``(snapshot, cached)``."""
        cache_key = matchplay_cache_key(user_id)
        if not bypass_cache:
            cached: Optional[MatchPlayPlayerSnapshot] = self._cache.get(cache_key)
            if cached is not None:
                return cached, True

        snapshot = await self._matchplay.fetch_player(user_id)
        self._cache.set(cache_key, snapshot, self._cache_ttl)
        return snapshot, False
