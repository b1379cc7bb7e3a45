"""
Dashboard aggregation service.

Runs the IFPA fetch, the Match Play fetch and the opponent reconstruction
concurrently and merges whatever succeeded into one ``UnifiedDashboard``.
A single failing source never fails the dashboard.
"""

from __future__ import annotations

import asyncio
import re
from typing import TYPE_CHECKING, Any, Awaitable, Optional, Tuple

import structlog

from pinstats.core.cache import FIFTEEN_MINUTES
from pinstats.features.identity.service import RawPlayerId, validate_player_ids
from pinstats.features.stats.schemas import (
    IFPAPlayerSnapshot,
    MatchPlayPlayerSnapshot,
)

from .schemas import UNKNOWN_PLAYER, PlayerIdentity, UnifiedDashboard

if TYPE_CHECKING:
    from pinstats.core.cache import CacheStore
    from pinstats.features.identity.service import IdentityResolver
    from pinstats.features.opponents.service import OpponentHistoryService
    from pinstats.features.stats.gateway import IFPAGateway, MatchPlayGateway

logger = structlog.get_logger(__name__)

_NON_LETTERS = re.compile(r"[^a-z]")


def build_cache_key(ifpa_id: Optional[int], matchplay_id: Optional[int]) -> str:
    """``combined:{ifpa_id|none}:{matchplay_id|none}``"""
    ifpa_part = "none" if ifpa_id is None else str(ifpa_id)
    matchplay_part = "none" if matchplay_id is None else str(matchplay_id)
    return f"combined:{ifpa_part}:{matchplay_part}"


def normalize_name(name: str) -> str:
    return _NON_LETTERS.sub("", name.lower())


def name_mismatch_warning(
    ifpa_name: Optional[str], matchplay_name: Optional[str]
) -> Optional[str]:
    """Warn when both providers report names that differ in their letters."""
    if not ifpa_name or not matchplay_name:
        return None
    if normalize_name(ifpa_name) == normalize_name(matchplay_name):
        return None
    return (
        f'IFPA name "{ifpa_name}" does not match Match Play name '
        f'"{matchplay_name}". Make sure both IDs belong to the same player.'
    )


async def _not_requested() -> None:
    return None


def _failure(outcome: Any) -> Optional[Exception]:
    """The exception a settled gather slot holds, if any."""
    if isinstance(outcome, BaseException):
        if not isinstance(outcome, Exception):
            raise outcome
        return outcome
    return None


class DashboardService:
    """Builds and caches unified dashboards."""

    def __init__(
        self,
        ifpa_gateway: "IFPAGateway",
        matchplay_gateway: "MatchPlayGateway",
        opponent_service: "OpponentHistoryService",
        identity_resolver: "IdentityResolver",
        cache: "CacheStore",
        cache_ttl: float = FIFTEEN_MINUTES,
        recent_events_limit: int = 5,
    ):
        self._ifpa = ifpa_gateway
        self._matchplay = matchplay_gateway
        self._opponents = opponent_service
        self._resolver = identity_resolver
        self._cache = cache
        self._cache_ttl = cache_ttl
        self._recent_events_limit = recent_events_limit

    async def get_dashboard(
        self,
        raw_ifpa_id: RawPlayerId,
        raw_matchplay_id: RawPlayerId,
        bypass_cache: bool = False,
    ) -> Tuple[UnifiedDashboard, bool]:
        """
        Validate request ids, serve from cache or build a fresh dashboard.

        Args:
            raw_ifpa_id: IFPA id as received
            raw_matchplay_id: Match Play id as received
            bypass_cache: Skip the cache lookup (the result is still stored)

        Returns:
            ``(dashboard, cached)``

        Raises:
            ValidationError: If both ids are absent or one is malformed
        """
        ifpa_id, matchplay_id = validate_player_ids(raw_ifpa_id, raw_matchplay_id)
        cache_key = build_cache_key(ifpa_id, matchplay_id)

        if not bypass_cache:
            cached = self._cache.get(cache_key)
            if cached is not None:
                logger.debug("Dashboard served from cache", cache_key=cache_key)
                return cached, True

        resolved = await self._resolver.resolve_ids(ifpa_id, matchplay_id)
        dashboard = await self.merge(
            resolved.ifpa_id,
            resolved.matchplay_id,
            id_mismatch_warning=resolved.mismatch_warning,
        )

        self._cache.set(cache_key, dashboard, self._cache_ttl)
        resolved_key = build_cache_key(resolved.ifpa_id, resolved.matchplay_id)
        if resolved_key != cache_key:
            self._cache.set(resolved_key, dashboard, self._cache_ttl)

        return dashboard, False

    async def merge(
        self,
        ifpa_id: Optional[int],
        matchplay_id: Optional[int],
        id_mismatch_warning: Optional[str] = None,
    ) -> UnifiedDashboard:
        """
        Fetch every requested source concurrently and merge the results.

        Never raises for a failing source: its block is ``None`` and the
        failure text is recorded on the dashboard.
        """
        ifpa_task: Awaitable[Any] = (
            self._ifpa.fetch_player(ifpa_id) if ifpa_id is not None else _not_requested()
        )
        matchplay_task: Awaitable[Any] = (
            self._matchplay.fetch_player(matchplay_id)
            if matchplay_id is not None
            else _not_requested()
        )
        opponents_task: Awaitable[Any] = (
            self._opponents.reconstruct(matchplay_id, self._recent_events_limit)
            if matchplay_id is not None
            else _not_requested()
        )

        ifpa_outcome, matchplay_outcome, opponents_outcome = await asyncio.gather(
            ifpa_task, matchplay_task, opponents_task, return_exceptions=True
        )

        ifpa: Optional[IFPAPlayerSnapshot] = None
        ifpa_error = _failure(ifpa_outcome)
        if ifpa_error is None:
            ifpa = ifpa_outcome
        else:
            self._log_failure("ifpa", ifpa_error, ifpa_id=ifpa_id)

        matchplay: Optional[MatchPlayPlayerSnapshot] = None
        matchplay_error = _failure(matchplay_outcome)
        if matchplay_error is None:
            matchplay = matchplay_outcome
        else:
            self._log_failure("matchplay", matchplay_error, matchplay_id=matchplay_id)

        opponents_error = _failure(opponents_outcome)
        recent_opponents = opponents_outcome if opponents_error is None else None
        if opponents_error is not None:
            self._log_failure(
                "recent_opponents", opponents_error, matchplay_id=matchplay_id
            )

        ifpa_identity = ifpa.identity if ifpa is not None else None
        matchplay_identity = matchplay.identity if matchplay is not None else None

        identity = PlayerIdentity(
            name=(
                (ifpa_identity and ifpa_identity.name)
                or (matchplay_identity and matchplay_identity.name)
                or UNKNOWN_PLAYER
            ),
            location=(
                (ifpa_identity and ifpa_identity.location)
                or (matchplay_identity and matchplay_identity.location)
                or None
            ),
            ifpa_id=ifpa_id,
            matchplay_id=matchplay_id,
        )

        dashboard = UnifiedDashboard(
            identity=identity,
            ifpa=ifpa.stats if ifpa is not None else None,
            matchplay=matchplay.stats if matchplay is not None else None,
            recent_opponents=recent_opponents,
            recent_opponents_error=(
                str(opponents_error) if opponents_error is not None else None
            ),
            id_mismatch_warning=id_mismatch_warning,
            name_mismatch_warning=name_mismatch_warning(
                ifpa_identity.name if ifpa_identity else None,
                matchplay_identity.name if matchplay_identity else None,
            ),
            ifpa_error=str(ifpa_error) if ifpa_error is not None else None,
            matchplay_error=(
                str(matchplay_error) if matchplay_error is not None else None
            ),
        )

        logger.info(
            "Dashboard merged",
            ifpa_id=ifpa_id,
            matchplay_id=matchplay_id,
            has_ifpa=dashboard.ifpa is not None,
            has_matchplay=dashboard.matchplay is not None,
            opponents=(
                len(recent_opponents) if recent_opponents is not None else None
            ),
        )
        return dashboard

    @staticmethod
    def _log_failure(source: str, error: Exception, **context: Any) -> None:
        logger.warning(
            "Dashboard source failed",
            source=source,
            error_type=error.__class__.__name__,
            error=str(error),
            **context,
        )
