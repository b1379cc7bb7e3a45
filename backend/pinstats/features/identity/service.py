"""
Identity resolution between IFPA player ids and Match Play user ids.

Each provider profile may carry a link to the other provider. When only one
id is supplied the link fills in the other; when both are supplied the IFPA
link is only used to warn about a contradiction. Supplied ids always win.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Awaitable, Callable, Optional, Tuple, Union

import structlog

from pinstats.core.enums import Provider
from pinstats.core.exceptions import UpstreamError, ValidationError

from .schemas import ResolvedIdentity

if TYPE_CHECKING:
    from pinstats.features.stats.gateway import IFPAGateway, MatchPlayGateway

logger = structlog.get_logger(__name__)

# str.isdigit() also accepts non-ASCII digits
_PLAYER_ID_PATTERN = re.compile(r"[0-9]+")

RawPlayerId = Union[str, int, None]


def parse_player_id(raw: RawPlayerId, field: str) -> Optional[int]:
    """
    Parse a user-supplied player id.

    Args:
        raw: Query value as received (None, text or int)
        field: Parameter name used in the error message

    Returns:
        The id, or None when the value is absent (None, empty or whitespace)

    Raises:
        ValidationError: If a present value is not a non-negative integer
    """
    if raw is None:
        return None

    if isinstance(raw, bool):
        raise ValidationError(
            f"{field} must be a non-negative integer",
            field=field,
            value=raw,
        )

    if isinstance(raw, int):
        if raw < 0:
            raise ValidationError(
                f"{field} must be a non-negative integer", field=field, value=raw
            )
        return raw

    text = str(raw).strip()
    if not text:
        return None

    if not _PLAYER_ID_PATTERN.fullmatch(text):
        raise ValidationError(
            f"{field} must be a non-negative integer",
            field=field,
            value=raw,
        )
    return int(text)


def validate_player_ids(
    raw_ifpa_id: RawPlayerId, raw_matchplay_id: RawPlayerId
) -> Tuple[Optional[int], Optional[int]]:
    """Parse both ids; at least one must be present."""
    ifpa_id = parse_player_id(raw_ifpa_id, "ifpaId")
    matchplay_id = parse_player_id(raw_matchplay_id, "matchPlayId")

    if ifpa_id is None and matchplay_id is None:
        raise ValidationError(
            "At least one player ID is required",
            service="IdentityResolver",
            operation="validate_player_ids",
        )
    return ifpa_id, matchplay_id


class IdentityResolver:
    """Fills in a missing provider id from the other provider's profile."""

    def __init__(
        self, ifpa_gateway: "IFPAGateway", matchplay_gateway: "MatchPlayGateway"
    ):
        self._ifpa = ifpa_gateway
        self._matchplay = matchplay_gateway

    async def resolve(
        self,
        raw_ifpa_id: RawPlayerId = None,
        raw_matchplay_id: RawPlayerId = None,
    ) -> ResolvedIdentity:
        """Validate raw request ids and resolve them."""
        ifpa_id, matchplay_id = validate_player_ids(raw_ifpa_id, raw_matchplay_id)
        return await self.resolve_ids(ifpa_id, matchplay_id)

    async def resolve_ids(
        self, ifpa_id: Optional[int], matchplay_id: Optional[int]
    ) -> ResolvedIdentity:
        """
        Resolve already validated ids.

        Lookup failures are logged and leave the missing id unset; they never
        fail the resolution.
        """
        if matchplay_id is None and ifpa_id is not None:
            linked = await self._lookup(
                Provider.IFPA, self._ifpa.fetch_cross_link, ifpa_id
            )
            if linked is not None:
                logger.info(
                    "Match Play id resolved from IFPA profile",
                    ifpa_id=ifpa_id,
                    matchplay_id=linked,
                )
            return ResolvedIdentity(ifpa_id=ifpa_id, matchplay_id=linked)

        if ifpa_id is None and matchplay_id is not None:
            linked = await self._lookup(
                Provider.MATCHPLAY, self._matchplay.fetch_cross_link, matchplay_id
            )
            if linked is not None:
                logger.info(
                    "IFPA id resolved from Match Play profile",
                    matchplay_id=matchplay_id,
                    ifpa_id=linked,
                )
            return ResolvedIdentity(ifpa_id=linked, matchplay_id=matchplay_id)

        linked = await self._lookup(Provider.IFPA, self._ifpa.fetch_cross_link, ifpa_id)
        warning = None
        if linked is not None and linked != matchplay_id:
            warning = (
                f"IFPA player {ifpa_id} is linked to Match Play user {linked}, "
                f"but Match Play user {matchplay_id} was requested. "
                "Make sure both IDs belong to the same player."
            )
            logger.warning(
                "Provider id mismatch",
                ifpa_id=ifpa_id,
                matchplay_id=matchplay_id,
                linked_matchplay_id=linked,
            )
        return ResolvedIdentity(
            ifpa_id=ifpa_id, matchplay_id=matchplay_id, mismatch_warning=warning
        )

    @staticmethod
    async def _lookup(
        provider: Provider,
        fetch: Callable[[int], Awaitable[Optional[int]]],
        player_id: int,
    ) -> Optional[int]:
        try:
            return await fetch(player_id)
        except UpstreamError as e:
            logger.warning(
                "Cross-link lookup failed",
                provider=provider.value,
                player_id=player_id,
                error=str(e),
            )
            return None
