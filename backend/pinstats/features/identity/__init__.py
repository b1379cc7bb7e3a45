"""Identity feature: IFPA <-> Match Play id reconciliation."""

from .schemas import ResolvedIdentity
from .service import IdentityResolver, parse_player_id, validate_player_ids

__all__ = [
    "ResolvedIdentity",
    "IdentityResolver",
    "parse_player_id",
    "validate_player_ids",
]
