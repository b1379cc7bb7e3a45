"""IFPA API v2.1 endpoint definitions."""

from enum import Enum

IFPA_API_BASE = "https://api.ifpapinball.com"


class ResultSet(str, Enum):
    """IFPA result-history buckets for the MAIN ranking system."""

    ACTIVE = "ACTIVE"
    NONACTIVE = "NONACTIVE"


class IFPAEndpoints:
    """IFPA endpoint definitions.

    The base URL has no version prefix; the legacy /v1 and /v2 paths are
    deprecated upstream.
    """

    def __init__(self, base_url: str = IFPA_API_BASE):
        self.base_url = base_url.rstrip("/")

    def player(self, player_id: int) -> str:
        """Player profile with embedded ranking stats and series data."""
        return f"{self.base_url}/player/{player_id}"

    def results(self, player_id: int, result_set: ResultSet) -> str:
        """Per-event results for one result set of the MAIN system."""
        return f"{self.base_url}/player/{player_id}/results/MAIN/{result_set.value}"

    def pvp(self, player_id: int) -> str:
        """Head-to-head records against every opponent faced."""
        return f"{self.base_url}/player/{player_id}/pvp"
