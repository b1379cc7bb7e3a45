"""IFPA API client (https://api.ifpapinball.com/docs).

Auth is the ``api_key`` query parameter. The single ``GET /player/{id}``
endpoint returns the profile together with nested ranking stats.
"""

from typing import Any, Dict, List, Optional

import structlog

from pinstats.core.exceptions import ConfigurationError
from pinstats.core.http import HTTPClient, InvalidResponseError

from .endpoints import IFPA_API_BASE, IFPAEndpoints, ResultSet
from .models import IFPAPlayerDTO, IFPAPvpOpponentDTO, IFPAResultDTO

logger = structlog.get_logger(__name__)


class IFPAClient:
    """Thin typed wrapper over the IFPA REST API."""

    def __init__(
        self,
        http_client: HTTPClient,
        api_key: Optional[str],
        base_url: str = IFPA_API_BASE,
    ):
        """
        Initialize IFPA client.

        Args:
            http_client: Shared retrying transport
            api_key: IFPA API key
            base_url: API base URL
        """
        self.http = http_client
        self.api_key = api_key
        self.endpoints = IFPAEndpoints(base_url)

    def _auth_params(self) -> Dict[str, str]:
        if not self.api_key:
            raise ConfigurationError(
                "Missing required environment variable: IFPA_API_KEY",
                service="IFPAClient",
            )
        return {"api_key": self.api_key}

    @staticmethod
    def _require_object(response: Any, url: str) -> Dict[str, Any]:
        if not isinstance(response, dict):
            raise InvalidResponseError(
                f"Expected JSON object, got {type(response).__name__}", url=url
            )
        return response

    async def get_player(self, player_id: int) -> IFPAPlayerDTO:
        """Get full player profile (includes embedded stats and cross-links)."""
        url = self.endpoints.player(player_id)
        logger.debug("Fetching IFPA player profile", player_id=player_id)
        response = self._require_object(
            await self.http.fetch_json(url, params=self._auth_params()), url
        )

        # The API wraps `player` in an array even for a single id
        player = response.get("player")
        if isinstance(player, list):
            player = player[0] if player else None

        if not isinstance(player, dict):
            raise InvalidResponseError("Player data not found in IFPA response", url=url)

        return IFPAPlayerDTO.model_validate(player)

    async def get_results(
        self, player_id: int, result_set: ResultSet
    ) -> List[IFPAResultDTO]:
        """Get per-event results for one result set."""
        url = self.endpoints.results(player_id, result_set)
        logger.debug(
            "Fetching IFPA results", player_id=player_id, result_set=result_set.value
        )
        response = self._require_object(
            await self.http.fetch_json(url, params=self._auth_params()), url
        )

        results = response.get("results")
        if not isinstance(results, list):
            # Players without results in a set get no list at all
            return []
        return [IFPAResultDTO.model_validate(r) for r in results if isinstance(r, dict)]

    async def get_pvp(self, player_id: int) -> List[IFPAPvpOpponentDTO]:
        """Get head-to-head records against every opponent faced."""
        url = self.endpoints.pvp(player_id)
        response = self._require_object(
            await self.http.fetch_json(url, params=self._auth_params()), url
        )

        raw_pvp = response.get("pvp")
        if isinstance(raw_pvp, dict):
            raw_pvp = [raw_pvp]
        if not isinstance(raw_pvp, list):
            return []
        return [
            IFPAPvpOpponentDTO.model_validate(entry)
            for entry in raw_pvp
            if isinstance(entry, dict)
        ]
