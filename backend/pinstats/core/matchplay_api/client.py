"""Match Play Events API client (https://app.matchplay.events/api)."""

from typing import Any, Dict, List, Optional

import structlog

from pinstats.core.exceptions import ConfigurationError
from pinstats.core.http import HTTPClient, InvalidResponseError

from .endpoints import MATCHPLAY_API_BASE, MatchPlayEndpoints
from .models import (
    MatchPlayGameDTO,
    MatchPlayProfileDTO,
    MatchPlayTournamentDTO,
    MatchPlayTournamentPlayerDTO,
)

logger = structlog.get_logger(__name__)


class MatchPlayClient:
    """Thin typed wrapper over the Match Play REST API."""

    def __init__(
        self,
        http_client: HTTPClient,
        api_token: Optional[str],
        base_url: str = MATCHPLAY_API_BASE,
    ):
        """
        Initialize Match Play client.

        Args:
            http_client: Shared retrying transport
            api_token: Bearer token for tournament endpoints
            base_url: API base URL
        """
        self.http = http_client
        self.api_token = api_token
        self.endpoints = MatchPlayEndpoints(base_url)

    def _auth_headers(self) -> Dict[str, str]:
        if not self.api_token:
            raise ConfigurationError(
                "Missing MATCHPLAY_API_TOKEN environment variable",
                service="MatchPlayClient",
            )
        return {
            "Authorization": f"Bearer {self.api_token}",
            "Accept": "application/json",
        }

    @staticmethod
    def _data(response: Any, url: str) -> Any:
        """Unwrap the ``data`` envelope used by tournament endpoints."""
        if not isinstance(response, dict) or "data" not in response:
            raise InvalidResponseError("Missing 'data' in Match Play response", url=url)
        return response["data"]

    async def get_user_profile(self, user_id: int) -> MatchPlayProfileDTO:
        """Get the public user profile (user + rating + userCounts)."""
        url = self.endpoints.user(user_id)
        logger.debug("Fetching Match Play user profile", user_id=user_id)
        response = await self.http.fetch_json(url, headers={"Accept": "application/json"})

        if not isinstance(response, dict) or not isinstance(response.get("user"), dict):
            raise InvalidResponseError(
                "User data not found in Match Play response", url=url
            )

        return MatchPlayProfileDTO.model_validate(response)

    async def list_completed_tournaments(
        self, user_id: int, page: int = 1
    ) -> List[MatchPlayTournamentDTO]:
        """Completed tournaments the user played in, newest first."""
        url = self.endpoints.tournaments()
        response = await self.http.fetch_json(
            url,
            params=self.endpoints.completed_tournaments_params(user_id, page),
            headers=self._auth_headers(),
        )

        data = self._data(response, url)
        if not isinstance(data, list):
            raise InvalidResponseError("Expected a tournament list", url=url)
        return [MatchPlayTournamentDTO.model_validate(t) for t in data]

    async def get_tournament_players(
        self, tournament_id: int
    ) -> List[MatchPlayTournamentPlayerDTO]:
        """Roster of a tournament."""
        url = self.endpoints.tournament(tournament_id)
        response = await self.http.fetch_json(
            url, params={"includePlayers": 1}, headers=self._auth_headers()
        )

        data = self._data(response, url)
        if not isinstance(data, dict):
            raise InvalidResponseError("Expected a tournament object", url=url)
        players = data.get("players") or []
        return [MatchPlayTournamentPlayerDTO.model_validate(p) for p in players]

    async def get_tournament_games(self, tournament_id: int) -> List[MatchPlayGameDTO]:
        """All games of a tournament."""
        url = self.endpoints.tournament_games(tournament_id)
        response = await self.http.fetch_json(url, headers=self._auth_headers())

        data = self._data(response, url)
        if not isinstance(data, list):
            raise InvalidResponseError("Expected a game list", url=url)
        return [MatchPlayGameDTO.model_validate(g) for g in data]
