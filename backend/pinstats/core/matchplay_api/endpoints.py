"""Match Play Events API endpoint definitions."""

from typing import Any, Dict

MATCHPLAY_API_BASE = "https://app.matchplay.events/api"


class MatchPlayEndpoints:
    """Match Play endpoint definitions.

    The user profile endpoint is public; tournament endpoints need a bearer
    token. Tournament lists are paginated newest page first.
    """

    def __init__(self, base_url: str = MATCHPLAY_API_BASE):
        self.base_url = base_url.rstrip("/")

    def user(self, user_id: int) -> str:
        """User profile with rating and aggregate counts."""
        return f"{self.base_url}/users/{user_id}"

    def tournaments(self) -> str:
        """Tournament search endpoint."""
        return f"{self.base_url}/tournaments"

    @staticmethod
    def completed_tournaments_params(user_id: int, page: int = 1) -> Dict[str, Any]:
        """Query parameters for completed tournaments a user played in."""
        return {"played": user_id, "status": "completed", "page": page}

    def tournament(self, tournament_id: int) -> str:
        """Tournament detail (pass ``includePlayers=1`` for the roster)."""
        return f"{self.base_url}/tournaments/{tournament_id}"

    def tournament_games(self, tournament_id: int) -> str:
        """All games of a tournament."""
        return f"{self.base_url}/tournaments/{tournament_id}/games"
