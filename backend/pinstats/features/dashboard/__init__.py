"""Dashboard feature: concurrent merge of both providers and the opponent history."""

from .router import router
from .schemas import PlayerIdentity, UnifiedDashboard
from .service import DashboardService, build_cache_key

__all__ = [
    "router",
    "PlayerIdentity",
    "UnifiedDashboard",
    "DashboardService",
    "build_cache_key",
]
