"""Shared fixtures for the pinstats test suite."""

import pytest

from pinstats.core.cache import CacheStore


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache_store(clock):
    return CacheStore(clock=clock)


@pytest.fixture
def ifpa_player_payload():
    """Raw IFPA ``player`` object as returned inside ``{"player": [...]}``."""
    return {
        "player_id": "67715",
        "first_name": "Ada",
        "last_name": "Flipper",
        "city": "Austin",
        "stateprov": "TX",
        "country_code": "US",
        "matchplay_events": {"id": "37737", "rating": "1600", "rank": "200"},
        "player_stats": {
            "system": {
                "open": {
                    "current_rank": "1234",
                    "current_points": "56.78",
                    "last_month_rank": "1300",
                    "last_year_rank": "",
                    "highest_rank": "999",
                    "ratings_value": "1500.5",
                    "efficiency_value": "25.5",
                    "total_events_all_time": "42",
                }
            }
        },
        "series": [
            {
                "series_code": "NACS",
                "region_name": "Texas",
                "year": "2023",
                "total_points": "10.5",
                "series_rank": "40",
                "system": "OPEN",
            },
            {
                "series_code": "NACS",
                "region_name": "Texas",
                "year": "2024",
                "total_points": "20.25",
                "series_rank": "12",
                "system": "open",
            },
            {
                "series_code": "NACS",
                "region_name": "Texas",
                "year": "2025",
                "total_points": "5",
                "series_rank": "3",
                "system": "WOMEN",
            },
        ],
    }


@pytest.fixture
def matchplay_profile_payload():
    """Raw ``GET /users/{id}`` response."""
    return {
        "user": {
            "userId": 37737,
            "name": "Ada Flipper",
            "ifpaId": 67715,
            "location": "Austin, TX",
        },
        "rating": {
            "rating": 1650,
            "ratingClass": 2,
            "rd": 45.5,
            "gameCount": 500,
            "winCount": 300,
            "lossCount": 200,
            "efficiencyPercent": 60.1,
        },
        "userCounts": {"tournamentPlayCount": 75},
    }
