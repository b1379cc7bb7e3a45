"""Transformers from raw provider DTOs to normalized stats schemas.

This is the anti-corruption layer for both providers: upstream quirks
(numbers as text, empty strings, mixed key casing, lowercase system names)
stop here.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Optional

from pinstats.core.ifpa_api.models import (
    IFPAPlayerDTO,
    IFPAPvpOpponentDTO,
    IFPAResultDTO,
)
from pinstats.core.matchplay_api.models import MatchPlayProfileDTO
from pinstats.utils.parsing import parse_count, parse_int, parse_number
from pinstats.utils.statistics import win_rate

from .schemas import (
    EventsByYear,
    IdentitySummary,
    IFPAStats,
    MatchPlayStats,
    PvpOpponentSummary,
    StateRanking,
)

# Lookup order for the open ranking system; the API currently sends "open"
OPEN_SYSTEM_KEYS = ("open", "OPEN", "MAIN")

RATING_CLASS_GRADES = {1: "A+", 2: "A", 3: "B", 4: "C", 5: "D"}


def parse_cross_link(value: Any) -> Optional[int]:
    """Parse a cross-linked player id; anything but a non-negative int is absent."""
    player_id = parse_int(value)
    if player_id is None or player_id < 0:
        return None
    return player_id


def _as_float(value: Any) -> Optional[float]:
    number = parse_number(value)
    return float(number) if number is not None else None


# IFPA


def select_open_system(player: IFPAPlayerDTO) -> Optional[Dict[str, Any]]:
    """Raw stats of the open ranking system, if the profile has any."""
    if player.player_stats is None:
        return None
    system = player.player_stats.system
    for key in OPEN_SYSTEM_KEYS:
        raw = system.get(key)
        if isinstance(raw, dict) and raw:
            return raw
    return None


def ifpa_identity(player: IFPAPlayerDTO) -> IdentitySummary:
    """Display name "first last" and location "city, stateprov"."""
    name = f"{player.first_name or ''} {player.last_name or ''}".strip()
    location = ", ".join(part for part in (player.city, player.stateprov) if part)
    return IdentitySummary(name=name or None, location=location or None)


def ifpa_matchplay_link(player: IFPAPlayerDTO) -> Optional[int]:
    """Match Play user id embedded in the IFPA profile (sent as text)."""
    if player.matchplay_events is None:
        return None
    return parse_cross_link(player.matchplay_events.id)


def ifpa_state_ranking(player: IFPAPlayerDTO) -> Optional[StateRanking]:
    """Most recent NACS open-system series entry, or None."""
    nacs_open = [
        entry
        for entry in player.series
        if entry.series_code == "NACS" and (entry.system or "").lower() == "open"
    ]
    if not nacs_open:
        return None

    latest = max(nacs_open, key=lambda entry: str(entry.year or ""))
    rank = parse_int(latest.series_rank)
    if rank is None:
        return None

    return StateRanking(
        state=latest.region_name or player.stateprov or "Unknown",
        rank=rank,
        points=_as_float(latest.total_points) or 0.0,
        year=str(latest.year or ""),
    )


def ifpa_events_by_year(results: Iterable[IFPAResultDTO]) -> List[EventsByYear]:
    """Group results by the year of ``event_date``, newest year first."""
    counts: Dict[str, int] = defaultdict(int)
    points: Dict[str, float] = defaultdict(float)

    for result in results:
        year = (result.event_date or "")[:4]
        if len(year) != 4:
            continue
        counts[year] += 1
        points[year] += _as_float(result.current_points) or 0.0

    return [
        EventsByYear(
            year=year, event_count=counts[year], total_points=round(points[year], 2)
        )
        for year in sorted(counts, reverse=True)
    ]


def ifpa_player_to_stats(
    player: IFPAPlayerDTO, events_by_year: Optional[List[EventsByYear]] = None
) -> IFPAStats:
    """Normalize the open-system stats block of an IFPA profile."""
    raw = select_open_system(player) or {}
    return IFPAStats(
        current_rank=parse_int(raw.get("current_rank")),
        current_points=_as_float(raw.get("current_points")),
        last_month_rank=parse_int(raw.get("last_month_rank")),
        last_year_rank=parse_int(raw.get("last_year_rank")),
        highest_rank=parse_int(raw.get("highest_rank")),
        ratings_value=_as_float(raw.get("ratings_value")),
        efficiency_value=_as_float(raw.get("efficiency_value")),
        total_events=parse_int(raw.get("total_events_all_time")),
        state_ranking=ifpa_state_ranking(player),
        events_by_year=events_by_year or [],
    )


def ifpa_pvp_to_summaries(
    opponents: Iterable[IFPAPvpOpponentDTO], limit: int = 10
) -> List[PvpOpponentSummary]:
    """Head-to-head records with at least one game, most games first."""
    summaries = []
    for opponent in opponents:
        wins = parse_count(opponent.win_count)
        losses = parse_count(opponent.loss_count)
        ties = parse_count(opponent.tie_count)
        total = wins + losses + ties
        if total <= 0:
            continue

        name = f"{opponent.first_name or ''} {opponent.last_name or ''}".strip()
        summaries.append(
            PvpOpponentSummary(
                player_id=parse_cross_link(opponent.player_id),
                name=name or "Unknown",
                wins=wins,
                losses=losses,
                ties=ties,
                total_games=total,
                win_rate=win_rate(wins, losses),
            )
        )

    summaries.sort(key=lambda s: s.total_games, reverse=True)
    return summaries[:limit]


# Match Play


def matchplay_identity(profile: MatchPlayProfileDTO) -> IdentitySummary:
    """Display name and free-text location of a Match Play user."""
    user = profile.user
    name = (user.name or "").strip()
    if not name:
        name = f"{user.first_name or ''} {user.last_name or ''}".strip()
    location = (user.location or "").strip()
    return IdentitySummary(name=name or None, location=location or None)


def matchplay_ifpa_link(profile: MatchPlayProfileDTO) -> Optional[int]:
    """IFPA player id linked on the Match Play profile."""
    return parse_cross_link(profile.user.ifpa_id)


def grade_for_rating_class(rating_class: Optional[int]) -> Optional[str]:
    """Letter grade for a rating class; unknown classes render as the number."""
    if rating_class is None:
        return None
    return RATING_CLASS_GRADES.get(rating_class, str(rating_class))


def matchplay_profile_to_stats(profile: MatchPlayProfileDTO) -> MatchPlayStats:
    """Normalize rating and aggregate counts of a Match Play profile."""
    rating = profile.rating
    counts = profile.user_counts
    rating_class = parse_int(rating.rating_class) if rating else None

    return MatchPlayStats(
        rating=_as_float(rating.rating) if rating else None,
        rating_class=rating_class,
        grade=grade_for_rating_class(rating_class),
        rd=_as_float(rating.rd) if rating else None,
        game_count=parse_int(rating.game_count) if rating else None,
        win_count=parse_int(rating.win_count) if rating else None,
        loss_count=parse_int(rating.loss_count) if rating else None,
        efficiency_percent=_as_float(rating.efficiency_percent) if rating else None,
        tournament_play_count=(
            parse_int(counts.tournament_play_count) if counts else None
        ),
    )
