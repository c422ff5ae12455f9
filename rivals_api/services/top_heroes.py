"""Top-hero lookups shared by the HTTP routes and the CLI.

Each lookup parses raw parameters, fetches player statistics from the
provider and hands the payloads to the aggregation functions. The
combined lookup fetches all players concurrently; every fetch settles into
one of three outcomes before anything is aggregated:

- ``FetchOk``: stats were returned
- ``FetchSkip``: the player is private or unknown (HTTP 403/404) and is left out
- ``FetchFatal``: any other failure, which fails the whole lookup
"""

import asyncio
import logging
import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..aggregation.heroes import MIN_MATCHES, combine_heroes, select_top_hero
from ..clients.marvel_rivals import Filters, PlayerStatsProvider
from ..core.exceptions import InvalidRequestError, UpstreamError

logger = logging.getLogger(__name__)

# Upstream statuses that mean "this player's data is not available"
SKIP_STATUSES = frozenset({403, 404})

NO_PLAYER_HERO_MESSAGE = f"No unranked hero with more than {MIN_MATCHES} matches"
NO_COMBINED_HERO_MESSAGE = "No eligible hero data found"


@dataclass
class FetchOk:
    username: str
    stats: Any


@dataclass
class FetchSkip:
    username: str
    status_code: int


@dataclass
class FetchFatal:
    username: str
    error: Exception


FetchResult = FetchOk | FetchSkip | FetchFatal


# ========== PARAMETER PARSING ==========


def parse_season(raw: str | None) -> int | float | None:
    """Convert the ``season`` query value to a number.

    Empty or missing means no season filter. Whole numbers come back as int
    ("2" -> 2, "2.0" -> 2); half seasons stay float ("1.5" -> 1.5).
    """
    if raw is None or not raw.strip():
        return None
    try:
        season = float(raw)
    except ValueError:
        raise InvalidRequestError("season must be a number") from None
    if not math.isfinite(season):
        raise InvalidRequestError("season must be a number")
    return int(season) if season.is_integer() else season


def build_filters(season: int | float | None) -> Filters:
    return {"season": season} if season is not None else {}


def parse_players(raw: str | None) -> list[str]:
    """Split a ``a;b;c`` players parameter into trimmed, non-empty names."""
    if not raw:
        raise InvalidRequestError("players query parameter is required")

    players = [name.strip() for name in raw.split(";")]
    players = [name for name in players if name]
    if not players:
        raise InvalidRequestError("No valid players provided")
    return players


def win_rate_percent(win_rate: float) -> float:
    """Ratio in [0, 1] -> percentage with two decimals, halves rounded up.

    The exact binary value of ``win_rate * 100`` is rounded, so 13/32
    (40.625) gives 40.63 and 10/15 gives 66.67.
    """
    percent = Decimal(win_rate * 100).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return float(percent)


# ========== FETCHING ==========


async def fetch_player(provider: PlayerStatsProvider, username: str, filters: Filters) -> FetchResult:
    """Fetch one player and classify the outcome instead of raising."""
    try:
        stats = await provider.get_player_stats(username, filters)
    except UpstreamError as e:
        if e.status_code in SKIP_STATUSES:
            logger.warning(f"Skipping player {username}: {e.status_code}")
            return FetchSkip(username=username, status_code=e.status_code)
        return FetchFatal(username=username, error=e)
    except Exception as e:
        return FetchFatal(username=username, error=e)
    return FetchOk(username=username, stats=stats)


async def fetch_players(
    provider: PlayerStatsProvider, usernames: list[str], filters: Filters
) -> list[FetchResult]:
    """Fetch all players concurrently; results keep the order of ``usernames``."""
    return list(
        await asyncio.gather(*(fetch_player(provider, name, filters) for name in usernames))
    )


def collect_player_stats(results: list[FetchResult]) -> list[Any]:
    """Reduce fetch outcomes to the list of available player stats.

    Skipped players are dropped. The first fatal outcome, in player order,
    is re-raised.
    """
    for result in results:
        if isinstance(result, FetchFatal):
            raise result.error

    return [
        result.stats
        for result in results
        if isinstance(result, FetchOk) and result.stats is not None
    ]


# ========== LOOKUPS ==========


async def player_top_hero(
    provider: PlayerStatsProvider, username: str, season: int | float | None = None
) -> dict[str, Any]:
    """Best unranked hero for one player, shaped as the API response.

    Every provider failure propagates, including 403/404.
    """
    stats = await provider.get_player_stats(username, build_filters(season))
    top_hero = select_top_hero(stats)

    if top_hero is None:
        return {"message": NO_PLAYER_HERO_MESSAGE}

    return {
        "player": username,
        "hero": top_hero.name,
        "matches": top_hero.matches,
        "wins": top_hero.wins,
        "winRate": win_rate_percent(top_hero.win_rate),
    }


async def combined_top_hero(
    provider: PlayerStatsProvider, players: list[str], season: int | float | None = None
) -> dict[str, Any]:
    """Best hero over the merged stats of several players.

    Players that are private or unknown upstream are left out silently; the
    response still lists every requested player.
    """
    results = await fetch_players(provider, players, build_filters(season))
    ranking = combine_heroes(collect_player_stats(results))

    if not ranking:
        return {"message": NO_COMBINED_HERO_MESSAGE}

    top_hero = ranking[0]
    return {
        "players": players,
        "hero": top_hero.name,
        "matches": top_hero.matches,
        "wins": top_hero.wins,
        "winRate": win_rate_percent(top_hero.win_rate),
    }
