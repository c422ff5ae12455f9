"""Hero ranking over upstream player statistics.

Two pure functions sit on top of the raw player payloads returned by the
statistics provider:

- ``select_top_hero``: the best unranked hero of a single player
- ``combine_heroes``: per-hero totals merged across several players, ranked

Both only consider heroes with more than ``MIN_MATCHES`` matches and group
heroes by ``normalize_hero_name`` so that "iron man" and "Iron man" land in
the same bucket. Malformed records are skipped rather than raising.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

# A hero needs strictly more matches than this to be ranked
MIN_MATCHES = 10

# Field of the player payload holding per-hero unranked stats
UNRANKED_HEROES_FIELD = "heroes_unranked"


@dataclass
class RankedHero:
    """Best hero of a single player."""

    name: str
    matches: int
    wins: int
    win_rate: float  # ratio in [0, 1]


@dataclass
class CombinedHero:
    """Hero totals summed across several players."""

    name: str
    matches: int = 0
    wins: int = 0
    win_rate: float = 0.0


def normalize_hero_name(raw: str) -> str:
    """Capitalize the first letter of every space-separated word.

    The rest of each word is kept as is, so the function is idempotent:
    "iron man" -> "Iron Man", "Iron Man" -> "Iron Man".
    """
    return " ".join(word[:1].upper() + word[1:] for word in raw.split(" "))


def _as_count(value: Any) -> int | None:
    """Whole, non-negative match or win count as int; None for anything else."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    return int(value) if value >= 0 else None


def _eligible_records(player_stats: Mapping[str, Any] | None) -> list[tuple[str, int, int]]:
    """Return (display name, matches, wins) for every eligible hero, in input order."""
    if not isinstance(player_stats, Mapping):
        return []

    heroes = player_stats.get(UNRANKED_HEROES_FIELD)
    if not isinstance(heroes, list):
        return []

    eligible = []
    for hero in heroes:
        if not isinstance(hero, Mapping):
            continue
        name = hero.get("hero_name")
        matches = _as_count(hero.get("matches"))
        wins = _as_count(hero.get("wins"))
        if not isinstance(name, str) or matches is None or wins is None:
            continue
        if matches <= MIN_MATCHES:
            continue
        eligible.append((normalize_hero_name(name), matches, wins))
    return eligible


def select_top_hero(player_stats: Mapping[str, Any] | None) -> RankedHero | None:
    """Pick the unranked hero with the highest win rate for one player.

    Returns None when the player has no hero above the match threshold
    (including a missing or empty hero list). On equal win rates the hero
    listed first by the provider wins.
    """
    ranked = [
        RankedHero(name=name, matches=matches, wins=wins, win_rate=wins / matches)
        for name, matches, wins in _eligible_records(player_stats)
    ]
    if not ranked:
        return None
    # max() keeps the first of several equal maxima
    return max(ranked, key=lambda hero: hero.win_rate)


def combine_heroes(players: Iterable[Mapping[str, Any]]) -> list[CombinedHero]:
    """Merge eligible hero stats across players and rank by combined win rate.

    Matches and wins of the same hero are summed over all players, then the
    win rate is computed from the totals. The full ranking is returned, best
    first; heroes with equal win rates keep the order in which they were
    first seen.
    """
    totals: dict[str, CombinedHero] = {}

    for player_stats in players:
        for name, matches, wins in _eligible_records(player_stats):
            entry = totals.setdefault(name, CombinedHero(name=name))
            entry.matches += matches
            entry.wins += wins

    for entry in totals.values():
        entry.win_rate = entry.wins / entry.matches

    # sorted() is stable, also with reverse=True
    return sorted(totals.values(), key=lambda hero: hero.win_rate, reverse=True)
