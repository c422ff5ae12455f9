"""Hero ranking and aggregation."""

from .heroes import (
    MIN_MATCHES,
    CombinedHero,
    RankedHero,
    combine_heroes,
    normalize_hero_name,
    select_top_hero,
)

__all__ = [
    "MIN_MATCHES",
    "CombinedHero",
    "RankedHero",
    "combine_heroes",
    "normalize_hero_name",
    "select_top_hero",
]
