"""Top-hero lookups built on the provider client and aggregation."""

from .top_heroes import (
    FetchFatal,
    FetchOk,
    FetchSkip,
    combined_top_hero,
    parse_players,
    parse_season,
    player_top_hero,
)

__all__ = [
    "FetchFatal",
    "FetchOk",
    "FetchSkip",
    "combined_top_hero",
    "parse_players",
    "parse_season",
    "player_top_hero",
]
