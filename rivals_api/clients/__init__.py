"""Clients for external statistics providers."""

from .marvel_rivals import Filters, MarvelRivalsClient, PlayerStatsProvider

__all__ = ["Filters", "MarvelRivalsClient", "PlayerStatsProvider"]
