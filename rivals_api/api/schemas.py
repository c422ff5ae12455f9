"""
Pydantic schemas for API responses.

Field names follow the JSON the frontend already consumes, so the win rate
is exposed as ``winRate`` through an alias while the Python attribute stays
``win_rate``. Every lookup either returns a hero result or a plain message
when no hero qualifies; failures use ``ErrorResponse``.
"""

from pydantic import BaseModel, ConfigDict, Field


class PlayerTopHeroResponse(BaseModel):
    """Best unranked hero of a single player."""

    model_config = ConfigDict(populate_by_name=True)

    player: str
    hero: str  # Display name, e.g. "Iron Man"
    matches: int  # Matches played with the hero
    wins: int  # Matches won with the hero
    win_rate: float = Field(alias="winRate")  # Percentage, two decimals (66.67)


class CombinedTopHeroResponse(BaseModel):
    """Best hero over the merged stats of several players."""

    model_config = ConfigDict(populate_by_name=True)

    players: list[str]  # Every requested player, including skipped ones
    hero: str
    matches: int  # Summed over the players that returned data
    wins: int
    win_rate: float = Field(alias="winRate")


class MessageResponse(BaseModel):
    """Returned with HTTP 200 when no hero meets the match threshold."""

    message: str


class ErrorResponse(BaseModel):
    """Body of 400 and 500 responses."""

    error: str


class HealthResponse(BaseModel):
    status: str
    service: str
    upstream_configured: bool
