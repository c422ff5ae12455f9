"""
Top-hero API endpoints.

Both endpoints proxy the Marvel Rivals statistics API and rank the player's
unranked heroes:

- /api/player/{username}/top-hero: best hero of one player
- /api/top-hero/combined: best hero over several players' merged stats

Error responses use the ``{"error": ...}`` body: 400 for unusable query
parameters, 500 for any upstream or unexpected failure.
"""

import logging

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from rivals_api.api.schemas import (
    CombinedTopHeroResponse,
    ErrorResponse,
    MessageResponse,
    PlayerTopHeroResponse,
)
from rivals_api.clients.marvel_rivals import PlayerStatsProvider
from rivals_api.core.exceptions import InvalidRequestError
from rivals_api.services.top_heroes import (
    combined_top_hero,
    parse_players,
    parse_season,
    player_top_hero,
)

logger = logging.getLogger(__name__)

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid query parameters"},
    500: {"model": ErrorResponse, "description": "Upstream or unexpected failure"},
}


def get_provider(request: Request) -> PlayerStatsProvider:
    """FastAPI dependency returning the provider built by the app factory."""
    return request.app.state.provider


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.get(
    "/player/{username}/top-hero",
    response_model=PlayerTopHeroResponse | MessageResponse,
    responses=ERROR_RESPONSES,
)
async def get_player_top_hero(
    username: str,
    season: str | None = Query(None, description="Season filter, e.g. 2 or 1.5"),
    provider: PlayerStatsProvider = Depends(get_provider),
):
    """
    Get the unranked hero with the best win rate for one player.

    Only heroes with more than 10 matches are considered. Any upstream
    failure, including a private or unknown player, is returned as a 500.

    Example URLs:
    - /api/player/someone/top-hero
    - /api/player/someone/top-hero?season=2
    """
    try:
        return await player_top_hero(provider, username, parse_season(season))
    except InvalidRequestError as e:
        return _error(400, e.message)
    except Exception as e:
        logger.exception(f"Error getting top hero for player {username}")
        return _error(500, getattr(e, "message", str(e)))


@router.get(
    "/top-hero/combined",
    response_model=CombinedTopHeroResponse | MessageResponse,
    responses=ERROR_RESPONSES,
)
async def get_combined_top_hero(
    players: str | None = Query(None, description="Semicolon-separated player names"),
    season: str | None = Query(None, description="Season filter, e.g. 2 or 1.5"),
    provider: PlayerStatsProvider = Depends(get_provider),
):
    """
    Get the best hero over the combined unranked stats of several players.

    Players whose stats are private (403) or unknown (404) upstream are
    skipped; any other upstream failure is returned as a 500.

    Example URLs:
    - /api/top-hero/combined?players=alice;bob;carol
    - /api/top-hero/combined?players=alice;bob&season=2
    """
    try:
        player_names = parse_players(players)
        return await combined_top_hero(provider, player_names, parse_season(season))
    except InvalidRequestError as e:
        return _error(400, e.message)
    except Exception as e:
        logger.exception(f"Error getting combined top hero for players {players!r}")
        return _error(500, getattr(e, "message", str(e)))
