"""
Command-line interface for the hero statistics service.

Commands:
- serve: run the HTTP API with uvicorn
- top-hero: print one player's best unranked hero
- combined: print the best hero over several players

Examples:
    rivals-api serve --port 3001
    rivals-api top-hero someone --season 2
    rivals-api combined "alice;bob;carol"
"""

import asyncio
import json
import logging

import typer
import uvicorn

from rivals_api.clients.marvel_rivals import MarvelRivalsClient
from rivals_api.config.settings import settings
from rivals_api.core.exceptions import InvalidRequestError, RivalsError
from rivals_api.core.logging import setup_logging
from rivals_api.services.top_heroes import (
    combined_top_hero,
    parse_players,
    parse_season,
    player_top_hero,
)

logger = logging.getLogger(__name__)

app = typer.Typer(help="Marvel Rivals hero statistics service")


@app.callback()
def main(debug: bool = typer.Option(False, "--debug", help="Enable debug logging")):
    """Configure logging before any command runs."""
    setup_logging(level="DEBUG" if debug else settings.log_level, log_file=settings.log_file)


@app.command()
def serve(
    host: str = typer.Option(settings.api_host, "--host", help="Interface to bind"),
    port: int = typer.Option(settings.api_port, "--port", "-p", help="Port to listen on"),
    reload: bool = typer.Option(settings.api_reload, "--reload", help="Reload on code changes"),
):
    """Run the HTTP API."""
    typer.echo(f"Server running at http://{host}:{port}")
    uvicorn.run(
        "rivals_api.api.main:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
    )


def _run_lookup(lookup) -> None:
    async def _run():
        async with MarvelRivalsClient.from_settings(settings) as client:
            return await lookup(client)

    try:
        result = asyncio.run(_run())
    except InvalidRequestError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(2) from e
    except RivalsError as e:
        logger.error(f"Lookup failed: {e.message}")
        raise typer.Exit(1) from e

    typer.echo(json.dumps(result, indent=2))


@app.command("top-hero")
def top_hero(
    username: str = typer.Argument(..., help="Player name or UID"),
    season: str | None = typer.Option(None, "--season", "-s", help="Season filter, e.g. 2 or 1.5"),
):
    """Print the best unranked hero of one player."""
    _run_lookup(lambda client: player_top_hero(client, username, parse_season(season)))


@app.command()
def combined(
    players: str = typer.Argument(..., help='Semicolon-separated names, e.g. "alice;bob"'),
    season: str | None = typer.Option(None, "--season", "-s", help="Season filter, e.g. 2 or 1.5"),
):
    """Print the best hero over the merged stats of several players."""
    _run_lookup(
        lambda client: combined_top_hero(client, parse_players(players), parse_season(season))
    )


if __name__ == "__main__":
    app()
