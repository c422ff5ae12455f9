"""
Main FastAPI application for the Marvel Rivals hero statistics service.

``create_app`` builds the application around an explicitly constructed
statistics provider. When no provider is passed, a ``MarvelRivalsClient`` is
opened from the settings for the lifetime of the app and closed on shutdown.
Logging is configured from the settings when the app starts up.

Run with uvicorn's factory mode:
    uvicorn rivals_api.api.main:create_app --factory --port 3001
or through the CLI:
    rivals-api serve
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rivals_api import __version__
from rivals_api.api.routers import heroes
from rivals_api.api.schemas import HealthResponse
from rivals_api.clients.marvel_rivals import MarvelRivalsClient, PlayerStatsProvider
from rivals_api.config.settings import Settings
from rivals_api.core.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None, provider: PlayerStatsProvider | None = None
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Service settings (read from the environment if omitted)
        provider: Statistics provider; a client owned by the app is created
            at startup when omitted

    Returns:
        Configured FastAPI application
    """
    settings = settings or Settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Runs in every server process, including uvicorn reload workers
        setup_logging(level=settings.log_level, log_file=settings.log_file)

        if provider is not None:
            yield
            return

        async with MarvelRivalsClient.from_settings(settings) as client:
            app.state.provider = client
            logger.info(f"Statistics provider ready at {client.base_url}")
            yield

    app = FastAPI(
        title="Marvel Rivals Hero Stats API",
        description="Top unranked heroes per player and across groups of players",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.provider = provider

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/")
    async def root():
        """Basic service information."""
        return {
            "message": "Marvel Rivals Hero Stats API",
            "version": __version__,
            "docs": f"http://{settings.api_host}:{settings.api_port}/docs",
        }

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        """Liveness check; also reports whether an upstream API key is set."""
        return HealthResponse(
            status="healthy",
            service="Marvel Rivals Hero Stats API",
            upstream_configured=settings.upstream_configured,
        )

    app.include_router(heroes.router, prefix="/api", tags=["heroes"])

    return app
