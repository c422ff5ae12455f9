"""End-to-end tests for the HTTP routes with a fake statistics provider."""

import logging

import pytest
from fastapi.testclient import TestClient

from rivals_api.api.main import create_app
from rivals_api.config.settings import Settings
from rivals_api.core.exceptions import UpstreamError
from rivals_api.core.logging import setup_logging
from tests.conftest import hero


# ========== SERVICE ENDPOINTS ==========


def test_root(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["message"] == "Marvel Rivals Hero Stats API"


def test_health(client):
    response = client.get("/health")
    assert response.json() == {
        "status": "healthy",
        "service": "Marvel Rivals Hero Stats API",
        "upstream_configured": True,
    }


# ========== SINGLE PLAYER ==========


def test_player_top_hero(client, provider):
    provider.players["tony"] = {
        "name": "tony",
        "heroes_unranked": [hero("iron man", 15, 10), hero("groot", 5, 4)],
    }

    response = client.get("/api/player/tony/top-hero", params={"season": "2"})

    assert response.status_code == 200
    assert response.json() == {
        "player": "tony",
        "hero": "Iron Man",
        "matches": 15,
        "wins": 10,
        "winRate": 66.67,
    }
    assert provider.calls == [("tony", {"season": 2})]


def test_player_top_hero_no_eligible_hero(client, provider):
    provider.players["rookie"] = {"heroes_unranked": [hero("groot", 5, 4)]}

    response = client.get("/api/player/rookie/top-hero")

    assert response.status_code == 200
    assert response.json() == {"message": "No unranked hero with more than 10 matches"}


def test_player_top_hero_missing_player_is_server_error(client):
    """The single-player route surfaces 404s from upstream as a 500."""
    response = client.get("/api/player/nobody/top-hero")

    assert response.status_code == 500
    assert response.json() == {"error": "Player not found"}


def test_player_top_hero_rounds_half_up(client, provider):
    provider.players["tony"] = {"heroes_unranked": [hero("storm", 32, 13)]}

    response = client.get("/api/player/tony/top-hero")

    assert response.json()["winRate"] == 40.63


def test_player_top_hero_fractional_counts_are_ignored(client, provider):
    provider.players["tony"] = {"heroes_unranked": [hero("storm", 12.5, 6)]}

    response = client.get("/api/player/tony/top-hero")

    assert response.status_code == 200
    assert response.json() == {"message": "No unranked hero with more than 10 matches"}


def test_player_top_hero_invalid_season(client, provider):
    response = client.get("/api/player/tony/top-hero", params={"season": "latest"})

    assert response.status_code == 400
    assert response.json() == {"error": "season must be a number"}
    assert provider.calls == []


# ========== COMBINED ==========


def test_combined_skips_missing_player(client, provider):
    provider.players["alice"] = {"heroes_unranked": [hero("hero x", 20, 12)]}
    provider.players["carol"] = {
        "heroes_unranked": [hero("hero x", 15, 9), hero("loki", 30, 12)]
    }

    response = client.get("/api/top-hero/combined", params={"players": "alice; bob ;carol"})

    assert response.status_code == 200
    assert response.json() == {
        "players": ["alice", "bob", "carol"],
        "hero": "Hero X",
        "matches": 35,
        "wins": 21,
        "winRate": 60.0,
    }


def test_combined_skips_private_player(client, provider):
    provider.players["alice"] = {"heroes_unranked": [hero("storm", 12, 9)]}
    provider.players["bob"] = UpstreamError("Forbidden", status_code=403)

    response = client.get("/api/top-hero/combined", params={"players": "alice;bob", "season": "1.5"})

    assert response.status_code == 200
    assert response.json()["hero"] == "Storm"
    assert response.json()["winRate"] == 75.0
    assert sorted(provider.calls) == [("alice", {"season": 1.5}), ("bob", {"season": 1.5})]


def test_combined_rounds_half_up(client, provider):
    provider.players["alice"] = {"heroes_unranked": [hero("storm", 16, 1)]}
    provider.players["bob"] = {"heroes_unranked": [hero("storm", 16, 0)]}

    response = client.get("/api/top-hero/combined", params={"players": "alice;bob"})

    assert response.json()["matches"] == 32
    assert response.json()["winRate"] == 3.13


def test_combined_no_eligible_data(client, provider):
    provider.players["alice"] = {"heroes_unranked": []}

    response = client.get("/api/top-hero/combined", params={"players": "alice;bob"})

    assert response.status_code == 200
    assert response.json() == {"message": "No eligible hero data found"}


def test_combined_upstream_failure(client, provider):
    provider.players["alice"] = {"heroes_unranked": [hero("storm", 12, 9)]}
    provider.players["bob"] = UpstreamError("Request failed with status code 500", status_code=500)

    response = client.get("/api/top-hero/combined", params={"players": "alice;bob"})

    assert response.status_code == 500
    assert response.json() == {"error": "Request failed with status code 500"}


@pytest.mark.parametrize(
    "params, message",
    [
        ({}, "players query parameter is required"),
        ({"players": ""}, "players query parameter is required"),
        ({"players": " ; ;"}, "No valid players provided"),
    ],
)
def test_combined_requires_players(client, provider, params, message):
    response = client.get("/api/top-hero/combined", params=params)

    assert response.status_code == 400
    assert response.json() == {"error": message}
    assert provider.calls == []


# ========== APP FACTORY ==========


def test_app_creates_and_closes_own_client(tmp_path):
    """Without an injected provider the app opens a client at startup."""
    log_file = tmp_path / "logs" / "server.log"
    settings = Settings(
        _env_file=None, marvel_rivals_key=None, log_level="INFO", log_file=log_file
    )
    app = create_app(settings=settings)

    with TestClient(app) as client:
        assert client.get("/health").json()["upstream_configured"] is False
        assert app.state.provider.base_url == "https://marvelrivalsapi.com/api/v1"
        assert not app.state.provider.client.is_closed

    assert app.state.provider.client.is_closed

    # Startup configured logging from the settings, file handler included
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "Statistics provider ready at" in log_file.read_text(encoding="utf-8")

    setup_logging(level="WARNING")
