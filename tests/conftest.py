"""Shared fixtures: a fake statistics provider and an app wired to it."""

import pytest
from fastapi.testclient import TestClient

from rivals_api.api.main import create_app
from rivals_api.config.settings import Settings
from rivals_api.core.exceptions import UpstreamError


class FakeProvider:
    """In-memory stand-in for the Marvel Rivals client.

    ``players`` maps a username to either a stats payload or an exception
    to raise. Every call is recorded in ``calls``.
    """

    def __init__(self, players=None):
        self.players = players or {}
        self.calls = []

    async def get_player_stats(self, username, filters=None):
        self.calls.append((username, filters))
        outcome = self.players.get(username, UpstreamError("Player not found", status_code=404))
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


def hero(name, matches, wins):
    return {"hero_name": name, "matches": matches, "wins": wins}


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def client(provider):
    settings = Settings(_env_file=None, marvel_rivals_key="test-key")
    return TestClient(create_app(settings=settings, provider=provider))
