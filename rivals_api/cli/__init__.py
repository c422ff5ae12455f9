"""CLI interface for the hero statistics service."""

from .main import app

__all__ = ["app"]
