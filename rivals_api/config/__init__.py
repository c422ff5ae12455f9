"""Configuration package for the Marvel Rivals stats service."""

from .settings import Settings, settings

__all__ = ["Settings", "settings"]
