"""HTTP API for the hero statistics service."""
