"""Logging setup shared by the API server and the CLI."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    """Configure root logging.

    Console output always goes to stdout; when ``log_file`` is given the same
    records are also written there (parent directories are created).
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    logging.basicConfig(
        # Convert string log level to logging constant (e.g., "DEBUG" -> logging.DEBUG)
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )
    # httpx logs every request at INFO; keep that at WARNING unless debugging
    if level.upper() != "DEBUG":
        logging.getLogger("httpx").setLevel(logging.WARNING)
