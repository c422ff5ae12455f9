"""Core utilities: exceptions and logging."""

from .exceptions import ConfigurationError, InvalidRequestError, RivalsError, UpstreamError
from .logging import setup_logging

__all__ = ["ConfigurationError", "InvalidRequestError", "RivalsError", "UpstreamError", "setup_logging"]
