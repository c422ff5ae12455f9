"""Custom exceptions for the hero statistics service."""


class RivalsError(Exception):
    """Base exception for service errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class UpstreamError(RivalsError):
    """Raised when the statistics provider request fails.

    ``status_code`` holds the HTTP status returned by the provider, or None
    when no response was received (timeout, connection failure, bad JSON).
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(RivalsError):
    """Exception raised for configuration errors."""
    pass


class InvalidRequestError(RivalsError):
    """Raised when request parameters cannot be used (HTTP 400)."""
    pass
