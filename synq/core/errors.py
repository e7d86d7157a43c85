"""Error kinds shared by the config store, API client and commands."""

from __future__ import annotations


class SynqError(Exception):
    """Base class for every failure the CLI reports to the user."""

    kind: str = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(SynqError):
    """The CLI is missing configuration it needs (usually the API key)."""

    kind = "configuration"


class ValidationError(SynqError):
    """Local input was rejected before any request was made."""

    kind = "validation"


class ApiError(SynqError):
    """The service answered with a structured error message."""

    kind = "api"

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.status_code = status_code


class TransportError(SynqError):
    """Network or HTTP-level failure without a structured message."""

    kind = "transport"
