"""Core CLI components - configuration, API client, and shared errors."""

from synq.core.api_client import APIClient, APIResponse
from synq.core.config import DEFAULT_BASE_URL, ConfigStore
from synq.core.errors import (
    ApiError,
    ConfigurationError,
    SynqError,
    TransportError,
    ValidationError,
)

__all__ = [
    "APIClient",
    "APIResponse",
    "ConfigStore",
    "DEFAULT_BASE_URL",
    "SynqError",
    "ConfigurationError",
    "ValidationError",
    "ApiError",
    "TransportError",
]
