"""Core infrastructure module.

This module exports core utilities used across features.
Never imports from features - only from external libraries.
"""

from .config import Settings, get_settings, get_global_settings
from .exceptions import (
    ServiceException,
    ValidationError,
    UpstreamError,
    RateLimitError,
    ConfigurationError,
)
from .enums import Provider
from .cache import CacheStore, FIFTEEN_MINUTES
from .logging import setup_logging, bind_request_context

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "get_global_settings",
    # Exceptions
    "ServiceException",
    "ValidationError",
    "UpstreamError",
    "RateLimitError",
    "ConfigurationError",
    # Enums
    "Provider",
    # Cache
    "CacheStore",
    "FIFTEEN_MINUTES",
    # Logging
    "setup_logging",
    "bind_request_context",
]
