"""
Shared HTTP transport package.

Provides the retrying JSON client used by both provider API clients and the
typed errors it raises.
"""

from .client import HTTPClient
from .errors import (
    HTTPError,
    ClientHTTPError,
    NotFoundError,
    ServerHTTPError,
    RequestTimeoutError,
    InvalidResponseError,
)

__all__ = [
    "HTTPClient",
    "HTTPError",
    "ClientHTTPError",
    "NotFoundError",
    "ServerHTTPError",
    "RequestTimeoutError",
    "InvalidResponseError",
]
