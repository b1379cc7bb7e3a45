"""Custom error classes for the shared HTTP transport."""

from typing import Optional


class HTTPError(Exception):
    """Base exception for transport errors with status code and raw body."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        body: Optional[str] = None,
        url: Optional[str] = None,
    ) -> None:
        """
        Initialize HTTPError.

        Args:
            message: Error message
            status_code: HTTP status code (404, 408, 500, 503, etc.)
            body: Raw response body, if one was received
            url: Request URL with credentials stripped
        """
        super().__init__(message)
        self.message: str = message
        self.status_code: Optional[int] = status_code
        self.body: Optional[str] = body
        self.url: Optional[str] = url

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"HTTP {self.status_code}: {self.message}"
        return f"HTTP error: {self.message}"


class ClientHTTPError(HTTPError):
    """Client error (4xx) - never retried."""

    pass


class NotFoundError(ClientHTTPError):
    """Not found error (404) - resource doesn't exist."""

    pass


class ServerHTTPError(HTTPError):
    """Server error (5xx) after all retries were used."""

    pass


class RequestTimeoutError(HTTPError):
    """Request timed out on the final attempt."""

    pass


class InvalidResponseError(HTTPError):
    """Successful status but the body was not valid JSON."""

    pass
