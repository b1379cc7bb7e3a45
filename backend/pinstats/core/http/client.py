"""Shared JSON HTTP transport with timeout, retries and typed errors."""

import asyncio
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx
import structlog

from .errors import (
    ClientHTTPError,
    HTTPError,
    InvalidResponseError,
    NotFoundError,
    RequestTimeoutError,
    ServerHTTPError,
)

logger = structlog.get_logger(__name__)


class HTTPClient:
    """
    Async JSON client used by every provider API client.

    Retries server-class failures (5xx, network errors, timeouts) with
    exponential backoff and never retries client-class failures (4xx).
    """

    def __init__(
        self,
        timeout: float = 10.0,
        retries: int = 2,
        retry_delay: float = 1.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the transport.

        Args:
            timeout: Per-request timeout in seconds
            retries: Extra attempts after the first one
            retry_delay: Base backoff delay; attempt ``n`` waits ``retry_delay * 2**n``
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)
            sleep: Awaitable sleep used between attempts
        """
        self.timeout = timeout
        self.retries = retries
        self.retry_delay = retry_delay
        self._transport = transport
        self._sleep = sleep

        self.session: Optional[httpx.AsyncClient] = None
        self._session_lock = asyncio.Lock()

    async def __aenter__(self) -> "HTTPClient":
        """Async context manager entry."""
        await self.start_session()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object | None,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def start_session(self) -> None:
        """Start the httpx session."""
        if self.session is None or self.session.is_closed:
            async with self._session_lock:
                if self.session is None or self.session.is_closed:
                    self.session = httpx.AsyncClient(
                        headers={"User-Agent": "pinstats/0.1"},
                        timeout=httpx.Timeout(self.timeout),
                        transport=self._transport,
                    )
                    logger.info("HTTP client session started", timeout=self.timeout)

    async def close(self) -> None:
        """Close the httpx session."""
        if self.session and not self.session.is_closed:
            await self.session.aclose()
            logger.info("HTTP client session closed")

    @staticmethod
    def _loggable_url(url: str) -> str:
        """Strip the query string so credentials never reach the logs."""
        return url.split("?", 1)[0]

    def _raise_client_error(self, response: httpx.Response, url: str) -> None:
        """Raise a non-retryable error for a 4xx response."""
        error_cls = NotFoundError if response.status_code == 404 else ClientHTTPError
        raise error_cls(
            response.reason_phrase or "Client error",
            status_code=response.status_code,
            body=response.text,
            url=url,
        )

    @staticmethod
    def _parse_json(response: httpx.Response, url: str) -> Any:
        """Decode the JSON body of a successful response."""
        try:
            return response.json()
        except ValueError as e:
            raise InvalidResponseError(
                f"Invalid JSON payload: {e}",
                status_code=response.status_code,
                body=response.text[:500],
                url=url,
            ) from e

    async def fetch_json(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        GET ``url`` and return the parsed JSON body.

        Args:
            url: Absolute request URL
            params: Query parameters
            headers: Extra request headers

        Returns:
            Parsed JSON (dict or list)

        Raises:
            HTTPError: On a 4xx, on exhausted retries, or on an invalid body
        """
        await self.start_session()
        if self.session is None:
            raise HTTPError("Session not initialized")

        log_url = self._loggable_url(url)
        last_error: Optional[HTTPError] = None

        for attempt in range(self.retries + 1):
            try:
                response = await self.session.get(url, params=params, headers=headers)
            except httpx.TimeoutException:
                last_error = RequestTimeoutError(
                    f"Request timeout after {self.timeout}s", status_code=408, url=log_url
                )
                logger.debug("HTTP request timed out", url=log_url, attempt=attempt)
            except httpx.RequestError as e:
                last_error = ServerHTTPError(
                    f"Request failed: {e}", status_code=503, url=log_url
                )
                logger.debug(
                    "HTTP request failed", url=log_url, attempt=attempt, error=str(e)
                )
            else:
                if 400 <= response.status_code < 500:
                    self._raise_client_error(response, log_url)
                if response.status_code < 400:
                    return self._parse_json(response, log_url)

                last_error = ServerHTTPError(
                    response.reason_phrase or "Server error",
                    status_code=response.status_code,
                    body=response.text,
                    url=log_url,
                )
                logger.debug(
                    "HTTP server error",
                    url=log_url,
                    attempt=attempt,
                    status_code=response.status_code,
                )

            if attempt < self.retries:
                await self._sleep(self.retry_delay * 2**attempt)

        logger.warning(
            "HTTP request failed after retries",
            url=log_url,
            attempts=self.retries + 1,
            status_code=last_error.status_code if last_error else None,
        )
        raise last_error or HTTPError("Request failed", url=log_url)
