"""
Tests for the gateway error decorator.
"""

import pytest

from pinstats.core.decorators import upstream_error_handler
from pinstats.core.enums import Provider
from pinstats.core.exceptions import ConfigurationError, UpstreamError
from pinstats.core.http import NotFoundError, ServerHTTPError
from pinstats.core.matchplay_api.models import MatchPlayTournamentDTO


class FakeGateway:
    def __init__(self, error=None):
        self.error = error

    @upstream_error_handler(Provider.IFPA)
    async def fetch_stats(self, player_id: int) -> int:
        """Return the id or raise the configured error."""
        if self.error:
            raise self.error
        return player_id

    @upstream_error_handler(Provider.MATCHPLAY, operation="list_events")
    async def parse_tournament(self, payload: dict) -> MatchPlayTournamentDTO:
        return MatchPlayTournamentDTO.model_validate(payload)


async def test_passes_result_through():
    """Successful calls are untouched."""
    assert await FakeGateway().fetch_stats(7) == 7


async def test_preserves_function_metadata():
    """functools.wraps keeps the name and docstring."""
    assert FakeGateway.fetch_stats.__name__ == "fetch_stats"
    assert "configured error" in FakeGateway.fetch_stats.__doc__


async def test_converts_http_error():
    """Transport errors become UpstreamError for the provider."""
    cause = NotFoundError("Not Found", status_code=404)

    with pytest.raises(UpstreamError) as exc_info:
        await FakeGateway(cause).fetch_stats(7)

    error = exc_info.value
    assert error.provider is Provider.IFPA
    assert error.cause is cause
    assert error.status_code == 404
    assert error.operation == "fetch_stats"
    assert error.__cause__ is cause
    assert str(error).startswith("IFPA request failed")


async def test_converts_configuration_error():
    """A missing credential surfaces as the cause of an UpstreamError."""
    cause = ConfigurationError("Missing required environment variable: IFPA_API_KEY")

    with pytest.raises(UpstreamError) as exc_info:
        await FakeGateway(cause).fetch_stats(7)

    assert exc_info.value.status_code is None
    assert "IFPA_API_KEY" in str(exc_info.value)


async def test_converts_payload_validation_error():
    """Malformed payloads become UpstreamError."""
    with pytest.raises(UpstreamError) as exc_info:
        await FakeGateway().parse_tournament({"name": "No id"})

    assert exc_info.value.provider is Provider.MATCHPLAY
    assert exc_info.value.operation == "list_events"
    assert str(exc_info.value).startswith("Match Play request failed")


async def test_upstream_error_passes_unchanged():
    """An UpstreamError raised inside is not wrapped again."""
    original = UpstreamError(Provider.MATCHPLAY, ServerHTTPError("down", status_code=503))

    with pytest.raises(UpstreamError) as exc_info:
        await FakeGateway(original).fetch_stats(7)

    assert exc_info.value is original


async def test_unrelated_errors_propagate():
    """Programming errors are not disguised as upstream failures."""
    with pytest.raises(RuntimeError):
        await FakeGateway(RuntimeError("bug")).fetch_stats(7)
