"""
Tests for the IFPA and Match Play gateways.
"""

from unittest.mock import AsyncMock

import pytest

from pinstats.core.enums import Provider
from pinstats.core.exceptions import UpstreamError
from pinstats.core.http import InvalidResponseError, NotFoundError, ServerHTTPError
from pinstats.core.ifpa_api import IFPAClient, ResultSet
from pinstats.core.ifpa_api.models import (
    IFPAPlayerDTO,
    IFPAPvpOpponentDTO,
    IFPAResultDTO,
)
from pinstats.core.matchplay_api import MatchPlayClient
from pinstats.core.matchplay_api.models import MatchPlayProfileDTO
from pinstats.features.stats.gateway import IFPAGateway, MatchPlayGateway


@pytest.fixture
def mock_ifpa_client(ifpa_player_payload):
    client = AsyncMock(spec=IFPAClient)
    client.get_player.return_value = IFPAPlayerDTO.model_validate(ifpa_player_payload)

    async def get_results(player_id, result_set):
        if result_set is ResultSet.ACTIVE:
            return [
                IFPAResultDTO(event_date="2024-03-01", current_points="10"),
                IFPAResultDTO(event_date="2023-03-01", current_points="2.5"),
            ]
        return [IFPAResultDTO(event_date="2019-01-01", current_points="0.5")]

    client.get_results.side_effect = get_results
    return client


@pytest.fixture
def ifpa_gateway(mock_ifpa_client):
    return IFPAGateway(mock_ifpa_client)


@pytest.fixture
def mock_matchplay_client(matchplay_profile_payload):
    client = AsyncMock(spec=MatchPlayClient)
    client.get_user_profile.return_value = MatchPlayProfileDTO.model_validate(
        matchplay_profile_payload
    )
    return client


@pytest.fixture
def matchplay_gateway(mock_matchplay_client):
    return MatchPlayGateway(mock_matchplay_client)


class TestIFPAGateway:
    """Test cases for IFPAGateway."""

    async def test_fetch_player(self, ifpa_gateway, mock_ifpa_client):
        """Profile and both result sets are combined into one snapshot."""
        snapshot = await ifpa_gateway.fetch_player(67715)

        assert snapshot.player_id == 67715
        assert snapshot.identity.name == "Ada Flipper"
        assert snapshot.matchplay_id == 37737
        assert snapshot.stats.current_rank == 1234
        assert [e.year for e in snapshot.stats.events_by_year] == [
            "2024",
            "2023",
            "2019",
        ]
        mock_ifpa_client.get_player.assert_awaited_once_with(67715)
        assert mock_ifpa_client.get_results.await_count == 2

    async def test_fetch_player_tolerates_failed_result_set(
        self, ifpa_gateway, mock_ifpa_client
    ):
        """A failed result set only shrinks the events-by-year summary."""

        async def get_results(player_id, result_set):
            if result_set is ResultSet.ACTIVE:
                return [IFPAResultDTO(event_date="2024-03-01", current_points="10")]
            raise ServerHTTPError("down", status_code=503)

        mock_ifpa_client.get_results.side_effect = get_results

        snapshot = await ifpa_gateway.fetch_player(67715)

        assert [e.year for e in snapshot.stats.events_by_year] == ["2024"]

    async def test_fetch_player_profile_failure(self, ifpa_gateway, mock_ifpa_client):
        """A failed profile fetch fails the whole snapshot."""
        mock_ifpa_client.get_player.side_effect = NotFoundError(
            "Not Found", status_code=404
        )

        with pytest.raises(UpstreamError) as exc_info:
            await ifpa_gateway.fetch_player(1)

        assert exc_info.value.provider is Provider.IFPA
        assert exc_info.value.status_code == 404

    async def test_fetch_stats(self, ifpa_gateway):
        stats = await ifpa_gateway.fetch_stats(67715)
        assert stats.current_points == 56.78

    async def test_fetch_identity_summary(self, ifpa_gateway, mock_ifpa_client):
        identity = await ifpa_gateway.fetch_identity_summary(67715)

        assert identity.name == "Ada Flipper"
        mock_ifpa_client.get_results.assert_not_awaited()

    async def test_fetch_cross_link(self, ifpa_gateway):
        assert await ifpa_gateway.fetch_cross_link(67715) == 37737

    async def test_fetch_cross_link_failure(self, ifpa_gateway, mock_ifpa_client):
        mock_ifpa_client.get_player.side_effect = InvalidResponseError("bad")

        with pytest.raises(UpstreamError):
            await ifpa_gateway.fetch_cross_link(67715)

    async def test_fetch_pvp_opponents(self, ifpa_gateway, mock_ifpa_client):
        mock_ifpa_client.get_pvp.return_value = [
            IFPAPvpOpponentDTO(player_id="9", first_name="Bob", win_count="2")
        ]

        opponents = await ifpa_gateway.fetch_pvp_opponents(67715)

        assert len(opponents) == 1
        assert opponents[0].player_id == 9
        assert opponents[0].wins == 2


class TestMatchPlayGateway:
    """Test cases for MatchPlayGateway."""

    async def test_fetch_player(self, matchplay_gateway):
        snapshot = await matchplay_gateway.fetch_player(37737)

        assert snapshot.user_id == 37737
        assert snapshot.identity.location == "Austin, TX"
        assert snapshot.stats.grade == "A"
        assert snapshot.ifpa_id == 67715

    async def test_fetch_stats_and_identity(self, matchplay_gateway):
        stats = await matchplay_gateway.fetch_stats(37737)
        identity = await matchplay_gateway.fetch_identity_summary(37737)

        assert stats.rating == 1650.0
        assert identity.name == "Ada Flipper"

    async def test_fetch_cross_link(self, matchplay_gateway):
        assert await matchplay_gateway.fetch_cross_link(37737) == 67715

    async def test_failure(self, matchplay_gateway, mock_matchplay_client):
        mock_matchplay_client.get_user_profile.side_effect = ServerHTTPError(
            "Bad Gateway", status_code=502
        )

        with pytest.raises(UpstreamError) as exc_info:
            await matchplay_gateway.fetch_stats(37737)

        assert exc_info.value.provider is Provider.MATCHPLAY
        assert "Match Play request failed" in str(exc_info.value)
