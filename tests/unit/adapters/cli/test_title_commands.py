"""
Tests pour les commandes CLI fetch, verify, info et version.

Le container est mocke: aucun appel reseau n'est effectue.
"""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from typer.testing import CliRunner

from src.adapters.api.jikan_schemas import (
    parse_raw_characters,
    parse_raw_staff,
    parse_raw_title,
)
from src.core.exceptions import MalformedResponseError, UpstreamError
from src.main import app
from src.services.title_mapper import map_title
from tests.fixtures.jikan_responses import (
    FRIEREN_ID,
    JIKAN_CHARACTERS_RESPONSE,
    JIKAN_FULL_RESPONSE,
    JIKAN_STAFF_RESPONSE,
)

runner = CliRunner()


@pytest.fixture
def frieren():
    return map_title(
        parse_raw_title(JIKAN_FULL_RESPONSE["data"]),
        parse_raw_characters(JIKAN_CHARACTERS_RESPONSE["data"]),
        parse_raw_staff(JIKAN_STAFF_RESPONSE["data"]),
    )


@pytest.fixture
def mock_service() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def mock_container(mock_service: AsyncMock):
    """Patche le Container instancie par with_container."""
    with patch("src.adapters.cli.helpers.Container") as MockContainer:
        container = MagicMock()
        container.title_service.return_value = mock_service
        jikan_client = MagicMock()
        jikan_client.close = AsyncMock()
        container.jikan_client.return_value = jikan_client
        MockContainer.return_value = container
        yield container


class TestFetchCommand:
    """Tests pour la commande fetch."""

    def test_fetch_displays_summary(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        result = runner.invoke(app, ["fetch", str(FRIEREN_ID)])

        assert result.exit_code == 0, result.output
        assert "Sousou no Frieren" in result.output
        assert "Madhouse" in result.output
        mock_service.get_full_title_details.assert_awaited_once_with(FRIEREN_ID)

    def test_fetch_json_output(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        result = runner.invoke(app, ["fetch", str(FRIEREN_ID), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["id"] == FRIEREN_ID
        assert data["organizations"][-1]["role"] == "Studio"

    def test_fetch_upstream_error_exits_1(self, mock_container, mock_service):
        mock_service.get_full_title_details.side_effect = UpstreamError(404, "Not Found")

        result = runner.invoke(app, ["fetch", "999999"])

        assert result.exit_code == 1
        assert "404" in result.output

    def test_fetch_closes_client(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        runner.invoke(app, ["fetch", str(FRIEREN_ID)])

        mock_container.jikan_client.return_value.close.assert_awaited_once()


class TestVerifyCommand:
    """Tests pour la commande verify."""

    def test_verify_all_checks_pass(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        result = runner.invoke(app, ["verify", str(FRIEREN_ID)])

        assert result.exit_code == 0, result.output
        assert "Tous les controles sont passes" in result.output

    def test_verify_defaults_to_frieren(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        runner.invoke(app, ["verify"])

        mock_service.get_full_title_details.assert_awaited_once_with(FRIEREN_ID)

    def test_verify_failed_check_exits_1(self, mock_container, mock_service, frieren):
        mock_service.get_full_title_details.return_value = frieren

        result = runner.invoke(app, ["verify", "1"])

        assert result.exit_code == 1
        assert "controle(s) en echec" in result.output

    def test_verify_rate_limit_is_soft_skip(self, mock_container, mock_service):
        """Un 429 est ignore avec un avertissement, code de sortie 0."""
        mock_service.get_full_title_details.side_effect = UpstreamError(429, "Too Many Requests")

        result = runner.invoke(app, ["verify", str(FRIEREN_ID)])

        assert result.exit_code == 0
        assert "429" in result.output

    def test_verify_other_upstream_error_exits_1(self, mock_container, mock_service):
        mock_service.get_full_title_details.side_effect = UpstreamError(503, "Service Unavailable")

        result = runner.invoke(app, ["verify", str(FRIEREN_ID)])

        assert result.exit_code == 1

    def test_verify_malformed_response_exits_1(self, mock_container, mock_service):
        mock_service.get_full_title_details.side_effect = MalformedResponseError("bad role")

        result = runner.invoke(app, ["verify", str(FRIEREN_ID)])

        assert result.exit_code == 1
        assert "bad role" in result.output


class TestInfoAndVersion:
    """Tests pour les commandes info et version."""

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert "AniFetch v" in result.output

    def test_info_shows_configuration(self):
        result = runner.invoke(app, ["info"])

        assert result.exit_code == 0
        assert "API Jikan" in result.output
