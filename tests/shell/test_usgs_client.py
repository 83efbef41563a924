"""Tests for the USGS API client.

Uses the `responses` library to mock HTTP requests.
"""

import pytest
import requests
import responses

from src.core.errors import HttpStatusError, TransportError
from src.shell.usgs_client import USGSClient


TEST_URL = (
    "https://earthquake.usgs.gov/fdsnws/event/1/query"
    "?format=geojson&starttime=2024-05-01&endtime=2024-05-10"
)


class TestUSGSClientInit:
    """Tests for USGSClient initialization."""

    def test_no_timeout_by_default(self):
        assert USGSClient().timeout is None

    def test_custom_timeout(self):
        assert USGSClient(timeout=5).timeout == 5


class TestUSGSClientFetch:
    """Tests for USGSClient.fetch()."""

    @responses.activate
    def test_returns_body_text(self):
        responses.add(
            responses.GET,
            TEST_URL,
            body='{"features": []}',
            status=200,
            content_type="application/json",
        )

        result = USGSClient().fetch(TEST_URL)

        assert result == '{"features": []}'

    @responses.activate
    def test_requests_exact_url(self):
        responses.add(responses.GET, TEST_URL, body="{}", status=200)

        USGSClient().fetch(TEST_URL)

        assert len(responses.calls) == 1
        assert responses.calls[0].request.url == TEST_URL
        assert responses.calls[0].request.method == "GET"

    @responses.activate
    def test_decodes_utf8_body(self):
        responses.add(
            responses.GET,
            TEST_URL,
            body='{"place": "Ñuñoa, Chile"}'.encode("utf-8"),
            status=200,
            content_type="application/json; charset=utf-8",
        )

        assert "Ñuñoa" in USGSClient().fetch(TEST_URL)

    @responses.activate
    def test_non_200_raises_status_error(self):
        responses.add(responses.GET, TEST_URL, body="oops", status=500)

        with pytest.raises(HttpStatusError) as exc_info:
            USGSClient().fetch(TEST_URL)

        assert exc_info.value.status_code == 500
        assert str(exc_info.value) == "Error en la consulta a la API: 500"

    @responses.activate
    def test_no_content_is_not_success(self):
        responses.add(responses.GET, TEST_URL, status=204)

        with pytest.raises(HttpStatusError) as exc_info:
            USGSClient().fetch(TEST_URL)

        assert exc_info.value.status_code == 204

    @responses.activate
    def test_bad_request_raises_status_error(self):
        responses.add(responses.GET, TEST_URL, body="Bad Request", status=400)

        with pytest.raises(HttpStatusError) as exc_info:
            USGSClient().fetch(TEST_URL)

        assert exc_info.value.status_code == 400

    @responses.activate
    def test_connection_error_raises_transport_error(self):
        responses.add(
            responses.GET,
            TEST_URL,
            body=requests.ConnectionError("Name or service not known"),
        )

        with pytest.raises(TransportError) as exc_info:
            USGSClient().fetch(TEST_URL)

        assert "Name or service not known" in str(exc_info.value)
        assert str(exc_info.value).startswith("Error al obtener datos:")

    @responses.activate
    def test_timeout_raises_transport_error(self):
        responses.add(
            responses.GET,
            TEST_URL,
            body=requests.Timeout("read timed out"),
        )

        with pytest.raises(TransportError, match="read timed out"):
            USGSClient(timeout=1).fetch(TEST_URL)
