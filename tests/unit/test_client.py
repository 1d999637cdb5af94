"""
Tests for the shared client behaviour.
"""

import io

import httpx
import pytest

from selectpdf.client import ApiClient, format_parameter, write_to_stream
from selectpdf.clients import HtmlToPdfClient
from selectpdf.config import Settings
from selectpdf.enums import PageSize, SecureProtocol
from selectpdf.exceptions import ApiStatusError, TransportError, ValidationError
from tests.helpers.api import form_fields

CONVERT = "/api2/convert/"


class TestFormatParameter:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (True, "True"),
            (False, "False"),
            (PageSize.A4, "A4"),
            (SecureProtocol.TLS10, "1"),
            (12, "12"),
            ("text", "text"),
        ],
    )
    def test_values(self, value, expected):
        assert format_parameter(value) == expected


def test_write_to_stream_flushes():
    stream = io.BytesIO()
    write_to_stream(stream, b"data")
    write_to_stream(stream, None)
    assert stream.getvalue() == b"data"


class TestApiClient:
    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("SELECTPDF_API_KEY", raising=False)
        settings = Settings(_env_file=None, api_key=None)

        with pytest.raises(ValidationError, match="API key cannot be empty"):
            ApiClient(settings=settings)

    def test_key_from_settings(self, settings):
        client = ApiClient(settings=settings)
        assert client.api_key == "test-key"
        assert client.parameters == {"key": "test-key"}

    def test_explicit_key_wins(self, settings):
        assert ApiClient("other", settings=settings).api_key == "other"

    def test_endpoints_from_base_url(self, settings):
        client = HtmlToPdfClient(settings=settings)

        assert client.api_endpoint == "https://api.test/api2/convert/"
        assert client.api_async_endpoint == "https://api.test/api2/asyncjob/"
        assert client.api_web_elements_endpoint == "https://api.test/api2/webelements/"

    def test_base_url_without_trailing_slash(self):
        settings = Settings(_env_file=None, api_key="k", api_base_url="https://api.test/v2")
        assert ApiClient(settings=settings).api_endpoint == "https://api.test/v2/convert/"

    def test_settings_defaults(self, settings):
        client = ApiClient(settings=settings)
        assert client.timeout == 6000
        assert client.async_calls_ping_interval == 3
        assert client.async_calls_max_pings == 1000

    def test_setters_return_self(self, settings):
        client = ApiClient(settings=settings)
        assert client.set_custom_parameter("flag", True) is client
        assert client.set_header("X-Test", "1") is client
        assert client.parameters["flag"] == "True"
        assert client.headers == {"X-Test": "1"}


class TestCalls:
    async def test_custom_endpoint_and_parameters(self, server, client_kwargs):
        server.queue("/custom/", httpx.Response(200, content=b"%PDF"))
        client = HtmlToPdfClient(**client_kwargs)
        client.set_api_endpoint("https://api.test/custom/")
        client.set_custom_parameter("extra", "va lue&")

        await client.convert_html_string("<p>x</p>")

        fields = form_fields(server.requests[0])
        assert fields["extra"] == "va lue&"
        assert fields["async"] == "False"

    async def test_custom_headers_are_sent(self, server, client_kwargs):
        server.queue(CONVERT, httpx.Response(200, content=b"%PDF"))
        client = HtmlToPdfClient(**client_kwargs).set_header("X-Trace", "t-1")

        await client.convert_html_string("<p>x</p>")

        assert server.requests[0].headers["x-trace"] == "t-1"

    async def test_call_state_is_reset_between_calls(self, server, client_kwargs):
        server.queue(
            CONVERT,
            httpx.Response(
                200,
                content=b"%PDF",
                headers={"selectpdf-api-pages": "3", "selectpdf-api-jobid": "j1"},
            ),
            httpx.Response(200, content=b"%PDF"),
        )
        client = HtmlToPdfClient(**client_kwargs)

        await client.convert_html_string("<p>one</p>")
        assert client.get_number_of_pages() == 3
        assert client.job_id == "j1"

        await client.convert_html_string("<p>two</p>")
        assert client.get_number_of_pages() == 0
        assert client.job_id == ""

    async def test_failed_call_clears_previous_state(self, server, client_kwargs):
        server.queue(
            CONVERT,
            httpx.Response(200, content=b"%PDF", headers={"selectpdf-api-pages": "3"}),
            httpx.Response(500, text="boom"),
        )
        client = HtmlToPdfClient(**client_kwargs)

        await client.convert_html_string("<p>one</p>")
        with pytest.raises(ApiStatusError):
            await client.convert_html_string("<p>two</p>")

        assert client.get_number_of_pages() == 0


class TestOutputFiles:
    async def test_result_written_to_file(self, server, client_kwargs, tmp_path):
        server.queue(CONVERT, httpx.Response(200, content=b"%PDF-data"))
        target = tmp_path / "out.pdf"

        result = await HtmlToPdfClient(**client_kwargs).convert_html_string_to_file(
            "<p>x</p>", target
        )

        assert target.read_bytes() == b"%PDF-data"
        assert result.consumed

    async def test_partial_file_removed_on_status_error(self, server, client_kwargs, tmp_path):
        server.queue(CONVERT, httpx.Response(500, text="Internal error"))
        target = tmp_path / "out.pdf"

        with pytest.raises(ApiStatusError):
            await HtmlToPdfClient(**client_kwargs).convert_html_string_to_file(
                "<p>x</p>", target
            )

        assert not target.exists()

    async def test_partial_file_removed_on_transport_error(
        self, server, client_kwargs, tmp_path
    ):
        def refuse(request):
            raise httpx.ConnectError("refused", request=request)

        server.queue(CONVERT, refuse)
        target = tmp_path / "out.pdf"

        with pytest.raises(TransportError):
            await HtmlToPdfClient(**client_kwargs).convert_url_to_file(
                "https://example.com", target
            )

        assert not target.exists()

    async def test_stream_output(self, server, client_kwargs):
        server.queue(CONVERT, httpx.Response(200, content=b"%PDF-stream"))
        stream = io.BytesIO()

        await HtmlToPdfClient(**client_kwargs).convert_url_to_stream(
            "https://example.com", stream
        )

        assert stream.getvalue() == b"%PDF-stream"
