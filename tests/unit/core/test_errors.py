"""
Tests for error mapping.
"""

import httpx
import pytest

from selectpdf.core.errors import (
    classify_status,
    format_status_message,
    map_status_failure,
    map_transport_failure,
)
from selectpdf.exceptions import ApiError, ApiStatusError, TransportError


def test_format_status_message():
    assert format_status_message(499, "Bad key") == "(499) Bad key"


class TestStatusFailure:
    def test_uses_body(self):
        error = map_status_failure(500, "Internal error", "Internal Server Error")

        assert isinstance(error, ApiStatusError)
        assert isinstance(error, ApiError)
        assert str(error) == "(500) Internal error"
        assert error.status_code == 500
        assert error.details["body"] == "Internal error"

    def test_falls_back_to_reason_phrase(self):
        assert str(map_status_failure(404, "  ", "Not Found")) == "(404) Not Found"

    def test_nothing_known(self):
        assert str(map_status_failure(418, None)) == "(418) Unknown error"


class TestTransportFailure:
    def test_connection_error(self):
        error = map_transport_failure(
            "https://api.test/api2/convert/", httpx.ConnectError("refused")
        )

        assert isinstance(error, TransportError)
        assert error.endpoint == "https://api.test/api2/convert/"
        assert "https://api.test/api2/convert/" in str(error)
        assert "Web Exception: refused" in str(error)
        assert error.status_code is None

    def test_timeout(self):
        error = map_transport_failure("https://api.test/", httpx.ReadTimeout("slow"))
        assert "Timeout: slow" in str(error)


@pytest.mark.parametrize(
    "status_code, expected",
    [(200, "ok"), (202, "accepted"), (201, "error"), (400, "error"), (500, "error")],
)
def test_classify_status(status_code, expected):
    assert classify_status(status_code) == expected
