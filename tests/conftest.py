from pathlib import Path
from typing import List

import pytest

from selectpdf.config import Settings
from tests.helpers.api import FakeApiServer

API_BASE = "https://api.test/api2/"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        api_key="test-key",
        api_base_url=API_BASE,
        async_calls_ping_interval=3,
        async_calls_max_pings=1000,
    )


@pytest.fixture
def server() -> FakeApiServer:
    return FakeApiServer()


@pytest.fixture
def sleeps() -> List[float]:
    return []


@pytest.fixture
def fake_sleep(sleeps):
    async def _sleep(seconds: float) -> None:
        sleeps.append(seconds)

    return _sleep


@pytest.fixture
def client_kwargs(settings, server, fake_sleep) -> dict:
    """Keyword arguments wiring a client to the fake API server."""
    return {"settings": settings, "transport": server.transport, "sleep": fake_sleep}


@pytest.fixture
def pdf_file(tmp_path) -> Path:
    path = tmp_path / "input.pdf"
    path.write_bytes(b"%PDF-1.4\n%fake document\n%%EOF\n")
    return path
