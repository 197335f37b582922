# ABOUTME: Shared test fixtures for the weather widget test suite.
# ABOUTME: Provides provider payloads, settings, an in-memory store and mock HTTP client factories.

from unittest.mock import AsyncMock

import httpx
import pytest

from src.config import WidgetSettings
from src.deps import WidgetDeps
from src.models import WeatherSnapshot
from src.store import MemoryStore

NOW_MS = 1_700_000_000_000
MINUTE_MS = 60 * 1000

PARIS_PAYLOAD = {
    "name": "Paris",
    "main": {"temp": 15, "humidity": 60, "pressure": 1012},
    "weather": [{"description": "nuageux", "icon": "04d"}],
    "wind": {"speed": 3.2},
}


@pytest.fixture
def paris_payload() -> dict:
    return {k: (v.copy() if isinstance(v, dict) else v) for k, v in PARIS_PAYLOAD.items()}


@pytest.fixture
def paris_snapshot() -> WeatherSnapshot:
    return WeatherSnapshot.from_provider(PARIS_PAYLOAD)


@pytest.fixture
def settings() -> WidgetSettings:
    return WidgetSettings(api_key="test-key")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture
def make_client():
    """Factory for a mock httpx.AsyncClient whose get() returns the given JSON response."""

    def _make(json_data: dict | None = None, status_code: int = 200) -> httpx.AsyncClient:
        mock = AsyncMock(spec=httpx.AsyncClient)
        mock.get.return_value = httpx.Response(
            status_code=status_code,
            json=json_data if json_data is not None else {},
            request=httpx.Request("GET", "https://test"),
        )
        return mock

    return _make


@pytest.fixture
def make_deps(settings, store, make_client):
    """Factory for WidgetDeps wired to the shared in-memory store."""

    def _make(json_data: dict | None = None, status_code: int = 200) -> WidgetDeps:
        return WidgetDeps(http_client=make_client(json_data, status_code), store=store, settings=settings)

    return _make
