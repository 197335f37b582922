# ABOUTME: Dependency container for the weather widget using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient, the cache store, the settings and the refresh lock shared by fetchers.

import asyncio
import time

import httpx
from pydantic import BaseModel, ConfigDict, Field

from src.config import WidgetSettings, load_settings
from src.store import JsonFileStore, KeyValueStore, MemoryStore


class WidgetDeps(BaseModel):
    """Dependencies injected into LocationWeatherFetcher.

    refresh_lock serializes refreshes of every fetcher built on these deps, so
    overlapping web requests against the same store run one at a time.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    store: KeyValueStore
    settings: WidgetSettings
    refresh_lock: asyncio.Lock = Field(default_factory=asyncio.Lock)


def now_ms() -> int:
    """Current wall-clock time in epoch milliseconds, the unit of cache timestamps."""
    return int(time.time() * 1000)


def create_http_client() -> httpx.AsyncClient:
    """Create an httpx client for the weather provider.

    No retry transport: a failed call is reported to the user as is. Timeouts
    are httpx's defaults.
    """
    return httpx.AsyncClient()


def create_store(settings: WidgetSettings) -> KeyValueStore:
    """Pick the cache store: a JSON file when WEATHER_STORE_PATH is set, memory otherwise."""
    if settings.store_path is not None:
        return JsonFileStore(settings.store_path)
    return MemoryStore()


def create_deps(settings: WidgetSettings | None = None) -> WidgetDeps:
    """Build the client, store and lock for one app from settings (loaded from the environment if omitted)."""
    settings = settings or load_settings()
    return WidgetDeps(http_client=create_http_client(), store=create_store(settings), settings=settings)
