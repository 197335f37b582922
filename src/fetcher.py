# ABOUTME: Cache-or-fetch policy for the current weather at the user's position.
# ABOUTME: LocationWeatherFetcher locates the user, serves a fresh cache entry or calls the provider.

import logging
from collections.abc import Callable

from src.deps import WidgetDeps, now_ms
from src.errors import WeatherWidgetError
from src.geolocation import Geolocation
from src.models import DataResult, ErrorResult, Origin, WeatherResult
from src.store import read_entry, write_entry
from src.weather_service import get_current_weather

logger = logging.getLogger(__name__)


class LocationWeatherFetcher:
    """Fetches weather for the current position, backed by a ten-minute cache entry.

    Calls to refresh() run one at a time across every fetcher sharing the same
    deps: a call made while another is pending waits for it, then applies its
    own policy.
    """

    def __init__(self, deps: WidgetDeps, geolocation: Geolocation, clock: Callable[[], int] = now_ms):
        self.deps = deps
        self.geolocation = geolocation
        self.clock = clock

    async def load(self, force: bool = False) -> DataResult:
        """Run one refresh and return the snapshot with its origin.

        Raises PositionError when no position is available and FetchError when
        the provider call fails. A failed fetch leaves the cache entry as it was.
        """
        settings = self.deps.settings
        coords = await self.geolocation.get_current_position()

        if not force:
            entry = read_entry(self.deps.store, settings.cache_key)
            if entry is not None and entry.is_fresh(self.clock(), settings.cache_ttl_ms):
                logger.debug("Serving cached weather for %s", entry.data.name)
                return DataResult(snapshot=entry.data, origin=Origin.CACHE)
            logger.debug("No fresh cache entry under %r", settings.cache_key)

        snapshot = await get_current_weather(self.deps.http_client, coords, settings)
        write_entry(self.deps.store, settings.cache_key, snapshot, self.clock())
        logger.info("Fetched live weather for %s (%.4f, %.4f)", snapshot.name, coords.latitude, coords.longitude)
        return DataResult(snapshot=snapshot, origin=Origin.API)

    async def refresh(self, force: bool = False) -> WeatherResult:
        """Like load(), but report position and fetch errors as an ErrorResult."""
        async with self.deps.refresh_lock:
            try:
                return await self.load(force)
            except WeatherWidgetError as e:
                logger.info("Weather refresh failed (%s): %s", e.kind, e.message)
                return ErrorResult(kind=e.kind, message=e.message)
