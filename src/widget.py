# ABOUTME: Stateful weather widget: initial cached load, manual forced refresh, current result.
# ABOUTME: Wraps LocationWeatherFetcher and keeps the last WeatherResult for rendering.

from src.fetcher import LocationWeatherFetcher
from src.models import LoadingResult, WeatherResult
from src.view import render


class WeatherWidget:
    def __init__(self, fetcher: LocationWeatherFetcher):
        self.fetcher = fetcher
        self.result: WeatherResult = LoadingResult()

    async def start(self) -> WeatherResult:
        """First display: a cached entry is acceptable."""
        return await self._refresh(force=False)

    async def refresh_location(self) -> WeatherResult:
        """Manual refresh: always re-locate and call the provider."""
        return await self._refresh(force=True)

    async def _refresh(self, force: bool) -> WeatherResult:
        self.result = await self.fetcher.refresh(force)
        return self.result

    def render(self) -> str:
        return render(self.result)
