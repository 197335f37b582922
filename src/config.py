# ABOUTME: Runtime settings for the weather widget, read from the environment and .env.
# ABOUTME: Settings are loaded at call time so a changed environment is picked up on the next load.

import logging
import os
from datetime import timedelta
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel

from src.models import Coordinates

logger = logging.getLogger(__name__)

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"
CACHE_KEY = "weatherData"
CACHE_TTL = timedelta(minutes=10)


class WidgetSettings(BaseModel):
    """Configuration for one widget instance."""

    api_key: str = ""
    weather_url: str = OPENWEATHER_URL
    cache_key: str = CACHE_KEY
    cache_ttl: timedelta = CACHE_TTL
    store_path: Path | None = None
    default_position: Coordinates | None = None

    @property
    def cache_ttl_ms(self) -> int:
        return int(self.cache_ttl.total_seconds() * 1000)


def load_settings() -> WidgetSettings:
    """Build WidgetSettings from OPENWEATHER_* / WEATHER_* / WIDGET_* environment variables."""
    load_dotenv(find_dotenv(usecwd=True))
    env = os.environ

    default_position = None
    lat, lon = env.get("WIDGET_LATITUDE"), env.get("WIDGET_LONGITUDE")
    if lat and lon:
        default_position = Coordinates(latitude=float(lat), longitude=float(lon))

    store_path = env.get("WEATHER_STORE_PATH")
    settings = WidgetSettings(
        api_key=env.get("OPENWEATHER_API_KEY", ""),
        weather_url=env.get("OPENWEATHER_URL", OPENWEATHER_URL),
        cache_key=env.get("WEATHER_CACHE_KEY", CACHE_KEY),
        cache_ttl=timedelta(seconds=int(env.get("WEATHER_CACHE_TTL_SECONDS", CACHE_TTL.total_seconds()))),
        store_path=Path(store_path) if store_path else None,
        default_position=default_position,
    )
    if not settings.api_key:
        logger.warning("OPENWEATHER_API_KEY is not set, weather requests will be rejected by the provider")
    return settings
