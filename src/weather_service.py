# ABOUTME: Service layer for OpenWeatherMap current-weather calls and response parsing.
# ABOUTME: Turns every transport, status or payload failure into a FetchError.

import logging

import httpx
from pydantic import ValidationError

from src.config import WidgetSettings
from src.errors import FetchError
from src.models import Coordinates, WeatherSnapshot

logger = logging.getLogger(__name__)

# The view labels values in °C and m/s with French text, so these are fixed.
UNITS = "metric"
LANG = "fr"


async def get_current_weather(
    client: httpx.AsyncClient,
    coords: Coordinates,
    settings: WidgetSettings,
) -> WeatherSnapshot:
    """Fetch current conditions at coords from OpenWeatherMap.

    Single attempt, no retry. Raises FetchError wrapping the underlying cause.
    """
    try:
        resp = await client.get(
            settings.weather_url,
            params={
                "lat": coords.latitude,
                "lon": coords.longitude,
                "appid": settings.api_key,
                "units": UNITS,
                "lang": LANG,
            },
        )
        resp.raise_for_status()
        data = resp.json()
    except (httpx.HTTPError, ValueError) as e:
        # ValueError covers both JSONDecodeError and UnicodeDecodeError from resp.json()
        logger.warning("Weather request failed: %s", e)
        raise FetchError(e) from e

    return parse_current_weather(data)


def parse_current_weather(data) -> WeatherSnapshot:
    """Parse an OpenWeatherMap JSON body into a WeatherSnapshot, or raise FetchError."""
    try:
        return WeatherSnapshot.from_provider(data)
    except (KeyError, IndexError, TypeError, ValidationError) as e:
        logger.warning("Malformed weather payload: %r", e)
        raise FetchError(e) from e
