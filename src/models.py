# ABOUTME: Pydantic BaseModels for the weather widget: snapshots, cache entries, results.
# ABOUTME: Defines the structured types shared by the fetcher, the store and the view.

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    """A single position reading from the geolocation capability."""

    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class WeatherSnapshot(BaseModel):
    """Current conditions at one place, as reported by OpenWeatherMap."""

    model_config = ConfigDict(frozen=True)

    name: str
    temperature: float
    humidity: int
    pressure: int
    wind_speed: float
    description: str
    icon: str

    @classmethod
    def from_provider(cls, data: dict) -> "WeatherSnapshot":
        """Build a snapshot from a raw /data/2.5/weather JSON body.

        Raises KeyError, IndexError or TypeError when the body lacks a field,
        and pydantic ValidationError when a field has the wrong type.
        """
        main = data["main"]
        condition = data["weather"][0]
        return cls(
            name=data["name"],
            temperature=main["temp"],
            humidity=main["humidity"],
            pressure=main["pressure"],
            wind_speed=data["wind"]["speed"],
            description=condition["description"],
            icon=condition["icon"],
        )


class CacheEntry(BaseModel):
    """The single persisted weather result, with its capture time in epoch milliseconds."""

    data: WeatherSnapshot
    timestamp: int

    def age_ms(self, now_ms: int) -> int:
        return now_ms - self.timestamp

    def is_fresh(self, now_ms: int, ttl_ms: int) -> bool:
        return self.age_ms(now_ms) < ttl_ms


class Origin(str, Enum):
    """Where a displayed snapshot came from."""

    CACHE = "cache"
    API = "api"

    @property
    def label(self) -> str:
        return "Cache" if self is Origin.CACHE else "API"


class LoadingResult(BaseModel):
    """No outcome yet: a refresh is pending."""

    status: Literal["loading"] = "loading"


class ErrorResult(BaseModel):
    """A refresh ended in a position or fetch error."""

    status: Literal["error"] = "error"
    kind: str
    message: str


class DataResult(BaseModel):
    """A refresh produced a snapshot, from the cache or from the API."""

    status: Literal["data"] = "data"
    snapshot: WeatherSnapshot
    origin: Origin


WeatherResult = LoadingResult | ErrorResult | DataResult
