# ABOUTME: Geolocation capabilities that supply the user's current position.
# ABOUTME: Each is a one-shot awaitable returning Coordinates or raising PositionError.

from typing import Protocol

from src.errors import PositionError, PositionErrorKind
from src.models import Coordinates


class Geolocation(Protocol):
    async def get_current_position(self) -> Coordinates: ...


class StaticGeolocation:
    """Always reports the same position, e.g. one configured for a kiosk display."""

    def __init__(self, coords: Coordinates):
        self.coords = coords

    async def get_current_position(self) -> Coordinates:
        return self.coords


class UnsupportedGeolocation:
    """The host has no geolocation capability at all."""

    async def get_current_position(self) -> Coordinates:
        raise PositionError(PositionErrorKind.UNSUPPORTED)


class ReportedGeolocation:
    """A position, or a position error, reported by the browser's navigator.geolocation.

    error_code takes the W3C GeolocationPositionError codes (1 denied,
    2 unavailable, 3 timeout). With neither coordinates nor an error code
    the browser is taken to lack geolocation support.
    """

    def __init__(
        self,
        coords: Coordinates | None = None,
        error_code: int | None = None,
        error_message: str | None = None,
    ):
        self.coords = coords
        self.error_code = error_code
        self.error_message = error_message

    async def get_current_position(self) -> Coordinates:
        if self.error_code is not None:
            raise PositionError(PositionErrorKind.from_code(self.error_code), self.error_message)
        if self.coords is None:
            raise PositionError(PositionErrorKind.UNSUPPORTED)
        return self.coords
