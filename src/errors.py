# ABOUTME: Exceptions raised by the weather widget while locating the user or fetching weather.
# ABOUTME: Messages are French because they are shown verbatim to the end user.

from enum import Enum


class PositionErrorKind(str, Enum):
    """Why the current position could not be obtained.

    from_code maps the numeric W3C GeolocationPositionError codes (1-3) onto
    the first three members; UNSUPPORTED has no W3C code.
    """

    PERMISSION_DENIED = "permission_denied"
    POSITION_UNAVAILABLE = "position_unavailable"
    TIMEOUT = "timeout"
    UNSUPPORTED = "unsupported"

    @classmethod
    def from_code(cls, code: int) -> "PositionErrorKind":
        return {
            1: cls.PERMISSION_DENIED,
            2: cls.POSITION_UNAVAILABLE,
            3: cls.TIMEOUT,
        }.get(code, cls.POSITION_UNAVAILABLE)


_POSITION_MESSAGES = {
    PositionErrorKind.PERMISSION_DENIED: "L'utilisateur a refusé la demande de géolocalisation.",
    PositionErrorKind.POSITION_UNAVAILABLE: "La position actuelle n'est pas disponible.",
    PositionErrorKind.TIMEOUT: "La demande de géolocalisation a expiré.",
    PositionErrorKind.UNSUPPORTED: "La géolocalisation n'est pas supportée par ce navigateur.",
}


class WeatherWidgetError(Exception):
    """Base class for errors that end a refresh and are displayed to the user."""

    kind = "error"

    @property
    def message(self) -> str:
        return str(self)


class PositionError(WeatherWidgetError):
    """The geolocation capability is missing, denied the request, or failed."""

    def __init__(self, kind: PositionErrorKind, message: str | None = None):
        self.position_kind = kind
        super().__init__(message or _POSITION_MESSAGES[kind])

    @property
    def kind(self) -> str:
        return f"position.{self.position_kind.value}"


class FetchError(WeatherWidgetError):
    """The weather provider call failed: transport error, non-2xx status, or malformed body."""

    kind = "fetch"

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Impossible de récupérer la météo : {cause}")
