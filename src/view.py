# ABOUTME: Presentation of a WeatherResult as an HTML fragment with French labels.
# ABOUTME: Pure functions; the fragment is served by the web app and swapped in by the page script.

from html import escape

from src.models import DataResult, ErrorResult, LoadingResult, WeatherResult

ICON_URL = "http://openweathermap.org/img/wn/{icon}@2x.png"
REFRESH_LABEL = "Rafraîchir ma position"


def render(result: WeatherResult) -> str:
    """Render the widget for the given refresh outcome."""
    if isinstance(result, ErrorResult):
        return render_error(result)
    if isinstance(result, DataResult):
        return render_weather(result)
    return render_loading(result)


def render_loading(result: LoadingResult | None = None) -> str:
    return '<div class="weather-loading">Chargement...</div>'


def render_error(result: ErrorResult) -> str:
    return f'<div class="weather-error" data-kind="{escape(result.kind)}">Erreur : {escape(result.message)}</div>'


def render_weather(result: DataResult) -> str:
    s = result.snapshot
    icon_url = ICON_URL.format(icon=escape(s.icon))
    return (
        '<div class="weather-container">'
        f'<h2 class="weather-title">Météo à {escape(s.name)}</h2>'
        '<div class="weather-info">'
        f'<img src="{icon_url}" alt="{escape(s.description)}" class="weather-icon">'
        '<div class="weather-details">'
        f'<p class="weather-temp">Température : {s.temperature:g}°C</p>'
        f'<p class="weather-description">Météo : {escape(s.description)}</p>'
        f'<p class="weather-humidity">Humidité : {s.humidity}%</p>'
        f'<p class="weather-pressure">Pression : {s.pressure} hPa</p>'
        f'<p class="weather-wind">Vitesse du vent : {s.wind_speed:g} m/s</p>'
        f'<p class="weather-source">Source: {result.origin.label}</p>'
        "</div>"
        "</div>"
        f'<button type="button" class="new-location-button">{REFRESH_LABEL}</button>'
        "</div>"
    )
