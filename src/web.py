# ABOUTME: ASGI web entry point for the weather widget.
# ABOUTME: Serves the widget page and the fragment endpoint the page calls with its geolocation result.

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from pydantic import ValidationError
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse
from starlette.routing import Route

from src.deps import WidgetDeps, create_deps
from src.fetcher import LocationWeatherFetcher
from src.geolocation import ReportedGeolocation, StaticGeolocation
from src.models import Coordinates
from src.view import render_loading
from src.widget import WeatherWidget

logger = logging.getLogger(__name__)

# The page asks navigator.geolocation for a single position and reports either
# the coordinates or the error code to /api/weather, then swaps in the fragment.
PAGE_TEMPLATE = """<!doctype html>
<html lang="fr">
<head><meta charset="utf-8"><title>Météo</title></head>
<body>
<div id="weather">{loading}</div>
<script>
const box = document.getElementById("weather");
function show(params) {{
  fetch("/api/weather?" + new URLSearchParams(params))
    .then((r) => r.text())
    .then((html) => {{
      box.innerHTML = html;
      const btn = box.querySelector(".new-location-button");
      if (btn) btn.addEventListener("click", () => locate(true));
    }});
}}
function locate(force) {{
  const f = force ? "1" : "0";
  if (!navigator.geolocation) {{ show({{force: f}}); return; }}
  navigator.geolocation.getCurrentPosition(
    (p) => show({{lat: p.coords.latitude, lon: p.coords.longitude, force: f}}),
    (e) => show({{error: e.code, message: e.message, force: f}}),
  );
}}
locate(false);
</script>
</body>
</html>
"""


def geolocation_from_query(params) -> ReportedGeolocation:
    """Rebuild the browser's geolocation outcome from /api/weather query parameters."""
    if "error" in params:
        try:
            code = int(params["error"])
        except ValueError:
            code = 2
        return ReportedGeolocation(error_code=code, error_message=params.get("message") or None)
    if "lat" in params and "lon" in params:
        try:
            coords = Coordinates(latitude=params["lat"], longitude=params["lon"])
        except ValidationError:
            logger.info("Rejecting reported position lat=%r lon=%r", params["lat"], params["lon"])
            return ReportedGeolocation(error_code=2)
        return ReportedGeolocation(coords=coords)
    return ReportedGeolocation()


async def page(request: Request) -> HTMLResponse:
    return HTMLResponse(PAGE_TEMPLATE.format(loading=render_loading()))


async def weather_fragment(request: Request) -> HTMLResponse:
    """Run one refresh for the reported position and return the rendered widget."""
    deps: WidgetDeps = request.app.state.deps
    params = request.query_params
    geolocation = geolocation_from_query(params)

    # Fall back to the configured position when the browser has no geolocation at all.
    default_position = deps.settings.default_position
    if default_position is not None and geolocation.coords is None and geolocation.error_code is None:
        geolocation = StaticGeolocation(default_position)

    widget = WeatherWidget(LocationWeatherFetcher(deps, geolocation))
    if params.get("force") in ("1", "true"):
        await widget.refresh_location()
    else:
        await widget.start()
    return HTMLResponse(widget.render())


def create_app(deps: WidgetDeps | None = None) -> Starlette:
    """Build the widget app. Without deps, they are created from the environment at startup."""

    @asynccontextmanager
    async def lifespan(app: Starlette):
        owned = deps is None
        app.state.deps = create_deps() if owned else deps
        try:
            yield
        finally:
            if owned:
                await app.state.deps.http_client.aclose()

    return Starlette(
        routes=[
            Route("/", page),
            Route("/api/weather", weather_fragment),
        ],
        lifespan=lifespan,
    )


app = create_app()


def main() -> None:
    """Serve the widget with uvicorn (`weather-widget` console script)."""
    host = os.environ.get("WIDGET_HOST", "127.0.0.1")
    port = int(os.environ.get("WIDGET_PORT", "8000"))
    uvicorn.run("src.web:app", host=host, port=port)
