"""Weather lookup API: FastAPI app serving /weather plus the static page."""

import logging
from pathlib import Path

from fastapi import FastAPI, HTTPException
from fastapi.staticfiles import StaticFiles

from zipweather.models.errors import (
    ForecastUnavailableError,
    LocationNotFoundError,
    TransformError,
)
from zipweather.pipeline.weather_service import WeatherService

logger = logging.getLogger(__name__)


def create_app(service: WeatherService, static_path: Path | None = None) -> FastAPI:
    app = FastAPI(title="Zip Code Weather", version="0.1.0")

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/weather")
    def get_weather(zipcode: str):
        """Display forecast for a postal/zip code."""
        try:
            display = service.lookup(zipcode)
        except LocationNotFoundError as e:
            raise HTTPException(404, str(e)) from e
        except ForecastUnavailableError as e:
            raise HTTPException(500, str(e)) from e
        except TransformError as e:
            raise HTTPException(500, f"Could not build forecast: {e}") from e
        return display.to_dict()

    @app.get("/health")
    def get_health():
        """Quick health check."""
        return {"status": "ok", "icon_codes": len(service.icons)}

    # ── Static page ─────────────────────────────────────────────────

    if static_path is not None:
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        else:
            logger.warning("Static directory %s not found; serving API only", static_path)

    return app
