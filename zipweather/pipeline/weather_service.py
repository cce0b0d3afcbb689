"""Weather lookup service: geocode, fetch, transform for one zip code."""

import logging
import time

import httpx

from zipweather.config.loader import icon_table_path
from zipweather.config.schema import ServiceConfig
from zipweather.ingest.geocode_client import GeocodeClient
from zipweather.ingest.open_meteo_client import OpenMeteoClient
from zipweather.models.display import DisplayForecast
from zipweather.models.errors import (
    ForecastUnavailableError,
    LocationNotFoundError,
    TransformError,
)
from zipweather.models.forecast import RawForecast
from zipweather.models.icons import IconTable, load_icon_table
from zipweather.transform.forecast_transformer import (
    DAILY_WINDOW,
    HOURLY_WINDOW,
    transform,
)

logger = logging.getLogger(__name__)


class WeatherService:
    """Runs a lookup strictly in sequence; holds no per-request state."""

    def __init__(
        self,
        geocoder: GeocodeClient,
        weather: OpenMeteoClient,
        icons: IconTable,
        hourly_limit: int = HOURLY_WINDOW,
        daily_limit: int = DAILY_WINDOW,
    ):
        self.geocoder = geocoder
        self.weather = weather
        self.icons = icons
        self.hourly_limit = hourly_limit
        self.daily_limit = daily_limit

    @classmethod
    def from_config(cls, config: ServiceConfig) -> "WeatherService":
        icons = load_icon_table(icon_table_path(config))
        logger.info("Loaded %d icon codes", len(icons))
        return cls(
            geocoder=GeocodeClient(
                api_key=config.geocoding.api_key,
                base_url=config.geocoding.base_url,
                timeout=config.geocoding.timeout,
            ),
            weather=OpenMeteoClient(
                base_url=config.weather.base_url,
                timeout=config.weather.timeout,
                forecast_days=config.weather.forecast_days,
                past_days=config.weather.past_days,
                temperature_unit=config.weather.temperature_unit,
            ),
            icons=icons,
            hourly_limit=config.outlook.hourly_hours,
            daily_limit=config.outlook.daily_days,
        )

    def lookup(self, zipcode: str) -> DisplayForecast:
        """Resolve a zip code and return its display forecast.

        Raises LocationNotFoundError, ForecastUnavailableError or a
        TransformError subclass.
        """
        start_time = time.monotonic()

        try:
            location = self.geocoder.search(zipcode)
        except LocationNotFoundError:
            logger.warning("No location found for zipcode=%s", zipcode)
            raise
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Geocoding failed for zipcode=%s: %s", zipcode, e)
            raise LocationNotFoundError(zipcode, str(e)) from e

        logger.info(
            "Resolved zipcode=%s to %s (lat=%.4f, lon=%.4f)",
            zipcode, location.display_name, location.latitude, location.longitude,
        )

        try:
            payload = self.weather.get_forecast(location.longitude, location.latitude)
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Forecast fetch failed for zipcode=%s: %s", zipcode, e)
            raise ForecastUnavailableError(str(e)) from e

        try:
            raw = RawForecast.from_payload(payload)
            display = transform(
                raw,
                location.display_name,
                self.icons,
                hourly_limit=self.hourly_limit,
                daily_limit=self.daily_limit,
            )
        except TransformError as e:
            logger.error(
                "Transform failed for zipcode=%s (%s): %s",
                zipcode, type(e).__name__, e,
            )
            raise

        logger.info(
            "Lookup for zipcode=%s done in %.2fs (%d hourly, %d daily)",
            zipcode,
            time.monotonic() - start_time,
            len(display.hourly_outlook),
            len(display.daily_outlook),
        )
        return display
