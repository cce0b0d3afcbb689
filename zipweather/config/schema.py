"""Pydantic v2 configuration schema with strict validation."""

from enum import StrEnum

from pydantic import BaseModel, Field


class TemperatureUnit(StrEnum):
    FAHRENHEIT = "fahrenheit"
    CELSIUS = "celsius"


class GeocodingConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://geocode.maps.co"
    api_key: str = ""
    timeout: float = Field(default=10.0, gt=0.0)


class WeatherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.open-meteo.com"
    timeout: float = Field(default=10.0, gt=0.0)
    forecast_days: int = Field(default=5, ge=1, le=16)
    past_days: int = Field(default=1, ge=0, le=5)
    temperature_unit: TemperatureUnit = TemperatureUnit.FAHRENHEIT


class OutlookConfig(BaseModel):
    model_config = {"extra": "forbid"}

    hourly_hours: int = Field(default=24, ge=1)
    daily_days: int = Field(default=5, ge=1)


class ServerConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=3000, ge=1, le=65535)
    static_dir: str = ""  # empty: bundled static/


class ServiceConfig(BaseModel):
    model_config = {"extra": "forbid"}

    geocoding: GeocodingConfig = GeocodingConfig()
    weather: WeatherConfig = WeatherConfig()
    outlook: OutlookConfig = OutlookConfig()
    server: ServerConfig = ServerConfig()
    icon_table: str = ""  # empty: bundled weather-codes.json
