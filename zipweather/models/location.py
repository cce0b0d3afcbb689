"""Geocoding result model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocationData:
    display_name: str  # e.g. "Springfield, Sangamon County, Illinois, 62701, United States"
    longitude: float
    latitude: float
