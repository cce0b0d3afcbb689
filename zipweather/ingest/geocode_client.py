"""geocode.maps.co search client: postal code to coordinates."""

import logging

import httpx

from zipweather.models.errors import LocationNotFoundError
from zipweather.models.location import LocationData

logger = logging.getLogger(__name__)

GEOCODE_BASE_URL = "https://geocode.maps.co"


class GeocodeClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = GEOCODE_BASE_URL,
        timeout: float = 10.0,
    ):
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout

    def search(self, query: str) -> LocationData:
        """Resolve a free-text query (a zip code) to its first match.

        Raises LocationNotFoundError when the provider has no candidates.
        HTTP and decoding errors propagate to the caller.
        """
        url = f"{self.base_url}/search"
        params = {"q": query, "api_key": self.api_key}
        try:
            resp = httpx.get(url, params=params, timeout=self.timeout)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Geocoding API error for q=%s: %d", query, e.response.status_code
            )
            raise
        except httpx.RequestError as e:
            logger.error("Geocoding request failed for q=%s: %s", query, e)
            raise

        data = resp.json()
        # maps.co returns a list of candidates; we want the first match
        if not isinstance(data, list) or not data:
            raise LocationNotFoundError(query)
        return _parse_location(data[0], query)


def _parse_location(entry: dict, query: str) -> LocationData:
    try:
        return LocationData(
            display_name=str(entry["display_name"]),
            longitude=float(entry["lon"]),
            latitude=float(entry["lat"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise LocationNotFoundError(query, f"malformed result ({e})") from e
