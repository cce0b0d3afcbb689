"""Error kinds raised by the forecast transform and the lookup service."""


class TransformError(Exception):
    """The raw forecast could not be turned into a display forecast."""


class MalformedForecast(TransformError):
    """Provider payload is missing a field or holds a value of the wrong type."""


class MalformedSeries(MalformedForecast):
    """Parallel series within one group have different lengths."""

    def __init__(self, group: str, lengths: dict[str, int]):
        self.group = group
        self.lengths = lengths
        detail = ", ".join(f"{name}={n}" for name, n in lengths.items())
        super().__init__(f"{group} series lengths differ: {detail}")


class MissingCurrentHour(TransformError):
    def __init__(self, hour_label: str):
        self.hour_label = hour_label
        super().__init__(f"No hourly entry for current local hour {hour_label}")


class EmptyDailySeries(TransformError):
    def __init__(self) -> None:
        super().__init__("Daily series is empty")


class UnknownConditionCode(TransformError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"No icon for weather code key {key!r}")


class WeatherServiceError(Exception):
    """A collaborator of the lookup service failed."""


class LocationNotFoundError(WeatherServiceError):
    def __init__(self, query: str, reason: str = "no results"):
        self.query = query
        self.reason = reason
        super().__init__(f"Could not resolve location {query!r}: {reason}")


class ForecastUnavailableError(WeatherServiceError):
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Weather provider request failed: {reason}")
