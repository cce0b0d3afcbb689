"""Raw Open-Meteo forecast models.

The provider returns each time series as a group of parallel arrays that are
correlated only by index. They are zipped once here into typed records so the
transform never has to re-align them.
"""

import math
from dataclasses import dataclass
from typing import Any

from zipweather.models.errors import MalformedForecast, MalformedSeries

HOURLY_FIELDS = ("time", "temperature_2m", "weather_code", "is_day")
DAILY_FIELDS = (
    "time",
    "temperature_2m_max",
    "temperature_2m_min",
    "weather_code",
)


@dataclass(frozen=True)
class CurrentSample:
    epoch_time: int
    temperature: float
    condition_code: int


@dataclass(frozen=True)
class HourlySample:
    epoch_time: int
    temperature: float
    condition_code: int
    is_day: int  # 1 day, 0 night


@dataclass(frozen=True)
class DailySample:
    epoch_time: int  # local midnight, provider epoch form
    temp_max: float
    temp_min: float
    condition_code: int


@dataclass(frozen=True)
class RawForecast:
    utc_offset_seconds: int
    current: CurrentSample
    hourly: tuple[HourlySample, ...]
    daily: tuple[DailySample, ...]

    @classmethod
    def from_payload(cls, payload: dict) -> "RawForecast":
        """Build a RawForecast from a decoded Open-Meteo response.

        Raises MalformedSeries if a group's arrays differ in length and
        MalformedForecast for missing fields or non-numeric values.
        """
        if not isinstance(payload, dict):
            raise MalformedForecast("Forecast payload must be a JSON object")

        offset = _integer(_require(payload, "utc_offset_seconds", ""), "utc_offset_seconds")

        current_raw = _section(payload, "current")
        current = CurrentSample(
            epoch_time=_integer(_require(current_raw, "time", "current"), "current.time"),
            temperature=_number(
                _require(current_raw, "temperature_2m", "current"), "current.temperature_2m"
            ),
            condition_code=_integer(
                _require(current_raw, "weather_code", "current"), "current.weather_code"
            ),
        )

        hourly_columns = _columns(_section(payload, "hourly"), "hourly", HOURLY_FIELDS)
        hourly = tuple(
            HourlySample(
                epoch_time=_integer(t, "hourly.time"),
                temperature=_number(temp, "hourly.temperature_2m"),
                condition_code=_integer(code, "hourly.weather_code"),
                is_day=_integer(is_day, "hourly.is_day"),
            )
            for t, temp, code, is_day in zip(*hourly_columns)
        )

        daily_columns = _columns(_section(payload, "daily"), "daily", DAILY_FIELDS)
        daily = tuple(
            DailySample(
                epoch_time=_integer(t, "daily.time"),
                temp_max=_number(t_max, "daily.temperature_2m_max"),
                temp_min=_number(t_min, "daily.temperature_2m_min"),
                condition_code=_integer(code, "daily.weather_code"),
            )
            for t, t_max, t_min, code in zip(*daily_columns)
        )

        return cls(
            utc_offset_seconds=offset,
            current=current,
            hourly=hourly,
            daily=daily,
        )


def _require(section: dict, key: str, group: str) -> Any:
    if key not in section:
        name = f"{group}.{key}" if group else key
        raise MalformedForecast(f"Forecast payload missing '{name}'")
    return section[key]


def _section(payload: dict, name: str) -> dict:
    value = _require(payload, name, "")
    if not isinstance(value, dict):
        raise MalformedForecast(f"'{name}' must be an object")
    return value


def _columns(section: dict, group: str, fields: tuple[str, ...]) -> list[list]:
    """Return the named arrays of a group, checking they line up."""
    columns = []
    for field in fields:
        values = _require(section, field, group)
        if not isinstance(values, list):
            raise MalformedForecast(f"'{group}.{field}' must be an array")
        columns.append(values)

    lengths = {field: len(values) for field, values in zip(fields, columns)}
    if len(set(lengths.values())) > 1:
        raise MalformedSeries(group, lengths)
    return columns


def _number(value: Any, field: str) -> float:
    # bool is an int subclass; null temperatures also end up here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MalformedForecast(f"'{field}' must be a number, got {value!r}")
    try:
        number = float(value)
    except OverflowError:
        number = math.inf
    # json accepts NaN and Infinity literals
    if not math.isfinite(number):
        raise MalformedForecast(f"'{field}' must be finite, got {value!r}")
    return number


def _integer(value: Any, field: str) -> int:
    number = _number(value, field)
    if not number.is_integer():
        raise MalformedForecast(f"'{field}' must be an integer, got {value!r}")
    return int(value)
