"""Forecast transformer: reshapes a raw forecast into display views.

Pure function of its inputs. All boundary checks ("this hour", "today") run on
local instants derived from the provider's UTC offset, never on the host clock.
"""

from itertools import islice

from zipweather.models.display import (
    CurrentConditions,
    DailyEntry,
    DisplayForecast,
    HourlyEntry,
)
from zipweather.models.errors import EmptyDailySeries, MissingCurrentHour
from zipweather.models.forecast import DailySample, HourlySample, RawForecast
from zipweather.models.icons import IconTable
from zipweather.transform.local_time import (
    format_clock,
    format_hour,
    format_month_day,
    hour_boundary,
    hour_key,
    local_instant,
)

HOURLY_WINDOW = 24
DAILY_WINDOW = 5


def transform(
    raw: RawForecast,
    display_name: str,
    icons: IconTable,
    *,
    hourly_limit: int = HOURLY_WINDOW,
    daily_limit: int = DAILY_WINDOW,
) -> DisplayForecast:
    """Build the current, hourly and daily views for one location.

    Raises MissingCurrentHour, EmptyDailySeries, UnknownConditionCode, or
    MalformedForecast for timestamps outside the datetime range; never returns
    a partial result.
    """
    offset = raw.utc_offset_seconds
    now_local = local_instant(raw.current.epoch_time, offset)
    this_hour = hour_boundary(raw.current.epoch_time, offset)

    if not raw.daily:
        raise EmptyDailySeries()
    today = raw.daily[0]

    current_hour = _find_current_hour(raw.hourly, hour_key(now_local), offset)
    if current_hour is None:
        raise MissingCurrentHour(now_local.strftime("%Y-%m-%d %H:00"))

    upcoming_hours = (
        h for h in raw.hourly if local_instant(h.epoch_time, offset) >= this_hour
    )
    hourly_outlook = [
        _hourly_entry(h, offset, icons)
        for h in islice(upcoming_hours, hourly_limit)
    ]

    # index 0 is today and is already in the current conditions
    daily_outlook = [
        _daily_entry(d, offset, icons)
        for d in raw.daily[1 : 1 + daily_limit]
    ]

    return DisplayForecast(
        location_name=location_name(display_name),
        current=CurrentConditions(
            formatted_time=format_clock(now_local),
            temp=truncate_temperature(current_hour.temperature),
            temp_max_today=truncate_temperature(today.temp_max),
            temp_min_today=truncate_temperature(today.temp_min),
        ),
        hourly_outlook=hourly_outlook,
        daily_outlook=daily_outlook,
    )


def location_name(display_name: str) -> str:
    """First comma-separated segment, e.g. "Austin, TX, USA" -> "Austin"."""
    return display_name.split(",", 1)[0]


def truncate_temperature(value: float) -> int:
    """Narrow toward zero: -0.9 -> 0, -1.1 -> -1, 1.9 -> 1."""
    return int(value)


def _find_current_hour(
    hourly: tuple[HourlySample, ...], key: tuple[int, int, int, int], offset: int
) -> HourlySample | None:
    for sample in hourly:
        if hour_key(local_instant(sample.epoch_time, offset)) == key:
            return sample
    return None


def _hourly_entry(sample: HourlySample, offset: int, icons: IconTable) -> HourlyEntry:
    return HourlyEntry(
        formatted_hour=format_hour(local_instant(sample.epoch_time, offset)),
        temperature=truncate_temperature(sample.temperature),
        icon_ref=icons.select(sample.condition_code, sample.is_day),
    )


def _daily_entry(sample: DailySample, offset: int, icons: IconTable) -> DailyEntry:
    # daily rows have no day/night flag; always the day icon
    return DailyEntry(
        formatted_date=format_month_day(local_instant(sample.epoch_time, offset)),
        temp_min=truncate_temperature(sample.temp_min),
        temp_max=truncate_temperature(sample.temp_max),
        icon_ref=icons.select(sample.condition_code),
    )
