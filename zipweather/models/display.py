"""Display-ready forecast models returned by the /weather endpoint."""

from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class CurrentConditions:
    formatted_time: str  # e.g. "3:07 PM"
    temp: int
    temp_max_today: int
    temp_min_today: int


@dataclass(frozen=True)
class HourlyEntry:
    formatted_hour: str  # e.g. "3 PM"
    temperature: int
    icon_ref: str


@dataclass(frozen=True)
class DailyEntry:
    formatted_date: str  # e.g. "1/16"
    temp_min: int
    temp_max: int
    icon_ref: str


@dataclass(frozen=True)
class DisplayForecast:
    location_name: str
    current: CurrentConditions
    hourly_outlook: list[HourlyEntry]
    daily_outlook: list[DailyEntry]

    def to_dict(self) -> dict:
        return asdict(self)
