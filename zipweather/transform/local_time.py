"""Local wall-clock helpers.

A "local instant" is a provider epoch shifted by the location's UTC offset and
held in a UTC-labelled datetime. Its fields read as the location's wall clock,
independent of the host timezone.
"""

from datetime import UTC, datetime, timedelta

from zipweather.models.errors import MalformedForecast

# what datetime raises for timestamps outside its supported range
_RANGE_ERRORS = (OverflowError, ValueError, OSError)


def local_instant(epoch_time: int, utc_offset_seconds: int) -> datetime:
    try:
        return datetime.fromtimestamp(epoch_time + utc_offset_seconds, UTC)
    except _RANGE_ERRORS as e:
        raise MalformedForecast(
            f"Timestamp {epoch_time} (offset {utc_offset_seconds}s) out of range"
        ) from e


def hour_boundary(epoch_time: int, utc_offset_seconds: int) -> datetime:
    """Start of the current local hour.

    The epoch is truncated to its UTC hour first and then shifted, so offsets
    that are not whole hours keep the provider's hour alignment.
    """
    try:
        utc_hour = datetime.fromtimestamp(epoch_time, UTC).replace(
            minute=0, second=0, microsecond=0
        )
        return utc_hour + timedelta(seconds=utc_offset_seconds)
    except _RANGE_ERRORS as e:
        raise MalformedForecast(
            f"Timestamp {epoch_time} (offset {utc_offset_seconds}s) out of range"
        ) from e


def hour_key(instant: datetime) -> tuple[int, int, int, int]:
    return (instant.year, instant.month, instant.day, instant.hour)


def _twelve_hour(instant: datetime) -> tuple[int, str]:
    marker = "AM" if instant.hour < 12 else "PM"
    hour = instant.hour % 12 or 12
    return hour, marker


def format_clock(instant: datetime) -> str:
    """Format as "3:07 PM" without relying on the process locale."""
    hour, marker = _twelve_hour(instant)
    return f"{hour}:{instant.minute:02d} {marker}"


def format_hour(instant: datetime) -> str:
    """Format as "3 PM"."""
    hour, marker = _twelve_hour(instant)
    return f"{hour} {marker}"


def format_month_day(instant: datetime) -> str:
    """Format as "1/6", no leading zeros."""
    return f"{instant.month}/{instant.day}"
