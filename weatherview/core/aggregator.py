"""Forecast aggregator: groups 3-hourly forecast samples into daily buckets."""

import logging
import math
from datetime import UTC, date, datetime, tzinfo

from weatherview.models.weather import DailyForecast, ForecastSample

logger = logging.getLogger(__name__)

SOLAR_NOON_HOUR = 12


def group_daily(
    samples: list[ForecastSample], tz: tzinfo | None = None
) -> list[DailyForecast]:
    """Group samples by local calendar date.

    Each day gets the max/min temperature of its samples and the condition
    of the sample closest to 12:00 local (earliest wins a tie). Samples with
    an unusable timestamp or temperature are skipped. Days are returned in
    ascending date order.
    """
    buckets: dict[date, list[tuple[datetime, ForecastSample]]] = {}

    for sample in samples:
        when = local_datetime(sample.timestamp, tz)
        if when is None:
            logger.debug("Skipping forecast sample with bad timestamp: %r", sample.timestamp)
            continue
        if not is_valid_temperature(sample.temperature):
            logger.debug("Skipping forecast sample with bad temperature: %r", sample.temperature)
            continue
        buckets.setdefault(when.date(), []).append((when, sample))

    days: list[DailyForecast] = []
    for day, entries in buckets.items():
        temps = [s.temperature for _, s in entries]
        _, noon_sample = min(entries, key=lambda e: (_distance_from_noon(e[0]), e[0]))
        days.append(
            DailyForecast(
                day=day,
                high=max(temps),
                low=min(temps),
                condition=noon_sample.description,
                icon=noon_sample.icon,
            )
        )

    # already in first-seen order for a time-ordered feed; sort guards the rest
    return sorted(days, key=lambda d: d.day)


def hourly(samples: list[ForecastSample], count: int = 8) -> list[ForecastSample]:
    """The leading samples shown in the hourly strip."""
    if count <= 0:
        return []
    return list(samples[:count])


def _distance_from_noon(when: datetime) -> float:
    noon = when.replace(hour=SOLAR_NOON_HOUR, minute=0, second=0, microsecond=0)
    return abs((when - noon).total_seconds())


def local_datetime(value, tz: tzinfo | None) -> datetime | None:
    """Normalise a sample timestamp to a datetime in the grouping time zone.

    Accepts datetimes, Unix epoch seconds, and ISO-8601 strings. Naive
    values are treated as system local time.
    """
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, datetime):
            dt = value
        elif isinstance(value, (int, float)):
            dt = datetime.fromtimestamp(value, UTC)
            if tz is None:
                return dt.astimezone()
        elif isinstance(value, str) and value:
            dt = datetime.fromisoformat(value)
        else:
            return None
    except (ValueError, OverflowError, OSError):
        return None

    if tz is not None:
        return dt.astimezone(tz)
    return dt


def is_valid_temperature(value) -> bool:
    """A finite number; bools and NaN/inf do not count."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
