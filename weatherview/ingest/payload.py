"""Turn raw OpenWeatherMap JSON into typed weather records.

Both parsers are null-tolerant: a missing or partial payload yields None
(or an empty list) instead of raising, and callers render a "no data"
state from that.
"""

import logging
import math
from datetime import UTC, datetime, timedelta, timezone, tzinfo

from weatherview.models.weather import ForecastSample, WeatherSnapshot

logger = logging.getLogger(__name__)


def is_ok(raw: dict | None) -> bool:
    """True when the payload is a dict without a non-200 ``cod``."""
    if not isinstance(raw, dict):
        return False
    cod = raw.get("cod")
    if cod is None:
        return True
    try:
        return int(cod) == 200
    except (TypeError, ValueError):
        return False


def primary_condition(raw: dict | None) -> dict | None:
    """The ``weather[0]`` entry, if present."""
    if not isinstance(raw, dict):
        return None
    weather = raw.get("weather")
    if not isinstance(weather, list) or not weather or not isinstance(weather[0], dict):
        return None
    return weather[0]


def parse_snapshot(raw: dict | None) -> WeatherSnapshot | None:
    """Extract a WeatherSnapshot from a ``/weather`` response."""
    if not is_ok(raw):
        return None
    main = raw.get("main")
    condition = primary_condition(raw)
    if not isinstance(main, dict) or condition is None:
        logger.debug("Partial weather payload, keys: %s", sorted(raw))
        return None
    temp = _number(main.get("temp"))
    if temp is None:
        return None

    wind = raw.get("wind") if isinstance(raw.get("wind"), dict) else {}
    feels_like = _number(main.get("feels_like"))
    return WeatherSnapshot(
        city=str(raw.get("name") or ""),
        timestamp=_from_epoch(raw.get("dt"), _offset_tz(raw.get("timezone"))),
        temperature=temp,
        feels_like=feels_like if feels_like is not None else temp,
        humidity=int(_number(main.get("humidity")) or 0),
        pressure=int(_number(main.get("pressure")) or 0),
        wind_speed=_number(wind.get("speed")) or 0.0,
        condition_main=str(condition.get("main") or ""),
        description=str(condition.get("description") or ""),
        icon=str(condition.get("icon") or ""),
    )


def parse_forecast(raw: dict | None) -> list[ForecastSample]:
    """Extract forecast samples from a ``/forecast`` response.

    Entries without a temperature are dropped. Timestamps are localised to
    the city's UTC offset when the payload carries one.
    """
    if not is_ok(raw):
        return []
    entries = raw.get("list")
    if not isinstance(entries, list):
        return []

    city = raw.get("city") if isinstance(raw.get("city"), dict) else {}
    tz = _offset_tz(city.get("timezone"))

    samples: list[ForecastSample] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        main = entry.get("main") if isinstance(entry.get("main"), dict) else {}
        temp = _number(main.get("temp"))
        if temp is None:
            logger.debug("Dropping forecast entry without temperature: %r", entry.get("dt"))
            continue
        condition = primary_condition(entry) or {}
        samples.append(
            ForecastSample(
                timestamp=_from_epoch(entry.get("dt"), tz),
                temperature=temp,
                description=str(condition.get("description") or ""),
                icon=str(condition.get("icon") or ""),
                condition_main=str(condition.get("main") or ""),
            )
        )
    return samples


def _number(value) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if not math.isfinite(value):
        return None
    return float(value)


def _offset_tz(seconds) -> tzinfo | None:
    offset = _number(seconds)
    if offset is None:
        return None
    try:
        return timezone(timedelta(seconds=offset))
    except ValueError:
        return None


def _from_epoch(value, tz: tzinfo | None) -> datetime | None:
    epoch = _number(value)
    if epoch is None:
        return None
    try:
        dt = datetime.fromtimestamp(epoch, UTC)
    except (OverflowError, OSError, ValueError):
        return None
    return dt.astimezone(tz) if tz is not None else dt.astimezone()
