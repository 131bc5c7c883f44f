"""Output formatters for screen view models."""

import json
from dataclasses import asdict
from datetime import date

from weatherview.models.view import (
    CurrentWeatherView,
    FavoritesView,
    HomeView,
    LocationView,
    ViewState,
)

NO_DATA_TEXT = "No weather data available."
LOCATION_DENIED_TEXT = "Location is not enabled; pass --lat and --lon or allow location access."


def format_current_text(v: CurrentWeatherView) -> str:
    if not v.has_data:
        return NO_DATA_TEXT
    heart = "♥" if v.is_favorite else "♡"
    return "\n".join([
        f"=== {v.city} {heart} ===",
        f"{v.display_temp}  {v.condition} [{v.icon}]",
        f"Feels like: {v.feels_like} | Humidity: {v.humidity}",
        f"Pressure: {v.pressure} | Wind: {v.wind}",
    ])


def format_home_text(v: HomeView) -> str:
    lines = [format_current_text(v.current)]
    if v.hourly:
        lines.append("")
        lines.append("Hourly:")
        lines.append(
            "  " + "  ".join(f"{h.time_label} {h.display_temp}" for h in v.hourly)
        )
    if v.daily:
        lines.append("")
        lines.append("Daily:")
        for d in v.daily:
            lines.append(f"  {d.weekday} {d.day.isoformat()}  {d.display_range}  {d.condition}")
    return "\n".join(lines)


def format_favorites_text(v: FavoritesView) -> str:
    if v.state == ViewState.EMPTY:
        return "No favourite cities yet."
    lines = [f"Favourites ({v.count}):"]
    for card in v.cards:
        if card.state == ViewState.NO_DATA:
            lines.append(f"  {card.city}: no data")
        else:
            lines.append(f"  {card.city}: {card.display_temp} {card.condition}")
    return "\n".join(lines)


def format_location_text(v: LocationView) -> str:
    if v.current.state == ViewState.DENIED:
        return LOCATION_DENIED_TEXT
    if not v.current.has_data:
        return "Could not fetch weather for your location."
    return "Weather at your location\n" + format_current_text(v.current)


def format_json(view) -> str:
    """JSON rendering of any view record for programmatic consumption."""
    return json.dumps(to_dict(view), indent=2, ensure_ascii=False)


def to_dict(view) -> dict:
    return json.loads(json.dumps(asdict(view), default=_default))


def _default(value):
    if isinstance(value, date):
        return value.isoformat()
    raise TypeError(f"Not JSON serialisable: {type(value).__name__}")
