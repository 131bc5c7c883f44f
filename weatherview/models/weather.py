"""OpenWeatherMap weather and forecast data models."""

from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class WeatherSnapshot:
    city: str
    timestamp: datetime | None
    temperature: float
    feels_like: float
    humidity: int
    pressure: int
    wind_speed: float
    condition_main: str
    description: str
    icon: str


@dataclass(frozen=True)
class ForecastSample:
    # timestamp may carry a raw epoch or ISO string straight from the feed
    timestamp: datetime | int | float | str | None
    temperature: float
    description: str
    icon: str
    condition_main: str = ""


@dataclass(frozen=True)
class DailyForecast:
    day: date
    high: float
    low: float
    condition: str
    icon: str
