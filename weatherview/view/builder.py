"""View-model builder: composes weather payloads and app state into screen records.

Nothing here performs I/O or raises on malformed upstream data; absent or
partial payloads come out as ViewState.NO_DATA records.
"""

import logging
from datetime import tzinfo

from weatherview.core.aggregator import group_daily, hourly, is_valid_temperature, local_datetime
from weatherview.core.conditions import gradient_for, icon_for
from weatherview.core.units import format_temp, round_temp, speed_suffix_for, suffix_for
from weatherview.ingest.payload import parse_forecast, parse_snapshot
from weatherview.models.view import (
    CurrentWeatherView,
    DailyRow,
    FavoriteCard,
    FavoritesView,
    HomeView,
    HourlyRow,
    LocationView,
    ViewState,
)
from weatherview.models.weather import ForecastSample, WeatherSnapshot
from weatherview.state.favorites import FavoritesStore
from weatherview.state.theme import ThemeState

logger = logging.getLogger(__name__)

DEFAULT_ICON_URL = "https://openweathermap.org/img/wn/{icon}@4x.png"
NO_DATA = CurrentWeatherView(state=ViewState.NO_DATA)
DENIED = CurrentWeatherView(state=ViewState.DENIED)


class ViewModelBuilder:
    def __init__(
        self,
        favorites: FavoritesStore,
        theme: ThemeState,
        hourly_count: int = 8,
        icon_url_template: str = DEFAULT_ICON_URL,
        tz: tzinfo | None = None,
    ):
        self.favorites = favorites
        self.theme = theme
        self.hourly_count = hourly_count
        self.icon_url_template = icon_url_template
        self.tz = tz

    def build_current(self, snapshot: dict | WeatherSnapshot | None) -> CurrentWeatherView:
        snap = _as_snapshot(snapshot)
        if snap is None:
            return NO_DATA

        units = self.theme.units
        temp = round_temp(snap.temperature)
        return CurrentWeatherView(
            state=ViewState.READY,
            city=snap.city,
            temperature=temp,
            unit_suffix=suffix_for(units),
            display_temp=f"{temp}{suffix_for(units)}",
            condition=display_condition(snap.description or snap.condition_main),
            icon=icon_for(snap.description or snap.condition_main),
            icon_url=self.icon_url_template.format(icon=snap.icon) if snap.icon else "",
            feels_like=format_temp(snap.feels_like, units),
            humidity=f"{snap.humidity}%",
            pressure=f"{snap.pressure} hPa",
            wind=f"{snap.wind_speed:g} {speed_suffix_for(units)}",
            is_favorite=self.favorites.contains(snap.city),
            gradient=gradient_for(snap.condition_main, self.theme.is_dark),
            accent_color=self.theme.accent_color,
        )

    def build_home(
        self,
        snapshot: dict | WeatherSnapshot | None,
        forecast: dict | list[ForecastSample] | None = None,
    ) -> HomeView:
        samples = _as_samples(forecast)
        return HomeView(
            current=self.build_current(snapshot),
            hourly=self.hourly_rows(samples),
            daily=self.daily_rows(samples),
            is_dark=self.theme.is_dark,
        )

    def build_favorites(
        self, entries: dict[str, dict | WeatherSnapshot | None]
    ) -> FavoritesView:
        """One card per favourite, in favourites order.

        ``entries`` maps city name to its weather payload; cities missing
        from it get a NO_DATA card.
        """
        names = self.favorites.favorites
        if not names:
            return FavoritesView(state=ViewState.EMPTY, is_dark=self.theme.is_dark)

        cards = []
        for name in names:
            snap = _as_snapshot(entries.get(name))
            if snap is None:
                cards.append(FavoriteCard(city=name, state=ViewState.NO_DATA))
                continue
            cards.append(
                FavoriteCard(
                    city=name,
                    state=ViewState.READY,
                    display_temp=format_temp(snap.temperature, self.theme.units),
                    condition=display_condition(snap.description) or "N/A",
                    icon=icon_for(snap.description),
                )
            )
        return FavoritesView(state=ViewState.READY, cards=cards, is_dark=self.theme.is_dark)

    def build_location(
        self, snapshot: dict | WeatherSnapshot | None, permission_denied: bool = False
    ) -> LocationView:
        """Location screen; a denied permission yields a DENIED record, not NO_DATA."""
        current = DENIED if permission_denied else self.build_current(snapshot)
        return LocationView(current=current, is_dark=self.theme.is_dark)

    def hourly_rows(self, samples: list[ForecastSample]) -> list[HourlyRow]:
        rows = []
        usable = [
            s for s in samples
            if is_valid_temperature(s.temperature)
            and local_datetime(s.timestamp, self.tz) is not None
        ]
        for sample in hourly(usable, self.hourly_count):
            when = local_datetime(sample.timestamp, self.tz)
            temp = round_temp(sample.temperature)
            rows.append(
                HourlyRow(
                    time_label=when.strftime("%H:%M"),
                    temperature=temp,
                    display_temp=f"{temp}°",
                    icon=icon_for(sample.description),
                )
            )
        return rows

    def daily_rows(self, samples: list[ForecastSample]) -> list[DailyRow]:
        suffix = suffix_for(self.theme.units)
        rows = []
        for day in group_daily(samples, self.tz):
            high, low = round_temp(day.high), round_temp(day.low)
            rows.append(
                DailyRow(
                    day=day.day,
                    weekday=day.day.strftime("%a"),
                    high=high,
                    low=low,
                    display_range=f"{high}{suffix} / {low}{suffix}",
                    condition=display_condition(day.condition),
                    icon=icon_for(day.condition),
                )
            )
        return rows


def display_condition(text: str | None) -> str:
    """Single-line condition text with each word capitalised."""
    if not text:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in text.split())


def _as_snapshot(snapshot) -> WeatherSnapshot | None:
    if isinstance(snapshot, WeatherSnapshot):
        temps = (snapshot.temperature, snapshot.feels_like)
        if not all(is_valid_temperature(t) for t in temps):
            logger.warning("Snapshot for %s has a non-finite temperature", snapshot.city)
            return None
        return snapshot
    return parse_snapshot(snapshot)


def _as_samples(forecast) -> list[ForecastSample]:
    if isinstance(forecast, list):
        return forecast
    return parse_forecast(forecast)
