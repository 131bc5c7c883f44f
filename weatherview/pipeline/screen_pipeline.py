"""Screen pipeline: fetch -> state update -> view model, one call per screen."""

import logging
import sqlite3

from weatherview.config.schema import AppConfig
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.ingest.payload import is_ok, primary_condition
from weatherview.models.theme import ThemePreference
from weatherview.models.view import FavoritesView, HomeView, LocationView
from weatherview.models.weather import Coordinates
from weatherview.state.favorites import FavoritesStore
from weatherview.state.theme import ThemeState
from weatherview.storage import preferences_repo
from weatherview.storage.favorites_repo import SqliteFavoritesStorage
from weatherview.view.builder import ViewModelBuilder

logger = logging.getLogger(__name__)


class ScreenPipeline:
    """Owns the favourites and theme state for one session.

    The connection is owned by the caller; the pipeline only reads and
    writes through it.
    """

    def __init__(
        self,
        config: AppConfig,
        conn: sqlite3.Connection,
        client: OpenWeatherClient | None = None,
    ):
        self.config = config
        self.conn = conn
        self.client = client or OpenWeatherClient.from_config(config.api)

        self.favorites = FavoritesStore(SqliteFavoritesStorage(conn))
        self.favorites.load()

        defaults = ThemePreference(
            is_dark=config.display.dark_mode,
            units=config.display.units,
            background_animation=config.display.background_animation,
        )
        self.theme = ThemeState.from_preferences(
            preferences_repo.get_preferences(conn), defaults
        )

        self.builder = ViewModelBuilder(
            self.favorites,
            self.theme,
            hourly_count=config.display.hourly_count,
            icon_url_template=config.api.icon_url_template,
        )

    def home(self, city: str) -> HomeView:
        """Search screen: current conditions plus hourly and daily forecast."""
        city = city.strip()
        weather = self.client.get_weather(city, self.theme.units)
        if not is_ok(weather):
            logger.info("No weather for %r", city)
            return self.builder.build_home(None, None)

        self._observe(weather)
        forecast = self.client.get_forecast(city, self.theme.units)
        return self.builder.build_home(weather, forecast)

    def favorites_screen(self) -> FavoritesView:
        entries = {
            name: self.client.get_weather(name, self.theme.units)
            for name in self.favorites.favorites
        }
        return self.builder.build_favorites(entries)

    def location(self, coords: Coordinates | None) -> LocationView:
        if coords is None:
            logger.info("Location permission not granted; skipping lookup")
            return self.builder.build_location(None, permission_denied=True)
        weather = self.client.get_weather_at(coords, self.theme.units)
        if is_ok(weather):
            self._observe(weather)
        return self.builder.build_location(weather)

    def save_theme(self) -> None:
        preferences_repo.set_preferences(self.conn, self.theme.to_preferences())

    def _observe(self, weather: dict) -> None:
        condition = primary_condition(weather) or {}
        self.theme.set_accent_from_weather(
            condition.get("main") or condition.get("description")
        )
