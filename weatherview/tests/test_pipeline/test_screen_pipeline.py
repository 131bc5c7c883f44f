"""Tests for the screen pipeline with a mocked weather client."""

import sqlite3
from unittest.mock import MagicMock

import pytest

from weatherview.config.schema import AppConfig
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.common import Units
from weatherview.models.theme import DEFAULT_ACCENT
from weatherview.models.view import ViewState
from weatherview.models.weather import Coordinates
from weatherview.pipeline.screen_pipeline import ScreenPipeline
from weatherview.storage import preferences_repo
from weatherview.storage.favorites_repo import list_favorites


@pytest.fixture
def client(zagreb_weather: dict, zagreb_forecast: dict) -> MagicMock:
    mock = MagicMock(spec=OpenWeatherClient)
    mock.get_weather.return_value = zagreb_weather
    mock.get_forecast.return_value = zagreb_forecast
    return mock


class TestHome:
    def test_home(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        pipeline = ScreenPipeline(app_config, db, client=client)
        view = pipeline.home("  Zagreb ")
        assert view.current.city == "Zagreb"
        assert len(view.daily) == 3
        client.get_weather.assert_called_once_with("Zagreb", Units.METRIC)
        client.get_forecast.assert_called_once_with("Zagreb", Units.METRIC)

    def test_accent_follows_weather(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock, split_weather: dict):
        client.get_weather.return_value = split_weather
        pipeline = ScreenPipeline(app_config, db, client=client)
        pipeline.home("Split")
        assert pipeline.theme.accent_color == "#FFD469"

    def test_unknown_city_skips_forecast(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        client.get_weather.return_value = {"cod": "404", "message": "city not found"}
        pipeline = ScreenPipeline(app_config, db, client=client)
        view = pipeline.home("Atlantis")
        assert view.current.state == ViewState.NO_DATA
        assert view.daily == []
        client.get_forecast.assert_not_called()
        assert pipeline.theme.accent_color == DEFAULT_ACCENT

    def test_units_follow_theme(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        pipeline = ScreenPipeline(app_config, db, client=client)
        pipeline.theme.set_units("imperial")
        view = pipeline.home("Zagreb")
        assert view.current.unit_suffix == "°F"
        client.get_weather.assert_called_once_with("Zagreb", Units.IMPERIAL)


class TestFavorites:
    def test_loaded_from_db(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        first = ScreenPipeline(app_config, db, client=client)
        first.favorites.add("Zagreb")
        assert list_favorites(db) == ["Zagreb"]

        second = ScreenPipeline(app_config, db, client=client)
        view = second.favorites_screen()
        assert [c.city for c in view.cards] == ["Zagreb"]
        assert view.cards[0].state == ViewState.READY

    def test_empty(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        view = ScreenPipeline(app_config, db, client=client).favorites_screen()
        assert view.state == ViewState.EMPTY
        client.get_weather.assert_not_called()


class TestLocation:
    def test_location(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock, split_weather: dict):
        client.get_weather_at.return_value = split_weather
        pipeline = ScreenPipeline(app_config, db, client=client)
        coords = Coordinates(latitude=43.5, longitude=16.44)
        view = pipeline.location(coords)
        assert view.current.city == "Split"
        client.get_weather_at.assert_called_once_with(coords, Units.METRIC)

    def test_location_failure(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        client.get_weather_at.return_value = None
        view = ScreenPipeline(app_config, db, client=client).location(Coordinates(0.0, 0.0))
        assert view.current.state == ViewState.NO_DATA

    def test_location_denied(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        view = ScreenPipeline(app_config, db, client=client).location(None)
        assert view.current.state == ViewState.DENIED
        client.get_weather_at.assert_not_called()

    def test_non_string_condition_keeps_accent(
        self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock
    ):
        client.get_weather_at.return_value = {
            "cod": 200, "name": "Split", "main": {"temp": 20}, "weather": [{"main": 5}]
        }
        pipeline = ScreenPipeline(app_config, db, client=client)
        before = pipeline.theme.accent_color
        view = pipeline.location(Coordinates(latitude=43.5, longitude=16.44))
        assert view.current.has_data
        assert pipeline.theme.accent_color == before


class TestTheme:
    def test_config_defaults_then_saved_prefs(self, app_config: AppConfig, db: sqlite3.Connection, client: MagicMock):
        config = app_config.model_copy(
            update={"display": app_config.display.model_copy(update={"dark_mode": True})}
        )
        pipeline = ScreenPipeline(config, db, client=client)
        assert pipeline.theme.is_dark is True

        pipeline.theme.toggle_dark()
        pipeline.save_theme()
        assert preferences_repo.get_preference(db, "dark_mode") == "false"

        reloaded = ScreenPipeline(config, db, client=client)
        assert reloaded.theme.is_dark is False
