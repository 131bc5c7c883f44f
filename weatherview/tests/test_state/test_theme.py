"""Tests for theme state mutations and preference round-trips."""

import pytest

from weatherview.models.common import Units
from weatherview.models.theme import DEFAULT_ACCENT, ThemePreference
from weatherview.state.theme import ThemeState


class TestAccent:
    def test_default(self):
        assert ThemeState().accent_color == DEFAULT_ACCENT

    def test_recognised_condition(self):
        theme = ThemeState()
        assert theme.set_accent_from_weather("Clear") is True
        assert theme.accent_color == "#FFD469"

    def test_unrecognised_keeps_previous(self):
        theme = ThemeState()
        theme.set_accent_from_weather("Clouds")
        assert theme.set_accent_from_weather("Squall") is False
        assert theme.set_accent_from_weather(None) is False
        assert theme.accent_color == "#8AB4F8"

    def test_non_string_condition_keeps_previous(self):
        theme = ThemeState()
        assert theme.set_accent_from_weather(42) is False
        assert theme.accent_color == DEFAULT_ACCENT


class TestMutations:
    def test_toggle_dark(self):
        theme = ThemeState()
        assert theme.toggle_dark() is True
        assert theme.preference.is_dark is True
        assert theme.toggle_dark() is False

    def test_set_units(self):
        theme = ThemeState()
        assert theme.set_units("imperial") == Units.IMPERIAL
        assert theme.preference.units == Units.IMPERIAL

    def test_set_units_invalid(self):
        theme = ThemeState()
        with pytest.raises(ValueError, match="Unknown units"):
            theme.set_units("kelvin")
        assert theme.units == Units.METRIC

    def test_toggle_animation(self):
        theme = ThemeState()
        assert theme.toggle_background_animation() is False


class TestPreferences:
    def test_round_trip(self):
        theme = ThemeState(is_dark=True, units="imperial", background_animation=False)
        theme.set_accent_from_weather("Snow")
        restored = ThemeState.from_preferences(theme.to_preferences())
        assert restored.preference == theme.preference

    def test_defaults_when_missing(self):
        defaults = ThemePreference(is_dark=True, units=Units.IMPERIAL)
        theme = ThemeState.from_preferences({}, defaults)
        assert theme.is_dark is True
        assert theme.units == Units.IMPERIAL

    def test_bad_stored_units_fall_back(self):
        theme = ThemeState.from_preferences({"units": "rankine"})
        assert theme.units == Units.METRIC
