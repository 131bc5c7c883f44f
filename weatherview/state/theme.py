"""Theme state: dark mode, unit preference, and weather-derived accent colour."""

import logging

from weatherview.core.conditions import accent_for
from weatherview.models.common import Units
from weatherview.models.theme import DEFAULT_ACCENT, ThemePreference

logger = logging.getLogger(__name__)

PREF_DARK = "dark_mode"
PREF_UNITS = "units"
PREF_ANIMATION = "background_animation"
PREF_ACCENT = "accent_color"


class ThemeState:
    def __init__(
        self,
        is_dark: bool = False,
        units: Units | str = Units.METRIC,
        background_animation: bool = True,
        accent_color: str = DEFAULT_ACCENT,
    ):
        self.is_dark = is_dark
        self.units = Units(units)
        self.background_animation = background_animation
        self.accent_color = accent_color

    @property
    def preference(self) -> ThemePreference:
        return ThemePreference(
            is_dark=self.is_dark,
            units=self.units,
            accent_color=self.accent_color,
            background_animation=self.background_animation,
        )

    def set_accent_from_weather(self, condition: str | None) -> bool:
        """Recompute the accent from condition text.

        Unrecognised or missing conditions keep the current accent and
        return False.
        """
        accent = accent_for(condition)
        if accent is None:
            logger.debug("No accent for condition %r; keeping %s", condition, self.accent_color)
            return False
        self.accent_color = accent
        return True

    def toggle_dark(self) -> bool:
        self.is_dark = not self.is_dark
        return self.is_dark

    def set_units(self, units: Units | str) -> Units:
        try:
            self.units = Units(units)
        except ValueError:
            raise ValueError(f"Unknown units: {units!r}") from None
        return self.units

    def toggle_background_animation(self) -> bool:
        self.background_animation = not self.background_animation
        return self.background_animation

    def to_preferences(self) -> dict[str, str]:
        return {
            PREF_DARK: _flag(self.is_dark),
            PREF_UNITS: str(self.units),
            PREF_ANIMATION: _flag(self.background_animation),
            PREF_ACCENT: self.accent_color,
        }

    @classmethod
    def from_preferences(
        cls, prefs: dict[str, str], defaults: ThemePreference | None = None
    ) -> "ThemeState":
        """Build from stored key/value preferences; unknown values fall back."""
        defaults = defaults or ThemePreference()
        units = prefs.get(PREF_UNITS, str(defaults.units))
        if units not in {u.value for u in Units}:
            logger.warning("Ignoring stored units %r", units)
            units = defaults.units
        return cls(
            is_dark=_parse_flag(prefs.get(PREF_DARK), defaults.is_dark),
            units=units,
            background_animation=_parse_flag(
                prefs.get(PREF_ANIMATION), defaults.background_animation
            ),
            accent_color=prefs.get(PREF_ACCENT) or defaults.accent_color,
        )


def _flag(value: bool) -> str:
    return "true" if value else "false"


def _parse_flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value == "true"
