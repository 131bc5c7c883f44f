"""Theme preference model."""

from dataclasses import dataclass

from weatherview.models.common import Units

DEFAULT_ACCENT = "#5EE1FF"


@dataclass(frozen=True)
class ThemePreference:
    is_dark: bool = False
    units: Units = Units.METRIC
    accent_color: str = DEFAULT_ACCENT
    background_animation: bool = True
