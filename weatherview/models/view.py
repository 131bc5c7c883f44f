"""Display records produced by the view-model builder, one per screen."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


class ViewState(StrEnum):
    READY = "ready"
    NO_DATA = "no_data"
    EMPTY = "empty"
    DENIED = "denied"


@dataclass(frozen=True)
class CurrentWeatherView:
    state: ViewState
    city: str = ""
    temperature: int | None = None
    unit_suffix: str = ""
    display_temp: str = ""
    condition: str = ""
    icon: str = ""
    icon_url: str = ""
    feels_like: str = ""
    humidity: str = ""
    pressure: str = ""
    wind: str = ""
    is_favorite: bool = False
    gradient: tuple[str, str] = ("", "")
    accent_color: str = ""

    @property
    def has_data(self) -> bool:
        return self.state == ViewState.READY


@dataclass(frozen=True)
class HourlyRow:
    time_label: str
    temperature: int
    display_temp: str
    icon: str


@dataclass(frozen=True)
class DailyRow:
    day: date
    weekday: str
    high: int
    low: int
    display_range: str
    condition: str
    icon: str


@dataclass(frozen=True)
class HomeView:
    current: CurrentWeatherView
    hourly: list[HourlyRow] = field(default_factory=list)
    daily: list[DailyRow] = field(default_factory=list)
    is_dark: bool = False


@dataclass(frozen=True)
class FavoriteCard:
    city: str
    state: ViewState
    display_temp: str = ""
    condition: str = ""
    icon: str = ""


@dataclass(frozen=True)
class FavoritesView:
    state: ViewState
    cards: list[FavoriteCard] = field(default_factory=list)
    is_dark: bool = False

    @property
    def count(self) -> int:
        return len(self.cards)


@dataclass(frozen=True)
class LocationView:
    current: CurrentWeatherView
    is_dark: bool = False
