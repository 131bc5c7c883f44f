"""OpenWeatherMap API client.

Every failure (transport error, HTTP error status, undecodable body) is
logged and returned as None; callers treat None as "no data". There is no
retry policy.
"""

import logging

import httpx

from weatherview.config.schema import ApiConfig
from weatherview.models.common import Units
from weatherview.models.weather import Coordinates

logger = logging.getLogger(__name__)

DEFAULT_USER_AGENT = "weatherview/0.1.0"


class OpenWeatherClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.openweathermap.org/data/2.5",
        lang: str = "hr",
        timeout: float = 10.0,
        user_agent: str = DEFAULT_USER_AGENT,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.lang = lang
        self.timeout = timeout
        self.user_agent = user_agent

    @classmethod
    def from_config(cls, config: ApiConfig) -> "OpenWeatherClient":
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            lang=config.lang,
            timeout=config.timeout,
        )

    def get_weather(self, city: str, units: Units | str = Units.METRIC) -> dict | None:
        """Current conditions for a city name."""
        if not city:
            return None
        return self._get("weather", {"q": city, "units": str(units)})

    def get_weather_at(
        self, coords: Coordinates, units: Units | str = Units.METRIC
    ) -> dict | None:
        """Current conditions at a latitude/longitude."""
        return self._get(
            "weather",
            {"lat": coords.latitude, "lon": coords.longitude, "units": str(units)},
        )

    def get_forecast(self, city: str, units: Units | str = Units.METRIC) -> dict | None:
        """5-day / 3-hour forecast for a city name."""
        if not city:
            return None
        return self._get("forecast", {"q": city, "units": str(units)})

    def _get(self, endpoint: str, params: dict) -> dict | None:
        url = f"{self.base_url}/{endpoint}"
        query = {**params, "appid": self.api_key, "lang": self.lang}
        try:
            resp = httpx.get(
                url,
                params=query,
                headers={"User-Agent": self.user_agent},
                timeout=self.timeout,
            )
        except httpx.RequestError as e:
            logger.warning("OpenWeather request to %s failed: %s", endpoint, e)
            return None

        if resp.status_code >= 400:
            logger.warning(
                "OpenWeather %s returned %d for %s",
                endpoint, resp.status_code, _describe(params),
            )
            return None

        try:
            data = resp.json()
        except ValueError:
            logger.exception("OpenWeather %s returned invalid JSON", endpoint)
            return None
        return data if isinstance(data, dict) else None


def _describe(params: dict) -> str:
    if "q" in params:
        return repr(params["q"])
    return f"({params.get('lat')}, {params.get('lon')})"
