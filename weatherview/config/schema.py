"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from weatherview.models.common import Units


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = "https://api.openweathermap.org/data/2.5"
    api_key: str = ""
    lang: str = "hr"
    timeout: float = Field(default=10.0, gt=0.0)
    icon_url_template: str = "https://openweathermap.org/img/wn/{icon}@4x.png"


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    units: Units = Units.METRIC
    dark_mode: bool = False
    background_animation: bool = True
    hourly_count: int = Field(default=8, ge=0, le=40)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/weatherview.db"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    display: DisplayConfig = DisplayConfig()
    storage: StorageConfig = StorageConfig()
