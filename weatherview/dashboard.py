"""Weather screens over HTTP: a FastAPI backend for the mobile/web client."""

import os
import sqlite3
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from weatherview.config.loader import load_config
from weatherview.config.schema import AppConfig
from weatherview.ingest.openweather_client import OpenWeatherClient
from weatherview.models.common import Units
from weatherview.models.weather import Coordinates
from weatherview.pipeline.screen_pipeline import ScreenPipeline
from weatherview.storage.database import connect, run_migrations
from weatherview.view.formatters import to_dict

CONFIG_PATH = Path(os.getenv("WEATHERVIEW_CONFIG", "config.yaml"))


class ThemeUpdate(BaseModel):
    model_config = {"extra": "forbid"}

    dark: bool | None = None
    units: Units | None = None
    background_animation: bool | None = None


def create_app(config: AppConfig, client: OpenWeatherClient | None = None) -> FastAPI:
    app = FastAPI(title="weatherview", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def _conn() -> sqlite3.Connection:
        conn = connect(config.storage.db_path)
        run_migrations(conn)
        return conn

    def _pipeline(conn: sqlite3.Connection) -> ScreenPipeline:
        return ScreenPipeline(config, conn, client=client)

    # ── Screens ─────────────────────────────────────────────────────

    @app.get("/api/weather/{city}")
    def get_weather(city: str):
        """Home screen for a searched city."""
        conn = _conn()
        try:
            pipeline = _pipeline(conn)
            view = pipeline.home(city)
            pipeline.save_theme()
            return to_dict(view)
        finally:
            conn.close()

    @app.get("/api/location")
    def get_location(lat: float | None = None, lon: float | None = None):
        conn = _conn()
        try:
            pipeline = _pipeline(conn)
            coords = None if lat is None or lon is None else Coordinates(latitude=lat, longitude=lon)
            view = pipeline.location(coords)
            pipeline.save_theme()
            return to_dict(view)
        finally:
            conn.close()

    @app.get("/api/favorites")
    def get_favorites():
        conn = _conn()
        try:
            return to_dict(_pipeline(conn).favorites_screen())
        finally:
            conn.close()

    # ── Favourites ──────────────────────────────────────────────────

    @app.put("/api/favorites/{city}")
    def add_favorite(city: str):
        conn = _conn()
        try:
            pipeline = _pipeline(conn)
            change = pipeline.favorites.add(city)
            return {
                "city": city,
                "favorite": pipeline.favorites.contains(city),
                "changed": change.changed,
                "persisted": change.persisted,
            }
        finally:
            conn.close()

    @app.delete("/api/favorites/{city}")
    def remove_favorite(city: str):
        conn = _conn()
        try:
            pipeline = _pipeline(conn)
            change = pipeline.favorites.remove(city)
            return {
                "city": city,
                "favorite": pipeline.favorites.contains(city),
                "changed": change.changed,
                "persisted": change.persisted,
            }
        finally:
            conn.close()

    # ── Theme ───────────────────────────────────────────────────────

    @app.get("/api/theme")
    def get_theme():
        conn = _conn()
        try:
            return to_dict(_pipeline(conn).theme.preference)
        finally:
            conn.close()

    @app.post("/api/theme")
    def update_theme(update: ThemeUpdate):
        conn = _conn()
        try:
            pipeline = _pipeline(conn)
            theme = pipeline.theme
            if update.dark is not None and update.dark != theme.is_dark:
                theme.toggle_dark()
            if update.units is not None:
                theme.set_units(update.units)
            if (
                update.background_animation is not None
                and update.background_animation != theme.background_animation
            ):
                theme.toggle_background_animation()
            pipeline.save_theme()
            return to_dict(theme.preference)
        finally:
            conn.close()

    return app


app = create_app(load_config(CONFIG_PATH))


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8777)
