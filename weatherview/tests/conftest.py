"""Shared test fixtures."""

import json
import sqlite3
from pathlib import Path

import pytest

from weatherview.config.schema import ApiConfig, AppConfig, StorageConfig
from weatherview.storage.database import connect, run_migrations

FIXTURE_DIR = Path(__file__).parent / "fixtures"
TEST_BASE_URL = "https://test-owm.example.com/data/2.5"


def load_fixture(name: str) -> dict:
    with open(FIXTURE_DIR / name, encoding="utf-8") as f:
        return json.load(f)


class MemoryStorage:
    """In-memory storage collaborator that records every save."""

    def __init__(self, names: list[str] | None = None, fail_save: bool = False):
        self.names = list(names or [])
        self.fail_save = fail_save
        self.saves: list[list[str]] = []

    def load_favorites(self) -> list[str]:
        return list(self.names)

    def save_favorites(self, names: list[str]) -> bool:
        self.saves.append(list(names))
        if self.fail_save:
            return False
        self.names = list(names)
        return True


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def zagreb_weather() -> dict:
    return load_fixture("owm_weather_zagreb.json")


@pytest.fixture
def split_weather() -> dict:
    return load_fixture("owm_weather_split.json")


@pytest.fixture
def zagreb_forecast() -> dict:
    return load_fixture("owm_forecast_zagreb.json")


@pytest.fixture
def memory_storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def app_config(tmp_path: Path) -> AppConfig:
    """Config pointing at a fake API host and a temporary database."""
    return AppConfig(
        api=ApiConfig(api_key="test-key", base_url=TEST_BASE_URL),
        storage=StorageConfig(db_path=str(tmp_path / "test.db")),
    )


@pytest.fixture
def db(tmp_path: Path) -> sqlite3.Connection:
    """Migrated SQLite database in a temp directory."""
    conn = connect(tmp_path / "test.db")
    run_migrations(conn)
    yield conn
    conn.close()
