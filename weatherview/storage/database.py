"""SQLite connection manager with WAL mode and numbered migrations."""

import importlib
import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "weatherview.storage.migrations"
MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a SQLite connection, creating the parent directory if needed."""
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA foreign_keys=ON")
    return conn


@contextmanager
def open_database(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    """Connect, bring the schema up to date, and close on exit."""
    conn = connect(db_path)
    try:
        run_migrations(conn)
        yield conn
    finally:
        conn.close()


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending migrations in name order. Returns the names applied."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    applied = {row[0] for row in conn.execute("SELECT version FROM schema_versions")}
    pending = [name for name in _discover_migrations() if name not in applied]

    for name in pending:
        module = importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}")
        module.up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        logger.info("Applied migration %s", name)

    return pending


def _discover_migrations() -> list[str]:
    """Migration modules follow the v###_*.py naming convention."""
    return sorted(p.stem for p in MIGRATIONS_DIR.glob("v[0-9]*_*.py"))
