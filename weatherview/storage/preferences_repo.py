"""Repository for display preferences stored as key/value strings."""

import sqlite3


def get_preference(conn: sqlite3.Connection, key: str) -> str | None:
    row = conn.execute(
        "SELECT value FROM preferences WHERE key = ?", (key,)
    ).fetchone()
    if row is None:
        return None
    return row[0]


def set_preference(conn: sqlite3.Connection, key: str, value: str) -> None:
    conn.execute(
        "INSERT INTO preferences (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP) "
        "ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP",
        (key, value),
    )
    conn.commit()


def get_preferences(conn: sqlite3.Connection) -> dict[str, str]:
    """All stored preferences as a dict."""
    rows = conn.execute("SELECT key, value FROM preferences").fetchall()
    return {row["key"]: row["value"] for row in rows}


def set_preferences(conn: sqlite3.Connection, values: dict[str, str]) -> None:
    for key, value in values.items():
        set_preference(conn, key, value)
