"""Initial schema: favourite cities and display preferences."""

import sqlite3

DDL = [
    # Favourite cities, kept in the order they were added
    """
    CREATE TABLE IF NOT EXISTS favorites (
        name TEXT PRIMARY KEY CHECK (length(trim(name)) > 0),
        position INTEGER NOT NULL,
        added_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    "CREATE INDEX IF NOT EXISTS idx_favorites_position ON favorites(position)",

    # Display preferences (dark mode, units, animation)
    """
    CREATE TABLE IF NOT EXISTS preferences (
        key TEXT PRIMARY KEY,
        value TEXT NOT NULL,
        updated_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
]


def up(conn: sqlite3.Connection) -> None:
    for stmt in DDL:
        conn.execute(stmt)
    conn.commit()
