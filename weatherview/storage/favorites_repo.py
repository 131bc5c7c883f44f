"""Repository for favourite cities; the storage side of FavoritesStore."""

import logging
import sqlite3

logger = logging.getLogger(__name__)


def list_favorites(conn: sqlite3.Connection) -> list[str]:
    """All favourite city names in the order they were added."""
    rows = conn.execute("SELECT name FROM favorites ORDER BY position, name").fetchall()
    return [row["name"] for row in rows]


def replace_favorites(conn: sqlite3.Connection, names: list[str]) -> None:
    """Overwrite the stored favourites with ``names`` in one transaction."""
    with conn:
        conn.execute("DELETE FROM favorites")
        conn.executemany(
            "INSERT INTO favorites (name, position) VALUES (?, ?)",
            [(name, i) for i, name in enumerate(names)],
        )


class SqliteFavoritesStorage:
    """Storage collaborator backed by the ``favorites`` table."""

    def __init__(self, conn: sqlite3.Connection):
        self.conn = conn

    def load_favorites(self) -> list[str]:
        return list_favorites(self.conn)

    def save_favorites(self, names: list[str]) -> bool:
        try:
            replace_favorites(self.conn, names)
        except sqlite3.Error:
            logger.exception("Failed to save %d favourites", len(names))
            return False
        return True
