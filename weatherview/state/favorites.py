"""Favourite cities held in memory, persisted through a storage collaborator."""

import logging
from dataclasses import dataclass
from typing import Protocol

logger = logging.getLogger(__name__)


class FavoritesStorage(Protocol):
    def load_favorites(self) -> list[str]: ...

    def save_favorites(self, names: list[str]) -> bool: ...


@dataclass(frozen=True)
class FavoritesChange:
    """Outcome of a mutation.

    ``changed`` is False for no-ops. ``persisted`` is False when the storage
    write failed; the in-memory change stands either way.
    """

    changed: bool
    persisted: bool


NO_CHANGE = FavoritesChange(changed=False, persisted=True)


class FavoritesStore:
    """Insertion-ordered set of favourite city names.

    Names match case-sensitively. Blank names are never stored.
    """

    def __init__(self, storage: FavoritesStorage):
        self.storage = storage
        self._names: dict[str, None] = {}

    def load(self) -> int:
        """Replace the in-memory set with what storage holds.

        A failing load leaves the store empty. Returns the number loaded.
        """
        self._names = {}
        try:
            loaded = self.storage.load_favorites() or []
        except Exception:
            logger.exception("Failed to load favourites; starting empty")
            return 0
        for name in loaded:
            if _valid(name):
                self._names[name] = None
        return len(self._names)

    @property
    def favorites(self) -> list[str]:
        return list(self._names)

    def contains(self, city: str | None) -> bool:
        return _valid(city) and city in self._names

    __contains__ = contains

    def __len__(self) -> int:
        return len(self._names)

    def add(self, city: str | None) -> FavoritesChange:
        if not _valid(city) or city in self._names:
            return NO_CHANGE
        self._names[city] = None
        return FavoritesChange(changed=True, persisted=self._persist())

    def remove(self, city: str | None) -> FavoritesChange:
        if not _valid(city) or city not in self._names:
            return NO_CHANGE
        del self._names[city]
        return FavoritesChange(changed=True, persisted=self._persist())

    def toggle(self, city: str | None) -> FavoritesChange:
        """Heart-button action: remove if present, add otherwise."""
        if self.contains(city):
            return self.remove(city)
        return self.add(city)

    def _persist(self) -> bool:
        names = self.favorites
        try:
            saved = bool(self.storage.save_favorites(names))
        except Exception:
            logger.exception("Failed to persist %d favourites", len(names))
            return False
        if not saved:
            logger.warning("Storage rejected favourites update (%d names)", len(names))
        return saved


def _valid(city) -> bool:
    return isinstance(city, str) and bool(city.strip())
