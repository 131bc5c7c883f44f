"""Tests for the favourites store and its persistence contract."""

from unittest.mock import MagicMock

from weatherview.state.favorites import FavoritesStorage, FavoritesStore
from weatherview.tests.conftest import MemoryStorage


class TestAddRemove:
    def test_add_twice_keeps_one(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        first = store.add("Zagreb")
        second = store.add("Zagreb")
        assert store.favorites == ["Zagreb"]
        assert first.changed is True
        assert second.changed is False
        # the no-op does not hit storage
        assert memory_storage.saves == [["Zagreb"]]

    def test_remove_missing_is_noop(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        change = store.remove("Split")
        assert change.changed is False
        assert len(store) == 0
        assert memory_storage.saves == []

    def test_remove_persists(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        store.add("Zagreb")
        store.add("Split")
        change = store.remove("Zagreb")
        assert change.changed and change.persisted
        assert memory_storage.names == ["Split"]

    def test_case_sensitive(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        store.add("Zagreb")
        assert store.contains("Zagreb")
        assert not store.contains("zagreb")
        assert "Zagreb" in store

    def test_blank_names_rejected(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        for bad in ("", "   ", None):
            assert store.add(bad).changed is False
        assert store.favorites == []
        assert store.contains(None) is False

    def test_insertion_order(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        for city in ("Split", "Zagreb", "Rijeka"):
            store.add(city)
        assert store.favorites == ["Split", "Zagreb", "Rijeka"]

    def test_toggle(self, memory_storage: MemoryStorage):
        store = FavoritesStore(memory_storage)
        store.toggle("Osijek")
        assert store.contains("Osijek")
        store.toggle("Osijek")
        assert not store.contains("Osijek")


class TestLoad:
    def test_load_from_storage(self):
        store = FavoritesStore(MemoryStorage(["Zagreb", "Split"]))
        assert store.load() == 2
        assert store.favorites == ["Zagreb", "Split"]

    def test_load_drops_blank_and_duplicate_entries(self):
        store = FavoritesStore(MemoryStorage(["Zagreb", "", None, "Zagreb", "Pula"]))
        store.load()
        assert store.favorites == ["Zagreb", "Pula"]

    def test_load_failure_yields_empty(self):
        storage = MagicMock(spec=FavoritesStorage)
        storage.load_favorites.side_effect = OSError("disk gone")
        store = FavoritesStore(storage)
        assert store.load() == 0
        assert store.favorites == []


class TestPersistenceFailure:
    def test_rejected_save_keeps_memory_state(self):
        store = FavoritesStore(MemoryStorage(fail_save=True))
        change = store.add("Zadar")
        assert change.changed is True
        assert change.persisted is False
        assert store.contains("Zadar")

    def test_raising_save_is_absorbed(self):
        storage = MagicMock(spec=FavoritesStorage)
        storage.save_favorites.side_effect = RuntimeError("boom")
        store = FavoritesStore(storage)
        change = store.add("Zadar")
        assert change.persisted is False
        assert store.contains("Zadar")
        storage.save_favorites.assert_called_once_with(["Zadar"])
