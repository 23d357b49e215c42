"""
Unit tests for InMemoryStorage.
"""

from food_roulette.infrastructure.persistence.in_memory.storage import InMemoryStorage


class TestInMemoryStorage:
    """Test suite for InMemoryStorage."""

    def test_get_missing_returns_none(self) -> None:
        """Test unknown keys."""
        assert InMemoryStorage().get_item("missing") is None

    def test_set_and_get(self) -> None:
        """Test values are stored by key."""
        storage = InMemoryStorage()

        storage.set_item("k", "v")

        assert storage.get_item("k") == "v"
        assert storage.count() == 1

    def test_remove(self) -> None:
        """Test removing present and missing keys."""
        storage = InMemoryStorage({"k": "v"})

        storage.remove_item("k")
        storage.remove_item("k")

        assert storage.get_item("k") is None

    def test_initial_is_copied(self) -> None:
        """Test the seed dict is not shared."""
        seed = {"k": "v"}
        storage = InMemoryStorage(seed)

        storage.set_item("other", "x")

        assert seed == {"k": "v"}

    def test_clear(self) -> None:
        """Test clearing all items."""
        storage = InMemoryStorage({"a": "1", "b": "2"})

        storage.clear()

        assert storage.count() == 0
