"""In-memory key/value storage.

Provides an in-memory implementation of IKeyValueStorage for tests and
throwaway sessions. Uses a dictionary with no external dependencies.
"""

from typing import Dict, Optional


class InMemoryStorage:
    """
    In-memory implementation of IKeyValueStorage port.

    Persistence: Data lost on process restart (in-memory only)

    Example:
        >>> storage = InMemoryStorage()
        >>> storage.set_item("foodie_history_v2", "{}")
        >>> storage.get_item("foodie_history_v2")
        '{}'
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        """Remove all items (for testing)."""
        self._items.clear()

    def count(self) -> int:
        return len(self._items)
