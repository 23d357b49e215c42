"""Port for string key/value storage.

Mirrors the browser local storage primitive the history lives in: whole
string values under string keys, each write replacing the previous value.
"""

from typing import Optional, Protocol


class IKeyValueStorage(Protocol):
    """
    Interface for key/value storage backends.

    Implementations:
    - InMemoryStorage (tests, transient sessions)
    - JsonFileStorage (local JSON file)
    """

    def get_item(self, key: str) -> Optional[str]:
        """Return the value stored under ``key``, or None when absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """
        Store ``value`` under ``key``, replacing any previous value.

        Raises:
            OSError: If the backend cannot write
        """
        ...

    def remove_item(self, key: str) -> None:
        """Remove ``key``; missing keys are ignored."""
        ...
