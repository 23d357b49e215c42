"""Port for loading and saving the daily history map."""

from typing import Protocol

from food_roulette.domain.history.entities import HistoryMap


class IHistoryRepository(Protocol):
    """
    Interface for history persistence.

    The whole map is written on every mutation; there is no partial update.
    """

    def load(self) -> HistoryMap:
        """
        Load the persisted history.

        Never raises: malformed or missing data yields an empty map.
        """
        ...

    def save(self, history: HistoryMap) -> None:
        """Persist the full history map (last write wins)."""
        ...
