"""Storage-backed history repository.

Implements IHistoryRepository on top of any IKeyValueStorage. The current
format is the full HistoryMap under a versioned key; the legacy format held a
single day's record under an unversioned key and is migrated on read.
"""

import json
import logging

from food_roulette.domain.history.entities import HistoryMap
from food_roulette.domain.history.exceptions import InvalidHistoryDataError
from food_roulette.domain.history.store import parse_day, parse_history, serialize
from food_roulette.domain.shared.ports.key_value_storage import IKeyValueStorage

logger = logging.getLogger(__name__)

HISTORY_KEY = "foodie_history_v2"
LEGACY_HISTORY_KEY = "foodie_history"


class StorageHistoryRepository:
    """
    IHistoryRepository adapter over a key/value storage.

    Example:
        >>> repository = StorageHistoryRepository(InMemoryStorage())
        >>> repository.load()
        {}
    """

    def __init__(self, storage: IKeyValueStorage) -> None:
        self._storage = storage

    def load(self) -> HistoryMap:
        """
        Load history, migrating the legacy record when needed.

        Order:
        1. Versioned map under HISTORY_KEY
        2. Legacy single record under LEGACY_HISTORY_KEY, wrapped by its date
        3. Empty map

        Malformed data at either key is logged and skipped.

        Returns:
            History map (possibly empty)
        """
        saved = self._storage.get_item(HISTORY_KEY)
        if saved is not None:
            try:
                history = parse_history(saved)
                logger.info("History loaded", extra={"days": len(history)})
                return history
            except InvalidHistoryDataError as exc:
                logger.error(
                    "Failed to parse history",
                    extra={"key": HISTORY_KEY, "error": str(exc)},
                )

        legacy = self._storage.get_item(LEGACY_HISTORY_KEY)
        if legacy is not None:
            try:
                record = parse_day(json.loads(legacy))
            except (ValueError, InvalidHistoryDataError) as exc:
                logger.error(
                    "Failed to parse legacy history",
                    extra={"key": LEGACY_HISTORY_KEY, "error": str(exc)},
                )
            else:
                logger.info(
                    "Migrated legacy history record",
                    extra={"date": record.date},
                )
                return {record.date: record}

        return {}

    def save(self, history: HistoryMap) -> None:
        """
        Persist the full history map under HISTORY_KEY.

        Write failures are logged and swallowed: the in-memory session stays
        authoritative and the next mutation writes the whole map again.
        """
        try:
            self._storage.set_item(HISTORY_KEY, serialize(history))
        except OSError:
            logger.exception(
                "Failed to persist history",
                extra={"days": len(history)},
            )
