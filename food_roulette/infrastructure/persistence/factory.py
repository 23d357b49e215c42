"""Storage Factory for Persistence Layer.

Environment-based storage selection.
Strategy:
- .env (runtime): STORAGE_BACKEND=json (local file persistence)
- tests: STORAGE_BACKEND=memory (fast, isolated)
- Default: json at ~/.food_roulette/storage.json

Usage:
    from food_roulette.infrastructure.persistence.factory import (
        create_storage,
        create_history_repository,
    )

    storage = create_storage()
    repository = create_history_repository(storage)
"""

import logging
from typing import Optional

from food_roulette.domain.shared.ports.history_repository import IHistoryRepository
from food_roulette.domain.shared.ports.key_value_storage import IKeyValueStorage
from food_roulette.infrastructure.config import get_storage_backend, get_storage_path
from food_roulette.infrastructure.persistence.history_repository import (
    StorageHistoryRepository,
)
from food_roulette.infrastructure.persistence.in_memory.storage import InMemoryStorage
from food_roulette.infrastructure.persistence.json_file.storage import JsonFileStorage

logger = logging.getLogger(__name__)


def create_storage() -> IKeyValueStorage:
    """Create key/value storage based on STORAGE_BACKEND env var.

    Environment variable: STORAGE_BACKEND
    Values:
        - "json": JSON file at STORAGE_PATH (default)
        - "memory": In-memory storage (transient)

    Returns:
        IKeyValueStorage: Storage instance

    Raises:
        ValueError: If STORAGE_BACKEND has an unknown value
    """
    mode = get_storage_backend()

    if mode == "memory":
        logger.info("Using in-memory storage")
        return InMemoryStorage()

    if mode == "json":
        path = get_storage_path()
        logger.info("Using JSON file storage", extra={"path": str(path)})
        return JsonFileStorage(path)

    raise ValueError(
        f"Unknown STORAGE_BACKEND={mode!r}. Use STORAGE_BACKEND=json or STORAGE_BACKEND=memory"
    )


def create_history_repository(
    storage: Optional[IKeyValueStorage] = None,
) -> IHistoryRepository:
    return StorageHistoryRepository(storage if storage is not None else create_storage())
