"""Shared ports implemented by the infrastructure layer."""

from food_roulette.domain.shared.ports.history_repository import IHistoryRepository
from food_roulette.domain.shared.ports.key_value_storage import IKeyValueStorage

__all__ = ["IHistoryRepository", "IKeyValueStorage"]
