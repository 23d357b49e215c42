"""Daily meal history: entities and the copy-on-write history store."""

from food_roulette.domain.history.entities import DailyHistory, HistoryMap, MealSlot
from food_roulette.domain.history.exceptions import (
    HistoryDomainError,
    InvalidHistoryDataError,
)
from food_roulette.domain.history.store import (
    delete_entry,
    deserialize,
    import_merge,
    parse_history,
    record_result,
    serialize,
    sorted_dates,
)

__all__ = [
    "DailyHistory",
    "HistoryDomainError",
    "HistoryMap",
    "InvalidHistoryDataError",
    "MealSlot",
    "delete_entry",
    "deserialize",
    "import_merge",
    "parse_history",
    "record_result",
    "serialize",
    "sorted_dates",
]
