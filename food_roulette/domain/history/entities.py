"""History entities: meal slots and one day's record."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Optional


class MealSlot(str, Enum):
    """The three recordable positions within a day."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"

    @property
    def label(self) -> str:
        return _SLOT_LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "MealSlot":
        """Resolve a slot from its value (``"lunch"``) or display label (``"午餐"``)."""
        for slot in cls:
            if label in (slot.value, slot.label):
                return slot
        raise ValueError(f"Unknown meal slot: {label!r}")


_SLOT_LABELS = {
    MealSlot.BREAKFAST: "早餐",
    MealSlot.LUNCH: "午餐",
    MealSlot.DINNER: "晚餐",
}


@dataclass(frozen=True)
class DailyHistory:
    """
    Entity: what was picked for each meal on one calendar day.

    Identity: the ``date`` string (YYYY-MM-DD), also used as the map key.
    Fields stay ``None`` until a spin (or an import) sets them and are never
    cleared automatically.

    Example:
        >>> day = DailyHistory(date="2024-01-01").with_meal(MealSlot.DINNER, "牛肉麵")
        >>> day.to_dict()
        {'date': '2024-01-01', 'dinner': '牛肉麵'}
    """

    date: str
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None

    def meal(self, slot: MealSlot) -> Optional[str]:
        return getattr(self, slot.value)

    def with_meal(self, slot: MealSlot, item_name: str) -> "DailyHistory":
        """Return a copy with ``slot`` set to ``item_name``."""
        return replace(self, **{slot.value: item_name})

    def to_dict(self) -> Dict[str, Any]:
        """Serializable form; unset meals are omitted."""
        data: Dict[str, Any] = {"date": self.date}
        for slot in MealSlot:
            value = self.meal(slot)
            if value is not None:
                data[slot.value] = value
        return data


HistoryMap = Dict[str, DailyHistory]
