"""FoodItem entity and the fixed wheel palette."""

from dataclasses import dataclass
from typing import Iterable, Tuple
from uuid import uuid4

from food_roulette.domain.roulette.core.exceptions import InvalidItemNameError

WHEEL_COLORS: Tuple[str, ...] = (
    "#F97316",
    "#EF4444",
    "#F59E0B",
    "#10B981",
    "#3B82F6",
    "#8B5CF6",
    "#EC4899",
    "#14B8A6",
)

INITIAL_FOODS: Tuple[str, ...] = (
    "滷肉飯",
    "牛肉麵",
    "雞排",
    "鍋貼",
    "壽司",
    "麻辣燙",
)

MIN_ITEMS_TO_SPIN = 2


def generate_item_id() -> str:
    return uuid4().hex[:9]


def color_for_position(position: int) -> str:
    return WHEEL_COLORS[position % len(WHEEL_COLORS)]


@dataclass(frozen=True)
class FoodItem:
    """
    Entity: one dish on the wheel.

    Identity: ``id`` (random, unique within a session).
    Created on add, destroyed on delete; never edited in place.

    Example:
        >>> item = FoodItem.create("水餃", position=3)
        >>> item.color == WHEEL_COLORS[3]
        True
    """

    id: str
    name: str
    color: str

    @classmethod
    def create(cls, name: str, position: int) -> "FoodItem":
        """
        Create an item colored by its position on the wheel.

        Args:
            name: Dish name (surrounding whitespace is stripped)
            position: List length at creation time, selects the palette color

        Raises:
            InvalidItemNameError: If the name is blank
        """
        clean = name.strip()
        if not clean:
            raise InvalidItemNameError()
        return cls(id=generate_item_id(), name=clean, color=color_for_position(position))


def build_items(names: Iterable[str]) -> Tuple[FoodItem, ...]:
    """Fresh item list colored by index; blank names are skipped."""
    clean = [name for name in names if name and name.strip()]
    return tuple(FoodItem.create(name, index) for index, name in enumerate(clean))
