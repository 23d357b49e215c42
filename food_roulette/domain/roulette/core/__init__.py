"""Core roulette model."""

from food_roulette.domain.roulette.core.exceptions import (
    InvalidGameStateTransitionError,
    InvalidItemNameError,
    ItemNotFoundError,
    NotEnoughItemsError,
    RouletteDomainError,
)
from food_roulette.domain.roulette.core.food_item import FoodItem, build_items
from food_roulette.domain.roulette.core.game_state import GameState

__all__ = [
    "FoodItem",
    "GameState",
    "InvalidGameStateTransitionError",
    "InvalidItemNameError",
    "ItemNotFoundError",
    "NotEnoughItemsError",
    "RouletteDomainError",
    "build_items",
]
