"""GraphQL types for the roulette session.

Domain objects are mapped at the edge through the ``from_domain`` helpers;
resolvers never hand dataclasses straight to Strawberry.
"""

from __future__ import annotations

from typing import Annotated, List, Optional, Union

import strawberry

from food_roulette.application.history.export import HistoryExport as DomainHistoryExport
from food_roulette.application.roulette.orchestrator import SpinOutcome
from food_roulette.domain.history.entities import DailyHistory as DomainDailyHistory
from food_roulette.domain.history.entities import MealSlot as DomainMealSlot
from food_roulette.domain.roulette.core.food_item import FoodItem as DomainFoodItem
from food_roulette.domain.roulette.core.game_state import GameState as DomainGameState
from food_roulette.domain.suggestion.services.suggestion_service import SuggestionResult
from food_roulette.domain.wheel.geometry import SliceGeometry

MealSlot = strawberry.enum(DomainMealSlot, name="MealSlot")
GameState = strawberry.enum(DomainGameState, name="GameState")


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class FoodItem:
    id: strawberry.ID
    name: str
    color: str

    @classmethod
    def from_domain(cls, item: DomainFoodItem) -> "FoodItem":
        return cls(id=strawberry.ID(item.id), name=item.name, color=item.color)


@strawberry.type
class DailyHistory:
    """One day of recorded meals."""

    date: str
    breakfast: Optional[str] = None
    lunch: Optional[str] = None
    dinner: Optional[str] = None
    is_today: bool = False

    @classmethod
    def from_domain(cls, day: DomainDailyHistory, today: str) -> "DailyHistory":
        return cls(
            date=day.date,
            breakfast=day.breakfast,
            lunch=day.lunch,
            dinner=day.dinner,
            is_today=day.date == today,
        )


@strawberry.type
class Session:
    """Current roulette session state."""

    game_state: GameState
    rotation: float
    selected_meal: MealSlot
    selected_meal_label: str
    winner: Optional[FoodItem]
    loading_suggestions: bool
    today: str
    item_count: int


@strawberry.type
class WheelSlice:
    index: int
    item: FoodItem
    start_angle: float
    end_angle: float
    path_data: str
    label_x: float
    label_y: float
    label_rotation: float

    @classmethod
    def from_domain(cls, geometry: SliceGeometry, item: DomainFoodItem) -> "WheelSlice":
        return cls(
            index=geometry.index,
            item=FoodItem.from_domain(item),
            start_angle=geometry.start_angle,
            end_angle=geometry.end_angle,
            path_data=geometry.path_data,
            label_x=geometry.label_x,
            label_y=geometry.label_y,
            label_rotation=geometry.label_rotation,
        )


@strawberry.type
class Wheel:
    size: int
    font_size: int
    slices: List[WheelSlice]


@strawberry.type
class HistoryExport:
    filename: str
    content: str
    days: int

    @classmethod
    def from_domain(cls, export: DomainHistoryExport) -> "HistoryExport":
        return cls(filename=export.filename, content=export.content, days=export.days)


# ============================================
# MUTATION RESULT TYPES
# ============================================


@strawberry.type
class OperationError:
    """Domain error surfaced to the user; nothing changed."""

    message: str
    code: str


@strawberry.type
class ItemsPayload:
    items: List[FoodItem]


@strawberry.type
class SpinSuccess:
    winner: FoodItem
    winner_index: int
    rotation: float
    meal_slot: MealSlot
    date: str

    @classmethod
    def from_domain(cls, outcome: SpinOutcome) -> "SpinSuccess":
        return cls(
            winner=FoodItem.from_domain(outcome.winner),
            winner_index=outcome.winner_index,
            rotation=outcome.rotation,
            meal_slot=outcome.meal_slot,
            date=outcome.date,
        )


@strawberry.type
class SuggestionPayload:
    items: List[FoodItem]
    is_fallback: bool
    reason: Optional[str]

    @classmethod
    def from_domain(
        cls, result: SuggestionResult, items: List[DomainFoodItem]
    ) -> "SuggestionPayload":
        return cls(
            items=[FoodItem.from_domain(item) for item in items],
            is_fallback=result.is_fallback,
            reason=result.reason,
        )


@strawberry.type
class DeleteHistorySuccess:
    date: str
    deleted: bool


@strawberry.type
class ImportHistorySuccess:
    imported_dates: List[str]
    total_days: int


ItemsResult = Annotated[
    Union[ItemsPayload, OperationError], strawberry.union("ItemsResult")
]
SpinResult = Annotated[
    Union[SpinSuccess, OperationError], strawberry.union("SpinResult")
]
SuggestionOutcome = Annotated[
    Union[SuggestionPayload, OperationError], strawberry.union("SuggestionOutcome")
]
DeleteHistoryResult = Annotated[
    Union[DeleteHistorySuccess, OperationError], strawberry.union("DeleteHistoryResult")
]
ImportHistoryResult = Annotated[
    Union[ImportHistorySuccess, OperationError], strawberry.union("ImportHistoryResult")
]
