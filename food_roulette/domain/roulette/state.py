"""Roulette session state and its reducer.

``AppState`` is immutable. Every operation below takes a state and returns the
next one; invalid requests raise a RouletteDomainError and leave the caller's
state untouched. Keeps the session logic testable without any UI or timer.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence, Tuple

from food_roulette.domain.history.entities import DailyHistory, HistoryMap, MealSlot
from food_roulette.domain.history.store import record_result
from food_roulette.domain.roulette.core.exceptions import (
    InvalidGameStateTransitionError,
    ItemNotFoundError,
    NotEnoughItemsError,
)
from food_roulette.domain.roulette.core.food_item import (
    INITIAL_FOODS,
    MIN_ITEMS_TO_SPIN,
    FoodItem,
    build_items,
)
from food_roulette.domain.roulette.core.game_state import GameState
from food_roulette.domain.wheel.resolver import winner_index


@dataclass(frozen=True)
class AppState:
    """
    Everything the session knows.

    Attributes:
        items: Dishes currently on the wheel, in slice order
        rotation: Cumulative wheel rotation in degrees
        game_state: IDLE | SPINNING | FINISHED
        winner: Item picked by the last completed spin
        selected_meal: Slot the next spin records into
        loading_suggestions: True while an AI suggestion fetch is outstanding
        history: Date-keyed daily history
    """

    items: Tuple[FoodItem, ...] = ()
    rotation: float = 0
    game_state: GameState = GameState.IDLE
    winner: Optional[FoodItem] = None
    selected_meal: MealSlot = MealSlot.DINNER
    loading_suggestions: bool = False
    history: HistoryMap = field(default_factory=dict)

    @property
    def is_spinning(self) -> bool:
        return self.game_state is GameState.SPINNING

    def day(self, date: str) -> DailyHistory:
        return self.history.get(date) or DailyHistory(date=date)


def initial_state(
    names: Iterable[str] = INITIAL_FOODS,
    history: Optional[HistoryMap] = None,
) -> AppState:
    return AppState(items=build_items(names), history=dict(history or {}))


def _transition(state: AppState, target: GameState) -> GameState:
    if not state.game_state.can_transition_to(target):
        raise InvalidGameStateTransitionError(
            f"Cannot go from {state.game_state.value} to {target.value}"
        )
    return target


def add_item(state: AppState, name: str) -> AppState:
    """Append a dish; its color follows the current list length."""
    item = FoodItem.create(name, position=len(state.items))
    return replace(state, items=state.items + (item,))


def delete_item(state: AppState, item_id: str) -> AppState:
    """
    Remove a dish from the wheel.

    Raises:
        NotEnoughItemsError: If the wheel holds MIN_ITEMS_TO_SPIN items or fewer
        ItemNotFoundError: If no item has ``item_id``
    """
    if len(state.items) <= MIN_ITEMS_TO_SPIN:
        raise NotEnoughItemsError()
    remaining = tuple(item for item in state.items if item.id != item_id)
    if len(remaining) == len(state.items):
        raise ItemNotFoundError(f"No item with id {item_id!r}")
    return replace(state, items=remaining)


def replace_items(state: AppState, names: Sequence[str]) -> AppState:
    """Swap the whole list, e.g. with AI suggestions; colors restart at index 0."""
    items = build_items(names)
    if len(items) < MIN_ITEMS_TO_SPIN:
        raise NotEnoughItemsError()
    return replace(state, items=items)


def select_meal(state: AppState, slot: MealSlot) -> AppState:
    return replace(state, selected_meal=slot)


def start_spin(state: AppState, rotation: float) -> AppState:
    """
    Begin a spin that ends at cumulative ``rotation``.

    A request while already SPINNING is a no-op and returns ``state`` itself.

    Raises:
        NotEnoughItemsError: If fewer than MIN_ITEMS_TO_SPIN items are on the wheel
    """
    if state.is_spinning:
        return state
    if len(state.items) < MIN_ITEMS_TO_SPIN:
        raise NotEnoughItemsError()
    return replace(
        state,
        game_state=_transition(state, GameState.SPINNING),
        rotation=rotation,
        winner=None,
    )


def complete_spin(
    state: AppState,
    items: Sequence[FoodItem],
    slot: MealSlot,
    date: str,
) -> AppState:
    """
    Resolve the winner and record it into ``date``'s ``slot``.

    Args:
        state: Current state (must be SPINNING)
        items: Items on the wheel when the spin started
        slot: Meal slot selected when the spin started
        date: Day key to record into

    Raises:
        InvalidGameStateTransitionError: If no spin is in progress
    """
    finished = _transition(state, GameState.FINISHED)
    winner = items[winner_index(state.rotation, len(items))]
    return replace(
        state,
        game_state=finished,
        winner=winner,
        history=record_result(state.history, date, slot, winner.name),
    )


def begin_suggestions(state: AppState) -> AppState:
    return replace(state, loading_suggestions=True)


def end_suggestions(state: AppState, names: Optional[Sequence[str]] = None) -> AppState:
    """Clear the loading flag, replacing the items when ``names`` is given."""
    if names is not None:
        state = replace_items(state, names)
    return replace(state, loading_suggestions=False)


def set_history(state: AppState, history: HistoryMap) -> AppState:
    return replace(state, history=history)
