"""Roulette session orchestrator.

Owns the session AppState and sequences every user action through the pure
reducer in ``domain.roulette.state``:

- spin: SPINNING -> wait for the animation -> resolve winner -> record -> persist
- AI suggestions: loading flag -> fetch (never fails) -> replace items
- history: delete a day, import-merge a file, export
"""

import asyncio
import logging
import random
from dataclasses import dataclass
from datetime import date, datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from food_roulette.application.history.export import HistoryExport, build_export
from food_roulette.domain.history.entities import DailyHistory, HistoryMap, MealSlot
from food_roulette.domain.history.exceptions import InvalidHistoryDataError
from food_roulette.domain.history.store import (
    delete_entry,
    import_merge,
    parse_history,
    sorted_dates,
)
from food_roulette.domain.roulette import state as reducer
from food_roulette.domain.roulette.core.food_item import INITIAL_FOODS, FoodItem
from food_roulette.domain.roulette.state import AppState
from food_roulette.domain.shared.ports.history_repository import IHistoryRepository
from food_roulette.domain.suggestion.services.suggestion_service import (
    DEFAULT_THEME,
    FoodSuggestionService,
    SuggestionResult,
)
from food_roulette.domain.wheel.geometry import (
    DEFAULT_WHEEL_SIZE,
    SliceGeometry,
    build_slices,
)
from food_roulette.domain.wheel.resolver import winner_index
from food_roulette.domain.wheel.spin_policy import SpinPolicy
from food_roulette.infrastructure.export.history_file import (
    read_import_file,
    write_export_file,
)

logger = logging.getLogger(__name__)

DEFAULT_SPIN_DURATION_S = 4.0


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


@dataclass(frozen=True)
class SpinOutcome:
    """
    Result of a completed spin.

    Attributes:
        winner: Item under the pointer
        winner_index: Position of the winner on the wheel
        rotation: Cumulative rotation the wheel stopped at
        meal_slot: Slot the result was recorded into
        date: Day key the result was recorded into
    """

    winner: FoodItem
    winner_index: int
    rotation: float
    meal_slot: MealSlot
    date: str


class RouletteOrchestrator:
    """
    Orchestrate one local roulette session.

    All state lives in an immutable AppState replaced on every action. Runs on
    a single event loop: the SPINNING and loading guards are checked and set
    with no ``await`` in between, so overlapping requests are rejected rather
    than interleaved.

    Example:
        >>> orchestrator = RouletteOrchestrator(
        ...     repository=StorageHistoryRepository(InMemoryStorage()),
        ...     suggestion_service=FoodSuggestionService(provider=None),
        ...     rng=random.Random(42),
        ...     spin_duration_s=0,
        ... )
        >>> outcome = await orchestrator.spin()
        >>> outcome.meal_slot
        <MealSlot.DINNER: 'dinner'>
    """

    def __init__(
        self,
        repository: IHistoryRepository,
        suggestion_service: FoodSuggestionService,
        rng: Optional[random.Random] = None,
        spin_policy: Optional[SpinPolicy] = None,
        spin_duration_s: float = DEFAULT_SPIN_DURATION_S,
        clock: Callable[[], date] = utc_today,
        initial_items: Sequence[str] = INITIAL_FOODS,
        default_theme: str = DEFAULT_THEME,
    ):
        """
        Initialize orchestrator and load persisted history.

        Args:
            repository: History persistence port
            suggestion_service: Never-failing dish suggestion service
            rng: Random source for spins (seed it for deterministic sessions)
            spin_policy: Full turns added per spin
            spin_duration_s: Seconds between spin start and winner resolution
            clock: Returns today's date; history is keyed by it
            initial_items: Dishes on the wheel at startup
            default_theme: Theme used when suggest_items() gets none
        """
        self._repository = repository
        self._suggestions = suggestion_service
        self._rng = rng or random.Random()
        self._spin_policy = spin_policy or SpinPolicy()
        self._spin_duration_s = spin_duration_s
        self._clock = clock
        self._default_theme = default_theme
        self._state = reducer.initial_state(initial_items, repository.load())

        logger.info(
            "Roulette session started",
            extra={
                "items": len(self._state.items),
                "history_days": len(self._state.history),
            },
        )

    @property
    def state(self) -> AppState:
        return self._state

    def today_key(self) -> str:
        return self._clock().isoformat()

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------

    def add_item(self, name: str) -> FoodItem:
        """
        Add a dish to the wheel.

        Raises:
            InvalidItemNameError: If the name is blank
        """
        self._state = reducer.add_item(self._state, name)
        item = self._state.items[-1]
        logger.info("Item added", extra={"item_id": item.id, "item_name": item.name})
        return item

    def delete_item(self, item_id: str) -> None:
        """
        Remove a dish from the wheel.

        Raises:
            NotEnoughItemsError: If only two items are left
            ItemNotFoundError: If the id is unknown
        """
        self._state = reducer.delete_item(self._state, item_id)
        logger.info("Item deleted", extra={"item_id": item_id})

    def select_meal(self, slot: MealSlot) -> None:
        self._state = reducer.select_meal(self._state, slot)

    def wheel_slices(self, size: int = DEFAULT_WHEEL_SIZE) -> List[SliceGeometry]:
        return build_slices(len(self._state.items), size)

    # ------------------------------------------------------------------
    # Spin
    # ------------------------------------------------------------------

    async def spin(self) -> Optional[SpinOutcome]:
        """
        Spin the wheel and record the winner for the selected meal.

        Flow:
        1. Reject if already spinning (returns None, nothing changes)
        2. Draw the new rotation and enter SPINNING
        3. Wait for the spin duration
        4. Resolve the winner against the items on the wheel at step 2
        5. Record into today's entry, enter FINISHED, persist history

        Returns:
            SpinOutcome, or None when a spin was already in progress

        Raises:
            NotEnoughItemsError: If fewer than two items are on the wheel
        """
        if self._state.is_spinning:
            logger.info("Spin ignored, wheel already spinning")
            return None

        rotation = self._spin_policy.next_rotation(self._state.rotation, self._rng)
        self._state = reducer.start_spin(self._state, rotation)
        items = self._state.items
        slot = self._state.selected_meal

        logger.info(
            "Spin started",
            extra={"rotation": rotation, "items": len(items), "meal": slot.value},
        )

        try:
            await asyncio.sleep(self._spin_duration_s)
        finally:
            # Once started a spin always completes, even if the waiter is cancelled.
            outcome = self._finish_spin(items, slot)
        return outcome

    def _finish_spin(self, items: Sequence[FoodItem], slot: MealSlot) -> SpinOutcome:
        today = self.today_key()
        self._state = reducer.complete_spin(self._state, items, slot, today)
        self._repository.save(self._state.history)

        index = winner_index(self._state.rotation, len(items))
        winner = items[index]
        logger.info(
            "Spin finished",
            extra={
                "winner": winner.name,
                "winner_index": index,
                "meal": slot.value,
                "date": today,
            },
        )
        return SpinOutcome(
            winner=winner,
            winner_index=index,
            rotation=self._state.rotation,
            meal_slot=slot,
            date=today,
        )

    # ------------------------------------------------------------------
    # Suggestions
    # ------------------------------------------------------------------

    async def suggest_items(self, theme: Optional[str] = None) -> Optional[SuggestionResult]:
        """
        Replace the wheel items with AI suggestions (or the fallback list).

        Returns:
            SuggestionResult, or None when a fetch was already outstanding
        """
        if self._state.loading_suggestions:
            logger.info("Suggestion request ignored, fetch already in progress")
            return None

        self._state = reducer.begin_suggestions(self._state)
        try:
            result = await self._suggestions.fetch_suggestions(theme or self._default_theme)
        finally:
            self._state = reducer.end_suggestions(self._state)
        self._state = reducer.replace_items(self._state, result.items)

        logger.info(
            "Items replaced by suggestions",
            extra={"count": len(result.items), "is_fallback": result.is_fallback},
        )
        return result

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def today_history(self) -> DailyHistory:
        return self._state.day(self.today_key())

    def history_entries(self) -> List[DailyHistory]:
        """All days, most recent first."""
        history = self._state.history
        return [history[key] for key in sorted_dates(history)]

    def _replace_history(self, history: HistoryMap) -> None:
        self._state = reducer.set_history(self._state, history)
        self._repository.save(history)

    def delete_history_entry(self, date_key: str) -> bool:
        """
        Delete one day. Confirmation is the caller's job.

        Returns:
            True if the day existed
        """
        if date_key not in self._state.history:
            logger.info("History entry not found", extra={"date": date_key})
            return False
        self._replace_history(delete_entry(self._state.history, date_key))
        logger.info("History entry deleted", extra={"date": date_key})
        return True

    def import_history(self, raw: str) -> List[str]:
        """
        Merge an exported history document into the session.

        Days in the document replace local days with the same date as a whole.

        Args:
            raw: JSON text of an export file

        Returns:
            Imported dates, most recent first

        Raises:
            InvalidHistoryDataError: If the document is malformed (nothing changes)
        """
        incoming = parse_history(raw)
        self._replace_history(import_merge(self._state.history, incoming))
        logger.info(
            "History imported",
            extra={"imported_days": len(incoming), "total_days": len(self._state.history)},
        )
        return sorted_dates(incoming)

    def import_history_file(self, path: Union[str, Path]) -> List[str]:
        """
        Merge an export file from disk, see import_history().

        Raises:
            InvalidHistoryDataError: If the file is not a valid history document
            OSError: If the file cannot be read
        """
        try:
            raw = read_import_file(path)
        except UnicodeDecodeError as exc:
            raise InvalidHistoryDataError(f"Import file is not UTF-8 text: {exc}") from exc
        return self.import_history(raw)

    def export_history(self) -> HistoryExport:
        return build_export(self._state.history, self.today_key())

    def write_export(self, directory: Union[str, Path]) -> Path:
        """Write the export file into ``directory`` and return its path."""
        export = self.export_history()
        return write_export_file(directory, export.filename, export.content)
