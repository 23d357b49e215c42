"""Mutation resolvers for the roulette session and its history.

Domain errors come back as ``OperationError`` members of the result unions
(user-facing message plus a stable code); the session is left unchanged.
"""

import logging
from typing import Optional

import strawberry

from food_roulette.domain.history.exceptions import InvalidHistoryDataError
from food_roulette.domain.roulette.core.exceptions import (
    InvalidGameStateTransitionError,
    InvalidItemNameError,
    ItemNotFoundError,
    NotEnoughItemsError,
    RouletteDomainError,
)
from food_roulette.graphql.resolvers.queries import orchestrator_from
from food_roulette.graphql.types import (
    DeleteHistoryResult,
    DeleteHistorySuccess,
    FoodItem,
    ImportHistoryResult,
    ImportHistorySuccess,
    ItemsPayload,
    ItemsResult,
    MealSlot,
    OperationError,
    SpinResult,
    SpinSuccess,
    SuggestionOutcome,
    SuggestionPayload,
)

logger = logging.getLogger(__name__)

_ERROR_CODES = {
    InvalidItemNameError: "INVALID_NAME",
    ItemNotFoundError: "NOT_FOUND",
    NotEnoughItemsError: "NOT_ENOUGH_ITEMS",
    InvalidGameStateTransitionError: "INVALID_STATE",
}


def _domain_error(exc: RouletteDomainError) -> OperationError:
    return OperationError(
        message=exc.user_message,
        code=_ERROR_CODES.get(type(exc), "DOMAIN_ERROR"),
    )


def _items_payload(info: strawberry.types.Info) -> ItemsPayload:
    items = orchestrator_from(info).state.items
    return ItemsPayload(items=[FoodItem.from_domain(item) for item in items])


@strawberry.type
class RouletteMutations:
    """Mutations on the wheel."""

    @strawberry.mutation
    def add_item(self, info: strawberry.types.Info, name: str) -> ItemsResult:
        try:
            orchestrator_from(info).add_item(name)
        except RouletteDomainError as e:
            return _domain_error(e)
        return _items_payload(info)

    @strawberry.mutation
    def delete_item(self, info: strawberry.types.Info, id: strawberry.ID) -> ItemsResult:
        try:
            orchestrator_from(info).delete_item(str(id))
        except RouletteDomainError as e:
            return _domain_error(e)
        return _items_payload(info)

    @strawberry.mutation
    def select_meal(self, info: strawberry.types.Info, meal: MealSlot) -> MealSlot:
        orchestrator_from(info).select_meal(meal)
        return meal

    @strawberry.mutation
    async def spin(self, info: strawberry.types.Info) -> SpinResult:
        """Spin the wheel; resolves once the spin animation time has elapsed.

        Example:
            mutation {
              roulette {
                spin {
                  ... on SpinSuccess { winner { name } mealSlot date }
                  ... on OperationError { message code }
                }
              }
            }
        """
        try:
            outcome = await orchestrator_from(info).spin()
        except RouletteDomainError as e:
            return _domain_error(e)

        if outcome is None:
            return OperationError(message="轉盤正在旋轉中", code="ALREADY_SPINNING")
        return SpinSuccess.from_domain(outcome)

    @strawberry.mutation
    async def suggest_items(
        self, info: strawberry.types.Info, theme: Optional[str] = None
    ) -> SuggestionOutcome:
        """Replace the items with AI suggestions (fallback list when unavailable)."""
        orchestrator = orchestrator_from(info)
        result = await orchestrator.suggest_items(theme)
        if result is None:
            return OperationError(message="正在生成推薦...", code="ALREADY_LOADING")
        return SuggestionPayload.from_domain(result, list(orchestrator.state.items))


@strawberry.type
class HistoryMutations:
    """Mutations on the daily history. Confirmation dialogs are client-side."""

    @strawberry.mutation
    def delete_entry(self, info: strawberry.types.Info, date: str) -> DeleteHistoryResult:
        deleted = orchestrator_from(info).delete_history_entry(date)
        return DeleteHistorySuccess(date=date, deleted=deleted)

    @strawberry.mutation(description="Merge an exported history document; whole days are replaced")
    def import_entries(self, info: strawberry.types.Info, content: str) -> ImportHistoryResult:
        orchestrator = orchestrator_from(info)
        try:
            imported = orchestrator.import_history(content)
        except InvalidHistoryDataError as e:
            logger.warning("History import rejected", extra={"error": str(e)})
            return OperationError(message=e.user_message, code="INVALID_FORMAT")
        return ImportHistorySuccess(
            imported_dates=imported,
            total_days=len(orchestrator.state.history),
        )
