"""Query resolvers for the roulette session and its history."""

from typing import List

import strawberry

from food_roulette.application.roulette.orchestrator import RouletteOrchestrator
from food_roulette.domain.wheel.geometry import DEFAULT_WHEEL_SIZE, label_font_size
from food_roulette.graphql.types import (
    DailyHistory,
    FoodItem,
    HistoryExport,
    Session,
    Wheel,
    WheelSlice,
)


def orchestrator_from(info: strawberry.types.Info) -> RouletteOrchestrator:
    orchestrator = info.context.get("orchestrator")
    if orchestrator is None:
        raise RuntimeError("Roulette session not available in context")
    return orchestrator


@strawberry.type
class RouletteQueries:
    """Read-only view of the wheel and the session."""

    @strawberry.field
    def items(self, info: strawberry.types.Info) -> List[FoodItem]:
        return [FoodItem.from_domain(item) for item in orchestrator_from(info).state.items]

    @strawberry.field
    def session(self, info: strawberry.types.Info) -> Session:
        orchestrator = orchestrator_from(info)
        state = orchestrator.state
        return Session(
            game_state=state.game_state,
            rotation=state.rotation,
            selected_meal=state.selected_meal,
            selected_meal_label=state.selected_meal.label,
            winner=FoodItem.from_domain(state.winner) if state.winner else None,
            loading_suggestions=state.loading_suggestions,
            today=orchestrator.today_key(),
            item_count=len(state.items),
        )

    @strawberry.field(description="Slice geometry for drawing the wheel")
    def wheel(self, info: strawberry.types.Info, size: int = DEFAULT_WHEEL_SIZE) -> Wheel:
        """Wheel drawing data.

        Example:
            query {
              roulette {
                wheel(size: 300) { fontSize slices { pathData item { name color } } }
              }
            }
        """
        orchestrator = orchestrator_from(info)
        items = orchestrator.state.items
        slices = orchestrator.wheel_slices(size) if items else []
        return Wheel(
            size=size,
            font_size=label_font_size(len(items)),
            slices=[WheelSlice.from_domain(geometry, item) for geometry, item in zip(slices, items)],
        )


@strawberry.type
class HistoryQueries:
    """Daily meal history."""

    @strawberry.field
    def today(self, info: strawberry.types.Info) -> DailyHistory:
        orchestrator = orchestrator_from(info)
        return DailyHistory.from_domain(orchestrator.today_history(), orchestrator.today_key())

    @strawberry.field(description="All recorded days, most recent first")
    def entries(self, info: strawberry.types.Info) -> List[DailyHistory]:
        orchestrator = orchestrator_from(info)
        today = orchestrator.today_key()
        return [DailyHistory.from_domain(day, today) for day in orchestrator.history_entries()]

    @strawberry.field(description="Full history as a downloadable JSON document")
    def export(self, info: strawberry.types.Info) -> HistoryExport:
        return HistoryExport.from_domain(orchestrator_from(info).export_history())
