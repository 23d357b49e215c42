from food_roulette.application.roulette.orchestrator import (
    RouletteOrchestrator,
    SpinOutcome,
    utc_today,
)

__all__ = ["RouletteOrchestrator", "SpinOutcome", "utc_today"]
