from food_roulette.domain.suggestion.services.suggestion_service import (
    DEFAULT_THEME,
    FALLBACK_SUGGESTIONS,
    FoodSuggestionService,
    SuggestionResult,
)

__all__ = [
    "DEFAULT_THEME",
    "FALLBACK_SUGGESTIONS",
    "FoodSuggestionService",
    "SuggestionResult",
]
