from food_roulette.infrastructure.suggestion.providers.factory import (
    create_suggestion_provider,
    create_suggestion_service,
)
from food_roulette.infrastructure.suggestion.providers.stub_suggestion_provider import (
    StubSuggestionProvider,
)

__all__ = [
    "StubSuggestionProvider",
    "create_suggestion_provider",
    "create_suggestion_service",
]
