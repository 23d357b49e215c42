from food_roulette.domain.suggestion.ports.suggestion_provider import ISuggestionProvider

__all__ = ["ISuggestionProvider"]
