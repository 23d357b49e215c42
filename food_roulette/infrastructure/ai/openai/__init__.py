from food_roulette.infrastructure.ai.openai.client import OpenAISuggestionClient
from food_roulette.infrastructure.ai.openai.models import FoodSuggestionsResponse

__all__ = ["FoodSuggestionsResponse", "OpenAISuggestionClient"]
