from food_roulette.infrastructure.ai.prompts.food_suggestion import (
    FOOD_SUGGESTION_SYSTEM_PROMPT,
    SUGGESTION_COUNT,
    build_suggestion_prompt,
)

__all__ = [
    "FOOD_SUGGESTION_SYSTEM_PROMPT",
    "SUGGESTION_COUNT",
    "build_suggestion_prompt",
]
