"""Pydantic models for OpenAI structured outputs.

Used with chat.completions.parse() for native Pydantic support.
"""

from typing import List

from pydantic import BaseModel, Field


class FoodSuggestionsResponse(BaseModel):
    """
    Root model for the dish suggestion structured output.

    Maps to the plain list of names returned by ISuggestionProvider.
    """

    suggestions: List[str] = Field(
        default_factory=list,
        description="Dish names in Traditional Chinese (e.g., '牛肉麵')",
    )
