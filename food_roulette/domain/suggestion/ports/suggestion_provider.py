"""Port (interface) for food suggestion providers.

External AI services implement this contract so the domain never depends on a
concrete vendor SDK.
"""

from typing import List, Protocol


class ISuggestionProvider(Protocol):
    """
    Interface for food suggestion providers.

    Implementations can be:
    - OpenAI chat completion with structured output
    - Stub provider (development and tests)
    """

    async def suggest_foods(self, theme: str) -> List[str]:
        """
        Suggest dish names for a free-text theme.

        Args:
            theme: Theme of the suggestions (e.g., "台灣在地美食", "日式料理")

        Returns:
            Dish names, around six of them

        Raises:
            Exception: Implementation-specific errors (network, API, parsing, etc.)
        """
        ...
