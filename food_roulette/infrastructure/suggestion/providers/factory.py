"""Provider Factory for food suggestions.

Environment-based provider selection with graceful fallback.
Strategy:
- .env (runtime): SUGGESTION_PROVIDER=openai + OPENAI_API_KEY
- tests / offline development: SUGGESTION_PROVIDER=stub
- SUGGESTION_PROVIDER=none, or openai without a key: no provider, the
  suggestion service answers with its static fallback list and never calls out

Usage:
    from food_roulette.infrastructure.suggestion.providers.factory import (
        create_suggestion_provider,
    )

    provider = create_suggestion_provider()  # None, stub or OpenAI
"""

import logging
from typing import Optional

from food_roulette.domain.suggestion.ports.suggestion_provider import ISuggestionProvider
from food_roulette.domain.suggestion.services.suggestion_service import (
    FoodSuggestionService,
)
from food_roulette.infrastructure.ai.openai.client import OpenAISuggestionClient
from food_roulette.infrastructure.config import (
    get_openai_api_key,
    get_suggestion_model,
    get_suggestion_provider_mode,
)
from food_roulette.infrastructure.suggestion.providers.stub_suggestion_provider import (
    StubSuggestionProvider,
)

logger = logging.getLogger(__name__)


def create_suggestion_provider() -> Optional[ISuggestionProvider]:
    """Create suggestion provider based on SUGGESTION_PROVIDER env var.

    Environment variable: SUGGESTION_PROVIDER
    Values:
        - "openai": OpenAI chat completion (default, requires OPENAI_API_KEY)
        - "stub": Stub provider
        - "none": No provider

    Returns:
        Provider instance, or None when suggestions must come from the fallback
        list

    Raises:
        ValueError: If SUGGESTION_PROVIDER has an unknown value
    """
    mode = get_suggestion_provider_mode()

    if mode == "stub":
        return StubSuggestionProvider()

    if mode == "none":
        return None

    if mode == "openai":
        api_key = get_openai_api_key()
        if not api_key:
            logger.warning(
                "SUGGESTION_PROVIDER=openai but OPENAI_API_KEY not set, "
                "suggestions will use the fallback list"
            )
            return None
        return OpenAISuggestionClient(api_key=api_key, model=get_suggestion_model())

    raise ValueError(
        f"Unknown SUGGESTION_PROVIDER={mode!r}. Use openai, stub or none"
    )


def create_suggestion_service(
    provider: Optional[ISuggestionProvider] = None,
) -> FoodSuggestionService:
    return FoodSuggestionService(provider=provider)
