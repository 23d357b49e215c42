"""OpenAI suggestion client - implements ISuggestionProvider port.

Key Features:
- Structured outputs (native Pydantic support)
- Circuit breaker (5 failures -> 60s open)
- Retry logic (exponential backoff on transient errors)
"""

# mypy: warn-unused-ignores=False

import logging
import time
from typing import Any, Dict, List

from circuitbreaker import circuit
from openai import APIError, AsyncOpenAI
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from food_roulette.infrastructure.ai.openai.models import FoodSuggestionsResponse
from food_roulette.infrastructure.ai.prompts.food_suggestion import (
    FOOD_SUGGESTION_SYSTEM_PROMPT,
    build_suggestion_prompt,
)

logger = logging.getLogger(__name__)


class OpenAISuggestionClient:
    """
    OpenAI chat client implementing ISuggestionProvider port.

    Domain defines ISuggestionProvider (port); this adapter fulfils it with a
    structured-output chat completion. Errors propagate: the domain
    FoodSuggestionService turns them into the fallback list.

    Example:
        >>> client = OpenAISuggestionClient(api_key="sk-...")
        >>> await client.suggest_foods("日式料理")
        ['拉麵', '壽司', '丼飯', '烏龍麵', '天婦羅', '咖哩飯']
    """

    def __init__(
        self,
        api_key: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.8,
    ):
        """
        Initialize OpenAI client.

        Args:
            api_key: OpenAI API key
            model: Model name supporting structured outputs
            temperature: Sampling temperature (higher for more varied menus)
        """
        self._client = AsyncOpenAI(api_key=api_key)
        self._model = model
        self._temperature = temperature

    async def __aenter__(self) -> "OpenAISuggestionClient":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self._client.close()

    @circuit(failure_threshold=5, recovery_timeout=60, name="openai_suggestions")  # type: ignore[misc]
    @retry(  # type: ignore[misc]
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type((TimeoutError, ConnectionError, APIError)),
        reraise=True,
    )
    async def suggest_foods(self, theme: str) -> List[str]:
        """
        Ask the model for dishes matching ``theme``.

        Implements ISuggestionProvider.suggest_foods() port.

        Args:
            theme: Free-text theme (e.g., "台灣在地美食")

        Returns:
            Dish names as returned by the model

        Raises:
            APIError: On OpenAI API failures
            ValueError: On empty or unparsable responses
        """
        start_time = time.time()

        logger.info(
            "Requesting food suggestions",
            extra={"theme": theme, "model": self._model},
        )

        response = await self._structured_completion(
            messages=[{"role": "user", "content": build_suggestion_prompt(theme)}],
        )

        processing_time_ms = int((time.time() - start_time) * 1000)
        logger.info(
            "Food suggestions received",
            extra={
                "count": len(response.suggestions),
                "processing_time_ms": processing_time_ms,
            },
        )
        return list(response.suggestions)

    async def _structured_completion(
        self,
        messages: List[Dict[str, Any]],
    ) -> FoodSuggestionsResponse:
        """
        Execute completion parsed into FoodSuggestionsResponse.

        Raises:
            APIError: On API failures
            ValueError: When the model returns no parsed content
        """
        full_messages = [
            {"role": "system", "content": FOOD_SUGGESTION_SYSTEM_PROMPT},
            *messages,
        ]

        response = await self._client.chat.completions.parse(
            model=self._model,
            messages=full_messages,  # type: ignore[arg-type]
            response_format=FoodSuggestionsResponse,
            temperature=self._temperature,
        )

        usage = response.usage
        if usage:
            logger.debug(
                "OpenAI response received",
                extra={
                    "model": self._model,
                    "total_tokens": usage.total_tokens,
                    "prompt_tokens": usage.prompt_tokens,
                    "completion_tokens": usage.completion_tokens,
                },
            )

        parsed = response.choices[0].message.parsed
        if not parsed:
            raise ValueError("OpenAI returned empty parsed response")
        return parsed
