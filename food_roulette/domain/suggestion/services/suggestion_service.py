"""Food suggestion service.

Wraps an optional ISuggestionProvider and guarantees a usable list of dishes:
any missing credential, provider failure or malformed answer degrades to a
static fallback list instead of an error.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from food_roulette.domain.roulette.core.food_item import MIN_ITEMS_TO_SPIN
from food_roulette.domain.suggestion.ports.suggestion_provider import ISuggestionProvider

logger = logging.getLogger(__name__)

DEFAULT_THEME = "台灣在地美食"

FALLBACK_SUGGESTIONS: Tuple[str, ...] = (
    "便當",
    "雞排",
    "牛肉麵",
    "水餃",
    "咖哩飯",
    "炒飯",
)


@dataclass(frozen=True)
class SuggestionResult:
    """
    Outcome of a suggestion fetch.

    Attributes:
        items: Dish names to put on the wheel (always at least two)
        is_fallback: True when the static fallback list was used
        reason: Why the fallback was used (None for provider results)
    """

    items: Tuple[str, ...]
    is_fallback: bool = False
    reason: Optional[str] = None


def _clean(names: Sequence[object]) -> List[str]:
    seen = set()
    cleaned: List[str] = []
    for name in names:
        if not isinstance(name, str):
            continue
        stripped = name.strip()
        if stripped and stripped not in seen:
            seen.add(stripped)
            cleaned.append(stripped)
    return cleaned


class FoodSuggestionService:
    """
    Domain service returning dish suggestions that never raises.

    Example:
        >>> service = FoodSuggestionService(provider=None)
        >>> result = await service.fetch_suggestions()
        >>> result.is_fallback
        True
    """

    def __init__(
        self,
        provider: Optional[ISuggestionProvider],
        fallback: Sequence[str] = FALLBACK_SUGGESTIONS,
    ):
        """
        Initialize service.

        Args:
            provider: Suggestion provider, or None when no credential is configured
            fallback: Dishes returned whenever the provider cannot be used

        Raises:
            ValueError: If the fallback has fewer than MIN_ITEMS_TO_SPIN usable names
        """
        cleaned = _clean(fallback)
        if len(cleaned) < MIN_ITEMS_TO_SPIN:
            raise ValueError(
                f"Fallback needs at least {MIN_ITEMS_TO_SPIN} dishes, got {len(cleaned)}"
            )
        self._provider = provider
        self._fallback = tuple(cleaned)

    @property
    def has_provider(self) -> bool:
        return self._provider is not None

    def _fallback_result(self, reason: str) -> SuggestionResult:
        return SuggestionResult(items=self._fallback, is_fallback=True, reason=reason)

    async def fetch_suggestions(self, theme: str = DEFAULT_THEME) -> SuggestionResult:
        """
        Fetch dish suggestions for ``theme``.

        Args:
            theme: Free-text theme forwarded to the provider

        Returns:
            SuggestionResult; the fallback list on any failure
        """
        if self._provider is None:
            logger.warning(
                "No suggestion provider configured, using fallback list",
                extra={"theme": theme},
            )
            return self._fallback_result("provider_unavailable")

        try:
            names = await self._provider.suggest_foods(theme)
        except Exception as exc:
            logger.error(
                "Suggestion provider failed, using fallback list",
                extra={
                    "theme": theme,
                    "provider": type(self._provider).__name__,
                    "error": str(exc),
                },
            )
            return self._fallback_result("provider_error")

        if not isinstance(names, (list, tuple)):
            logger.warning(
                "Suggestion provider returned unexpected type",
                extra={"type": type(names).__name__},
            )
            return self._fallback_result("invalid_response")

        cleaned = _clean(names)
        if len(cleaned) < MIN_ITEMS_TO_SPIN:
            logger.warning(
                "Suggestion provider returned too few items",
                extra={"theme": theme, "count": len(cleaned)},
            )
            return self._fallback_result("invalid_response")

        logger.info(
            "Suggestions received",
            extra={"theme": theme, "count": len(cleaned)},
        )
        return SuggestionResult(items=tuple(cleaned))
