"""
Unit tests for FoodSuggestionService.

The service never raises: every failure ends in the fallback list.
"""

from typing import Any
from unittest.mock import AsyncMock

import pytest

from food_roulette.domain.suggestion.services.suggestion_service import (
    FALLBACK_SUGGESTIONS,
    FoodSuggestionService,
)


@pytest.fixture
def mock_provider() -> AsyncMock:
    """Mock ISuggestionProvider."""
    provider = AsyncMock()
    provider.suggest_foods = AsyncMock(return_value=["拉麵", "壽司", "丼飯"])
    return provider


class TestFoodSuggestionService:
    """Test suite for FoodSuggestionService."""

    @pytest.mark.asyncio
    async def test_provider_result_used(self, mock_provider: AsyncMock) -> None:
        """Test provider names are returned as is."""
        service = FoodSuggestionService(provider=mock_provider)

        result = await service.fetch_suggestions("日式料理")

        assert result.items == ("拉麵", "壽司", "丼飯")
        assert result.is_fallback is False
        assert result.reason is None
        mock_provider.suggest_foods.assert_awaited_once_with("日式料理")

    @pytest.mark.asyncio
    async def test_no_provider_uses_fallback(self) -> None:
        """Test missing credential degrades to the fallback list."""
        service = FoodSuggestionService(provider=None)

        result = await service.fetch_suggestions()

        assert service.has_provider is False
        assert result.items == FALLBACK_SUGGESTIONS
        assert result.is_fallback is True
        assert result.reason == "provider_unavailable"

    @pytest.mark.asyncio
    async def test_provider_error_uses_fallback(self, mock_provider: AsyncMock) -> None:
        """Test provider exceptions never escape."""
        mock_provider.suggest_foods.side_effect = RuntimeError("network down")
        service = FoodSuggestionService(provider=mock_provider)

        result = await service.fetch_suggestions()

        assert result.items == FALLBACK_SUGGESTIONS
        assert result.reason == "provider_error"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            "拉麵, 壽司",
            None,
            [],
            ["拉麵"],
            ["拉麵", "  拉麵 ", ""],
            [1, 2, 3],
        ],
    )
    async def test_unusable_response_uses_fallback(
        self, mock_provider: AsyncMock, response: Any
    ) -> None:
        """Test non-lists and lists with fewer than two names are rejected."""
        mock_provider.suggest_foods.return_value = response
        service = FoodSuggestionService(provider=mock_provider)

        result = await service.fetch_suggestions()

        assert result.is_fallback is True
        assert result.reason == "invalid_response"

    @pytest.mark.asyncio
    async def test_names_are_cleaned(self, mock_provider: AsyncMock) -> None:
        """Test names are stripped and de-duplicated in order."""
        mock_provider.suggest_foods.return_value = [" 拉麵", "壽司", "拉麵", "", 7, "丼飯 "]
        service = FoodSuggestionService(provider=mock_provider)

        result = await service.fetch_suggestions()

        assert result.items == ("拉麵", "壽司", "丼飯")

    @pytest.mark.asyncio
    async def test_custom_fallback(self) -> None:
        """Test an injected fallback list."""
        service = FoodSuggestionService(provider=None, fallback=["A", "B"])

        result = await service.fetch_suggestions()

        assert result.items == ("A", "B")

    @pytest.mark.parametrize("fallback", [(), ("only",), ("A", " A ", "")])
    def test_short_fallback_rejected(self, fallback: Any) -> None:
        """Test the fallback must fill a spinnable wheel."""
        with pytest.raises(ValueError, match="at least 2"):
            FoodSuggestionService(provider=None, fallback=fallback)
