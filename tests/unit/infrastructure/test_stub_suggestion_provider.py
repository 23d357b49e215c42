"""
Unit tests for StubSuggestionProvider.
"""

import pytest

from food_roulette.infrastructure.suggestion.providers.stub_suggestion_provider import (
    StubSuggestionProvider,
)


class TestStubSuggestionProvider:
    """Test suite for StubSuggestionProvider."""

    @pytest.mark.asyncio
    async def test_themed_list(self) -> None:
        """Test keyword themes get their own list."""
        result = await StubSuggestionProvider().suggest_foods("想吃日式料理")

        assert result[0] == "拉麵"

    @pytest.mark.asyncio
    async def test_default_list(self) -> None:
        """Test unknown themes get Taiwanese street food."""
        result = await StubSuggestionProvider().suggest_foods("台灣在地美食")

        assert "滷肉飯" in result
        assert len(result) == 6

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        """Test lifespan compatibility."""
        async with StubSuggestionProvider() as provider:
            assert await provider.suggest_foods("早餐")
