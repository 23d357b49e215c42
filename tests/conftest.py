"""Shared test fixtures.

Every fixture builds an isolated session over in-memory storage with a seeded
random source and no spin delay, so spins are deterministic and instant.
"""

import random
from datetime import date
from typing import Callable, Optional, Sequence

import pytest

from food_roulette.application.roulette.orchestrator import RouletteOrchestrator
from food_roulette.domain.suggestion.ports.suggestion_provider import ISuggestionProvider
from food_roulette.domain.suggestion.services.suggestion_service import (
    FoodSuggestionService,
)
from food_roulette.infrastructure.persistence.history_repository import (
    StorageHistoryRepository,
)
from food_roulette.infrastructure.persistence.in_memory.storage import InMemoryStorage

TODAY = date(2024, 1, 1)


@pytest.fixture
def storage() -> InMemoryStorage:
    """Fixture providing clean InMemoryStorage."""
    return InMemoryStorage()


@pytest.fixture
def repository(storage: InMemoryStorage) -> StorageHistoryRepository:
    return StorageHistoryRepository(storage)


@pytest.fixture
def make_orchestrator(
    repository: StorageHistoryRepository,
) -> Callable[..., RouletteOrchestrator]:
    """Factory fixture for orchestrators sharing the test repository."""

    def _make(
        items: Sequence[str] = ("A", "B", "C", "D"),
        provider: Optional[ISuggestionProvider] = None,
        seed: int = 1234,
        spin_duration_s: float = 0,
    ) -> RouletteOrchestrator:
        return RouletteOrchestrator(
            repository=repository,
            suggestion_service=FoodSuggestionService(provider=provider),
            rng=random.Random(seed),
            spin_duration_s=spin_duration_s,
            clock=lambda: TODAY,
            initial_items=items,
        )

    return _make


@pytest.fixture
def orchestrator(make_orchestrator: Callable[..., RouletteOrchestrator]) -> RouletteOrchestrator:
    return make_orchestrator()
