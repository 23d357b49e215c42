from food_roulette.infrastructure.persistence.in_memory.storage import InMemoryStorage

__all__ = ["InMemoryStorage"]
