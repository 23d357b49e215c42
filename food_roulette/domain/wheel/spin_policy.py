"""Spin trigger policy: how far the wheel turns on each spin."""

import random
from dataclasses import dataclass

DEFAULT_MIN_FULL_TURNS = 10


@dataclass(frozen=True)
class SpinPolicy:
    """
    Value object describing how much rotation a spin adds.

    Each spin adds ``360 * min_full_turns`` degrees for the visual effect plus
    a uniformly random extra in ``[0, 360)`` that decides the outcome.

    Attributes:
        min_full_turns: Full turns added before the random extra (>= 1)

    Example:
        >>> policy = SpinPolicy(min_full_turns=10)
        >>> rng = random.Random(7)
        >>> policy.next_rotation(0, rng) >= 3600
        True
    """

    min_full_turns: int = DEFAULT_MIN_FULL_TURNS

    def __post_init__(self) -> None:
        if self.min_full_turns < 1:
            raise ValueError(
                f"min_full_turns must be at least 1, got {self.min_full_turns}"
            )

    def extra_degrees(self, rng: random.Random) -> int:
        return rng.randrange(360)

    def next_rotation(self, current: float, rng: random.Random) -> float:
        """Cumulative rotation after one more spin from ``current``."""
        return current + 360 * self.min_full_turns + self.extra_degrees(rng)
