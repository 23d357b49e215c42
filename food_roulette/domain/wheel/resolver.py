"""Outcome resolver.

Reads the wheel against the fixed pointer at 12 o'clock. Pure function of the
cumulative rotation and the item count, so spins can be tested without any
animation timing.
"""

import math

from food_roulette.domain.wheel.geometry import slice_angle


def winner_index(rotation: float, count: int) -> int:
    """
    Index of the slice under the pointer after the wheel rotated ``rotation``.

    The wheel turns clockwise while the pointer stays still, so the pointer
    reads the angle ``360 - rotation`` on the unrotated wheel.

    Args:
        rotation: Cumulative rotation in degrees (unbounded, usually growing)
        count: Number of items on the wheel

    Returns:
        Winning index in ``[0, count - 1]``

    Raises:
        ValueError: If count is lower than 1

    Example:
        >>> winner_index(30, 4)
        3
        >>> winner_index(0, 4)
        0
    """
    per_slice = slice_angle(count)
    normalized = rotation % 360
    pointer_angle = (360 - normalized) % 360
    index = math.floor(pointer_angle / per_slice)
    # Float error can push pointer_angle to exactly 360.
    return max(0, min(count - 1, index))
