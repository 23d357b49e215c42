"""Wheel geometry, outcome resolution and spin policy."""

from food_roulette.domain.wheel.geometry import (
    SliceGeometry,
    build_slices,
    label_font_size,
    point_on_circle,
    slice_angle,
)
from food_roulette.domain.wheel.resolver import winner_index
from food_roulette.domain.wheel.spin_policy import SpinPolicy

__all__ = [
    "SliceGeometry",
    "SpinPolicy",
    "build_slices",
    "label_font_size",
    "point_on_circle",
    "slice_angle",
    "winner_index",
]
