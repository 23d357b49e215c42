"""Wheel geometry.

Converts an item count into slice angles, SVG arc paths and label anchors.
Angles are in degrees, measured clockwise from 12 o'clock (angle 0 points up).
"""

import math
from dataclasses import dataclass
from typing import List, Tuple

DEFAULT_WHEEL_SIZE = 300
RIM_MARGIN = 10
LABEL_RADIUS_DIVISOR = 1.6
DENSE_WHEEL_THRESHOLD = 8


@dataclass(frozen=True)
class SliceGeometry:
    """Drawing data for one slice of the wheel.

    Attributes:
        index: Position of the slice (same as the item position).
        start_angle: Start angle in degrees.
        end_angle: End angle in degrees.
        path_data: SVG path ``d`` attribute for the filled wedge.
        label_x: X coordinate of the label anchor.
        label_y: Y coordinate of the label anchor.
        label_rotation: Rotation (degrees) applied to the label around its anchor.
    """

    index: int
    start_angle: float
    end_angle: float
    path_data: str
    label_x: float
    label_y: float
    label_rotation: float

    @property
    def mid_angle(self) -> float:
        return (self.start_angle + self.end_angle) / 2


def slice_angle(count: int) -> float:
    """Angle covered by each slice when the wheel holds ``count`` items.

    Raises:
        ValueError: If count is lower than 1
    """
    if count < 1:
        raise ValueError(f"Wheel needs at least one slice, got {count}")
    return 360 / count


def point_on_circle(
    center: float, radius: float, angle: float
) -> Tuple[float, float]:
    """Cartesian point at ``angle`` on a circle centered at (center, center)."""
    rad = math.radians(angle - 90)
    return center + radius * math.cos(rad), center + radius * math.sin(rad)


def label_font_size(count: int) -> int:
    # Crowded wheels get the smaller label font.
    return 10 if count > DENSE_WHEEL_THRESHOLD else 14


def _full_circle_path(center: float, radius: float) -> str:
    # SVG renders an arc with coinciding endpoints as empty.
    top = center - radius
    bottom = center + radius
    return (
        f"M {center} {top} "
        f"A {radius} {radius} 0 1 1 {center} {bottom} "
        f"A {radius} {radius} 0 1 1 {center} {top} Z"
    )


def build_slices(count: int, size: int = DEFAULT_WHEEL_SIZE) -> List[SliceGeometry]:
    """
    Compute drawing data for every slice of a wheel.

    Args:
        count: Number of items on the wheel
        size: Width/height of the square canvas in pixels

    Returns:
        One SliceGeometry per item, in item order

    Raises:
        ValueError: If count is lower than 1

    Example:
        >>> slices = build_slices(4)
        >>> [s.start_angle for s in slices]
        [0.0, 90.0, 180.0, 270.0]
    """
    per_slice = slice_angle(count)
    center = size / 2
    radius = size / 2 - RIM_MARGIN
    label_radius = radius / LABEL_RADIUS_DIVISOR
    large_arc = 1 if per_slice > 180 else 0

    slices: List[SliceGeometry] = []
    for index in range(count):
        start = index * per_slice
        end = (index + 1) * per_slice
        if count == 1:
            path = _full_circle_path(center, radius)
        else:
            x1, y1 = point_on_circle(center, radius, start)
            x2, y2 = point_on_circle(center, radius, end)
            path = (
                f"M {center} {center} L {x1} {y1} "
                f"A {radius} {radius} 0 {large_arc} 1 {x2} {y2} Z"
            )

        mid = start + per_slice / 2
        label_x, label_y = point_on_circle(center, label_radius, mid)

        slices.append(
            SliceGeometry(
                index=index,
                start_angle=float(start),
                end_angle=float(end),
                path_data=path,
                label_x=label_x,
                label_y=label_y,
                label_rotation=mid,
            )
        )
    return slices
