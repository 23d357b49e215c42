"""
Unit tests for wheel geometry.

Tests slice angles, SVG wedge paths and label anchors.
"""

import pytest

from food_roulette.domain.wheel.geometry import (
    build_slices,
    label_font_size,
    point_on_circle,
    slice_angle,
)


class TestSliceAngle:
    """Test suite for slice_angle."""

    @pytest.mark.parametrize("count,expected", [(1, 360), (2, 180), (4, 90), (6, 60)])
    def test_even_split(self, count: int, expected: float) -> None:
        """Test the circle is split evenly."""
        assert slice_angle(count) == pytest.approx(expected)

    def test_empty_wheel_raises(self) -> None:
        """Test a wheel without items has no slice angle."""
        with pytest.raises(ValueError, match="at least one slice"):
            slice_angle(0)


class TestPointOnCircle:
    """Test suite for point_on_circle."""

    def test_zero_angle_points_up(self) -> None:
        """Test angle 0 is 12 o'clock."""
        x, y = point_on_circle(150, 140, 0)

        assert x == pytest.approx(150)
        assert y == pytest.approx(10)

    def test_ninety_degrees_points_right(self) -> None:
        """Test angles grow clockwise."""
        x, y = point_on_circle(150, 140, 90)

        assert x == pytest.approx(290)
        assert y == pytest.approx(150)


class TestBuildSlices:
    """Test suite for build_slices."""

    def test_one_slice_per_item(self) -> None:
        """Test slices cover the wheel in item order."""
        slices = build_slices(4)

        assert [s.index for s in slices] == [0, 1, 2, 3]
        assert [s.start_angle for s in slices] == [0.0, 90.0, 180.0, 270.0]
        assert [s.end_angle for s in slices] == [90.0, 180.0, 270.0, 360.0]

    def test_path_is_closed_wedge_from_center(self) -> None:
        """Test path starts at the center and closes."""
        path = build_slices(4)[0].path_data

        assert path.startswith("M 150.0 150.0 L ")
        assert " A 140.0 140.0 0 0 1 " in path
        assert path.endswith(" Z")

    def test_single_item_is_full_circle(self) -> None:
        """Test a one item wheel is drawn as two half arcs."""
        path = build_slices(1)[0].path_data

        assert path == (
            "M 150.0 10.0 "
            "A 140.0 140.0 0 1 1 150.0 290.0 "
            "A 140.0 140.0 0 1 1 150.0 10.0 Z"
        )

    def test_label_anchor_on_inner_circle(self) -> None:
        """Test labels sit at radius / 1.6 on the slice bisector."""
        first = build_slices(4)[0]

        assert first.mid_angle == pytest.approx(45)
        assert first.label_rotation == pytest.approx(45)
        assert first.label_x == pytest.approx(150 + 87.5 * 0.7071067811865476)
        assert first.label_y == pytest.approx(150 - 87.5 * 0.7071067811865476)

    def test_custom_size(self) -> None:
        """Test geometry scales with the canvas size."""
        path = build_slices(2, size=200)[0].path_data

        assert path.startswith("M 100.0 100.0 L ")
        assert " A 90.0 90.0 " in path

    def test_empty_wheel_raises(self) -> None:
        """Test no geometry for an empty wheel."""
        with pytest.raises(ValueError):
            build_slices(0)


class TestLabelFontSize:
    """Test suite for label_font_size."""

    @pytest.mark.parametrize("count,expected", [(2, 14), (8, 14), (9, 10), (20, 10)])
    def test_dense_wheels_use_small_font(self, count: int, expected: int) -> None:
        """Test font shrinks above eight items."""
        assert label_font_size(count) == expected
