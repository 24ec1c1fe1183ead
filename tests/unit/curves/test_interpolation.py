"""Tests for segment interpolation functions."""

from __future__ import annotations

import math

import pytest

from blickline.core.curves.definitions import InterpolationMethod
from blickline.core.curves.interpolation import (
    interpolate_cosine,
    interpolate_cubic,
    interpolate_linear,
    interpolate_segment,
)


class TestLinear:
    """Tests for interpolate_linear."""

    def test_midpoint(self):
        assert interpolate_linear(0, 0.0, 10, 1.0, 5) == pytest.approx(0.5)

    def test_endpoints(self):
        assert interpolate_linear(100, -2.0, 200, 4.0, 100) == pytest.approx(-2.0)
        assert interpolate_linear(100, -2.0, 200, 4.0, 200) == pytest.approx(4.0)


class TestCosine:
    """Tests for interpolate_cosine."""

    def test_midpoint_is_average(self):
        assert interpolate_cosine(0, 0.0, 10, 2.0, 5) == pytest.approx(1.0)

    def test_quarter_point(self):
        expected = (1.0 - math.cos(math.pi / 4)) / 2.0
        assert interpolate_cosine(0, 0.0, 100, 1.0, 25) == pytest.approx(expected)

    def test_flat_near_ends(self):
        """The ease moves slower than a straight line near the start."""
        assert interpolate_cosine(0, 0.0, 100, 1.0, 10) < 0.1


class TestCubic:
    """Tests for interpolate_cubic."""

    def test_reproduces_straight_line(self):
        """Evenly spaced collinear points interpolate as a line."""
        assert interpolate_cubic(0, 0.0, 10, 1.0, 20, 2.0, 30, 3.0, 15) == pytest.approx(1.5)

    def test_clamped_two_point_segment(self):
        assert interpolate_cubic(0, 0.0, 0, 0.0, 10, 1.0, 10, 1.0, 5) == pytest.approx(0.5)

    def test_passes_through_endpoints(self):
        args = (-5, 3.0, 0, 1.0, 7, -2.0, 20, 4.0)
        assert interpolate_cubic(*args, 0) == pytest.approx(1.0)
        assert interpolate_cubic(*args, 7) == pytest.approx(-2.0)

    def test_non_uniform_spacing_is_finite(self):
        value = interpolate_cubic(0, 0.0, 1, 5.0, 1000, -5.0, 1001, 0.0, 500)
        assert math.isfinite(value)


class TestInterpolateSegment:
    """Tests for method dispatch in interpolate_segment."""

    positions = [0, 100, 200, 300]
    values = [0.0, 1.0, 0.0, 1.0]

    def test_linear(self):
        result = interpolate_segment(
            InterpolationMethod.LINEAR, self.positions, self.values, 1, 50
        )
        assert result == pytest.approx(0.5)

    def test_cosine(self):
        result = interpolate_segment(
            InterpolationMethod.COSINE, self.positions, self.values, 2, 125
        )
        assert result == pytest.approx(interpolate_cosine(100, 1.0, 200, 0.0, 125))

    def test_cubic_uses_neighbours(self):
        result = interpolate_segment(InterpolationMethod.CUBIC, self.positions, self.values, 2, 150)
        assert result == pytest.approx(interpolate_cubic(0, 0.0, 100, 1.0, 200, 0.0, 300, 1.0, 150))

    def test_cubic_clamps_first_segment(self):
        result = interpolate_segment(InterpolationMethod.CUBIC, self.positions, self.values, 1, 50)
        assert result == pytest.approx(interpolate_cubic(0, 0.0, 0, 0.0, 100, 1.0, 200, 0.0, 50))

    def test_cubic_clamps_last_segment(self):
        result = interpolate_segment(
            InterpolationMethod.CUBIC, self.positions, self.values, 3, 250
        )
        assert result == pytest.approx(
            interpolate_cubic(100, 1.0, 200, 0.0, 300, 1.0, 300, 1.0, 250)
        )
