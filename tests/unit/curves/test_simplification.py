"""Tests for Ramer-Douglas-Peucker simplification helpers."""

from __future__ import annotations

import numpy as np
import pytest

from blickline.core.curves.simplification import (
    DEFAULT_THRESHOLD,
    band_deviation,
    simplify_banded,
    simplify_rdp,
    vertical_deviation,
)


class TestVerticalDeviation:
    """Tests for vertical_deviation."""

    def test_point_above_flat_chord(self):
        assert vertical_deviation(5, 1.0, 0, 0.0, 10, 0.0) == pytest.approx(1.0)

    def test_point_on_sloped_chord(self):
        assert vertical_deviation(5, 0.5, 0, 0.0, 10, 1.0) == pytest.approx(0.0)

    def test_point_below_sloped_chord(self):
        assert vertical_deviation(5, 0.0, 0, 0.0, 10, 1.0) == pytest.approx(0.5)

    def test_degenerate_chord(self):
        assert vertical_deviation(3, 2.0, 3, 0.5, 3, 9.0) == pytest.approx(1.5)


class TestSimplifyRdp:
    """Tests for simplify_rdp index selection."""

    def test_default_threshold(self):
        assert DEFAULT_THRESHOLD == 0.002

    def test_collinear_points_collapse(self):
        assert simplify_rdp([0, 1, 2, 3], [0.0, 1.0, 2.0, 3.0]) == [0, 3]

    def test_short_inputs_unchanged(self):
        assert simplify_rdp([], []) == []
        assert simplify_rdp([0], [1.0]) == [0]
        assert simplify_rdp([0, 5], [1.0, 2.0]) == [0, 1]

    def test_keeps_significant_peak(self):
        assert simplify_rdp([0, 1, 2], [0.0, 1.0, 0.0], threshold=0.5) == [0, 1, 2]

    def test_drops_small_bump(self):
        assert simplify_rdp([0, 1, 2], [0.0, 0.001, 0.0]) == [0, 2]

    def test_tie_keeps_earliest_point(self):
        """Equal deviations split at the earliest point."""
        kept = simplify_rdp([0, 1, 2, 3, 4], [0.0, 1.0, 0.0, -1.0, 0.0], threshold=0.5)
        assert kept == [0, 1, 3, 4]

    def test_deviation_equal_to_threshold_is_kept(self):
        assert simplify_rdp([0, 1, 2], [0.0, 0.5, 0.0], threshold=0.5) == [0, 1, 2]

    def test_zero_threshold_keeps_everything(self):
        assert simplify_rdp([0, 1, 2, 3], [0.0, 1.0, 2.0, 3.0], threshold=0.0) == [0, 1, 2, 3]

    def test_idempotent(self):
        rng = np.random.default_rng(3)
        positions = list(range(0, 5000, 10))
        values = np.cumsum(rng.normal(0.0, 0.1, size=len(positions))).tolist()

        kept = simplify_rdp(positions, values, threshold=0.3)
        again = simplify_rdp([positions[i] for i in kept], [values[i] for i in kept], 0.3)
        assert again == list(range(len(kept)))

    def test_long_curve(self):
        """A zigzag splits one point at a time without hitting the recursion limit."""
        n = 2000
        positions = list(range(n))
        values = [float(i % 2) for i in range(n)]

        assert simplify_rdp(positions, values, threshold=0.5) == list(range(n))


class TestBandDeviation:
    """Tests for band_deviation."""

    def test_value_inside_band(self):
        assert band_deviation(0.5, 0.0, 1.0) == pytest.approx(0.5)

    def test_value_outside_band(self):
        assert band_deviation(2.0, 0.0, 1.0) == pytest.approx(2.0)

    def test_value_on_band_end(self):
        assert band_deviation(0.0, 0.0, 0.25) == pytest.approx(0.25)


class TestSimplifyBanded:
    """Tests for simplify_banded index selection."""

    def test_flat_run_collapses(self):
        assert simplify_banded([0.0] * 5, 0.01) == [0, 4]

    def test_straight_slope_kept(self):
        """A slope is not a band, even when the points are collinear."""
        assert simplify_banded([0.0, 0.25, 0.5, 0.75, 1.0], 0.01) == [0, 1, 2, 3, 4]

    def test_chord_end_spread_blocks_removal(self):
        assert simplify_banded([0.0, 0.004, 0.008], 0.005) == [0, 1, 2]

    def test_outer_neighbour_before(self):
        assert simplify_banded([0.0, 0.0, 0.0], 0.01, before=1.0) == [0, 1, 2]
        assert simplify_banded([0.0, 0.0, 0.0], 0.01, before=0.005) == [0, 2]

    def test_outer_neighbour_after(self):
        assert simplify_banded([0.0, 0.0, 0.0], 0.01, after=-1.0) == [0, 1, 2]
        assert simplify_banded([0.0, 0.0, 0.0], 0.01, after=0.0) == [0, 2]

    def test_step_keeps_point_next_to_it(self):
        """The point right after a step stays, the rest of the flat run goes."""
        assert simplify_banded([1.0, 0.0, 0.0, 0.0, 0.0], 0.01) == [0, 1, 2, 4]

    def test_zero_tolerance_keeps_everything(self):
        assert simplify_banded([0.0] * 4, 0.0) == [0, 1, 2, 3]

    def test_idempotent(self):
        rng = np.random.default_rng(11)
        values = np.cumsum(rng.normal(0.0, 0.01, size=500)).tolist()

        kept = simplify_banded(values, 0.03, before=0.5, after=values[-1])
        assert len(kept) < len(values)
        again = simplify_banded([values[i] for i in kept], 0.03, before=0.5, after=values[-1])
        assert again == list(range(len(kept)))
