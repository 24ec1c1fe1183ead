"""Ramer-Douglas-Peucker curve simplification.

This module provides functions for simplifying automation curves by
removing points that don't contribute significantly to the overall shape.

Distance is measured vertically (in value units) rather than
perpendicularly: positions are blicks and values are parameter units, so
the two axes share no common scale.

Two chord tests are provided. simplify_rdp measures each point against the
straight chord and suits linear curves. simplify_banded only drops a run of
points whose values, and the values of the points right next to the run,
fit in a band around both chord ends. That keeps the change bounded for
curves whose segments are not straight (cosine, cubic).
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

DEFAULT_THRESHOLD = 0.002


def vertical_deviation(
    x: float,
    v: float,
    x0: float,
    v0: float,
    x1: float,
    v1: float,
) -> float:
    """Vertical distance from (x, v) to the line through (x0, v0) and (x1, v1).

    Args:
        x, v: The point to measure.
        x0, v0: Start of the chord.
        x1, v1: End of the chord.

    Returns:
        ``|v - line(x)|``. For a degenerate chord (x0 == x1) the distance
        to v0.

    Example:
        >>> vertical_deviation(5, 1.0, 0, 0.0, 10, 0.0)
        1.0
    """
    if x1 == x0:
        return abs(v - v0)
    line_v = v0 + (v1 - v0) * (x - x0) / (x1 - x0)
    return abs(v - line_v)


def band_deviation(v: float, v0: float, v1: float) -> float:
    """Largest distance from v to any value between v0 and v1.

    Example:
        >>> band_deviation(0.5, 0.0, 0.25)
        0.5
    """
    return max(abs(v - v0), abs(v - v1))


def _split_chords(
    n: int,
    deviation: Callable[[int, int, int], float],
    accept: Callable[[int, int, float], bool],
) -> list[int]:
    """Shared RDP driver over indices 0..n-1.

    deviation(i, start, end) scores interior point i against the chord.
    accept(start, end, max_dev) decides whether the chord replaces its
    interior. A rejected chord is split at its highest-scoring point,
    earliest first on ties.
    """
    if n <= 2:
        return list(range(n))

    keep = [False] * n
    keep[0] = keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start <= 1:
            continue

        max_dev = -1.0
        max_idx = start
        for i in range(start + 1, end):
            dev = deviation(i, start, end)
            if dev > max_dev:
                max_dev = dev
                max_idx = i

        if accept(start, end, max_dev):
            continue

        keep[max_idx] = True
        stack.append((max_idx, end))
        stack.append((start, max_idx))

    return [i for i in range(n) if keep[i]]


def simplify_rdp(
    positions: Sequence[int],
    values: Sequence[float],
    threshold: float = DEFAULT_THRESHOLD,
) -> list[int]:
    """Simplify a point sequence using the Ramer-Douglas-Peucker algorithm.

    For each chord, the interior point with the largest vertical deviation
    is found (earliest point wins ties). If that deviation is below
    threshold, every interior point of the chord is dropped; otherwise the
    point is kept and both halves are processed the same way.

    The first and last points are always kept. Because every dropped point
    lies within threshold of the chord that replaces it, the linearly
    interpolated curve moves by less than threshold anywhere. Running the
    algorithm again on its own output keeps every point.

    Uses an explicit work stack so long curves do not hit the recursion
    limit.

    Args:
        positions: Ascending point positions.
        values: Values matching positions.
        threshold: Deviation below which a point is considered redundant.

    Returns:
        Ascending indices of the points to keep.

    Example:
        >>> simplify_rdp([0, 1, 2, 3], [0.0, 1.0, 2.0, 3.0])
        [0, 3]
    """

    def deviation(i: int, start: int, end: int) -> float:
        return vertical_deviation(
            positions[i],
            values[i],
            positions[start],
            values[start],
            positions[end],
            values[end],
        )

    return _split_chords(
        len(positions), deviation, lambda start, end, max_dev: max_dev < threshold
    )


def simplify_banded(
    values: Sequence[float],
    tolerance: float,
    before: float | None = None,
    after: float | None = None,
) -> list[int]:
    """Simplify with a value band instead of a straight chord.

    A chord replaces its interior only when all of these are below
    tolerance:

    - the spread between the two chord ends,
    - band_deviation of every interior point against the chord ends,
    - the step from each chord end to its outer neighbour.

    The outer neighbour of an end is the adjacent point of the input, or
    before/after at the edges of the sequence (None means there is none).
    Rejected chords are split at the point with the largest band deviation.

    Every test only looks at a chord, its interior and the points adjacent
    to it, and a point that fails a neighbour test is never an interior
    point of an accepted chord. Running the function again on its own
    output therefore keeps every point.

    Args:
        values: Point values in position order.
        tolerance: Band width below which points are considered redundant.
        before: Value of the point preceding the sequence, if any.
        after: Value of the point following the sequence, if any.

    Returns:
        Ascending indices of the points to keep.

    Example:
        >>> simplify_banded([0.0, 0.001, 0.0, 0.005, 1.0], 0.01)
        [0, 2, 3, 4]
    """
    n = len(values)

    def deviation(i: int, start: int, end: int) -> float:
        return band_deviation(values[i], values[start], values[end])

    def accept(start: int, end: int, max_dev: float) -> bool:
        left = values[start - 1] if start > 0 else before
        right = values[end + 1] if end + 1 < n else after
        return (
            max_dev < tolerance
            and abs(values[start] - values[end]) < tolerance
            and (left is None or abs(left - values[start]) < tolerance)
            and (right is None or abs(right - values[end]) < tolerance)
        )

    return _split_chords(n, deviation, accept)
