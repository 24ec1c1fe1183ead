"""Interpolation between automation control points.

Each function evaluates one segment between a bracketing pair of points
(x0, v0) and (x1, v1) with x0 < x <= x1. Cubic interpolation also needs the
neighbours on either side; callers repeat the boundary point where a
neighbour does not exist.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from blickline.core.curves.definitions import InterpolationMethod
from blickline.core.utils.math import lerp


def interpolate_linear(x0: float, v0: float, x1: float, v1: float, x: float) -> float:
    """Straight line between (x0, v0) and (x1, v1).

    Example:
        >>> interpolate_linear(0, 0.0, 10, 1.0, 5)
        0.5
    """
    return lerp(v0, v1, (x - x0) / (x1 - x0))


def interpolate_cosine(x0: float, v0: float, x1: float, v1: float, x: float) -> float:
    """Half-cosine ease between (x0, v0) and (x1, v1).

    Flat tangents at both ends; the curve passes the midpoint at the
    segment centre.
    """
    alpha = (x - x0) / (x1 - x0)
    weight = (1.0 - math.cos(alpha * math.pi)) / 2.0
    return lerp(v0, v1, weight)


def interpolate_cubic(
    xm: float,
    vm: float,
    x0: float,
    v0: float,
    x1: float,
    v1: float,
    x2: float,
    v2: float,
    x: float,
) -> float:
    """Catmull-Rom style cubic Hermite segment for non-uniform spacing.

    Tangents at the bracketing points are the slopes across their
    neighbours: ``(v1 - vm) / (x1 - xm)`` at x0 and ``(v2 - v0) / (x2 - x0)``
    at x1. Passing a boundary point as its own neighbour (xm == x0 or
    x2 == x1) clamps the curve at that end.

    Args:
        xm, vm: Point before the segment (or the segment start repeated).
        x0, v0: Segment start.
        x1, v1: Segment end.
        x2, v2: Point after the segment (or the segment end repeated).
        x: Position to evaluate, x0 <= x <= x1.

    Returns:
        Interpolated value.
    """
    h = x1 - x0
    t = (x - x0) / h
    t2 = t * t
    t3 = t2 * t

    m0 = (v1 - vm) / (x1 - xm)
    m1 = (v2 - v0) / (x2 - x0)

    h00 = 2.0 * t3 - 3.0 * t2 + 1.0
    h10 = t3 - 2.0 * t2 + t
    h01 = -2.0 * t3 + 3.0 * t2
    h11 = t3 - t2

    return h00 * v0 + h10 * h * m0 + h01 * v1 + h11 * h * m1


def interpolate_segment(
    method: InterpolationMethod,
    positions: Sequence[int],
    values: Sequence[float],
    idx: int,
    x: float,
) -> float:
    """Interpolate inside the segment ending at positions[idx].

    Args:
        method: Interpolation method to apply.
        positions: Ascending control point positions.
        values: Values matching positions.
        idx: Index of the right bracketing point, 1 <= idx < len(positions).
        x: Position strictly between positions[idx - 1] and positions[idx].

    Returns:
        Interpolated value.
    """
    x0, v0 = positions[idx - 1], values[idx - 1]
    x1, v1 = positions[idx], values[idx]

    if method == InterpolationMethod.LINEAR:
        return interpolate_linear(x0, v0, x1, v1, x)
    if method == InterpolationMethod.COSINE:
        return interpolate_cosine(x0, v0, x1, v1, x)

    # Cubic: clamp at curve ends by repeating the boundary point
    if idx >= 2:
        xm, vm = positions[idx - 2], values[idx - 2]
    else:
        xm, vm = x0, v0
    if idx + 1 < len(positions):
        x2, v2 = positions[idx + 1], values[idx + 1]
    else:
        x2, v2 = x1, v1

    return interpolate_cubic(xm, vm, x0, v0, x1, v1, x2, v2, x)
