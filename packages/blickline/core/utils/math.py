"""Math utilities for common operations."""

from __future__ import annotations


def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between a and b.

    Args:
        a: Start value
        b: End value
        t: Interpolation factor [0, 1]

    Returns:
        Interpolated value
    """
    return float(a) + (float(b) - float(a)) * t
