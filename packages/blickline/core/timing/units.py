"""Blick unit conversions.

A blick is the smallest unit of musical time. There are 705,600,000 blicks
in a quarter note, a number divisible by every small subdivision used in
music software (2, 3, 4, 5, 6, 7, 8, 9, 10, 12, 14, 15, 16, ...).

These helpers convert at a single fixed tempo. Conversions that follow a
project's tempo map go through TimeAxis.
"""

from __future__ import annotations

import math

from blickline.core.errors import InvalidIntervalError, InvalidPositionError

QUARTER = 705_600_000
"""Number of blicks in a quarter note."""

BARS_TO_QUARTERS = 4
"""A whole note (denominator 1) spans four quarters."""


def blick_round_div(dividend: int | float, divisor: int | float) -> int:
    """Rounded division of dividend over divisor.

    Rounds to the nearest integer with ties going toward positive infinity
    (round-half-up). Integer operands are divided exactly, so the result
    does not depend on float precision.

    Args:
        dividend: Numerator (blicks).
        divisor: Denominator (blicks). Must not be zero.

    Returns:
        The rounded quotient.

    Raises:
        InvalidIntervalError: If divisor is zero.

    Example:
        >>> blick_round_div(5, 2)
        3
        >>> blick_round_div(-5, 2)
        -2
    """
    if divisor == 0:
        raise InvalidIntervalError(f"Cannot divide {dividend} by a zero interval")

    if isinstance(dividend, int) and isinstance(divisor, int):
        if divisor < 0:
            dividend, divisor = -dividend, -divisor
        # floor((dividend / divisor) + 1/2) in exact integer arithmetic
        return (2 * dividend + divisor) // (2 * divisor)

    return math.floor(dividend / divisor + 0.5)


def blick_round_to(b: int | float, interval: int | float) -> int | float:
    """Return the multiple of interval closest to b.

    Equivalent to ``blick_round_div(b, interval) * interval``.

    Raises:
        InvalidIntervalError: If interval is zero.
    """
    return blick_round_div(b, interval) * interval


def blick_to_quarter(b: int | float) -> float:
    """Convert blicks to quarters."""
    return b / QUARTER


def quarter_to_blick(q: float) -> int:
    """Convert quarters to the nearest blick.

    Raises:
        InvalidPositionError: If q is NaN or infinite.
    """
    if isinstance(q, int):
        return q * QUARTER
    if not math.isfinite(q):
        raise InvalidPositionError(f"Cannot convert {q} quarters to blicks")
    return math.floor(q * QUARTER + 0.5)


def blick_to_seconds(b: int | float, bpm: float) -> float:
    """Convert blicks to seconds at a constant tempo.

    Args:
        b: Musical time in blicks.
        bpm: Beats (quarters) per minute.

    Returns:
        Physical time in seconds.
    """
    return b / QUARTER * 60.0 / bpm


def seconds_to_blick(s: float, bpm: float) -> float:
    """Convert seconds to (fractional) blicks at a constant tempo."""
    return s / 60.0 * bpm * QUARTER


def bar_length_blicks(numerator: int, denominator: int) -> int:
    """Length of one bar in blicks for a numerator/denominator signature.

    Example:
        >>> bar_length_blicks(4, 4) == 4 * QUARTER
        True
        >>> bar_length_blicks(6, 8) == 3 * QUARTER
        True
    """
    return blick_round_div(numerator * BARS_TO_QUARTERS * QUARTER, denominator)
