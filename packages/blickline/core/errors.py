"""Exception hierarchy for blickline.

Every error raised by the curve and time-axis components is a contract
violation surfaced immediately to the caller. Nothing here is transient,
so nothing here is retried.
"""

from __future__ import annotations


class BlicklineError(Exception):
    """Base exception for all blickline errors."""

    pass


class InvalidConfigurationError(BlicklineError, ValueError):
    """Raised for values outside a closed catalog.

    Covers unknown parameter types, unknown interpolation methods and
    malformed configuration files.
    """

    pass


class InvalidIntervalError(BlicklineError, ZeroDivisionError):
    """Raised when blick arithmetic is asked to divide by a zero interval."""

    pass


class InvalidTempoError(BlicklineError, ValueError):
    """Raised for a tempo mark with a non-positive BPM or negative position."""

    pass


class InvalidTimeSignatureError(BlicklineError, ValueError):
    """Raised for a measure mark with an invalid measure number or signature."""

    pass


class InvalidPositionError(BlicklineError, ValueError):
    """Raised for a position that cannot be placed on the blick grid.

    Control point positions must be whole blicks, and measure lookups need a
    finite position.
    """

    pass
