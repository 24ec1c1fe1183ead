"""CurveStore - sparse automation curve for one parameter channel.

Points are kept as two parallel lists (positions, values) sorted by
position and searched with bisect. Positions are unique: adding at an
existing position overwrites its value.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterable, Iterator
import logging
import numbers

import numpy as np

from blickline.core.curves.definitions import (
    InterpolationMethod,
    ParameterDefinition,
    ParameterType,
    get_definition,
    resolve_interpolation,
)
from blickline.core.curves.interpolation import interpolate_segment
from blickline.core.curves.models import ControlPoint
from blickline.core.curves.simplification import (
    DEFAULT_THRESHOLD,
    simplify_banded,
    simplify_rdp,
)
from blickline.core.errors import InvalidPositionError

logger = logging.getLogger(__name__)

# Dropping a run that fits a band moves a Catmull-Rom curve by at most 10/3 of
# the band width.
CUBIC_BAND_FRACTION = 0.25


def _blick_position(position: object) -> int:
    if isinstance(position, numbers.Integral) and not isinstance(position, bool):
        return int(position)
    if isinstance(position, float) and position.is_integer():
        return int(position)
    raise InvalidPositionError(f"Control point position must be a whole blick, got {position!r}")


class CurveStore:
    """Control points for one parameter type with interpolated sampling.

    Outside the span of defined points (and everywhere when the store is
    empty) sampling yields the parameter's default value. A point that
    exists exactly at the sampled position is returned as stored,
    whatever the interpolation method.

    Example:
        >>> store = CurveStore("tension")
        >>> store.add(0, 0.0)
        True
        >>> store.add(100, 1.0)
        True
        >>> store.get_linear(50)
        0.5
    """

    def __init__(
        self,
        parameter_type: ParameterType | str,
        interpolation: InterpolationMethod | str | None = None,
    ):
        """Initialize an empty curve.

        Args:
            parameter_type: Catalog entry, as enum or case-insensitive name.
            interpolation: Interpolation method. Defaults to the catalog's
                method for the parameter type.

        Raises:
            InvalidConfigurationError: If either argument is not in its catalog.
        """
        self._definition: ParameterDefinition = get_definition(parameter_type)
        self._interpolation: InterpolationMethod = (
            self._definition.interpolation
            if interpolation is None
            else resolve_interpolation(interpolation)
        )
        self._positions: list[int] = []
        self._values: list[float] = []

    def clone(self) -> CurveStore:
        """Return a deep copy sharing no mutable state with this store."""
        other = CurveStore(self._definition.parameter_type, self._interpolation)
        other._positions = list(self._positions)
        other._values = list(self._values)
        return other

    # ------------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------------

    def get_definition(self) -> ParameterDefinition:
        """Get the catalog definition of this curve's parameter type."""
        return self._definition

    def get_type(self) -> ParameterType:
        """Get the parameter type of this curve."""
        return self._definition.parameter_type

    def get_interpolation_method(self) -> InterpolationMethod:
        """Get how values between control points are interpolated."""
        return self._interpolation

    @property
    def default_value(self) -> float:
        return self._definition.default_value

    # ------------------------------------------------------------------
    # Point editing
    # ------------------------------------------------------------------

    def add(self, position: int, value: float) -> bool:
        """Add a control point, or update the value of an existing one.

        Args:
            position: Position in blicks.
            value: Parameter value.

        Returns:
            True if a new point was created, False if an existing point
            was overwritten.

        Raises:
            InvalidPositionError: If position is not a whole number of
                blicks (this includes NaN and infinities).
        """
        position = _blick_position(position)
        idx = bisect.bisect_left(self._positions, position)
        if idx < len(self._positions) and self._positions[idx] == position:
            self._values[idx] = float(value)
            return False

        self._positions.insert(idx, position)
        self._values.insert(idx, float(value))
        return True

    def remove(self, begin: int, end: int | None = None) -> bool:
        """Remove the point at begin, or every point in [begin, end].

        Args:
            begin: Exact position, or start of the range (blicks).
            end: Inclusive end of the range. When omitted only an exact
                point at begin is removed.

        Returns:
            True if any point was removed.
        """
        if end is None:
            end = begin

        lo = bisect.bisect_left(self._positions, begin)
        hi = bisect.bisect_right(self._positions, end)
        if hi <= lo:
            return False

        del self._positions[lo:hi]
        del self._values[lo:hi]
        return True

    def remove_all(self) -> None:
        """Remove all control points. The definition is kept."""
        self._positions.clear()
        self._values.clear()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get(self, position: float) -> float:
        """Get the interpolated parameter value at position (blicks)."""
        return self._sample(position, self._interpolation)

    def get_linear(self, position: float) -> float:
        """Like get(), but always interpolates linearly."""
        return self._sample(position, InterpolationMethod.LINEAR)

    def sample(self, positions: Iterable[float] | np.ndarray) -> np.ndarray:
        """Evaluate get() at every position.

        Args:
            positions: Positions in blicks.

        Returns:
            Float64 array of sampled values, one per position.
        """
        flat = np.asarray(positions).ravel().tolist()
        return np.array([self.get(p) for p in flat], dtype=np.float64)

    def get_points(self, begin: int, end: int) -> list[tuple[int, float]]:
        """Get (position, value) pairs with begin <= position <= end, ascending."""
        lo = bisect.bisect_left(self._positions, begin)
        hi = bisect.bisect_right(self._positions, end)
        return list(zip(self._positions[lo:hi], self._values[lo:hi], strict=True))

    def get_all_points(self) -> list[tuple[int, float]]:
        """Get every (position, value) pair, ascending."""
        return list(zip(self._positions, self._values, strict=True))

    # ------------------------------------------------------------------
    # Simplification
    # ------------------------------------------------------------------

    def simplify(self, begin: int, end: int, threshold: float = DEFAULT_THRESHOLD) -> bool:
        """Remove points in [begin, end] that barely contribute to the curve.

        The first and last point inside the range are always kept, and
        get() anywhere in the range changes by less than threshold under the
        store's interpolation method. A second call with the same arguments
        removes nothing.

        Linear stores use vertical deviation from the straight chord. Cosine
        and cubic segments bend away from the chord, so those stores only
        drop runs of points that sit in a narrow value band together with
        their outer neighbours (see simplify_banded). The band is threshold
        for cosine and CUBIC_BAND_FRACTION of it for cubic.

        Args:
            begin: Start of the range (blicks).
            end: End of the range (blicks).
            threshold: Largest change of the sampled curve tolerated, in
                value units.

        Returns:
            True if any point was removed.
        """
        lo = bisect.bisect_left(self._positions, begin)
        hi = bisect.bisect_right(self._positions, end)
        if hi - lo < 3:
            return False

        values = self._values[lo:hi]
        if self._interpolation == InterpolationMethod.LINEAR:
            kept = simplify_rdp(self._positions[lo:hi], values, threshold)
        else:
            band = threshold
            if self._interpolation == InterpolationMethod.CUBIC:
                band *= CUBIC_BAND_FRACTION
            kept = simplify_banded(
                values,
                band,
                before=self._values[lo - 1] if lo > 0 else None,
                after=self._values[hi] if hi < len(self._values) else None,
            )
        removed = (hi - lo) - len(kept)
        if removed == 0:
            return False

        self._positions[lo:hi] = [self._positions[lo + i] for i in kept]
        self._values[lo:hi] = [self._values[lo + i] for i in kept]

        logger.debug(
            f"Simplified {self._definition.type_name} in [{begin}, {end}]: "
            f"removed {removed} of {removed + len(kept)} points (threshold={threshold})"
        )
        return True

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._positions)

    def __iter__(self) -> Iterator[ControlPoint]:
        for position, value in zip(self._positions, self._values, strict=True):
            yield ControlPoint(position=position, value=value)

    def __contains__(self, position: object) -> bool:
        idx = bisect.bisect_left(self._positions, position)  # type: ignore[arg-type]
        return idx < len(self._positions) and self._positions[idx] == position

    def __repr__(self) -> str:
        return (
            f"CurveStore(type={self._definition.parameter_type.value}, "
            f"interpolation={self._interpolation.value}, points={len(self)})"
        )

    def _sample(self, position: float, method: InterpolationMethod) -> float:
        idx = bisect.bisect_left(self._positions, position)
        if idx < len(self._positions) and self._positions[idx] == position:
            return self._values[idx]
        if idx == 0 or idx == len(self._positions):
            return self._definition.default_value
        return interpolate_segment(method, self._positions, self._values, idx, position)
