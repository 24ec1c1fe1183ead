"""ParameterSet - one automation curve per catalog parameter type.

Mirrors the parameter lookup of a note group: every catalog entry always
has a curve, looked up by enum or case-insensitive name.
"""

from __future__ import annotations

from collections.abc import Iterator

from blickline.core.curves.definitions import (
    PARAMETER_CATALOG,
    ParameterType,
    resolve_parameter_type,
)
from blickline.core.curves.store import CurveStore


class ParameterSet:
    """The full set of automation curves owned by one note group.

    Example:
        >>> params = ParameterSet()
        >>> params.get_parameter("pitchDelta").add(0, 50.0)
        True
        >>> len(params.get_parameter(ParameterType.PITCH_DELTA))
        1
    """

    def __init__(self) -> None:
        self._curves: dict[ParameterType, CurveStore] = {
            parameter_type: CurveStore(parameter_type) for parameter_type in PARAMETER_CATALOG
        }

    def get_parameter(self, parameter_type: ParameterType | str) -> CurveStore:
        """Get the curve for a parameter type (case-insensitive name or enum).

        Raises:
            InvalidConfigurationError: If parameter_type names no catalog entry.
        """
        return self._curves[resolve_parameter_type(parameter_type)]

    def clone(self) -> ParameterSet:
        """Return a deep copy; every curve is cloned."""
        other = ParameterSet.__new__(ParameterSet)
        other._curves = {key: curve.clone() for key, curve in self._curves.items()}
        return other

    def __iter__(self) -> Iterator[CurveStore]:
        return iter(self._curves.values())

    def __len__(self) -> int:
        return len(self._curves)
