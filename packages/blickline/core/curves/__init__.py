"""Automation curves: parameter catalog, control point storage and simplification."""

from blickline.core.curves.definitions import (
    PARAMETER_CATALOG,
    InterpolationMethod,
    ParameterDefinition,
    ParameterType,
    get_definition,
)
from blickline.core.curves.models import ControlPoint
from blickline.core.curves.parameters import ParameterSet
from blickline.core.curves.simplification import (
    DEFAULT_THRESHOLD,
    simplify_banded,
    simplify_rdp,
)
from blickline.core.curves.store import CurveStore

__all__ = [
    "DEFAULT_THRESHOLD",
    "PARAMETER_CATALOG",
    "ControlPoint",
    "CurveStore",
    "InterpolationMethod",
    "ParameterDefinition",
    "ParameterSet",
    "ParameterType",
    "get_definition",
    "simplify_banded",
    "simplify_rdp",
]
