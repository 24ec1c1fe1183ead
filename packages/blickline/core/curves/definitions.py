"""Parameter catalog for automation curves.

The catalog is a closed, static table: seven parameter types, each with a
display name, machine name, value range, default value and the
interpolation method its curve uses. CurveStore consults it at
construction time and never changes the definition afterward.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from blickline.core.errors import InvalidConfigurationError


class InterpolationMethod(str, Enum):
    """How values between control points are interpolated."""

    LINEAR = "Linear"
    COSINE = "Cosine"
    CUBIC = "Cubic"


class ParameterType(str, Enum):
    """Parameter channels that can carry an automation curve."""

    PITCH_DELTA = "PitchDelta"
    VIBRATO_ENV = "VibratoEnv"
    LOUDNESS = "Loudness"
    TENSION = "Tension"
    BREATHINESS = "Breathiness"
    VOICING = "Voicing"
    GENDER = "Gender"


class ParameterDefinition(BaseModel):
    """Static description of one parameter type.

    Attributes:
        parameter_type: Catalog key.
        display_name: Human-readable name ("Pitch Deviation").
        type_name: Machine name ("pitchDelta").
        value_range: (min, max) of meaningful values.
        default_value: Value of the curve where no points are defined.
        interpolation: Interpolation method used by curves of this type.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    parameter_type: ParameterType
    display_name: str = Field(..., min_length=1)
    type_name: str = Field(..., min_length=1)
    value_range: tuple[float, float]
    default_value: float
    interpolation: InterpolationMethod = InterpolationMethod.CUBIC

    @model_validator(mode="after")
    def _validate_range(self) -> ParameterDefinition:
        lo, hi = self.value_range
        if lo > hi:
            raise ValueError(f"{self.type_name}: value_range min {lo} exceeds max {hi}")
        if not (lo <= self.default_value <= hi):
            raise ValueError(f"{self.type_name}: default_value outside value_range")
        return self


PARAMETER_CATALOG: dict[ParameterType, ParameterDefinition] = {
    d.parameter_type: d
    for d in (
        ParameterDefinition(
            parameter_type=ParameterType.PITCH_DELTA,
            display_name="Pitch Deviation",
            type_name="pitchDelta",
            value_range=(-1200.0, 1200.0),
            default_value=0.0,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.VIBRATO_ENV,
            display_name="Vibrato Envelope",
            type_name="vibratoEnv",
            value_range=(0.0, 2.0),
            default_value=1.0,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.LOUDNESS,
            display_name="Loudness",
            type_name="loudness",
            value_range=(-48.0, 12.0),
            default_value=0.0,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.TENSION,
            display_name="Tension",
            type_name="tension",
            value_range=(-1.0, 1.0),
            default_value=0.0,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.BREATHINESS,
            display_name="Breathiness",
            type_name="breathiness",
            value_range=(-1.0, 1.0),
            default_value=0.0,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.VOICING,
            display_name="Voicing",
            type_name="voicing",
            value_range=(0.0, 1.0),
            default_value=1.0,
            interpolation=InterpolationMethod.COSINE,
        ),
        ParameterDefinition(
            parameter_type=ParameterType.GENDER,
            display_name="Gender",
            type_name="gender",
            value_range=(-1.0, 1.0),
            default_value=0.0,
        ),
    )
}


def _normalize(name: str) -> str:
    return name.strip().lower()


_LOOKUP: dict[str, ParameterType] = {}
for _definition in PARAMETER_CATALOG.values():
    _LOOKUP[_normalize(_definition.parameter_type.value)] = _definition.parameter_type
    _LOOKUP[_normalize(_definition.type_name)] = _definition.parameter_type
    _LOOKUP[_normalize(_definition.parameter_type.name)] = _definition.parameter_type


def resolve_parameter_type(value: ParameterType | str) -> ParameterType:
    """Resolve a parameter type from an enum member or a case-insensitive name.

    Accepts the enum value ("PitchDelta"), the machine name ("pitchDelta")
    or the enum member name ("PITCH_DELTA").

    Raises:
        InvalidConfigurationError: If value names no catalog entry.
    """
    if isinstance(value, ParameterType):
        return value
    if isinstance(value, str):
        resolved = _LOOKUP.get(_normalize(value))
        if resolved is not None:
            return resolved
    raise InvalidConfigurationError(
        f"Unknown parameter type {value!r}. Expected one of: "
        f"{', '.join(p.value for p in ParameterType)}"
    )


def resolve_interpolation(value: InterpolationMethod | str) -> InterpolationMethod:
    """Resolve an interpolation method from an enum member or a case-insensitive name.

    Raises:
        InvalidConfigurationError: If value is not Linear, Cosine or Cubic.
    """
    if isinstance(value, InterpolationMethod):
        return value
    if isinstance(value, str):
        for method in InterpolationMethod:
            if _normalize(value) == method.value.lower():
                return method
    raise InvalidConfigurationError(
        f"Unknown interpolation method {value!r}. Expected one of: "
        f"{', '.join(m.value for m in InterpolationMethod)}"
    )


def get_definition(parameter_type: ParameterType | str) -> ParameterDefinition:
    """Look up the catalog definition for a parameter type.

    Example:
        >>> get_definition("tension").display_name
        'Tension'
    """
    return PARAMETER_CATALOG[resolve_parameter_type(parameter_type)]
