"""Control point model for automation curves."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class ControlPoint(BaseModel):
    """A single automation sample.

    Positions are the primary key of a curve: a CurveStore never holds two
    points at the same position. This model is immutable (frozen=True).

    Attributes:
        position: Position in blicks.
        value: Parameter value at that position.

    Example:
        >>> point = ControlPoint(position=705600000, value=0.25)
        >>> point.as_tuple()
        (705600000, 0.25)
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    position: int = Field(..., description="Position in blicks")
    value: float = Field(..., description="Parameter value")

    def as_tuple(self) -> tuple[int, float]:
        """Return the (position, value) pair used for point listings."""
        return (self.position, self.value)
