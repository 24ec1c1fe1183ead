"""Resolved tempo and measure mark descriptors.

TimeAxis stores marks as sorted keys; these models are the read-only views
it hands out, with derived positions (seconds, blicks) already resolved.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TempoMark(BaseModel):
    """A tempo change, effective until the next tempo mark.

    Attributes:
        position: Position of the mark in blicks.
        position_seconds: Position of the mark in seconds.
        bpm: Beats per minute between this mark and the next one.

    Example:
        >>> mark = TempoMark(position=0, position_seconds=0.0, bpm=120.0)
        >>> mark.bpm
        120.0
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    position: int = Field(..., description="Position in blicks")
    position_seconds: float = Field(..., description="Position in seconds")
    bpm: float = Field(..., gt=0.0, description="Beats per minute")


class MeasureMark(BaseModel):
    """A time signature change, effective until the next measure mark.

    ``position_blick`` is derived from every earlier mark, since bar length
    depends on the prevailing signature.

    Attributes:
        position: Measure number at which the mark is placed.
        position_blick: Position of the mark in blicks.
        numerator: Beats per bar (3 for 3/4).
        denominator: Beat unit (4 for 3/4).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    position: int = Field(..., ge=0, description="Measure number")
    position_blick: int = Field(..., ge=0, description="Position in blicks")
    numerator: int = Field(..., ge=1)
    denominator: int = Field(..., ge=1)

    @property
    def signature(self) -> str:
        """Signature as text, e.g. ``"3/4"``."""
        return f"{self.numerator}/{self.denominator}"
