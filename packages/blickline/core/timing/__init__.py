"""Timing domain - blick units and the project time axis."""

from blickline.core.timing.models import MeasureMark, TempoMark
from blickline.core.timing.time_axis import TimeAxis
from blickline.core.timing.units import (
    QUARTER,
    bar_length_blicks,
    blick_round_div,
    blick_round_to,
    blick_to_quarter,
    blick_to_seconds,
    quarter_to_blick,
    seconds_to_blick,
)

__all__ = [
    "QUARTER",
    "MeasureMark",
    "TempoMark",
    "TimeAxis",
    "bar_length_blicks",
    "blick_round_div",
    "blick_round_to",
    "blick_to_quarter",
    "blick_to_seconds",
    "quarter_to_blick",
    "seconds_to_blick",
]
