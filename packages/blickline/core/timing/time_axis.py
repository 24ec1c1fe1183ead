"""TimeAxis - tempo map and time signature map for a project.

Handles conversion between musical time (blicks, measures) and physical
time (seconds). Both maps are kept as parallel sorted lists and searched
with bisect; derived positions (seconds of each tempo mark, blicks of each
measure mark) are recomputed eagerly on every edit so queries never see
stale offsets.
"""

from __future__ import annotations

import bisect
import logging
import math
from typing import TYPE_CHECKING

from blickline.core.errors import (
    InvalidPositionError,
    InvalidTempoError,
    InvalidTimeSignatureError,
)
from blickline.core.timing.models import MeasureMark, TempoMark
from blickline.core.timing.units import (
    bar_length_blicks,
    blick_to_seconds,
    seconds_to_blick,
)

if TYPE_CHECKING:
    from blickline.core.config.models import TimeAxisDefaults

logger = logging.getLogger(__name__)

DEFAULT_BPM = 120.0
DEFAULT_NUMERATOR = 4
DEFAULT_DENOMINATOR = 4


def _validate_tempo(position: int, bpm: float) -> None:
    if position < 0:
        raise InvalidTempoError(f"Tempo mark position must be >= 0, got {position}")
    if not (math.isfinite(bpm) and bpm > 0.0):
        raise InvalidTempoError(f"Tempo must be a finite positive BPM, got {bpm}")


def _validate_signature(measure: int, numerator: int, denominator: int) -> None:
    if measure < 0:
        raise InvalidTimeSignatureError(f"Measure number must be >= 0, got {measure}")
    if numerator < 1 or denominator < 1:
        raise InvalidTimeSignatureError(
            f"Invalid time signature {numerator}/{denominator} at measure {measure}"
        )


class TimeAxis:
    """Project-wide tempo and time signature marks.

    A tempo mark at blick 0 and a measure mark at measure 0 always exist.
    Re-adding a mark at an existing key updates it in place.

    Example:
        >>> axis = TimeAxis()
        >>> axis.add_tempo_mark(2_822_400_000, 60.0)  # 4 quarters
        >>> axis.get_seconds_from_blick(5_644_800_000)  # 8 quarters
        6.0
    """

    def __init__(
        self,
        default_bpm: float = DEFAULT_BPM,
        default_numerator: int = DEFAULT_NUMERATOR,
        default_denominator: int = DEFAULT_DENOMINATOR,
    ):
        """Initialize a TimeAxis with its origin marks.

        Args:
            default_bpm: Tempo of the mark at blick 0.
            default_numerator: Numerator of the mark at measure 0.
            default_denominator: Denominator of the mark at measure 0.

        Raises:
            InvalidTempoError: If default_bpm is not a finite positive number.
            InvalidTimeSignatureError: If the default signature is invalid.
        """
        _validate_tempo(0, default_bpm)
        _validate_signature(0, default_numerator, default_denominator)

        # Tempo map: positions (blicks), bpm, and derived start seconds
        self._tempo_positions: list[int] = [0]
        self._tempo_bpms: list[float] = [float(default_bpm)]
        self._tempo_seconds: list[float] = [0.0]

        # Signature map: measure numbers, (num, den), and derived start blicks
        self._measure_numbers: list[int] = [0]
        self._signatures: list[tuple[int, int]] = [(default_numerator, default_denominator)]
        self._measure_blicks: list[int] = [0]

    @classmethod
    def from_config(cls, defaults: TimeAxisDefaults) -> TimeAxis:
        """Create a TimeAxis seeded from configured defaults."""
        return cls(
            default_bpm=defaults.bpm,
            default_numerator=defaults.numerator,
            default_denominator=defaults.denominator,
        )

    def clone(self) -> TimeAxis:
        """Return a deep copy sharing no mutable state with this axis."""
        other = TimeAxis.__new__(TimeAxis)
        other._tempo_positions = list(self._tempo_positions)
        other._tempo_bpms = list(self._tempo_bpms)
        other._tempo_seconds = list(self._tempo_seconds)
        other._measure_numbers = list(self._measure_numbers)
        other._signatures = list(self._signatures)
        other._measure_blicks = list(self._measure_blicks)
        return other

    def __repr__(self) -> str:
        return (
            f"TimeAxis(tempo_marks={len(self._tempo_positions)}, "
            f"measure_marks={len(self._measure_numbers)})"
        )

    # ------------------------------------------------------------------
    # Tempo marks
    # ------------------------------------------------------------------

    def add_tempo_mark(self, position: int, bpm: float) -> None:
        """Insert a tempo mark at position (blicks), or update its BPM.

        Args:
            position: Mark position in blicks (>= 0).
            bpm: Beats per minute from this mark until the next one.

        Raises:
            InvalidTempoError: If position is negative or bpm is not positive.
        """
        _validate_tempo(position, bpm)

        idx = bisect.bisect_left(self._tempo_positions, position)
        if idx < len(self._tempo_positions) and self._tempo_positions[idx] == position:
            self._tempo_bpms[idx] = float(bpm)
        else:
            self._tempo_positions.insert(idx, position)
            self._tempo_bpms.insert(idx, float(bpm))
            self._tempo_seconds.insert(idx, 0.0)

        self._recompute_tempo_seconds(idx)
        logger.debug(f"Tempo mark set: position={position} bpm={bpm}")

    def remove_tempo_mark(self, position: int) -> bool:
        """Remove the tempo mark at position (blicks).

        The mark at blick 0 cannot be removed.

        Returns:
            True if a mark was removed.
        """
        if position == 0:
            logger.debug("Ignoring removal of the tempo mark at the origin")
            return False

        idx = bisect.bisect_left(self._tempo_positions, position)
        if idx >= len(self._tempo_positions) or self._tempo_positions[idx] != position:
            return False

        del self._tempo_positions[idx]
        del self._tempo_bpms[idx]
        del self._tempo_seconds[idx]
        self._recompute_tempo_seconds(idx)
        logger.debug(f"Tempo mark removed: position={position}")
        return True

    def get_tempo_mark_at(self, b: int | float) -> TempoMark:
        """Get the tempo mark effective at position b (blicks)."""
        return self._tempo_mark(self._tempo_index_at_blick(b))

    def get_all_tempo_marks(self) -> list[TempoMark]:
        """Get all tempo marks, ascending by position."""
        return [self._tempo_mark(i) for i in range(len(self._tempo_positions))]

    # ------------------------------------------------------------------
    # Blick <-> seconds
    # ------------------------------------------------------------------

    def get_seconds_from_blick(self, b: int | float) -> float:
        """Convert musical time b (blicks) to physical time (seconds).

        Positions before blick 0 are extrapolated with the first tempo.
        """
        idx = self._tempo_index_at_blick(b)
        offset = b - self._tempo_positions[idx]
        return self._tempo_seconds[idx] + blick_to_seconds(offset, self._tempo_bpms[idx])

    def get_blick_from_seconds(self, t: float) -> int:
        """Convert physical time t (seconds) to musical time (blicks).

        The result is rounded to the nearest blick (ties toward +infinity).
        Converting the seconds of a tempo mark returns the mark's exact
        position; elsewhere a round trip lands within one blick. Non-finite
        input propagates unchanged.
        """
        idx = bisect.bisect_right(self._tempo_seconds, t) - 1
        idx = max(idx, 0)

        offset = seconds_to_blick(t - self._tempo_seconds[idx], self._tempo_bpms[idx])
        raw = self._tempo_positions[idx] + offset
        if not math.isfinite(raw):
            return raw  # type: ignore[return-value]
        return math.floor(raw + 0.5)

    # ------------------------------------------------------------------
    # Measure marks
    # ------------------------------------------------------------------

    def add_measure_mark(self, measure: int, numerator: int, denominator: int) -> None:
        """Insert a numerator/denominator mark at a measure number, or update it.

        Every later mark's blick position is recomputed, since it depends on
        the bar lengths of all earlier signatures.

        Raises:
            InvalidTimeSignatureError: If measure < 0 or the signature is invalid.
        """
        _validate_signature(measure, numerator, denominator)

        idx = bisect.bisect_left(self._measure_numbers, measure)
        if idx < len(self._measure_numbers) and self._measure_numbers[idx] == measure:
            self._signatures[idx] = (numerator, denominator)
        else:
            self._measure_numbers.insert(idx, measure)
            self._signatures.insert(idx, (numerator, denominator))
            self._measure_blicks.insert(idx, 0)

        self._recompute_measure_blicks(idx)
        logger.debug(f"Measure mark set: measure={measure} signature={numerator}/{denominator}")

    def remove_measure_mark(self, measure: int) -> bool:
        """Remove the measure mark at a measure number.

        The mark at measure 0 cannot be removed.

        Returns:
            True if a mark was removed.
        """
        if measure == 0:
            logger.debug("Ignoring removal of the measure mark at the origin")
            return False

        idx = bisect.bisect_left(self._measure_numbers, measure)
        if idx >= len(self._measure_numbers) or self._measure_numbers[idx] != measure:
            return False

        del self._measure_numbers[idx]
        del self._signatures[idx]
        del self._measure_blicks[idx]
        self._recompute_measure_blicks(idx)
        logger.debug(f"Measure mark removed: measure={measure}")
        return True

    def get_measure_at(self, b: int | float) -> int:
        """Get the measure number containing position b (blicks).

        Raises:
            InvalidPositionError: If b is NaN or infinite.
        """
        if not math.isfinite(b):
            raise InvalidPositionError(f"Cannot locate a measure at position {b}")
        idx = self._measure_index_at_blick(b)
        bar = bar_length_blicks(*self._signatures[idx])
        return self._measure_numbers[idx] + int((b - self._measure_blicks[idx]) // bar)

    def get_measure_start_blick(self, measure: int) -> int:
        """Get the blick position where a measure begins."""
        idx = self._measure_index_at_measure(measure)
        bar = bar_length_blicks(*self._signatures[idx])
        return self._measure_blicks[idx] + (measure - self._measure_numbers[idx]) * bar

    def get_measure_mark_at(self, measure_number: int) -> MeasureMark:
        """Get the measure mark effective at a measure number."""
        return self._measure_mark(self._measure_index_at_measure(measure_number))

    def get_measure_mark_at_blick(self, b: int | float) -> MeasureMark:
        """Get the measure mark effective at position b (blicks)."""
        return self.get_measure_mark_at(self.get_measure_at(b))

    def get_all_measure_marks(self) -> list[MeasureMark]:
        """Get all measure marks, ascending by measure number."""
        return [self._measure_mark(i) for i in range(len(self._measure_numbers))]

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _tempo_index_at_blick(self, b: int | float) -> int:
        return max(bisect.bisect_right(self._tempo_positions, b) - 1, 0)

    def _measure_index_at_blick(self, b: int | float) -> int:
        return max(bisect.bisect_right(self._measure_blicks, b) - 1, 0)

    def _measure_index_at_measure(self, measure: int) -> int:
        return max(bisect.bisect_right(self._measure_numbers, measure) - 1, 0)

    def _recompute_tempo_seconds(self, start: int) -> None:
        """Recompute the start seconds of every tempo mark from index start on."""
        for i in range(max(start, 1), len(self._tempo_positions)):
            span = self._tempo_positions[i] - self._tempo_positions[i - 1]
            self._tempo_seconds[i] = self._tempo_seconds[i - 1] + blick_to_seconds(
                span, self._tempo_bpms[i - 1]
            )

    def _recompute_measure_blicks(self, start: int) -> None:
        """Recompute the start blick of every measure mark from index start on."""
        for i in range(max(start, 1), len(self._measure_numbers)):
            bars = self._measure_numbers[i] - self._measure_numbers[i - 1]
            bar = bar_length_blicks(*self._signatures[i - 1])
            self._measure_blicks[i] = self._measure_blicks[i - 1] + bars * bar

    def _tempo_mark(self, idx: int) -> TempoMark:
        return TempoMark(
            position=self._tempo_positions[idx],
            position_seconds=self._tempo_seconds[idx],
            bpm=self._tempo_bpms[idx],
        )

    def _measure_mark(self, idx: int) -> MeasureMark:
        numerator, denominator = self._signatures[idx]
        return MeasureMark(
            position=self._measure_numbers[idx],
            position_blick=self._measure_blicks[idx],
            numerator=numerator,
            denominator=denominator,
        )
