"""Shared pytest fixtures for blickline tests."""

from __future__ import annotations

from collections.abc import Iterator
import logging
from pathlib import Path

import pytest

from blickline.core.timing.time_axis import TimeAxis
from blickline.core.timing.units import QUARTER

# ============================================================================
# Path Fixtures
# ============================================================================


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


# ============================================================================
# Timing Fixtures
# ============================================================================


@pytest.fixture
def time_axis() -> TimeAxis:
    """Default axis: 120 BPM, 4/4 from the origin."""
    return TimeAxis()


@pytest.fixture
def tempo_change_axis() -> TimeAxis:
    """120 BPM for the first bar, then 60 BPM from quarter 4."""
    axis = TimeAxis()
    axis.add_tempo_mark(4 * QUARTER, 60.0)
    return axis


@pytest.fixture
def waltz_axis() -> TimeAxis:
    """4/4 for measures 0-1, then 3/4 from measure 2."""
    axis = TimeAxis()
    axis.add_measure_mark(2, 3, 4)
    return axis


# ============================================================================
# Logging Fixtures
# ============================================================================


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level

    yield root

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
