"""Shared fixtures for automation curve tests."""

from __future__ import annotations

import math

import numpy as np
import pytest

from blickline.core.curves.store import CurveStore
from blickline.core.timing.units import QUARTER


@pytest.fixture
def tension_points() -> list[tuple[int, float]]:
    """Irregularly spaced points with an uneven shape."""
    return [
        (0, 0.0),
        (QUARTER // 3, 0.4),
        (QUARTER, -0.2),
        (QUARTER + 17, 0.9),
        (5 * QUARTER, 0.1),
    ]


@pytest.fixture
def tension_store(tension_points) -> CurveStore:
    """Tension curve (cubic) populated with tension_points."""
    store = CurveStore("tension")
    for position, value in tension_points:
        store.add(position, value)
    return store


@pytest.fixture
def random_walk_points() -> list[tuple[int, float]]:
    """Smoothed random walk sampled every 32nd note, reproducible."""
    rng = np.random.default_rng(7)
    steps = rng.normal(0.0, 0.02, size=400)
    values = np.convolve(np.cumsum(steps), np.ones(5) / 5, mode="same")
    spacing = QUARTER // 8
    return [(i * spacing, float(v)) for i, v in enumerate(values)]


@pytest.fixture
def random_walk_store(random_walk_points) -> CurveStore:
    """Linear pitch curve populated with random_walk_points."""
    store = CurveStore("pitchDelta", "linear")
    for position, value in random_walk_points:
        store.add(position, value)
    return store


@pytest.fixture
def plateau_points() -> list[tuple[int, float]]:
    """Two sine swells around a near-flat stretch, sampled every 32nd note."""
    spacing = QUARTER // 8
    values = [0.5 * math.sin(i / 8) for i in range(80)]
    values += [0.0005 * (-1) ** i for i in range(80)]
    values += [0.5 * math.sin(i / 8) for i in range(80)]
    return [(i * spacing, v) for i, v in enumerate(values)]
