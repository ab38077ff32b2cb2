"""Shared fixtures for the sandfall test suite."""

from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from sandfall.simulation.config import SimulationConfig
from sandfall.simulation.engine import SimulationEngine
from sandfall.simulation.rng import LcgRandom
from sandfall.world.cell import Cell
from sandfall.world.grid import Grid
from sandfall.world.materials import Material

CellValue = Material | tuple[Material, int]
Builder = Callable[..., SimulationEngine]


@pytest.fixture
def rng() -> LcgRandom:
    """A deterministic random source for reproducible tests."""
    return LcgRandom(seed=12345)


@pytest.fixture
def small_grid() -> Grid:
    """A small 8x8 grid for fast tests."""
    return Grid(width=8, height=8)


@pytest.fixture
def default_config() -> SimulationConfig:
    """Default simulation config (no YAML file needed)."""
    return SimulationConfig()


@pytest.fixture
def build() -> Builder:
    """Factory for an engine pre-populated with specific cells.

    ``cells`` maps ``(x, y)`` to either a material or a
    ``(material, life)`` pair.
    """

    def _build(
        width: int,
        height: int,
        cells: Mapping[tuple[int, int], CellValue] | None = None,
        seed: int = 12345,
    ) -> SimulationEngine:
        engine = SimulationEngine(width=width, height=height, seed=seed)
        for (x, y), value in (cells or {}).items():
            material, life = value if isinstance(value, tuple) else (value, 0)
            engine.set_cell(x, y, Cell(material, life))
        return engine

    return _build
