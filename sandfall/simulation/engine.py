"""SimulationEngine — the tick scheduler and public authoring API.

Owns the grid and the random source of one world.  Each tick walks the
grid from the bottom row to the top, left to right within a row, and
hands every cell not yet resolved this tick to the rule for its material.
Bottom-up order means a particle that falls lands in a row that has
already been visited, so it cannot fall twice in one tick.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from sandfall.rules.dispatch import rule_for
from sandfall.simulation import placement
from sandfall.simulation.rng import LcgRandom
from sandfall.world.grid import Grid
from sandfall.world.materials import Material

if TYPE_CHECKING:
    from collections.abc import MutableSequence

    from numpy.typing import NDArray

    from sandfall.simulation.config import SimulationConfig
    from sandfall.world.cell import Cell

logger = logging.getLogger(__name__)


@dataclass
class SimulationEngine:
    """Drives one world forward tick by tick.

    Attributes:
        width: Requested number of grid columns.
        height: Requested number of grid rows.
        seed: RNG seed for deterministic replay.
        grid: The cell store.
        rng: Deterministic random source shared by every rule.
        tick: Number of ticks advanced so far.
    """

    width: int
    height: int
    seed: int = 0
    grid: Grid = field(init=False)
    rng: LcgRandom = field(init=False, repr=False)
    tick: int = 0

    def __post_init__(self) -> None:
        """Build the grid and seed the random source."""
        self.grid = Grid(width=self.width, height=self.height)
        self.width, self.height = self.grid.width, self.grid.height
        self.rng = LcgRandom(self.seed)
        logger.info(
            "Created %dx%d world (seed=%d)",
            self.width,
            self.height,
            self.seed,
        )

    @classmethod
    def from_config(cls, config: SimulationConfig) -> SimulationEngine:
        """Create an engine and paint the configured starting scene.

        Args:
            config: Loaded simulation configuration.
        """
        engine = cls(
            width=config.world_width,
            height=config.world_height,
            seed=config.seed,
        )
        for stroke in config.brushes:
            engine.place_brush(stroke.x, stroke.y, stroke.radius, stroke.material)
        return engine

    # -- Lifecycle ------------------------------------------------------------

    def resize(self, width: int, height: int) -> None:
        """Reallocate the world at a new size, discarding all content."""
        self.grid.resize(width, height)
        self.width, self.height = self.grid.width, self.grid.height
        logger.info("Resized world to %dx%d", self.width, self.height)

    def clear(self) -> None:
        """Reset every cell to empty.  The random source is not reset."""
        self.grid.clear()
        logger.info("Cleared world")

    # -- Ticking --------------------------------------------------------------

    def step(self) -> None:
        """Advance the simulation by one tick.

        A fresh update mask is created for the tick; each rule marks the
        cells it resolves or moves into, and marked cells are skipped for
        the rest of the tick.
        """
        grid = self.grid
        if grid.size == 0:
            return

        width = grid.width
        materials = grid.materials
        updated = np.zeros(grid.size, dtype=np.bool_)

        for y in range(grid.height - 1, -1, -1):
            row = y * width
            for x in range(width):
                i = row + x
                if updated[i]:
                    continue
                rule = rule_for(Material(int(materials[i])))
                if rule is None:
                    updated[i] = True
                    continue
                rule(self, x, y, updated)

        self.tick += 1

    def run(self, ticks: int) -> None:
        """Run the simulation for a fixed number of ticks.

        Args:
            ticks: Number of ticks to advance.
        """
        for _ in range(ticks):
            self.step()

    # -- Authoring --------------------------------------------------------------

    def place_brush(self, cx: int, cy: int, radius: int, material: Material) -> None:
        """Paint a disc of ``material``; lightning drops a bolt instead."""
        placement.place_brush(self.grid, cx, cy, radius, material)

    def place_lightning(self, cx: int, cy: int) -> int:
        """Drop a lightning bolt from ``(cx, cy)``.  Returns its length."""
        return placement.place_lightning(self.grid, cx, cy)

    def explode(self, cx: int, cy: int, radius: int) -> None:
        """Detonate at ``(cx, cy)`` using the engine's random source."""
        placement.explode(self.grid, self.rng, cx, cy, radius)

    # -- Queries ----------------------------------------------------------------

    def get_cell(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``; empty when out of bounds."""
        return self.grid.get(x, y)

    def set_cell(self, x: int, y: int, cell: Cell) -> bool:
        """Overwrite a cell.  Returns False when out of bounds."""
        return self.grid.set(x, y, cell)

    def export_cells(self, buffer: NDArray[np.void] | MutableSequence[Cell]) -> int:
        """Copy all cells, row-major, into ``buffer``.

        Returns:
            Number of cells written.
        """
        return self.grid.export(buffer)
