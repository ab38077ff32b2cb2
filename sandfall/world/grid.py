"""Grid — the flat cell store shared by every rule in a tick.

The Grid owns all cell storage as two contiguous NumPy buffers addressed
row-major (``y * width + x``).  Every coordinate accessor routes through
``in_bounds`` so that out-of-range reads return an empty cell and
out-of-range writes are silently ignored.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator, MutableSequence
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from sandfall.world.cell import EMPTY_CELL, Cell
from sandfall.world.materials import Material

CELL_DTYPE = np.dtype([("material", np.uint8), ("life", np.int32)])


@dataclass
class Grid:
    """A width x height rectangle of cells.

    Attributes:
        width: Number of columns (clamped to >= 0).
        height: Number of rows (clamped to >= 0).
        materials: Flat ``uint8`` buffer of material values.
        life: Flat ``int32`` buffer of per-cell counters.
    """

    width: int
    height: int
    materials: NDArray[np.uint8] = field(init=False, repr=False)
    life: NDArray[np.int32] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Clamp dimensions and allocate empty buffers."""
        self._allocate(self.width, self.height)

    def _allocate(self, width: int, height: int) -> None:
        self.width = max(0, operator.index(width))
        self.height = max(0, operator.index(height))
        self.materials = np.zeros(self.size, dtype=np.uint8)
        self.life = np.zeros(self.size, dtype=np.int32)

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    def resize(self, width: int, height: int) -> None:
        """Reallocate the grid at a new size.  Existing content is dropped."""
        self._allocate(width, height)

    def clear(self) -> None:
        """Reset every cell to empty in place."""
        self.materials.fill(Material.EMPTY)
        self.life.fill(0)

    # -- Addressing ---------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """Flat buffer index for in-bounds coordinates ``(x, y)``."""
        return y * self.width + x

    def neighbours(
        self,
        x: int,
        y: int,
        radius: int = 1,
        *,
        include_self: bool = False,
    ) -> Iterator[tuple[int, int]]:
        """Yield in-bounds coordinates around ``(x, y)``.

        Coordinates are produced in row-major scan order (top row first,
        left to right), which the rules rely on for deterministic
        first-match searches.

        Args:
            x: Centre column.
            y: Centre row.
            radius: Chebyshev radius of the square window.
            include_self: Whether ``(x, y)`` itself is yielded.
        """
        for dy in range(-radius, radius + 1):
            ny = y + dy
            if ny < 0 or ny >= self.height:
                continue
            for dx in range(-radius, radius + 1):
                if dx == 0 and dy == 0 and not include_self:
                    continue
                nx = x + dx
                if 0 <= nx < self.width:
                    yield nx, ny

    # -- Cell access ----------------------------------------------------------

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``, or an empty cell if out of bounds."""
        if not self.in_bounds(x, y):
            return EMPTY_CELL
        i = self.index(x, y)
        return Cell(Material(int(self.materials[i])), int(self.life[i]))

    def set(self, x: int, y: int, cell: Cell) -> bool:
        """Overwrite the cell at ``(x, y)``.

        Returns:
            False if the coordinates are out of bounds (nothing written).
        """
        return self.put(x, y, cell.material, cell.life)

    def put(self, x: int, y: int, material: Material, life: int = 0) -> bool:
        """Write a material and counter without building a ``Cell``."""
        if not self.in_bounds(x, y):
            return False
        i = self.index(x, y)
        self.materials[i] = material
        self.life[i] = life
        return True

    def material_at(self, x: int, y: int) -> Material:
        if not self.in_bounds(x, y):
            return Material.EMPTY
        return Material(int(self.materials[self.index(x, y)]))

    def life_at(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            return 0
        return int(self.life[self.index(x, y)])

    def set_life(self, x: int, y: int, life: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        self.life[self.index(x, y)] = life
        return True

    def swap(self, x1: int, y1: int, x2: int, y2: int) -> None:
        """Exchange two in-bounds cells, material and counter together."""
        a = self.index(x1, y1)
        b = self.index(x2, y2)
        mats = self.materials
        life = self.life
        mats[a], mats[b] = mats[b], mats[a]
        life[a], life[b] = life[b], life[a]

    # -- Bulk queries ---------------------------------------------------------

    def count(self, material: Material) -> int:
        """Number of cells currently holding ``material``."""
        return int(np.count_nonzero(self.materials == material))

    def snapshot(self) -> NDArray[np.int32]:
        """Return a ``(height, width, 2)`` copy of materials and counters."""
        stacked = np.stack(
            (self.materials.astype(np.int32), self.life.copy()),
            axis=-1,
        )
        return stacked.reshape(self.height, self.width, 2)

    def export(self, buffer: NDArray[np.void] | MutableSequence[Cell]) -> int:
        """Copy cells in row-major order into a caller-provided buffer.

        Accepts either a NumPy array of :data:`CELL_DTYPE` (filled with a
        vectorised copy) or any mutable sequence, which receives ``Cell``
        objects.

        Returns:
            Number of cells written: ``min(len(buffer), size)``.
        """
        n = min(len(buffer), self.size)
        if isinstance(buffer, np.ndarray):
            buffer["material"][:n] = self.materials[:n]
            buffer["life"][:n] = self.life[:n]
            return n
        for i in range(n):
            buffer[i] = Cell(Material(int(self.materials[i])), int(self.life[i]))
        return n
