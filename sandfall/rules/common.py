"""Helpers shared by the per-category rules.

Every rule receives the engine, the coordinates of the cell it resolves
and the tick's update mask.  Moving a particle goes through :func:`move`
so the destination is always marked as resolved.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from sandfall.world.materials import Material

if TYPE_CHECKING:
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.world.grid import Grid

UpdateMask = NDArray[np.bool_]
Rule = Callable[["SimulationEngine", int, int, UpdateMask], None]


def mark(grid: Grid, updated: UpdateMask, x: int, y: int) -> None:
    """Flag ``(x, y)`` as resolved for the rest of the tick."""
    updated[grid.index(x, y)] = True


def move(
    grid: Grid,
    updated: UpdateMask,
    x: int,
    y: int,
    nx: int,
    ny: int,
) -> None:
    """Swap the particle at ``(x, y)`` into ``(nx, ny)`` and mark it."""
    grid.swap(x, y, nx, ny)
    mark(grid, updated, nx, ny)


def is_still(grid: Grid, x: int, y: int, material: Material) -> bool:
    """Return True if ``(x, y)`` still holds ``material``.

    Rules only apply self-effects (ageing, cooling, charge decay) while
    the particle has not been converted by an earlier reaction.
    """
    return grid.material_at(x, y) == material


def touches(
    grid: Grid,
    x: int,
    y: int,
    predicate: Callable[[Material], bool],
    *,
    include_self: bool = False,
) -> bool:
    """Return True if any 8-neighbour of ``(x, y)`` satisfies ``predicate``."""
    return any(
        predicate(grid.material_at(nx, ny))
        for nx, ny in grid.neighbours(x, y, include_self=include_self)
    )


def find_first(
    grid: Grid,
    x: int,
    y: int,
    material: Material,
    radius: int,
) -> tuple[int, int] | None:
    """Return the first cell of ``material`` in scan order, if any.

    The window is scanned top row first, left to right.  This is not a
    nearest-distance search: a farther match earlier in scan order wins.
    """
    for nx, ny in grid.neighbours(x, y, radius, include_self=True):
        if grid.material_at(nx, ny) == material:
            return nx, ny
    return None


def lift_charge(grid: Grid, x: int, y: int, level: int) -> None:
    """Raise the counter at ``(x, y)`` to at least ``level``."""
    if grid.life_at(x, y) < level:
        grid.set_life(x, y, level)
