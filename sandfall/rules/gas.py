"""Gas rules — smoke, steam, gas, toxic gas, hydrogen, chlorine.

Gases rise into empty space, drift sideways when capped, and expire once
their lifetime counter runs out.  Steam may condense and smoke may leave
ash behind when they expire.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.common import is_still, mark, move, touches
from sandfall.simulation.placement import explode
from sandfall.world.materials import Material, is_explosive_gas, is_heat_source

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.simulation.rng import LcgRandom
    from sandfall.world.grid import Grid

HYDROGEN_BLAST_RADIUS = 4


def step_gas(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one gas cell: rise or drift, ignite, poison, then age."""
    grid, rng = engine.grid, engine.rng
    kind = grid.material_at(x, y)
    mark(grid, updated, x, y)

    px, py = _rise(grid, updated, x, y)
    if (px, py) == (x, y):
        px, py = _drift(grid, rng, updated, x, y)

    if is_explosive_gas(kind) and touches(grid, px, py, is_heat_source):
        if kind == Material.HYDROGEN:
            explode(grid, rng, px, py, HYDROGEN_BLAST_RADIUS, updated)
        else:
            grid.put(px, py, Material.FIRE, 12)
    elif kind == Material.CHLORINE:
        for nx, ny in grid.neighbours(px, py, include_self=True):
            if grid.material_at(nx, ny) == Material.PLANT and rng.chance(35):
                grid.put(nx, ny, Material.TOXIC_GAS, 25)

    if is_still(grid, px, py, kind):
        _age(grid, rng, kind, px, py)


def _rise(grid: Grid, updated: UpdateMask, x: int, y: int) -> tuple[int, int]:
    """Climb one cell into empty space straight above."""
    if grid.in_bounds(x, y - 1) and grid.material_at(x, y - 1) == Material.EMPTY:
        move(grid, updated, x, y, x, y - 1)
        return x, y - 1
    return x, y


def _drift(
    grid: Grid,
    rng: LcgRandom,
    updated: UpdateMask,
    x: int,
    y: int,
) -> tuple[int, int]:
    """Wander sideways, sometimes diagonally upwards, into empty space."""
    order = (1, -1) if rng.chance(50) else (-1, 1)
    for dx in order:
        nx = x + dx
        ny = y - 1 if rng.chance(50) else y
        if grid.in_bounds(nx, ny) and grid.material_at(nx, ny) == Material.EMPTY:
            move(grid, updated, x, y, nx, ny)
            return nx, ny
    return x, y


def _age(grid: Grid, rng: LcgRandom, kind: Material, x: int, y: int) -> None:
    remaining = grid.life_at(x, y) - 1
    if remaining > 0:
        grid.set_life(x, y, remaining)
        return

    residue = Material.EMPTY
    if kind == Material.STEAM and rng.chance(15):
        residue = Material.WATER
    elif kind == Material.SMOKE and rng.chance(8):
        residue = Material.ASH
    grid.put(x, y, residue, 0)
