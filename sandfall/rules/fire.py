"""Fire and lightning rules.

Fire flickers upwards, spreads to flammable neighbours, is doused by
water and burns out into smoke.  Lightning is stationary: for the two
ticks it lives it charges, ignites and detonates everything within a
5x5 window.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.common import is_still, lift_charge, mark, move
from sandfall.simulation.placement import explode
from sandfall.world.materials import (
    Material,
    is_conductor,
    is_explosive_gas,
    is_flammable,
    is_passable,
    is_water,
)

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine

FIRE_SMOKE_LIFE = 15
LIGHTNING_REACH = 2


def step_fire(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one fire cell."""
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)

    px, py = x, y
    if (
        grid.in_bounds(x, y - 1)
        and is_passable(grid.material_at(x, y - 1))
        and rng.chance(50)
    ):
        move(grid, updated, x, y, x, y - 1)
        py = y - 1

    for nx, ny in grid.neighbours(px, py):
        other = grid.material_at(nx, ny)
        if is_flammable(other):
            if not rng.chance(40):
                continue
            if other == Material.GUNPOWDER:
                explode(grid, rng, nx, ny, 5, updated)
            else:
                grid.put(nx, ny, Material.FIRE, 15 + rng.range_inclusive(0, 10))
        elif is_water(other):
            if is_still(grid, px, py, Material.FIRE):
                grid.put(px, py, Material.SMOKE, FIRE_SMOKE_LIFE)
        elif is_conductor(other) and rng.chance(5):
            lift_charge(grid, nx, ny, 5)

    if is_still(grid, px, py, Material.FIRE):
        remaining = grid.life_at(px, py) - 1
        if remaining <= 0:
            grid.put(px, py, Material.SMOKE, FIRE_SMOKE_LIFE)
        else:
            grid.set_life(px, py, remaining)


def step_lightning(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one lightning cell."""
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)

    for nx, ny in grid.neighbours(x, y, LIGHTNING_REACH):
        other = grid.material_at(nx, ny)
        if is_conductor(other):
            lift_charge(grid, nx, ny, 12)
        elif is_water(other):
            lift_charge(grid, nx, ny, 8)
        elif is_flammable(other):
            if other == Material.GUNPOWDER:
                explode(grid, rng, nx, ny, 6, updated)
            else:
                grid.put(nx, ny, Material.FIRE, 20 + rng.range_inclusive(0, 10))
        elif is_explosive_gas(other):
            explode(grid, rng, nx, ny, 4, updated)

    if is_still(grid, x, y, Material.LIGHTNING):
        remaining = grid.life_at(x, y) - 1
        if remaining <= 0:
            grid.put(x, y, Material.EMPTY, 0)
        else:
            grid.set_life(x, y, remaining)
