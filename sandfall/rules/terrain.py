"""Stationary terrain rules.

Wet dirt dries out, plants and seaweed grow or burn, wood and coal catch
fire, metal and wire conduct charge, and ice melts near heat.  None of
these materials ever move.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.common import lift_charge, mark, touches
from sandfall.simulation.placement import explode
from sandfall.world.materials import (
    Material,
    is_conductor,
    is_explosive_gas,
    is_flammable,
    is_heat_source,
    is_water,
)

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine

GROWTH_CHANCE = 2


def step_wet_dirt(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Dry out by one tick unless water is within reach."""
    grid = engine.grid
    mark(grid, updated, x, y)
    if touches(grid, x, y, is_water, include_self=True):
        return
    remaining = grid.life_at(x, y) - 1
    if remaining <= 0:
        grid.put(x, y, Material.DIRT, 0)
    else:
        grid.set_life(x, y, remaining)


def step_plant_like(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Burn near heat, otherwise occasionally grow one cell upwards.

    Plants grow into empty air when rooted in wet dirt.  Seaweed grows by
    converting the water above its top segment.
    """
    grid, rng = engine.grid, engine.rng
    kind = grid.material_at(x, y)
    mark(grid, updated, x, y)

    if touches(grid, x, y, is_heat_source):
        grid.put(x, y, Material.FIRE, 20)
        return

    has_above = grid.in_bounds(x, y - 1)
    above = grid.material_at(x, y - 1)

    if kind == Material.PLANT:
        rooted = grid.material_at(x, y + 1) == Material.WET_DIRT
        if (
            rooted
            and rng.chance(GROWTH_CHANCE)
            and has_above
            and above == Material.EMPTY
        ):
            grid.put(x, y - 1, Material.PLANT, 0)
            mark(grid, updated, x, y - 1)
    elif has_above and is_water(above) and rng.chance(GROWTH_CHANCE):
        grid.put(x, y - 1, Material.SEAWEED, 0)
        mark(grid, updated, x, y - 1)


def step_burnable_solid(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Wood and coal catch fire next to fire or lava; coal burns longer."""
    grid = engine.grid
    kind = grid.material_at(x, y)
    mark(grid, updated, x, y)
    if touches(grid, x, y, is_heat_source):
        grid.put(x, y, Material.FIRE, 35 if kind == Material.COAL else 25)


def step_conductor(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Pass charge along wire, metal and water, sparking what it touches.

    Neighbouring conductors and water are raised to one less than this
    cell's charge (never lowered).  Each tick a charged cell loses one
    unit.
    """
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)
    charge = grid.life_at(x, y)
    if charge <= 0:
        return

    for nx, ny in grid.neighbours(x, y):
        other = grid.material_at(nx, ny)
        if is_conductor(other) or is_water(other):
            lift_charge(grid, nx, ny, charge - 1)
        elif is_flammable(other):
            if not rng.chance(15):
                continue
            if other == Material.GUNPOWDER:
                explode(grid, rng, nx, ny, 5, updated)
            else:
                grid.put(nx, ny, Material.FIRE, 15 + rng.range_inclusive(0, 10))
        elif is_explosive_gas(other) and rng.chance(35):
            explode(grid, rng, nx, ny, 4, updated)

    grid.set_life(x, y, max(0, charge - 1))


def step_ice(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Each adjacent fire, lava or steam cell gives a 25% chance to melt."""
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)
    for nx, ny in grid.neighbours(x, y, include_self=True):
        other = grid.material_at(nx, ny)
        if (is_heat_source(other) or other == Material.STEAM) and rng.chance(25):
            grid.put(x, y, Material.WATER, 0)
            return
