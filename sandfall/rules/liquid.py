"""Liquid rules — water, salt water, oil, ethanol, acid, lava, mercury.

Liquids fall through empty space and gases, sink below lighter liquids,
and otherwise flow sideways.  Once settled for the tick, each liquid
reacts with its eight neighbours according to the material it started
the tick as.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from sandfall.rules.common import is_still, lift_charge, mark, move
from sandfall.world.materials import (
    Material,
    density,
    is_dissolvable,
    is_flammable,
    is_heat_source,
    is_liquid,
    is_passable,
    is_water,
)

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.simulation.rng import LcgRandom
    from sandfall.world.grid import Grid

LAVA_COOLING_TICKS = 200
WET_DIRT_LIFE = 300

Reaction = Callable[["Grid", "LcgRandom", int, int, int, int, Material], None]


def _displaces(kind: Material, other: Material) -> bool:
    return is_liquid(other) and density(kind) > density(other)


def step_liquid(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one liquid cell: flow, react, then age or discharge.

    Lava ageing and charge decay only apply to a liquid that stayed put
    this tick.
    """
    grid, rng = engine.grid, engine.rng
    kind = grid.material_at(x, y)
    mark(grid, updated, x, y)

    px, py = _flow(grid, rng, updated, kind, x, y)

    react = _REACTIONS.get(kind)
    if react is not None:
        for nx, ny in grid.neighbours(px, py):
            react(grid, rng, px, py, nx, ny, grid.material_at(nx, ny))

    settled = (px, py) == (x, y)
    if kind == Material.LAVA:
        if settled:
            _cool(grid, px, py)
    elif is_water(kind):
        _hydrate(grid, px, py)
        if (
            settled
            and is_water(grid.material_at(px, py))
            and grid.life_at(px, py) > 0
        ):
            _discharge(grid, px, py)


def _flow(
    grid: Grid,
    rng: LcgRandom,
    updated: UpdateMask,
    kind: Material,
    x: int,
    y: int,
) -> tuple[int, int]:
    """Move the liquid at most one cell and return where it ended up."""
    if grid.in_bounds(x, y + 1):
        below = grid.material_at(x, y + 1)
        if is_passable(below) or _displaces(kind, below):
            move(grid, updated, x, y, x, y + 1)
            return x, y + 1

    order = (1, -1) if rng.chance(50) else (-1, 1)
    for dx in order:
        nx = x + dx
        if not grid.in_bounds(nx, y):
            continue
        side = grid.material_at(nx, y)
        if is_passable(side) or (_displaces(kind, side) and rng.chance(50)):
            move(grid, updated, x, y, nx, y)
            return nx, y
    return x, y


# -- Reactions -----------------------------------------------------------------
# Each reaction sees the neighbour's material as it was when the neighbour
# was reached.  Writes to (px, py) target the reacting liquid itself.


def _water_reacts(
    grid: Grid,
    rng: LcgRandom,
    px: int,
    py: int,
    nx: int,
    ny: int,
    other: Material,
) -> None:
    if other == Material.FIRE:
        grid.put(nx, ny, Material.SMOKE, 15)
    elif other == Material.LAVA:
        grid.put(nx, ny, Material.STONE, 0)
        _steam_or_stone(grid, rng, px, py)


def _fuel_reacts(
    grid: Grid,
    rng: LcgRandom,
    px: int,
    py: int,
    nx: int,
    ny: int,
    other: Material,
) -> None:
    if is_heat_source(other):
        grid.put(px, py, Material.FIRE, 25)


def _acid_reacts(
    grid: Grid,
    rng: LcgRandom,
    px: int,
    py: int,
    nx: int,
    ny: int,
    other: Material,
) -> None:
    if is_dissolvable(other):
        if rng.chance(30):
            grid.put(nx, ny, Material.TOXIC_GAS, 25)
        else:
            grid.put(nx, ny, Material.EMPTY, 0)
        if rng.chance(25):
            grid.put(px, py, Material.EMPTY, 0)
    if other == Material.WATER and rng.chance(30):
        grid.put(px, py, Material.SALT_WATER, 0)
        if rng.chance(30):
            grid.put(nx, ny, Material.STEAM, 20)


def _lava_reacts(
    grid: Grid,
    rng: LcgRandom,
    px: int,
    py: int,
    nx: int,
    ny: int,
    other: Material,
) -> None:
    if is_flammable(other):
        grid.put(nx, ny, Material.FIRE, 25)
    elif other in (Material.SAND, Material.SNOW):
        grid.put(nx, ny, Material.GLASS, 0)
    elif is_water(other):
        grid.put(nx, ny, Material.STONE, 0)
        _steam_or_stone(grid, rng, px, py)
    elif other == Material.ICE:
        grid.put(nx, ny, Material.WATER, 0)


_REACTIONS: dict[Material, Reaction] = {
    Material.WATER: _water_reacts,
    Material.SALT_WATER: _water_reacts,
    Material.OIL: _fuel_reacts,
    Material.ETHANOL: _fuel_reacts,
    Material.ACID: _acid_reacts,
    Material.LAVA: _lava_reacts,
}


def _steam_or_stone(grid: Grid, rng: LcgRandom, x: int, y: int) -> None:
    """Quench contact between water and lava at ``(x, y)``."""
    if rng.chance(50):
        grid.put(x, y, Material.STEAM, 20)
    else:
        grid.put(x, y, Material.STONE, 0)


# -- After-reaction effects ------------------------------------------------------


def _cool(grid: Grid, x: int, y: int) -> None:
    """Age lava by one tick; old lava solidifies into stone."""
    if not is_still(grid, x, y, Material.LAVA):
        return
    age = grid.life_at(x, y) + 1
    if age > LAVA_COOLING_TICKS:
        grid.put(x, y, Material.STONE, 0)
    else:
        grid.set_life(x, y, age)


def _hydrate(grid: Grid, x: int, y: int) -> None:
    """Soak dirt touching the water at ``(x, y)``."""
    for nx, ny in grid.neighbours(x, y):
        if grid.material_at(nx, ny) in (Material.DIRT, Material.WET_DIRT):
            grid.put(nx, ny, Material.WET_DIRT, WET_DIRT_LIFE)


def _discharge(grid: Grid, x: int, y: int) -> None:
    """Spread charge through neighbouring water and kill actors it touches.

    Neighbouring water is raised to one less than this cell's charge but
    never lowered.  This cell then loses one unit of charge.
    """
    charge = grid.life_at(x, y)
    for nx, ny in grid.neighbours(x, y):
        other = grid.material_at(nx, ny)
        if is_water(other):
            lift_charge(grid, nx, ny, charge - 1)
        elif other in (Material.HUMAN, Material.ZOMBIE):
            grid.put(nx, ny, Material.ASH, 0)
    grid.set_life(x, y, max(0, charge - 1))
