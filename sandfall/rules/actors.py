"""Actor rules — humans and zombies.

Both actors die in contact with hazards or charged water, fall through
air, look for the other kind within a 13x13 window and then take one
step: humans flee, zombies chase.  A blocked actor may hop diagonally
upwards over a one-cell obstacle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.common import find_first, mark, move
from sandfall.world.materials import Material, is_hazard, is_passable, is_water

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.world.grid import Grid

SIGHT_RADIUS = 6


def _in_danger(grid: Grid, x: int, y: int) -> bool:
    """Return True if a hazard or charged water touches ``(x, y)``."""
    for nx, ny in grid.neighbours(x, y, include_self=True):
        other = grid.material_at(nx, ny)
        if is_hazard(other):
            return True
        if is_water(other) and grid.life_at(nx, ny) > 0:
            return True
    return False


def _fall(grid: Grid, updated: UpdateMask, x: int, y: int) -> bool:
    if grid.in_bounds(x, y + 1) and is_passable(grid.material_at(x, y + 1)):
        move(grid, updated, x, y, x, y + 1)
        return True
    return False


def _walk(grid: Grid, updated: UpdateMask, x: int, y: int, tx: int) -> bool:
    if grid.in_bounds(tx, y) and is_passable(grid.material_at(tx, y)):
        move(grid, updated, x, y, tx, y)
        return True
    return False


def _advance(
    engine: SimulationEngine,
    updated: UpdateMask,
    x: int,
    y: int,
    direction: int,
) -> None:
    """Step sideways, hop over an obstacle, or try a random direction."""
    grid, rng = engine.grid, engine.rng
    tx = x + direction
    if _walk(grid, updated, x, y, tx):
        return
    if (
        grid.in_bounds(tx, y - 1)
        and grid.material_at(tx, y - 1) == Material.EMPTY
        and grid.material_at(x, y - 1) == Material.EMPTY
        and rng.chance(70)
    ):
        move(grid, updated, x, y, tx, y - 1)
        return
    retry = 1 if rng.chance(50) else -1
    _walk(grid, updated, x, y, x + retry)


def _animate(grid: Grid, x: int, y: int) -> None:
    grid.set_life(x, y, grid.life_at(x, y) + 1)


def step_human(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one human: die, fall, fight nearby zombies, then flee."""
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)

    if _in_danger(grid, x, y):
        grid.put(x, y, Material.ASH, 0)
        return

    _animate(grid, x, y)
    if _fall(grid, updated, x, y):
        return

    threat = find_first(grid, x, y, Material.ZOMBIE, SIGHT_RADIUS)

    for nx, ny in grid.neighbours(x, y):
        if grid.material_at(nx, ny) == Material.ZOMBIE and rng.chance(35):
            if rng.chance(60):
                grid.put(nx, ny, Material.FIRE, 10 + rng.range_inclusive(0, 10))
            else:
                grid.put(nx, ny, Material.ASH, 0)

    direction = 1 if rng.chance(50) else -1
    if threat is not None:
        direction = 1 if threat[0] < x else -1
    _advance(engine, updated, x, y, direction)


def step_zombie(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one zombie: burn, fall, infect nearby humans, then chase."""
    grid, rng = engine.grid, engine.rng
    mark(grid, updated, x, y)

    if _in_danger(grid, x, y):
        grid.put(x, y, Material.FIRE, 15)
        return

    _animate(grid, x, y)
    if _fall(grid, updated, x, y):
        return

    prey = find_first(grid, x, y, Material.HUMAN, SIGHT_RADIUS)

    for nx, ny in grid.neighbours(x, y):
        if grid.material_at(nx, ny) == Material.HUMAN:
            if rng.chance(70):
                grid.put(nx, ny, Material.ZOMBIE, 0)
            else:
                grid.put(nx, ny, Material.FIRE, 10)

    direction = 1 if rng.chance(50) else -1
    if prey is not None:
        direction = 1 if prey[0] > x else -1
    _advance(engine, updated, x, y, direction)
