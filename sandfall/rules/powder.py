"""Powder rules — sand, gunpowder, ash and snow.

Powders fall straight down through empty space and liquids, and slide
down a diagonal when blocked.  After moving, a few materials react with
their surroundings.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.common import mark, move, touches
from sandfall.simulation.placement import explode
from sandfall.world.materials import Material, is_heat_source, is_liquid

if TYPE_CHECKING:
    from sandfall.rules.common import UpdateMask
    from sandfall.simulation.engine import SimulationEngine
    from sandfall.world.grid import Grid

# Ticks of continuous submersion before sand seeds a seaweed stalk.
SEAWEED_SEED_TICKS = 220
GUNPOWDER_BLAST_RADIUS = 5


def _sinkable(grid: Grid, x: int, y: int) -> bool:
    if not grid.in_bounds(x, y):
        return False
    m = grid.material_at(x, y)
    return m == Material.EMPTY or is_liquid(m)


def step_powder(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Resolve one powder cell: fall, slide, then react in place."""
    grid, rng = engine.grid, engine.rng
    kind = grid.material_at(x, y)
    mark(grid, updated, x, y)

    px, py = x, y
    if _sinkable(grid, x, y + 1):
        move(grid, updated, x, y, x, y + 1)
        py = y + 1
    else:
        direction = 1 if rng.chance(50) else -1
        for dx in (direction, -direction):
            if _sinkable(grid, x + dx, y + 1):
                move(grid, updated, x, y, x + dx, y + 1)
                px, py = x + dx, y + 1
                break

    if kind == Material.SNOW:
        if touches(grid, px, py, is_heat_source):
            grid.put(px, py, Material.WATER, 0)
    elif kind == Material.SAND:
        _grow_seaweed(grid, px, py)
    elif kind == Material.GUNPOWDER:
        step_gunpowder(engine, px, py, updated)


def _grow_seaweed(grid: Grid, x: int, y: int) -> None:
    """Count submerged ticks and plant seaweed above once enough pass."""
    if grid.material_at(x, y - 1) != Material.WATER:
        grid.set_life(x, y, 0)
        return

    submerged = grid.life_at(x, y) + 1
    if submerged > SEAWEED_SEED_TICKS:
        crowded = any(
            grid.material_at(sx, sy) == Material.SEAWEED
            for sx, sy in grid.neighbours(x, y, 2, include_self=True)
        )
        if not crowded:
            grid.put(x, y - 1, Material.SEAWEED, 0)
        submerged = 0
    grid.set_life(x, y, submerged)


def step_gunpowder(
    engine: SimulationEngine,
    x: int,
    y: int,
    updated: UpdateMask,
) -> None:
    """Detonate if fire or lava touches the gunpowder at ``(x, y)``."""
    grid = engine.grid
    mark(grid, updated, x, y)
    if touches(grid, x, y, is_heat_source):
        explode(grid, engine.rng, x, y, GUNPOWDER_BLAST_RADIUS, updated)
