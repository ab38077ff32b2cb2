"""Placement — brush fills, lightning bolts and explosions.

These mutate the grid directly.  They are called by the input layer
between ticks and by the rules during a tick; in the latter case the
update mask is passed so freshly created cells are not processed again
before the tick ends.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sandfall.world.materials import (
    Material,
    is_gas,
    is_indestructible,
    is_passable,
    is_water,
)

if TYPE_CHECKING:
    import numpy as np
    from numpy.typing import NDArray

    from sandfall.simulation.rng import LcgRandom
    from sandfall.world.grid import Grid

logger = logging.getLogger(__name__)

BOLT_LIFE = 2
BOLT_WATER_CHARGE = 8


def initial_life(material: Material) -> int:
    """Counter a freshly brushed cell of ``material`` starts with."""
    if material == Material.FIRE:
        return 20
    if is_gas(material):
        return 25
    return 0


def _disc(cx: int, cy: int, radius: int) -> list[tuple[int, int]]:
    r2 = radius * radius
    return [
        (cx + dx, cy + dy)
        for dy in range(-radius, radius + 1)
        for dx in range(-radius, radius + 1)
        if dx * dx + dy * dy <= r2
    ]


def place_brush(
    grid: Grid,
    cx: int,
    cy: int,
    radius: int,
    material: Material,
) -> None:
    """Fill every cell within Euclidean ``radius`` of ``(cx, cy)``.

    Lightning is never area-filled; it is routed to :func:`place_lightning`.
    A negative radius places nothing.

    Args:
        grid: Target grid.
        cx: Centre column.
        cy: Centre row.
        radius: Brush radius in cells.
        material: Material to paint.
    """
    if material == Material.LIGHTNING:
        place_lightning(grid, cx, cy)
        return

    life = initial_life(material)
    for x, y in _disc(cx, cy, radius):
        grid.put(x, y, material, life)


def place_lightning(grid: Grid, cx: int, cy: int) -> int:
    """Drop a vertical bolt from ``(cx, cy)`` down to the first obstacle.

    The bolt descends through empty and gas cells, filling its whole path
    with short-lived lightning.  Water or salt water directly beneath the
    impact point is charged to at least ``BOLT_WATER_CHARGE``.

    Returns:
        The number of lightning cells placed (0 if the start is out of
        bounds).
    """
    if not grid.in_bounds(cx, cy):
        return 0

    end = cy
    while end + 1 < grid.height and is_passable(grid.material_at(cx, end + 1)):
        end += 1

    for y in range(cy, end + 1):
        grid.put(cx, y, Material.LIGHTNING, BOLT_LIFE)

    below = end + 1
    if is_water(grid.material_at(cx, below)):
        grid.set_life(cx, below, max(grid.life_at(cx, below), BOLT_WATER_CHARGE))

    logger.debug("Lightning at x=%d from y=%d to y=%d", cx, cy, end)
    return end - cy + 1


def explode(
    grid: Grid,
    rng: LcgRandom,
    cx: int,
    cy: int,
    radius: int,
    updated: NDArray[np.bool_] | None = None,
) -> None:
    """Blast every destructible cell within ``radius`` of ``(cx, cy)``.

    Each affected cell rolls 1-100: up to 50 becomes fire, up to 80 smoke,
    the rest flammable gas.  Indestructible materials are skipped without
    consuming a roll.

    Args:
        grid: Target grid.
        rng: Engine random source.
        cx: Centre column.
        cy: Centre row.
        radius: Blast radius in cells.
        updated: Current tick's update mask, when called from a rule.
    """
    logger.debug("Explosion at (%d, %d) radius %d", cx, cy, radius)
    for x, y in _disc(cx, cy, radius):
        if not grid.in_bounds(x, y):
            continue
        if is_indestructible(grid.material_at(x, y)):
            continue
        roll = rng.range_inclusive(1, 100)
        if roll <= 50:
            grid.put(x, y, Material.FIRE, 15 + rng.range_inclusive(0, 10))
        elif roll <= 80:
            grid.put(x, y, Material.SMOKE, 20)
        else:
            grid.put(x, y, Material.GAS, 20)
        if updated is not None:
            updated[grid.index(x, y)] = True
