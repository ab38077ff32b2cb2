"""Cell — the value held by a single grid slot.

Cells are plain values: the grid stores their fields in flat arrays and
builds a ``Cell`` only when a caller asks for one.
"""

from __future__ import annotations

from dataclasses import dataclass

from sandfall.world.materials import Material


@dataclass(frozen=True)
class Cell:
    """A single grid slot.

    Attributes:
        material: The substance occupying the slot.
        life: Overloaded per-material counter.  Burn or gas lifetime for
            fire and gases, electrical charge for conductors and water,
            wetness for wet dirt, submersion time for sand and an
            animation counter for humans and zombies.
    """

    material: Material = Material.EMPTY
    life: int = 0


EMPTY_CELL = Cell()
