"""Dispatch table from material to the rule that resolves it.

Built from the classification predicates so category membership stays
defined in one place.  Materials without an entry (empty space, wall,
stone, glass, dirt) are inert.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.rules.actors import step_human, step_zombie
from sandfall.rules.fire import step_fire, step_lightning
from sandfall.rules.gas import step_gas
from sandfall.rules.liquid import step_liquid
from sandfall.rules.powder import step_powder
from sandfall.rules.terrain import (
    step_burnable_solid,
    step_conductor,
    step_ice,
    step_plant_like,
    step_wet_dirt,
)
from sandfall.world.materials import Material, is_gas, is_liquid, is_powder

if TYPE_CHECKING:
    from sandfall.rules.common import Rule


def _build_table() -> dict[Material, Rule]:
    table: dict[Material, Rule] = {}
    for material in Material:
        if is_powder(material):
            table[material] = step_powder
        elif is_liquid(material):
            table[material] = step_liquid
        elif is_gas(material):
            table[material] = step_gas
    table.update(
        {
            Material.FIRE: step_fire,
            Material.LIGHTNING: step_lightning,
            Material.HUMAN: step_human,
            Material.ZOMBIE: step_zombie,
            Material.WET_DIRT: step_wet_dirt,
            Material.PLANT: step_plant_like,
            Material.SEAWEED: step_plant_like,
            Material.WOOD: step_burnable_solid,
            Material.COAL: step_burnable_solid,
            Material.WIRE: step_conductor,
            Material.METAL: step_conductor,
            Material.ICE: step_ice,
        },
    )
    return table


RULES: dict[Material, Rule] = _build_table()


def rule_for(material: Material) -> Rule | None:
    """Return the rule for ``material``, or None if it never changes."""
    return RULES.get(material)
