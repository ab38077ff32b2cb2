"""Materials — the closed set of substances a cell can hold.

Category membership (powder, liquid, gas, ...) is never stored on a cell.
It is resolved on demand by the predicate functions in this module, which
are the only place that knows which material belongs where.
"""

from __future__ import annotations

from enum import IntEnum


class Material(IntEnum):
    """Every substance known to the simulation.

    Values are small integers so a whole grid fits in a ``uint8`` buffer.
    """

    EMPTY = 0
    # powders
    SAND = 1
    GUNPOWDER = 2
    ASH = 3
    SNOW = 4
    # liquids
    WATER = 5
    SALT_WATER = 6
    OIL = 7
    ETHANOL = 8
    ACID = 9
    LAVA = 10
    MERCURY = 11
    # solids / terrain
    STONE = 12
    GLASS = 13
    WALL = 14
    WOOD = 15
    PLANT = 16
    METAL = 17
    WIRE = 18
    ICE = 19
    COAL = 20
    DIRT = 21
    WET_DIRT = 22
    SEAWEED = 23
    # gases
    SMOKE = 24
    STEAM = 25
    GAS = 26
    TOXIC_GAS = 27
    HYDROGEN = 28
    CHLORINE = 29
    # specials
    FIRE = 30
    LIGHTNING = 31
    HUMAN = 32
    ZOMBIE = 33

    @classmethod
    def from_name(cls, name: str) -> Material:
        """Parse a material from a loose, human-written name.

        ``"salt water"``, ``"salt_water"``, ``"SaltWater"`` and
        ``"SALT-WATER"`` all resolve to :attr:`SALT_WATER`.

        Raises:
            ValueError: If the name matches no material.
        """
        key = "".join(ch for ch in name if ch.isalnum()).upper()
        for member in cls:
            if member.name.replace("_", "") == key:
                return member
        msg = f"unknown material {name!r}"
        raise ValueError(msg)


_POWDERS = frozenset(
    {Material.SAND, Material.GUNPOWDER, Material.ASH, Material.SNOW},
)

_LIQUIDS = frozenset(
    {
        Material.WATER,
        Material.SALT_WATER,
        Material.OIL,
        Material.ETHANOL,
        Material.ACID,
        Material.LAVA,
        Material.MERCURY,
    },
)

_SOLIDS = frozenset(
    {
        Material.STONE,
        Material.GLASS,
        Material.WALL,
        Material.WOOD,
        Material.PLANT,
        Material.METAL,
        Material.WIRE,
        Material.ICE,
        Material.COAL,
        Material.DIRT,
        Material.WET_DIRT,
        Material.SEAWEED,
    },
)

_GASES = frozenset(
    {
        Material.SMOKE,
        Material.STEAM,
        Material.GAS,
        Material.TOXIC_GAS,
        Material.HYDROGEN,
        Material.CHLORINE,
    },
)

_SPECIALS = frozenset(
    {Material.FIRE, Material.LIGHTNING, Material.HUMAN, Material.ZOMBIE},
)

_FLAMMABLE = frozenset(
    {
        Material.WOOD,
        Material.PLANT,
        Material.OIL,
        Material.ETHANOL,
        Material.GUNPOWDER,
        Material.COAL,
        Material.SEAWEED,
    },
)

_DISSOLVABLE = frozenset(
    {
        Material.SAND,
        Material.STONE,
        Material.GLASS,
        Material.WOOD,
        Material.PLANT,
        Material.METAL,
        Material.WIRE,
        Material.ASH,
        Material.COAL,
        Material.SEAWEED,
        Material.DIRT,
        Material.WET_DIRT,
    },
)

_HAZARDS = frozenset(
    {
        Material.FIRE,
        Material.LAVA,
        Material.ACID,
        Material.TOXIC_GAS,
        Material.CHLORINE,
        Material.LIGHTNING,
    },
)

# Explosions leave these untouched.
_INDESTRUCTIBLE = frozenset(
    {
        Material.WALL,
        Material.STONE,
        Material.GLASS,
        Material.METAL,
        Material.WIRE,
        Material.ICE,
    },
)

_DENSITY: dict[Material, int] = {
    Material.MERCURY: 200,
    Material.LAVA: 160,
    Material.ACID: 110,
    Material.SALT_WATER: 103,
    Material.WATER: 100,
    Material.OIL: 90,
    Material.ETHANOL: 85,
    Material.CHLORINE: 5,
    Material.SMOKE: 3,
    Material.STEAM: 2,
    Material.GAS: 1,
    Material.HYDROGEN: 1,
}

_DEFAULT_DENSITY = 999


def is_powder(m: Material) -> bool:
    """Return True for granular materials that fall and pile up."""
    return m in _POWDERS


def is_liquid(m: Material) -> bool:
    """Return True for materials that fall and flow sideways."""
    return m in _LIQUIDS


def is_gas(m: Material) -> bool:
    """Return True for materials that rise and expire."""
    return m in _GASES


def is_solid(m: Material) -> bool:
    """Return True for stationary terrain."""
    return m in _SOLIDS


def is_special(m: Material) -> bool:
    """Return True for fire, lightning and the two actors."""
    return m in _SPECIALS


def is_flammable(m: Material) -> bool:
    return m in _FLAMMABLE


def is_dissolvable(m: Material) -> bool:
    """Return True for materials acid can eat through."""
    return m in _DISSOLVABLE


def is_hazard(m: Material) -> bool:
    """Return True for materials that kill humans and zombies on contact."""
    return m in _HAZARDS


def is_indestructible(m: Material) -> bool:
    return m in _INDESTRUCTIBLE


def is_water(m: Material) -> bool:
    """Return True for the two conductive water variants."""
    return m in (Material.WATER, Material.SALT_WATER)


def is_conductor(m: Material) -> bool:
    return m in (Material.WIRE, Material.METAL)


def is_heat_source(m: Material) -> bool:
    """Return True for materials that ignite, melt or detonate neighbours."""
    return m in (Material.FIRE, Material.LAVA)


def is_explosive_gas(m: Material) -> bool:
    return m in (Material.HYDROGEN, Material.GAS)


def is_passable(m: Material) -> bool:
    """Return True if a moving particle or actor may enter a cell of ``m``."""
    return m == Material.EMPTY or m in _GASES


def density(m: Material) -> int:
    """Relative density used to sort liquids and gases.

    Materials without a listed density are treated as immovably heavy.
    """
    return _DENSITY.get(m, _DEFAULT_DENSITY)
