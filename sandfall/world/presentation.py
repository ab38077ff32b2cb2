"""Presentation lookups for renderers.

Pure, stateless mappings from a material (and its counter) to a display
name, a small palette index and a single-character glyph.  Nothing in the
simulation reads these; they exist for whatever draws the grid.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sandfall.world.materials import Material, is_water

if TYPE_CHECKING:
    from sandfall.world.grid import Grid

# Palette index used for charged water regardless of material colour.
CHARGED_WATER_COLOUR = 9

_NAMES: dict[Material, str] = {
    Material.EMPTY: "Empty",
    Material.SAND: "Sand",
    Material.GUNPOWDER: "Gunpowder",
    Material.ASH: "Ash",
    Material.SNOW: "Snow",
    Material.WATER: "Water",
    Material.SALT_WATER: "Salt Water",
    Material.OIL: "Oil",
    Material.ETHANOL: "Ethanol",
    Material.ACID: "Acid",
    Material.LAVA: "Lava",
    Material.MERCURY: "Mercury",
    Material.STONE: "Stone",
    Material.GLASS: "Glass",
    Material.WALL: "Wall",
    Material.WOOD: "Wood",
    Material.PLANT: "Plant",
    Material.METAL: "Metal",
    Material.WIRE: "Wire",
    Material.ICE: "Ice",
    Material.COAL: "Coal",
    Material.DIRT: "Dirt",
    Material.WET_DIRT: "Wet Dirt",
    Material.SEAWEED: "Seaweed",
    Material.SMOKE: "Smoke",
    Material.STEAM: "Steam",
    Material.GAS: "Gas",
    Material.TOXIC_GAS: "Toxic Gas",
    Material.HYDROGEN: "Hydrogen",
    Material.CHLORINE: "Chlorine",
    Material.FIRE: "Fire",
    Material.LIGHTNING: "Lightning",
    Material.HUMAN: "Human",
    Material.ZOMBIE: "Zombie",
}

# Palette groups, 1-9:
# 1 background, 2 yellow powders, 3 cyan water-ish, 4 white solids,
# 5 green life, 6 red danger, 7 magenta haze, 8 blue heavy liquids,
# 9 chemicals and electricity.
_PALETTE_GROUPS: dict[int, tuple[Material, ...]] = {
    1: (Material.EMPTY,),
    2: (Material.SAND, Material.GUNPOWDER, Material.SNOW, Material.DIRT),
    3: (
        Material.WATER,
        Material.SALT_WATER,
        Material.STEAM,
        Material.ICE,
        Material.ETHANOL,
    ),
    4: (
        Material.STONE,
        Material.GLASS,
        Material.WALL,
        Material.METAL,
        Material.WIRE,
        Material.COAL,
        Material.WET_DIRT,
    ),
    5: (Material.WOOD, Material.PLANT, Material.SEAWEED, Material.HUMAN),
    6: (Material.FIRE, Material.LAVA, Material.ZOMBIE),
    7: (Material.SMOKE, Material.ASH, Material.GAS, Material.HYDROGEN),
    8: (Material.OIL, Material.MERCURY),
    9: (
        Material.ACID,
        Material.TOXIC_GAS,
        Material.CHLORINE,
        Material.LIGHTNING,
    ),
}

_COLOURS: dict[Material, int] = {
    m: index for index, members in _PALETTE_GROUPS.items() for m in members
}

_GLYPHS: dict[Material, str] = {
    Material.EMPTY: " ",
    Material.SAND: ".",
    Material.GUNPOWDER: "%",
    Material.ASH: ";",
    Material.SNOW: ",",
    Material.WATER: "~",
    Material.SALT_WATER: ":",
    Material.OIL: "o",
    Material.ETHANOL: "e",
    Material.ACID: "a",
    Material.LAVA: "L",
    Material.MERCURY: "m",
    Material.STONE: "#",
    Material.GLASS: "=",
    Material.WALL: "@",
    Material.WOOD: "w",
    Material.PLANT: "p",
    Material.SEAWEED: "v",
    Material.METAL: "M",
    Material.WIRE: "-",
    Material.ICE: "I",
    Material.COAL: "c",
    Material.DIRT: "d",
    Material.WET_DIRT: "D",
    Material.SMOKE: "^",
    Material.STEAM: '"',
    Material.GAS: "`",
    Material.TOXIC_GAS: "x",
    Material.HYDROGEN: "'",
    Material.CHLORINE: "X",
    Material.FIRE: "*",
    Material.LIGHTNING: "|",
}

# Actors alternate between two frames every six ticks.
_ACTOR_FRAMES: dict[Material, tuple[str, str]] = {
    Material.HUMAN: ("Y", "y"),
    Material.ZOMBIE: ("T", "t"),
}
_FRAME_TICKS = 6


def name_of(material: Material) -> str:
    """Human-readable material name, e.g. ``"Salt Water"``."""
    return _NAMES[material]


def color_of(material: Material, life: int = 0) -> int:
    """Palette index 1-9 for ``material``.

    Charged water (life > 0) always maps to ``CHARGED_WATER_COLOUR``.
    """
    if is_water(material) and life > 0:
        return CHARGED_WATER_COLOUR
    return _COLOURS[material]


def glyph_of(material: Material, life: int = 0) -> str:
    """Single-character glyph for text renderers."""
    frames = _ACTOR_FRAMES.get(material)
    if frames is not None:
        return frames[1 if int(life / _FRAME_TICKS) % 2 != 0 else 0]
    return _GLYPHS[material]


def render_ascii(grid: Grid) -> str:
    """Render the whole grid as newline-separated rows of glyphs."""
    rows = []
    for y in range(grid.height):
        rows.append(
            "".join(
                glyph_of(grid.material_at(x, y), grid.life_at(x, y))
                for x in range(grid.width)
            ),
        )
    return "\n".join(rows)
