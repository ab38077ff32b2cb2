"""Tests for sandfall.world — materials, cells and the grid store."""

import numpy as np
import pytest

from sandfall.world.cell import Cell
from sandfall.world.grid import CELL_DTYPE, Grid
from sandfall.world.materials import (
    Material,
    density,
    is_flammable,
    is_gas,
    is_indestructible,
    is_liquid,
    is_passable,
    is_powder,
    is_solid,
    is_special,
)


class TestMaterials:
    """Tests for classification predicates and name parsing."""

    def test_every_material_has_exactly_one_category(self) -> None:
        for m in Material:
            memberships = [
                m == Material.EMPTY,
                is_powder(m),
                is_liquid(m),
                is_gas(m),
                is_solid(m),
                is_special(m),
            ]
            assert sum(memberships) == 1, m

    def test_material_count(self) -> None:
        assert len(Material) == 34

    def test_values_fit_in_a_byte(self) -> None:
        assert max(Material) < 256

    @pytest.mark.parametrize(
        "text",
        ["salt water", "salt_water", "SaltWater", "SALT-WATER"],
    )
    def test_from_name_is_forgiving(self, text: str) -> None:
        assert Material.from_name(text) is Material.SALT_WATER

    def test_from_name_unknown(self) -> None:
        with pytest.raises(ValueError, match="unknown material"):
            Material.from_name("unobtainium")

    def test_liquid_density_order(self) -> None:
        ordered = [
            Material.MERCURY,
            Material.LAVA,
            Material.ACID,
            Material.SALT_WATER,
            Material.WATER,
            Material.OIL,
            Material.ETHANOL,
            Material.CHLORINE,
            Material.SMOKE,
            Material.STEAM,
            Material.GAS,
        ]
        values = [density(m) for m in ordered]
        assert values == sorted(values, reverse=True)
        assert density(Material.GAS) == density(Material.HYDROGEN) == 1

    def test_unlisted_density_is_heavy(self) -> None:
        assert density(Material.STONE) == 999

    def test_gunpowder_is_flammable_powder(self) -> None:
        assert is_powder(Material.GUNPOWDER)
        assert is_flammable(Material.GUNPOWDER)

    def test_indestructibles(self) -> None:
        expected = {
            Material.WALL,
            Material.STONE,
            Material.GLASS,
            Material.METAL,
            Material.WIRE,
            Material.ICE,
        }
        assert {m for m in Material if is_indestructible(m)} == expected

    def test_passable(self) -> None:
        assert is_passable(Material.EMPTY)
        assert is_passable(Material.SMOKE)
        assert not is_passable(Material.WATER)
        assert not is_passable(Material.FIRE)


class TestCell:
    """Tests for the Cell value type."""

    def test_default_values(self) -> None:
        cell = Cell()
        assert cell.material is Material.EMPTY
        assert cell.life == 0

    def test_cells_compare_by_value(self) -> None:
        assert Cell(Material.SAND, 3) == Cell(Material.SAND, 3)
        assert Cell(Material.SAND, 3) != Cell(Material.SAND, 4)


class TestGrid:
    """Tests for the Grid store."""

    def test_dimensions(self, small_grid: Grid) -> None:
        assert small_grid.width == 8
        assert small_grid.height == 8
        assert small_grid.size == 64
        assert small_grid.materials.shape == (64,)

    def test_starts_empty(self, small_grid: Grid) -> None:
        assert small_grid.count(Material.EMPTY) == 64
        assert not small_grid.life.any()

    def test_negative_dimensions_clamp(self) -> None:
        grid = Grid(width=-4, height=3)
        assert grid.width == 0
        assert grid.height == 3
        assert grid.size == 0

    def test_non_integer_dimensions_rejected(self) -> None:
        with pytest.raises(TypeError):
            Grid(width=2.5, height=3)

    def test_row_major_index(self, small_grid: Grid) -> None:
        assert small_grid.index(3, 2) == 2 * 8 + 3
        small_grid.put(3, 2, Material.SAND, 7)
        assert small_grid.materials[19] == Material.SAND
        assert small_grid.life[19] == 7

    def test_get_set_roundtrip(self, small_grid: Grid) -> None:
        assert small_grid.set(1, 6, Cell(Material.OIL, 4))
        assert small_grid.get(1, 6) == Cell(Material.OIL, 4)

    @pytest.mark.parametrize("xy", [(-1, 0), (0, -1), (8, 0), (0, 8), (100, 100)])
    def test_out_of_bounds_is_silent(self, small_grid: Grid, xy: tuple[int, int]) -> None:
        x, y = xy
        assert small_grid.get(x, y) == Cell(Material.EMPTY, 0)
        assert small_grid.material_at(x, y) is Material.EMPTY
        assert small_grid.life_at(x, y) == 0
        assert small_grid.set(x, y, Cell(Material.WALL, 1)) is False
        assert small_grid.set_life(x, y, 5) is False
        assert small_grid.count(Material.WALL) == 0

    def test_zero_area_grid(self) -> None:
        grid = Grid(width=0, height=0)
        assert grid.get(0, 0) == Cell()
        assert grid.set(0, 0, Cell(Material.SAND)) is False
        assert list(grid.neighbours(0, 0)) == []

    def test_material_at_returns_enum(self, small_grid: Grid) -> None:
        small_grid.put(0, 0, Material.LAVA)
        assert isinstance(small_grid.material_at(0, 0), Material)

    def test_swap(self, small_grid: Grid) -> None:
        small_grid.put(0, 0, Material.SAND, 3)
        small_grid.put(1, 1, Material.WATER, 9)
        small_grid.swap(0, 0, 1, 1)
        assert small_grid.get(0, 0) == Cell(Material.WATER, 9)
        assert small_grid.get(1, 1) == Cell(Material.SAND, 3)

    def test_clear(self, small_grid: Grid) -> None:
        small_grid.put(2, 2, Material.STONE, 1)
        small_grid.clear()
        assert small_grid.count(Material.EMPTY) == 64
        assert small_grid.width == 8

    def test_resize_drops_content(self, small_grid: Grid) -> None:
        small_grid.put(2, 2, Material.STONE)
        small_grid.resize(3, 5)
        assert (small_grid.width, small_grid.height) == (3, 5)
        assert small_grid.size == 15
        assert small_grid.count(Material.STONE) == 0

    def test_neighbours_scan_order(self) -> None:
        grid = Grid(width=3, height=3)
        assert list(grid.neighbours(1, 1)) == [
            (0, 0),
            (1, 0),
            (2, 0),
            (0, 1),
            (2, 1),
            (0, 2),
            (1, 2),
            (2, 2),
        ]

    def test_neighbours_corner(self, small_grid: Grid) -> None:
        assert list(small_grid.neighbours(0, 0)) == [(1, 0), (0, 1), (1, 1)]

    def test_neighbours_include_self_and_radius(self, small_grid: Grid) -> None:
        assert len(list(small_grid.neighbours(4, 4, 2, include_self=True))) == 25
        assert (4, 4) not in list(small_grid.neighbours(4, 4, 2))

    def test_snapshot_shape(self, small_grid: Grid) -> None:
        small_grid.put(5, 1, Material.ICE, 2)
        snap = small_grid.snapshot()
        assert snap.shape == (8, 8, 2)
        assert snap[1, 5, 0] == Material.ICE
        assert snap[1, 5, 1] == 2


class TestExport:
    """Tests for bulk row-major export."""

    def test_export_into_numpy_buffer(self) -> None:
        grid = Grid(width=3, height=2)
        grid.put(1, 0, Material.SAND, 3)
        grid.put(2, 1, Material.WALL)
        buffer = np.zeros(6, dtype=CELL_DTYPE)
        assert grid.export(buffer) == 6
        assert buffer["material"][1] == Material.SAND
        assert buffer["life"][1] == 3
        assert buffer["material"][5] == Material.WALL

    def test_export_truncates_to_buffer(self) -> None:
        grid = Grid(width=3, height=2)
        grid.put(2, 1, Material.WALL)
        buffer = np.zeros(4, dtype=CELL_DTYPE)
        assert grid.export(buffer) == 4
        assert not (buffer["material"] == Material.WALL).any()

    def test_export_into_list(self) -> None:
        grid = Grid(width=2, height=2)
        grid.put(0, 1, Material.OIL, 1)
        sentinel = object()
        buffer: list = [sentinel] * 6
        assert grid.export(buffer) == 4
        assert buffer[2] == Cell(Material.OIL, 1)
        assert buffer[0] == Cell()
        assert buffer[4] is sentinel
