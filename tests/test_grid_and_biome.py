from __future__ import annotations

import pytest

from bag_renamer.biome import UNKNOWN_BIOME_LABEL, biome_label
from bag_renamer.grid import column_letters, position_to_grid
from bag_renamer.models import Biome, Vector3


@pytest.mark.parametrize(("index", "letters"), [(1, "A"), (26, "Z"), (27, "AA"), (52, "AZ"), (53, "BA")])
def test_column_letters(index: int, letters: str) -> None:
    assert column_letters(index) == letters


def test_column_letters_rejects_zero() -> None:
    with pytest.raises(ValueError):
        column_letters(0)


def test_north_west_corner_is_a0() -> None:
    assert position_to_grid(Vector3(-2000, 0, 2000), 4000) == "A0"


def test_cell_offsets_from_corner() -> None:
    cell = 146.3
    position = Vector3(-2000 + 2.5 * cell, 0, 2000 - 4.5 * cell)

    assert position_to_grid(position, 4000, cell) == "C4"


def test_positions_outside_map_are_clamped() -> None:
    assert position_to_grid(Vector3(-9000, 0, 9000), 4000) == "A0"
    assert position_to_grid(Vector3(9000, 0, -9000), 1000) == "G6"


@pytest.mark.parametrize(
    ("value", "label"),
    [
        (Biome.arctic, "Arctic"),
        (Biome.arid, "Arid"),
        ("tundra", "Tundra"),
        ("Temperate", "Temperate"),
        (8, "Arctic"),
        (1, "Arid"),
    ],
)
def test_known_biomes(value, label: str) -> None:
    assert biome_label(value) == label


@pytest.mark.parametrize("value", ["Jungle", 16, 0, None, True, ""])
def test_unknown_biome_uses_default_label(value) -> None:
    assert biome_label(value) == UNKNOWN_BIOME_LABEL
    assert biome_label(value) != ""
