"""Map grid labels ("A0", "C4", "AB12") for world positions."""

from __future__ import annotations

import math

from .models import Vector3

DEFAULT_CELL_SIZE = 146.3


def column_letters(index: int) -> str:
    """Bijective base-26 column name for a 1-based index: 1 -> A, 26 -> Z, 27 -> AA."""
    if index < 1:
        raise ValueError(f"Column index must be >= 1, got {index}")

    letters = ""
    while index > 0:
        index, remainder = divmod(index - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def position_to_grid(position: Vector3, world_size: float, cell_size: float = DEFAULT_CELL_SIZE) -> str:
    """Columns count east from the west edge, rows count south from the north edge starting at 0.

    Positions outside the map are clamped to the border cell.
    """
    half = world_size / 2
    cells = max(1, math.ceil(world_size / cell_size))

    column = math.floor((position.x + half) / cell_size)
    row = math.floor((half - position.z) / cell_size)

    column = min(max(column, 0), cells - 1)
    row = min(max(row, 0), cells - 1)
    return f"{column_letters(column + 1)}{row}"
