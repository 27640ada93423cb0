from __future__ import annotations

from .models import Biome

UNKNOWN_BIOME_LABEL = "Unnamed Bag"

# Host terrain encodes biomes as bit flags.
_BIOME_FLAGS = {1: Biome.arid, 2: Biome.temperate, 4: Biome.tundra, 8: Biome.arctic}


def biome_label(value: Biome | str | int | None) -> str:
    """Display label for a host biome value; anything unrecognised is "Unnamed Bag"."""
    if isinstance(value, Biome):
        return value.value
    if isinstance(value, bool):
        return UNKNOWN_BIOME_LABEL
    if isinstance(value, int):
        biome = _BIOME_FLAGS.get(value)
        return biome.value if biome else UNKNOWN_BIOME_LABEL
    if isinstance(value, str):
        for biome in Biome:
            if value.lower() == biome.value.lower():
                return biome.value
    return UNKNOWN_BIOME_LABEL
