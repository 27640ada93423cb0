"""Resolves the placeholder values for one bag."""

from __future__ import annotations

import logging
from typing import Callable

from .biome import biome_label
from .configuration import RenamerConfig
from .host.interfaces import TerrainService
from .landmarks import LandmarkLocator
from .models import Vector3

logger = logging.getLogger("bag_renamer.resolver")


class AttributeResolver:
    """Looks up grid, biome, landmark and player values, each behind its own toggle."""

    def __init__(self, terrain: TerrainService, landmarks: LandmarkLocator) -> None:
        self._terrain = terrain
        self._landmarks = landmarks

    def resolve(self, position: Vector3, player_name: str | None, config: RenamerConfig) -> dict[str, str]:
        return {
            "grid": self._safe_lookup("grid", config.rename_by_grid, lambda: self._terrain.grid_label_at(position)),
            "biome": self._safe_lookup(
                "biome", config.rename_by_biome, lambda: biome_label(self._terrain.biome_at(position))
            ),
            "landmark": self._safe_lookup(
                "landmark", config.rename_by_landmark, lambda: self._landmarks.nearest(position)
            ),
            "player": (player_name or "") if config.rename_by_player else "",
        }

    @staticmethod
    def _safe_lookup(name: str, enabled: bool, lookup: Callable[[], str | None]) -> str:
        if not enabled:
            return ""
        try:
            value = lookup()
        except Exception:  # noqa: BLE001 - one failed lookup must not cost the other attributes.
            logger.exception("attribute_lookup_failed", extra={"attribute": name})
            return ""
        return value or ""
