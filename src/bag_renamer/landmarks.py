"""Nearest-monument lookup over the host's live world objects."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .host.interfaces import EntityRegistry
from .models import Vector3, WorldObject

MONUMENT_MARKER = "autospawn/monument"
PREFAB_SUFFIX = ".prefab"


@dataclass(slots=True, frozen=True)
class LandmarkMatch:
    identifier: str
    label: str
    distance: float


def simplify_identifier(identifier: str) -> str:
    """``assets/.../monument/banditcamp.prefab`` -> ``banditcamp``."""
    name = identifier.rsplit("/", 1)[-1]
    if name.endswith(PREFAB_SUFFIX):
        name = name[: -len(PREFAB_SUFFIX)]
    return name


def is_monument(identifier: str, marker: str = MONUMENT_MARKER) -> bool:
    return marker in identifier


class LandmarkLocator:
    """Scans every loaded object on each call; nothing is cached between calls."""

    def __init__(self, registry: EntityRegistry, *, marker: str = MONUMENT_MARKER) -> None:
        self._registry = registry
        self._marker = marker

    def nearest_match(self, position: Vector3) -> LandmarkMatch | None:
        best: WorldObject | None = None
        best_distance = math.inf
        origin = position.as_tuple()

        for obj in self._registry.live_objects():
            if not is_monument(obj.identifier, self._marker):
                continue
            distance = math.dist(origin, obj.position.as_tuple())
            # Exact ties go to the lexicographically smaller identifier.
            if distance < best_distance or (
                distance == best_distance and best is not None and obj.identifier < best.identifier
            ):
                best = obj
                best_distance = distance

        if best is None:
            return None
        return LandmarkMatch(identifier=best.identifier, label=simplify_identifier(best.identifier), distance=best_distance)

    def nearest(self, position: Vector3) -> str:
        match = self.nearest_match(position)
        return match.label if match else ""
