from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SLEEPING_BAG_KIND = "sleepingbag"


class Biome(str, Enum):
    arctic = "Arctic"
    tundra = "Tundra"
    temperate = "Temperate"
    arid = "Arid"


@dataclass(slots=True, frozen=True)
class Vector3:
    x: float
    y: float
    z: float

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(slots=True, frozen=True)
class Player:
    user_id: str
    display_name: str


@dataclass(slots=True)
class WorldEntity:
    """A live object the host has constructed; ``display_name`` is mutable."""

    entity_id: int
    prefab: str
    kind: str
    position: Vector3
    display_name: str = ""
    owner_id: str | None = None

    @property
    def is_sleeping_bag(self) -> bool:
        return self.kind == SLEEPING_BAG_KIND


@dataclass(slots=True, frozen=True)
class WorldObject:
    identifier: str
    position: Vector3


@dataclass(slots=True, frozen=True)
class BuildEvent:
    """Host notification that ``actor`` finished constructing ``entity``."""

    actor: Player | None
    entity: WorldEntity | None


@dataclass(slots=True, frozen=True)
class RenameRequest:
    """Deferred rename, referencing the bag and its owner by id only."""

    entity_id: int
    owner_id: str
    owner_name: str
