"""In-memory host services.

These stand in for the game server when driving the renamer from tests or the
``simulate`` command. They behave like the live services: enumeration order is
insertion order, destroyed entities disappear from lookups, and unknown
biomes are passed through untouched.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Callable, Iterable

from bag_renamer.grid import DEFAULT_CELL_SIZE, position_to_grid
from bag_renamer.models import Biome, Vector3, WorldEntity, WorldObject

logger = logging.getLogger("bag_renamer.host.memory")


class InMemoryPermissions:
    """Permission registry keyed by user id."""

    def __init__(self) -> None:
        self._registered: dict[str, str] = {}
        self._grants: dict[str, set[str]] = defaultdict(set)

    @property
    def registered(self) -> dict[str, str]:
        return dict(self._registered)

    def register_permission(self, name: str, owner: str) -> None:
        self._registered[name] = owner

    def grant(self, user_id: str, name: str) -> None:
        self._grants[user_id].add(name)

    def revoke(self, user_id: str, name: str) -> None:
        self._grants[user_id].discard(name)

    def user_has_permission(self, user_id: str, name: str) -> bool:
        if name not in self._registered:
            return False
        return name in self._grants.get(user_id, ())


@dataclass(slots=True)
class StaticTerrain:
    """Terrain with a fixed biome per position rule and the standard map grid."""

    world_size: float = 4000
    cell_size: float = DEFAULT_CELL_SIZE
    default_biome: Biome | str | int = Biome.temperate
    biome_rule: Callable[[Vector3], Biome | str | int | None] | None = None

    def biome_at(self, position: Vector3) -> Biome | str | int:
        if self.biome_rule is not None:
            biome = self.biome_rule(position)
            if biome is not None:
                return biome
        return self.default_biome

    def grid_label_at(self, position: Vector3) -> str:
        return position_to_grid(position, self.world_size, self.cell_size)


@dataclass(slots=True)
class InMemoryWorld:
    """Entity registry holding static world objects plus spawned entities."""

    objects: list[WorldObject] = field(default_factory=list)
    entities: dict[int, WorldEntity] = field(default_factory=dict)
    _next_id: int = field(default=1, init=False, repr=False)

    def add_object(self, identifier: str, position: Vector3) -> WorldObject:
        obj = WorldObject(identifier=identifier, position=position)
        self.objects.append(obj)
        return obj

    def spawn(
        self,
        *,
        prefab: str,
        kind: str,
        position: Vector3,
        display_name: str = "",
        owner_id: str | None = None,
    ) -> WorldEntity:
        entity = WorldEntity(
            entity_id=self._next_id,
            prefab=prefab,
            kind=kind,
            position=position,
            display_name=display_name,
            owner_id=owner_id,
        )
        self._next_id += 1
        self.entities[entity.entity_id] = entity
        return entity

    def destroy(self, entity_id: int) -> None:
        self.entities.pop(entity_id, None)

    def live_objects(self) -> Iterable[WorldObject]:
        yield from self.objects
        for entity in self.entities.values():
            yield WorldObject(identifier=entity.prefab, position=entity.position)

    def find_entity(self, entity_id: int) -> WorldEntity | None:
        return self.entities.get(entity_id)

    def set_display_name(self, entity: WorldEntity, name: str) -> None:
        logger.debug("display_name_set", extra={"entity_id": entity.entity_id, "display_name": name})
        entity.display_name = name
