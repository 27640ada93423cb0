"""Boundary for the host game-server services the renamer queries."""

from __future__ import annotations

from typing import Callable, Iterable, Protocol

from bag_renamer.models import Biome, Vector3, WorldEntity, WorldObject


class PermissionService(Protocol):
    """Host permission registry."""

    def register_permission(self, name: str, owner: str) -> None:
        """Declare a permission owned by a plugin."""

    def user_has_permission(self, user_id: str, name: str) -> bool:
        """Return whether ``user_id`` holds ``name``."""


class TerrainService(Protocol):
    """Terrain and map queries at a world position."""

    def biome_at(self, position: Vector3) -> Biome | str | int:
        """Return the dominant biome at ``position``; unknown values are allowed."""

    def grid_label_at(self, position: Vector3) -> str:
        """Return the map grid cell label containing ``position``."""


class EntityRegistry(Protocol):
    """Live world objects currently loaded by the host."""

    def live_objects(self) -> Iterable[WorldObject]:
        """Enumerate every loaded object; order is unspecified."""

    def find_entity(self, entity_id: int) -> WorldEntity | None:
        """Return the entity if it still exists."""

    def set_display_name(self, entity: WorldEntity, name: str) -> None:
        """Apply a new display name to ``entity``."""


class TickScheduler(Protocol):
    """Defers work until the host finishes its current unit of work."""

    def next_tick(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` once, after current processing and before the next event."""
