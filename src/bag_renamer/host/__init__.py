"""Host game-server services consumed by the renamer."""

from .interfaces import EntityRegistry, PermissionService, TerrainService, TickScheduler
from .memory import InMemoryPermissions, InMemoryWorld, StaticTerrain
from .scheduling import AsyncioTickScheduler, ManualTickScheduler

__all__ = [
    "AsyncioTickScheduler",
    "EntityRegistry",
    "InMemoryPermissions",
    "InMemoryWorld",
    "ManualTickScheduler",
    "PermissionService",
    "StaticTerrain",
    "TerrainService",
    "TickScheduler",
]
