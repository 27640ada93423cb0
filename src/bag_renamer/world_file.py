"""JSON world fixtures for the ``simulate`` command.

Example::

    {
      "world_size": 3000,
      "default_biome": "Temperate",
      "biome_zones": [{"biome": "Arid", "min_x": 0, "max_x": 1500, "min_z": -1500, "max_z": 0}],
      "monuments": [{"prefab": "assets/bundled/prefabs/autospawn/monument/small/gas_station_1.prefab",
                     "position": [120, 0, -300]}],
      "players": [{"user_id": "7656", "display_name": "Raider", "permissions": ["autobagrenamer.use"]}],
      "placements": [{"user_id": "7656", "position": [100, 5, -280]}]
    }
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .configuration import ConfigurationError
from .grid import DEFAULT_CELL_SIZE
from .host.memory import InMemoryPermissions, InMemoryWorld, StaticTerrain
from .models import SLEEPING_BAG_KIND, Player, Vector3

SLEEPING_BAG_PREFAB = "assets/prefabs/deployable/sleeping bag/sleepingbag_leather_deployed.prefab"


class BiomeZone(BaseModel):
    biome: str
    min_x: float
    max_x: float
    min_z: float
    max_z: float

    def contains(self, position: Vector3) -> bool:
        return self.min_x <= position.x <= self.max_x and self.min_z <= position.z <= self.max_z


class MonumentSpec(BaseModel):
    prefab: str
    position: tuple[float, float, float]


class PlayerSpec(BaseModel):
    user_id: str
    display_name: str
    permissions: list[str] = Field(default_factory=list)


class PlacementSpec(BaseModel):
    user_id: str
    position: tuple[float, float, float]
    kind: str = SLEEPING_BAG_KIND
    prefab: str = SLEEPING_BAG_PREFAB
    display_name: str = "Sleeping Bag"


class WorldFixture(BaseModel):
    world_size: int = 4000
    grid_cell_size: float = DEFAULT_CELL_SIZE
    default_biome: str = "Temperate"
    biome_zones: list[BiomeZone] = Field(default_factory=list)
    monuments: list[MonumentSpec] = Field(default_factory=list)
    players: list[PlayerSpec] = Field(default_factory=list)
    placements: list[PlacementSpec] = Field(default_factory=list)

    def build_terrain(self) -> StaticTerrain:
        zones = list(self.biome_zones)

        def _rule(position: Vector3) -> str | None:
            for zone in zones:
                if zone.contains(position):
                    return zone.biome
            return None

        return StaticTerrain(
            world_size=self.world_size,
            cell_size=self.grid_cell_size,
            default_biome=self.default_biome,
            biome_rule=_rule,
        )

    def build_world(self) -> InMemoryWorld:
        world = InMemoryWorld()
        for monument in self.monuments:
            world.add_object(monument.prefab, Vector3(*monument.position))
        return world

    def build_permissions(self) -> InMemoryPermissions:
        permissions = InMemoryPermissions()
        for player in self.players:
            for name in player.permissions:
                permissions.grant(player.user_id, name)
        return permissions

    def player_map(self) -> dict[str, Player]:
        return {p.user_id: Player(user_id=p.user_id, display_name=p.display_name) for p in self.players}


def load_world_fixture(path: str | Path) -> WorldFixture:
    fixture_path = Path(path)
    try:
        return WorldFixture.model_validate(json.loads(fixture_path.read_text(encoding="utf-8")))
    except (OSError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Unable to load world fixture {fixture_path}: {exc}") from exc
