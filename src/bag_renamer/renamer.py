"""Plugin entry point: reacts to build events and renames sleeping bags."""

from __future__ import annotations

import logging

from .configuration import ConfigStore
from .eligibility import is_eligible
from .formatter import format_bag_name
from .host.interfaces import EntityRegistry, PermissionService, TerrainService, TickScheduler
from .landmarks import LandmarkLocator
from .models import BuildEvent, RenameRequest
from .permissions import register_permissions
from .resolver import AttributeResolver

logger = logging.getLogger("bag_renamer.renamer")


class BagRenamer:
    """Wires the host services to the rename pipeline.

    The rename itself runs one tick after the build event so the host has
    finished setting up the entity. The deferred step only carries ids and
    looks the bag up again before touching it.
    """

    def __init__(
        self,
        *,
        config_store: ConfigStore,
        permissions: PermissionService,
        terrain: TerrainService,
        registry: EntityRegistry,
        scheduler: TickScheduler,
        owner: str = "AutoBagRenamer",
    ) -> None:
        self._config_store = config_store
        self._permissions = permissions
        self._registry = registry
        self._scheduler = scheduler
        self._owner = owner
        self._resolver = AttributeResolver(terrain, LandmarkLocator(registry))

    @property
    def config_store(self) -> ConfigStore:
        return self._config_store

    def init(self) -> None:
        register_permissions(self._permissions, self._owner)
        logger.info("plugin_initialized", extra={"owner": self._owner})

    def unload(self) -> None:
        self._config_store.clear()
        logger.info("plugin_unloaded", extra={"owner": self._owner})

    def on_entity_built(self, event: BuildEvent) -> RenameRequest | None:
        """Schedule a rename for an eligible bag; returns the scheduled request."""
        if not is_eligible(event, self._permissions):
            return None

        request = RenameRequest(
            entity_id=event.entity.entity_id,
            owner_id=event.actor.user_id,
            owner_name=event.actor.display_name,
        )
        self._scheduler.next_tick(lambda: self.apply_rename(request))
        logger.debug("rename_scheduled", extra={"entity_id": request.entity_id, "owner_id": request.owner_id})
        return request

    def apply_rename(self, request: RenameRequest) -> str | None:
        """Run the deferred rename; returns the applied name, or None when skipped."""
        config = self._config_store.current
        if config is None:
            logger.debug("rename_skipped_unloaded", extra={"entity_id": request.entity_id})
            return None

        entity = self._registry.find_entity(request.entity_id)
        if entity is None or not entity.is_sleeping_bag:
            logger.debug("rename_skipped_missing_entity", extra={"entity_id": request.entity_id})
            return None

        attributes = self._resolver.resolve(entity.position, request.owner_name, config)
        name = format_bag_name(config.bag_name_format, attributes)
        if not name:
            logger.debug("rename_skipped_empty_name", extra={"entity_id": entity.entity_id})
            return None

        self._registry.set_display_name(entity, name)
        logger.info("bag_renamed", extra={"entity_id": entity.entity_id, "owner_id": request.owner_id, "bag_name": name})
        return name
