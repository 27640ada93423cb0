from __future__ import annotations

from .host.interfaces import PermissionService
from .models import Player

USE = "autobagrenamer.use"
PERMISSIONS = (USE,)


def register_permissions(service: PermissionService, owner: str) -> None:
    for name in PERMISSIONS:
        service.register_permission(name, owner)


def has_permission(service: PermissionService, player: Player, name: str) -> bool:
    return service.user_has_permission(player.user_id, name)
