"""Decides whether a build event should trigger a rename."""

from __future__ import annotations

import logging

from .host.interfaces import PermissionService
from .models import BuildEvent
from .permissions import USE, has_permission

logger = logging.getLogger("bag_renamer.eligibility")


def is_eligible(event: BuildEvent | None, permissions: PermissionService) -> bool:
    if event is None or event.actor is None or event.entity is None:
        return False
    try:
        allowed = has_permission(permissions, event.actor, USE)
    except Exception:  # noqa: BLE001 - an unanswerable permission check counts as denied.
        logger.exception("permission_check_failed", extra={"user_id": event.actor.user_id})
        return False
    if not allowed:
        return False
    return event.entity.is_sleeping_bag
