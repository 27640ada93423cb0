"""Tick schedulers that defer work until the current host callback returns."""

from __future__ import annotations

import asyncio
import logging
from collections import deque
from typing import Callable

logger = logging.getLogger("bag_renamer.host.scheduling")


class ManualTickScheduler:
    """Collects deferred callbacks until the owner advances the tick."""

    def __init__(self) -> None:
        self._pending: deque[Callable[[], None]] = deque()

    @property
    def pending(self) -> int:
        return len(self._pending)

    def next_tick(self, callback: Callable[[], None]) -> None:
        self._pending.append(callback)

    def run_pending(self) -> int:
        """Run the callbacks queued before this call; ones they schedule wait for the next tick."""
        batch = len(self._pending)
        for _ in range(batch):
            callback = self._pending.popleft()
            try:
                callback()
            except Exception:  # noqa: BLE001 - a failing callback must not stall the tick.
                logger.exception("tick_callback_failed")
        return batch


class AsyncioTickScheduler:
    """Schedules callbacks on an asyncio loop with ``call_soon``.

    The callback runs after the currently executing callback and in FIFO order
    with other ready callbacks, without blocking the dispatching one.
    """

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def next_tick(self, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_soon(self._run, callback)

    @staticmethod
    def _run(callback: Callable[[], None]) -> None:
        try:
            callback()
        except Exception:  # noqa: BLE001 - keep the event loop alive.
            logger.exception("tick_callback_failed")
