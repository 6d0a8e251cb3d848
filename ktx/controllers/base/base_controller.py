"""Base controller for background work posting results on the event bus."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any

from ktx.models.events.events import SemanticEvent

if TYPE_CHECKING:
    from ktx.runtime.bus import EventBus

logger = logging.getLogger(__name__)


class BaseController:
    """Base controller class for fire-and-forget background tasks.

    Results are never returned to the caller that started the work; they are
    posted as events on the bus. Spawned tasks are referenced until they
    finish so they are not garbage collected mid-flight.
    """

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self._tasks: set[asyncio.Task[Any]] = set()

    def _emit(self, event: SemanticEvent) -> bool:
        return self._bus.emit(event)

    def _spawn(self, coro: Coroutine[Any, Any, Any], name: str) -> asyncio.Task[Any]:
        task = asyncio.create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[Any]) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "Background task %s failed", task.get_name(), exc_info=task.exception()
            )

    @property
    def active_tasks(self) -> int:
        """Number of background tasks still running."""
        return len(self._tasks)
