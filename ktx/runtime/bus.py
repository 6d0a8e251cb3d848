"""Single ordered channel for semantic events."""

from __future__ import annotations

import asyncio
import logging

from ktx.models.events.events import SemanticEvent

logger = logging.getLogger(__name__)


class EventBus:
    """Unbounded FIFO of semantic events with one consumer.

    Any component may emit; only the orchestrator receives. Emitting after
    :meth:`close` is a silent no-op so background tasks outliving the UI do
    not fail.
    """

    def __init__(self) -> None:
        self._queue: asyncio.Queue[SemanticEvent] = asyncio.Queue()
        self._closed = False

    def emit(self, event: SemanticEvent) -> bool:
        """Queue event; return False if the bus is already closed."""
        if self._closed:
            logger.debug("Dropping %s, bus is closed", type(event).__name__)
            return False
        self._queue.put_nowait(event)
        return True

    async def receive(self) -> SemanticEvent:
        return await self._queue.get()

    def receive_nowait(self) -> SemanticEvent | None:
        try:
            return self._queue.get_nowait()
        except asyncio.QueueEmpty:
            return None

    @property
    def pending(self) -> int:
        return self._queue.qsize()

    def empty(self) -> bool:
        return self._queue.empty()

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


__all__ = ["EventBus"]
