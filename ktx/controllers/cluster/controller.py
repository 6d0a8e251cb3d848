"""Bounded-concurrency connectivity prober."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol

from ktx.constants.limits import PROBE_MAX_CONCURRENT
from ktx.constants.timeouts import PROBE_SPAWN_DELAY
from ktx.controllers.base.base_controller import BaseController
from ktx.controllers.cluster.fetchers.version_fetcher import ClusterClient
from ktx.models.core.connectivity import ConnectivityStatus
from ktx.models.core.profile import Configuration
from ktx.models.events.events import ConnectivityResult, PushInfoMessage

if TYPE_CHECKING:
    from ktx.runtime.bus import EventBus

logger = logging.getLogger(__name__)


class VersionClient(Protocol):
    def fetch_version(self) -> Awaitable[str]: ...


ClientFactory = Callable[[Configuration, str], VersionClient]


class ConnectivityProber(BaseController):
    """Probes every profile's endpoint and posts one result per profile.

    At most ``max_concurrent`` probes are in flight; spawns are staggered by
    ``spawn_delay`` seconds. Probes are never retried.
    """

    def __init__(
        self,
        bus: EventBus,
        client_factory: ClientFactory = ClusterClient.build,
        *,
        max_concurrent: int = PROBE_MAX_CONCURRENT,
        spawn_delay: float = PROBE_SPAWN_DELAY,
    ) -> None:
        super().__init__(bus)
        self._client_factory = client_factory
        self.max_concurrent = max_concurrent
        self.spawn_delay = spawn_delay

    def probe_all(self, configuration: Configuration) -> asyncio.Task[None]:
        """Start probing every profile in the background and return immediately."""
        names = configuration.profile_names
        logger.info("Probing %d contexts", len(names))
        return self._spawn(self._probe_batch(configuration, names), "probe-all")

    async def _probe_batch(self, configuration: Configuration, names: list[str]) -> None:
        semaphore = asyncio.Semaphore(self.max_concurrent)
        tasks = []
        for index, name in enumerate(names):
            if index and self.spawn_delay:
                await asyncio.sleep(self.spawn_delay)
            tasks.append(
                self._spawn(
                    self._probe_one(configuration, name, semaphore), f"probe-{name}"
                )
            )
        if tasks:
            await asyncio.wait(tasks)

    async def _probe_one(
        self,
        configuration: Configuration,
        name: str,
        semaphore: asyncio.Semaphore,
    ) -> ConnectivityStatus:
        async with semaphore:
            return await self.probe(configuration, name)

    async def probe(self, configuration: Configuration, name: str) -> ConnectivityStatus:
        """Probe a single profile and emit its result."""
        try:
            client = self._client_factory(configuration, name)
            version = await client.fetch_version()
        except Exception as e:  # any failure marks the profile unhealthy
            logger.info("Context %s is unreachable: %s", name, e)
            status = ConnectivityStatus.unhealthy()
            self._emit(ConnectivityResult(name, status))
            self._emit(PushInfoMessage(str(e)))
            return status

        status = ConnectivityStatus.healthy(version)
        self._emit(ConnectivityResult(name, status))
        return status


__all__ = ["ClientFactory", "ConnectivityProber"]
