"""Cloud import controller: drill-down option loading and credential import."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ktx.constants.enums import CloudProvider
from ktx.constants.timeouts import IMPORT_BATCH_DELAY, IMPORT_SETTLE_DELAY
from ktx.constants.values import IMPORT_SUCCESS_TEMPLATE
from ktx.controllers.base.base_controller import BaseController
from ktx.controllers.cloud.cli import CloudCli
from ktx.controllers.cloud.fetchers.aws_fetcher import AwsFetcher
from ktx.controllers.cloud.fetchers.azure_fetcher import AzureFetcher
from ktx.controllers.cloud.fetchers.base_fetcher import CloudFetcher
from ktx.controllers.cloud.fetchers.gcp_fetcher import GcpFetcher
from ktx.errors import ImportPathError, KtxError
from ktx.models.core.import_path import ImportPath, ImportSegment
from ktx.models.events.events import (
    PushErrorMessage,
    PushSuccessMessage,
    RefreshConfig,
)

if TYPE_CHECKING:
    from ktx.runtime.bus import EventBus

logger = logging.getLogger(__name__)


class CloudImportController(BaseController):
    """Loads import options per path and imports clusters under the write guard.

    Every import holds the write guard for its whole duration plus a settle
    delay, so two provider CLIs never rewrite the kubeconfig at once.
    """

    def __init__(
        self,
        bus: EventBus,
        cli: CloudCli | None = None,
        *,
        settle_delay: float = IMPORT_SETTLE_DELAY,
        batch_delay: float = IMPORT_BATCH_DELAY,
        fetchers: Iterable[CloudFetcher] | None = None,
    ) -> None:
        super().__init__(bus)
        cli = cli or CloudCli()
        if fetchers is None:
            fetchers = (AwsFetcher(cli), GcpFetcher(cli), AzureFetcher(cli))
        self._fetchers: dict[CloudProvider, CloudFetcher] = {
            fetcher.provider: fetcher for fetcher in fetchers
        }
        self.settle_delay = settle_delay
        self.batch_delay = batch_delay

    def _fetcher_for(self, path: ImportPath) -> CloudFetcher:
        provider = path.provider
        if provider is None or provider not in self._fetchers:
            raise ImportPathError(f"Unsupported import path: {'/'.join(path.labels)}")
        return self._fetchers[provider]

    async def load_options(self, path: ImportPath) -> list[ImportSegment]:
        """Return the options one level below path.

        The empty path lists the providers whose CLI has a configured account,
        checked concurrently. A terminal path has no options.
        """
        if path.is_terminal:
            return []
        if path.is_empty:
            fetchers = list(self._fetchers.values())
            configured = await asyncio.gather(
                *(fetcher.is_configured() for fetcher in fetchers)
            )
            return [
                fetcher.root_segment()
                for fetcher, is_configured in zip(fetchers, configured)
                if is_configured
            ]
        return await self._fetcher_for(path).list_options(path)

    async def import_cluster(self, path: ImportPath, config_lock: asyncio.Lock) -> None:
        """Import the cluster at a terminal path while holding config_lock.

        Raises:
            ImportPathError: If path does not resolve a cluster.
            CloudCliError: If the provider CLI fails.
        """
        if not path.is_terminal:
            raise ImportPathError("Import path does not resolve a cluster")
        fetcher = self._fetcher_for(path)
        async with config_lock:
            logger.info("Importing %s", "/".join(path.labels))
            await fetcher.import_cluster(path)
            self._emit(
                PushSuccessMessage(IMPORT_SUCCESS_TEMPLATE.format(cluster=path.cluster_id))
            )
            # Let the provider CLI finish flushing the kubeconfig.
            await asyncio.sleep(self.settle_delay)

    def import_all(
        self,
        path: ImportPath,
        options: Sequence[ImportSegment],
        config_lock: asyncio.Lock,
    ) -> asyncio.Task[None]:
        """Import every option below path, one after another, in the background."""
        return self._spawn(
            self._import_sequence(path, list(options), config_lock), "import-all"
        )

    async def _import_sequence(
        self,
        path: ImportPath,
        options: list[ImportSegment],
        config_lock: asyncio.Lock,
    ) -> None:
        for option in options:
            target = path.append(option)
            try:
                await self.import_cluster(target, config_lock)
            except (KtxError, OSError) as e:
                logger.warning("Import of %s failed: %s", option.id, e)
                self._emit(PushErrorMessage(str(e)))
            else:
                self._emit(RefreshConfig())
            await asyncio.sleep(self.batch_delay)


__all__ = ["CloudImportController"]
