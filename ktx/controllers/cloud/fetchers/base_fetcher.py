"""Common interface of the cloud provider fetchers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from ktx.constants.enums import CloudProvider
from ktx.controllers.cloud.cli import CloudCli
from ktx.errors import CommandError
from ktx.models.core.import_path import ImportPath, ImportSegment

logger = logging.getLogger(__name__)


class CloudFetcher(ABC):
    """Lists the options below an import path and imports a terminal path."""

    provider: CloudProvider

    def __init__(self, cli: CloudCli) -> None:
        self._cli = cli

    async def is_configured(self) -> bool:
        """Return True when the provider CLI reports a configured account."""
        try:
            return await self._check_account()
        except CommandError as e:
            logger.debug("%s is not configured: %s", self.provider.label, e)
            return False

    def root_segment(self) -> ImportSegment:
        return ImportSegment(self.provider.value, self.provider.label)

    @abstractmethod
    async def _check_account(self) -> bool: ...

    @abstractmethod
    async def list_options(self, path: ImportPath) -> list[ImportSegment]:
        """Return the options one level below path."""
        ...

    @abstractmethod
    async def import_cluster(self, path: ImportPath) -> None:
        """Write credentials for the cluster at terminal path into the kubeconfig."""
        ...
