"""Kubeconfig file store.

Reads and writes the kubeconfig document with PyYAML. Writes go to a
temporary file in the same directory which then replaces the original, so
a crash mid-write never leaves a truncated kubeconfig behind.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import os
import stat
import tempfile
from pathlib import Path

import yaml

from ktx.errors import ConfigLoadError, ConfigSaveError
from ktx.models.core.profile import Configuration

logger = logging.getLogger(__name__)


class KubeconfigStore:
    """Loads and saves a :class:`Configuration` at a fixed path."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path).expanduser()

    def load_sync(self) -> Configuration:
        """Read and parse the kubeconfig file.

        Raises:
            ConfigLoadError: If the file is missing, unreadable or not a mapping.
        """
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigLoadError(f"Cannot read kubeconfig {self.path}: {e}") from e

        try:
            document = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid kubeconfig {self.path}: {e}") from e

        if document is None:
            document = {}
        if not isinstance(document, dict):
            raise ConfigLoadError(f"Invalid kubeconfig {self.path}: not a mapping")

        configuration = Configuration.from_document(document, str(self.path))
        logger.debug(
            "Loaded %d profiles from %s", len(configuration.profiles), self.path
        )
        return configuration

    def save_sync(self, configuration: Configuration) -> None:
        """Atomically write configuration to the kubeconfig file.

        Raises:
            ConfigSaveError: If the file cannot be written.
        """
        text = yaml.safe_dump(
            configuration.to_document(),
            sort_keys=False,
            default_flow_style=False,
        )
        tmp_path: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(text)
            if self.path.exists():
                os.chmod(tmp_path, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_path, self.path)
            tmp_path = None
        except OSError as e:
            raise ConfigSaveError(f"Cannot write kubeconfig {self.path}: {e}") from e
        finally:
            if tmp_path is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp_path)
        logger.debug("Saved %d profiles to %s", len(configuration.profiles), self.path)

    async def load(self) -> Configuration:
        return await asyncio.to_thread(self.load_sync)

    async def save(self, configuration: Configuration) -> None:
        await asyncio.to_thread(self.save_sync, configuration)


__all__ = ["KubeconfigStore"]
