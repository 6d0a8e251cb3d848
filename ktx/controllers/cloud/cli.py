"""Thin wrapper over the cloud provider command line tools."""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any

from ktx.constants.timeouts import CLOUD_CLI_COMMAND_TIMEOUT
from ktx.controllers.base.command_runner import run_command
from ktx.errors import CloudCliError

logger = logging.getLogger(__name__)


class CloudCli:
    """Runs ``aws``, ``gcloud`` and ``az`` in worker threads.

    When ``kubeconfig_path`` is set it is exported as ``KUBECONFIG`` so the
    provider's credential commands write into the file ktx is editing.
    """

    def __init__(
        self,
        timeout: float = CLOUD_CLI_COMMAND_TIMEOUT,
        kubeconfig_path: str | None = None,
    ) -> None:
        self.timeout = timeout
        self.kubeconfig_path = kubeconfig_path

    def _env(self) -> dict[str, str] | None:
        if not self.kubeconfig_path:
            return None
        return {"KUBECONFIG": self.kubeconfig_path}

    async def run(self, program: str, args: Sequence[str]) -> str:
        """Run program and return its standard output.

        Raises:
            CloudCliError: On a missing program, timeout or non-zero exit.
        """
        return await run_command(
            program,
            args,
            self.timeout,
            env=self._env(),
            error_cls=CloudCliError,
        )

    async def run_json(self, program: str, args: Sequence[str]) -> Any:
        """Run program and decode its standard output as JSON."""
        output = await self.run(program, args)
        try:
            return json.loads(output)
        except json.JSONDecodeError as e:
            raise CloudCliError(program, f"{program} returned invalid JSON: {e}") from e


def json_field(value: Any, *keys: str) -> str:
    """Read a nested string field, treating anything missing as empty."""
    for key in keys:
        if not isinstance(value, dict):
            return ""
        value = value.get(key)
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def json_list(value: Any, *keys: str) -> list[Any]:
    """Read a nested list, treating anything missing as empty."""
    for key in keys:
        if not isinstance(value, dict):
            return []
        value = value.get(key)
    return value if isinstance(value, list) else []


__all__ = ["CloudCli", "json_field", "json_list"]
