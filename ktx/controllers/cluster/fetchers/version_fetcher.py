"""Fetches the server version of a profile's cluster with kubectl."""

from __future__ import annotations

import json
import logging

from ktx.constants.timeouts import KUBECTL_COMMAND_TIMEOUT, PROBE_REQUEST_TIMEOUT
from ktx.constants.values import KUBECTL_PROGRAM
from ktx.controllers.base.command_runner import run_command
from ktx.errors import ClusterClientError, CommandError
from ktx.models.core.profile import Configuration

logger = logging.getLogger(__name__)


class ClusterClient:
    """A client scoped to one profile of one kubeconfig file."""

    def __init__(
        self,
        kubeconfig_path: str,
        context: str,
        request_timeout: str = PROBE_REQUEST_TIMEOUT,
        command_timeout: float = KUBECTL_COMMAND_TIMEOUT,
    ) -> None:
        self.kubeconfig_path = kubeconfig_path
        self.context = context
        self.request_timeout = request_timeout
        self.command_timeout = command_timeout

    @classmethod
    def build(
        cls,
        configuration: Configuration,
        profile_name: str,
        request_timeout: str = PROBE_REQUEST_TIMEOUT,
    ) -> ClusterClient:
        """Build a client for profile_name in configuration.

        Raises:
            ClusterClientError: If the profile does not exist.
        """
        if configuration.get_profile(profile_name) is None:
            raise ClusterClientError(f"Unknown context {profile_name}")
        return cls(configuration.path, profile_name, request_timeout)

    def _args(self) -> list[str]:
        args = []
        if self.kubeconfig_path:
            args.extend(["--kubeconfig", self.kubeconfig_path])
        args.extend(
            [
                "--context",
                self.context,
                "version",
                "-o",
                "json",
                f"--request-timeout={self.request_timeout}",
            ]
        )
        return args

    async def fetch_version(self) -> str:
        """Return the server version as ``major.minor``.

        Raises:
            ClusterClientError: If the cluster cannot be reached or answers
                with an unexpected payload.
        """
        try:
            output = await run_command(
                KUBECTL_PROGRAM, self._args(), self.command_timeout
            )
        except CommandError as e:
            raise ClusterClientError(f"{self.context}: {e}") from e

        try:
            payload = json.loads(output)
        except json.JSONDecodeError as e:
            raise ClusterClientError(f"{self.context}: invalid version payload") from e

        server = payload.get("serverVersion") if isinstance(payload, dict) else None
        if not isinstance(server, dict):
            raise ClusterClientError(f"{self.context}: server version unavailable")
        major = str(server.get("major") or "")
        minor = str(server.get("minor") or "")
        if not major:
            raise ClusterClientError(f"{self.context}: server version unavailable")
        return f"{major}.{minor}"


__all__ = ["ClusterClient"]
