"""Exception hierarchy for recoverable ktx failures.

Anything deriving from :class:`KtxError` is reported on the status line by the
orchestrator instead of crashing the UI.
"""

from __future__ import annotations


class KtxError(Exception):
    """Base exception for recoverable errors."""


class ConfigStoreError(KtxError):
    """Base exception for kubeconfig persistence errors."""


class ConfigLoadError(ConfigStoreError):
    """Raised when the kubeconfig file cannot be read or parsed."""


class ConfigSaveError(ConfigStoreError):
    """Raised when the kubeconfig file cannot be written."""


class CommandError(KtxError):
    """Raised when an external command fails."""

    def __init__(
        self,
        program: str,
        message: str,
        *,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.program = program
        self.returncode = returncode
        self.stderr = stderr


class CloudCliError(CommandError):
    """Raised when a cloud provider CLI invocation fails."""


class ClusterClientError(KtxError):
    """Raised when a profile's cluster cannot be reached or described."""


class ImportPathError(KtxError):
    """Raised when an import path cannot be resolved for an operation."""


__all__ = [
    "CloudCliError",
    "ClusterClientError",
    "CommandError",
    "ConfigLoadError",
    "ConfigSaveError",
    "ConfigStoreError",
    "ImportPathError",
    "KtxError",
]
