"""All enum definitions for the TUI.

This module consolidates all enumerations used throughout the application.
"""

from enum import Enum, auto

# =============================================================================
# Status Enums
# =============================================================================

class HealthState(Enum):
    """Connectivity state of a profile's cluster endpoint."""

    UNKNOWN = "unknown"
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"


class MessageKind(Enum):
    """Kinds of transient status-line messages."""

    ERROR = "error"
    INFO = "info"
    SUCCESS = "success"


# =============================================================================
# View Enums
# =============================================================================

class ConfirmationSelection(Enum):
    """Highlighted button of a confirmation dialog."""

    CONFIRM = "confirm"
    REJECT = "reject"
    NONE = "none"


class RenderSignal(Enum):
    """Messages understood by the render loop."""

    RENDER = auto()
    STOP = auto()


# =============================================================================
# Cloud Enums
# =============================================================================

class CloudProvider(str, Enum):
    """Cloud providers supported by the import navigator."""

    AWS = "aws"
    GCP = "gcp"
    AZURE = "azure"

    @property
    def label(self) -> str:
        """Human readable provider name."""
        return _PROVIDER_LABELS[self]


_PROVIDER_LABELS = {
    CloudProvider.AWS: "AWS",
    CloudProvider.GCP: "GCP",
    CloudProvider.AZURE: "Azure",
}
