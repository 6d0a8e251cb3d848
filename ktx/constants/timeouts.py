"""Timeout constants for the TUI.

All timeout, delay and interval values for probes, imports and rendering.
"""

from typing import Final

# ============================================================================
# Cluster probe timeouts (string format for kubectl)
# ============================================================================

PROBE_REQUEST_TIMEOUT: Final = "10s"

# Process-level command timeouts (must be greater than request timeout)
KUBECTL_COMMAND_TIMEOUT: Final = 20
CLOUD_CLI_COMMAND_TIMEOUT: Final = 120

# ============================================================================
# Backpressure delays (float, in seconds)
# ============================================================================

PROBE_SPAWN_DELAY: Final = 0.1
IMPORT_BATCH_DELAY: Final = 0.1
IMPORT_SETTLE_DELAY: Final = 1.0

# ============================================================================
# Rendering (float, in seconds)
# ============================================================================

STATUS_MESSAGE_DISPLAY_SECONDS: Final = 6.0
STATUS_REFRESH_INTERVAL: Final = 1.0

__all__ = [
    "CLOUD_CLI_COMMAND_TIMEOUT",
    "IMPORT_BATCH_DELAY",
    "IMPORT_SETTLE_DELAY",
    "KUBECTL_COMMAND_TIMEOUT",
    "PROBE_REQUEST_TIMEOUT",
    "PROBE_SPAWN_DELAY",
    "STATUS_MESSAGE_DISPLAY_SECONDS",
    "STATUS_REFRESH_INTERVAL",
]
