"""Default values for settings.

All default values used in AppSettings model and validation fallback values.
"""

from typing import Final

from ktx.constants.limits import PROBE_MAX_CONCURRENT
from ktx.constants.timeouts import (
    CLOUD_CLI_COMMAND_TIMEOUT,
    IMPORT_BATCH_DELAY,
    IMPORT_SETTLE_DELAY,
    PROBE_REQUEST_TIMEOUT,
    PROBE_SPAWN_DELAY,
    STATUS_MESSAGE_DISPLAY_SECONDS,
)
from ktx.constants.values import DEFAULT_KUBECONFIG_PATH

# ============================================================================
# Paths
# ============================================================================

KUBECONFIG_PATH_DEFAULT: Final = DEFAULT_KUBECONFIG_PATH

# ============================================================================
# Prober / import defaults
# ============================================================================

PROBE_MAX_CONCURRENT_DEFAULT: Final = PROBE_MAX_CONCURRENT
PROBE_SPAWN_DELAY_DEFAULT: Final = PROBE_SPAWN_DELAY
PROBE_REQUEST_TIMEOUT_DEFAULT: Final = PROBE_REQUEST_TIMEOUT
IMPORT_BATCH_DELAY_DEFAULT: Final = IMPORT_BATCH_DELAY
IMPORT_SETTLE_DELAY_DEFAULT: Final = IMPORT_SETTLE_DELAY
CLOUD_CLI_TIMEOUT_DEFAULT: Final = CLOUD_CLI_COMMAND_TIMEOUT

# ============================================================================
# UI / logging defaults
# ============================================================================

STATUS_MESSAGE_SECONDS_DEFAULT: Final = STATUS_MESSAGE_DISPLAY_SECONDS
LOG_LEVEL_DEFAULT: Final = "WARNING"
LOG_FILE_DEFAULT: Final = ""

__all__ = [
    "CLOUD_CLI_TIMEOUT_DEFAULT",
    "IMPORT_BATCH_DELAY_DEFAULT",
    "IMPORT_SETTLE_DELAY_DEFAULT",
    "KUBECONFIG_PATH_DEFAULT",
    "LOG_FILE_DEFAULT",
    "LOG_LEVEL_DEFAULT",
    "PROBE_MAX_CONCURRENT_DEFAULT",
    "PROBE_REQUEST_TIMEOUT_DEFAULT",
    "PROBE_SPAWN_DELAY_DEFAULT",
    "STATUS_MESSAGE_SECONDS_DEFAULT",
]
