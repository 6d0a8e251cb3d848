"""Constants module for the ktx TUI.

Centralized constants organized by domain:
- enums.py: All Enum class definitions
- values.py: Scalar constants (strings, colors, program names)
- timeouts.py: Timeout and delay values (seconds)
- limits.py: Limit values (max/min)
- defaults.py: Default values for settings

Note: Keyboard bindings and key help are defined in the ktx.keyboard module.
"""

from ktx.constants.defaults import (
    KUBECONFIG_PATH_DEFAULT,
    LOG_LEVEL_DEFAULT,
)
from ktx.constants.enums import (
    CloudProvider,
    ConfirmationSelection,
    HealthState,
    MessageKind,
    RenderSignal,
)
from ktx.constants.limits import (
    LIST_PAGE_SIZE,
    PROBE_MAX_CONCURRENT,
)
from ktx.constants.timeouts import (
    IMPORT_BATCH_DELAY,
    IMPORT_SETTLE_DELAY,
    PROBE_SPAWN_DELAY,
    STATUS_MESSAGE_DISPLAY_SECONDS,
    STATUS_REFRESH_INTERVAL,
)
from ktx.constants.values import (
    APP_TITLE,
    DEFAULT_KUBECONFIG_PATH,
)

__all__ = [
    # Application
    "APP_TITLE",
    "DEFAULT_KUBECONFIG_PATH",
    # Timeouts
    "IMPORT_BATCH_DELAY",
    "IMPORT_SETTLE_DELAY",
    "KUBECONFIG_PATH_DEFAULT",
    # Limits
    "LIST_PAGE_SIZE",
    "LOG_LEVEL_DEFAULT",
    "PROBE_MAX_CONCURRENT",
    "PROBE_SPAWN_DELAY",
    "STATUS_MESSAGE_DISPLAY_SECONDS",
    "STATUS_REFRESH_INTERVAL",
    # Enums
    "CloudProvider",
    "ConfirmationSelection",
    "HealthState",
    "MessageKind",
    "RenderSignal",
]
