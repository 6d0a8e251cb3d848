"""Limit and threshold constants for the TUI.

All limit values and validation ranges.
"""

from typing import Final

# ============================================================================
# Navigation limits
# ============================================================================

LIST_PAGE_SIZE: Final = 10

# ============================================================================
# Layout limits (terminal rows)
# ============================================================================

TOP_BAR_HEIGHT: Final = 3
STATUS_LINE_HEIGHT: Final = 1
PANEL_BORDER_HEIGHT: Final = 2
MIN_LIST_ROWS: Final = 1
DEFAULT_TERMINAL_SIZE: Final = (80, 24)

# ============================================================================
# Controller limits
# ============================================================================

PROBE_MAX_CONCURRENT: Final = 10
PROBE_MAX_CONCURRENT_MIN: Final = 1
PROBE_MAX_CONCURRENT_MAX: Final = 64

__all__ = [
    "DEFAULT_TERMINAL_SIZE",
    "LIST_PAGE_SIZE",
    "MIN_LIST_ROWS",
    "PANEL_BORDER_HEIGHT",
    "PROBE_MAX_CONCURRENT",
    "PROBE_MAX_CONCURRENT_MAX",
    "PROBE_MAX_CONCURRENT_MIN",
    "STATUS_LINE_HEIGHT",
    "TOP_BAR_HEIGHT",
]
