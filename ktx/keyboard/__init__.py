"""Keyboard bindings module.

This module provides the keyboard bindings and key help of the ktx TUI:

- app: App-level Textual bindings (APP_BINDINGS)
- navigation: Per-view key help (*_KEY_HELP) and list navigation keys
"""

from ktx.keyboard.app import APP_BINDINGS
from ktx.keyboard.navigation import (
    CONFIRMATION_KEY_HELP,
    IMPORT_CLUSTERS_KEY_HELP,
    IMPORT_KEY_HELP,
    PROFILE_LIST_KEY_HELP,
)

__all__ = [
    "APP_BINDINGS",
    # Key help
    "CONFIRMATION_KEY_HELP",
    "IMPORT_CLUSTERS_KEY_HELP",
    "IMPORT_KEY_HELP",
    "PROFILE_LIST_KEY_HELP",
]
