"""Scalar constants for the TUI.

All application-level constants with proper type hints using Final.
"""

from typing import Final

# ============================================================================
# Application
# ============================================================================

APP_TITLE: Final = "ktx"
DEFAULT_KUBECONFIG_PATH: Final = "~/.kube/config"
DEFAULT_SETTINGS_PATH: Final = "~/.config/ktx/settings.yaml"
SETTINGS_PATH_ENV: Final = "KTX_SETTINGS"

# ============================================================================
# External programs
# ============================================================================

KUBECTL_PROGRAM: Final = "kubectl"
AWS_PROGRAM: Final = "aws"
GCLOUD_PROGRAM: Final = "gcloud"
AZURE_PROGRAM: Final = "az"

# ============================================================================
# Connectivity status labels
# ============================================================================

STATUS_HEALTHY_TEMPLATE: Final = "Healthy ({version})"
STATUS_UNHEALTHY: Final = "Unhealthy"
STATUS_UNKNOWN: Final = "Unknown"

# ============================================================================
# View titles and messages
# ============================================================================

PROFILE_LIST_TITLE: Final = "Contexts"
IMPORT_VIEW_TITLE: Final = "Import Kubernetes Context(s)"
CONFIRMATION_TITLE: Final = "Confirmation"
FILTER_TITLE: Final = "Filter"
DELETE_CONFIRMATION_TEMPLATE: Final = (
    "Are you sure you want to delete\n\n{name}\n\nfrom your kubeconfig file?"
)
IMPORT_SUCCESS_TEMPLATE: Final = "Successfully imported {cluster}"
NO_IMPORT_OPTIONS: Final = "Nothing to import here"
TEST_CONNECTIONS_TEMPLATE: Final = "Testing connectivity of {count} context(s)"
PROFILE_SELECTED_TEMPLATE: Final = "Switched to {name}"
PROFILE_DELETED_TEMPLATE: Final = "Deleted {name}"

# ============================================================================
# Colors (Rich style strings)
# ============================================================================

COLOR_KEY: Final = "bold cyan"
COLOR_TOP_BAR: Final = "yellow"
COLOR_CURRENT_PROFILE: Final = "bold bright_blue"
COLOR_HIGHLIGHT: Final = "bold on grey23"
COLOR_HEALTHY: Final = "green"
COLOR_UNHEALTHY: Final = "red"
COLOR_UNKNOWN: Final = "bright_black"
COLOR_MESSAGE_ERROR: Final = "red"
COLOR_MESSAGE_INFO: Final = "bright_black"
COLOR_MESSAGE_SUCCESS: Final = "green"
COLOR_BUTTON: Final = "grey70"
COLOR_BUTTON_SELECTED: Final = "reverse grey70"

HIGHLIGHT_SYMBOL: Final = "> "

__all__ = [
    "APP_TITLE",
    "AWS_PROGRAM",
    "AZURE_PROGRAM",
    "COLOR_BUTTON",
    "COLOR_BUTTON_SELECTED",
    "COLOR_CURRENT_PROFILE",
    "COLOR_HEALTHY",
    "COLOR_HIGHLIGHT",
    "COLOR_KEY",
    "COLOR_MESSAGE_ERROR",
    "COLOR_MESSAGE_INFO",
    "COLOR_MESSAGE_SUCCESS",
    "COLOR_TOP_BAR",
    "COLOR_UNHEALTHY",
    "COLOR_UNKNOWN",
    "CONFIRMATION_TITLE",
    "DEFAULT_KUBECONFIG_PATH",
    "DEFAULT_SETTINGS_PATH",
    "DELETE_CONFIRMATION_TEMPLATE",
    "FILTER_TITLE",
    "GCLOUD_PROGRAM",
    "HIGHLIGHT_SYMBOL",
    "IMPORT_SUCCESS_TEMPLATE",
    "IMPORT_VIEW_TITLE",
    "KUBECTL_PROGRAM",
    "NO_IMPORT_OPTIONS",
    "PROFILE_DELETED_TEMPLATE",
    "PROFILE_LIST_TITLE",
    "PROFILE_SELECTED_TEMPLATE",
    "SETTINGS_PATH_ENV",
    "STATUS_HEALTHY_TEMPLATE",
    "STATUS_UNHEALTHY",
    "STATUS_UNKNOWN",
    "TEST_CONNECTIONS_TEMPLATE",
]
