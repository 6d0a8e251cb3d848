"""Per-view key help and list navigation keys.

Key help entries are ``(keys, description)`` tuples rendered in the top bar.
Navigation maps are keyed by :attr:`ktx.models.events.events.KeyInput.name`.
"""

from ktx.models.events.events import (
    ListBottom,
    ListOneDown,
    ListOneUp,
    ListPageDown,
    ListPageUp,
    ListTop,
    SemanticEvent,
)

# ============================================================================
# Key help
# ============================================================================

PROFILE_LIST_KEY_HELP: list[tuple[str, str]] = [
    ("jk", "up/down"),
    ("Enter", "select"),
    ("Esc", "quit"),
    ("t", "test"),
    ("d", "delete"),
    ("i", "import"),
]

IMPORT_CLUSTERS_KEY_HELP: list[tuple[str, str]] = [
    ("jk", "up/down"),
    ("Enter", "import"),
    ("a", "import all"),
]

IMPORT_KEY_HELP: list[tuple[str, str]] = [
    ("jk", "up/down"),
    ("Enter", "list"),
]

CONFIRMATION_KEY_HELP: list[tuple[str, str]] = [
    ("y", "yes"),
    ("Esc, n", "no"),
]

# ============================================================================
# List navigation
# ============================================================================

LIST_NAVIGATION_KEYS: dict[str, type[SemanticEvent]] = {
    "up": ListOneUp,
    "k": ListOneUp,
    "down": ListOneDown,
    "j": ListOneDown,
    "pageup": ListPageUp,
    "ctrl+u": ListPageUp,
    "pagedown": ListPageDown,
    "ctrl+d": ListPageDown,
    "home": ListTop,
    "end": ListBottom,
    "G": ListBottom,
}

TOP_CHORD_KEY = "g"
FILTER_KEY = "/"

# ============================================================================
# Filter editing
# ============================================================================

FILTER_EXIT_KEYS: frozenset[str] = frozenset({"enter", "escape"})
FILTER_DELETE_KEY = "backspace"

__all__ = [
    "CONFIRMATION_KEY_HELP",
    "FILTER_DELETE_KEY",
    "FILTER_EXIT_KEYS",
    "FILTER_KEY",
    "IMPORT_CLUSTERS_KEY_HELP",
    "IMPORT_KEY_HELP",
    "LIST_NAVIGATION_KEYS",
    "PROFILE_LIST_KEY_HELP",
    "TOP_CHORD_KEY",
]
