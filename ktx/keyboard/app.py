"""App-level keyboard bindings.

Every other key is forwarded verbatim to the runtime's input queue, so only
the emergency quit is bound at the Textual level.
"""

from textual.binding import Binding

# ============================================================================
# Textual Binding objects for app-level bindings
# ============================================================================

APP_BINDINGS: list[Binding] = [
    Binding("ctrl+c", "quit", "Quit", priority=True, show=False),
]

__all__ = [
    "APP_BINDINGS",
]
