"""Widgets module for the ktx TUI.

- panes: the three Static panes painted by the render loop
"""

from ktx.widgets.panes import StatusLine, TopBar, ViewPane

__all__ = [
    "StatusLine",
    "TopBar",
    "ViewPane",
]
