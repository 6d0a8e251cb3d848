"""Static panes the render loop paints into.

The panes hold no state of their own; each paint replaces their content with
the renderables of one :class:`ktx.runtime.renderer.Frame`.
"""

from __future__ import annotations

from textual.widgets import Static


class TopBar(Static):
    """Key help of the focused view, or the live filter text."""

    DEFAULT_CSS = """
    TopBar {
        height: 3;
        width: 1fr;
    }
    """


class ViewPane(Static):
    """Body of the focused view."""

    DEFAULT_CSS = """
    ViewPane {
        height: 1fr;
        width: 1fr;
    }
    """


class StatusLine(Static):
    """Most recent status message while it is fresh."""

    DEFAULT_CSS = """
    StatusLine {
        height: 1;
        width: 1fr;
    }
    """
