"""Main application class for the ktx TUI."""

from __future__ import annotations

import asyncio
import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding

from ktx.constants import APP_TITLE, STATUS_REFRESH_INTERVAL
from ktx.keyboard.app import APP_BINDINGS
from ktx.models.events.events import InputEvent, KeyInput, ResizeInput
from ktx.models.state.app_settings import AppSettings
from ktx.runtime.core import KtxCore
from ktx.runtime.renderer import Frame, RenderLoop
from ktx.widgets import StatusLine, TopBar, ViewPane

logger = logging.getLogger(__name__)


class KtxApp(App[None]):
    """Textual host of the ktx runtime.

    The app owns the terminal only: keys and resizes are queued for the
    input/event loop, and the render loop paints frames into three panes.
    """

    TITLE = APP_TITLE
    BINDINGS: list[Binding] = APP_BINDINGS
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        layout: vertical;
    }
    """

    def __init__(
        self,
        core: KtxCore,
        settings: AppSettings | None = None,
        *args,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        self.core = core
        self.settings = settings or AppSettings()
        self.inputs: asyncio.Queue[InputEvent] = asyncio.Queue()
        self.renderer = RenderLoop(
            core,
            self._paint,
            on_stop=self.exit,
            status_window=self.settings.status_message_seconds,
        )

    def compose(self) -> ComposeResult:
        yield TopBar(id="top-bar")
        yield ViewPane(id="view-pane")
        yield StatusLine(id="status-line")

    def on_mount(self) -> None:
        """Start the runtime once the panes exist."""
        self.core.start()
        self.inputs.put_nowait(ResizeInput(self.size.width, self.size.height))
        self.run_worker(self.renderer.run(), name="render-loop", group="runtime")
        self.run_worker(
            self.core.run(self.inputs, self.renderer),
            name="event-loop",
            group="runtime",
        )
        # Repaint periodically so stale status messages disappear.
        self.set_interval(STATUS_REFRESH_INTERVAL, self.renderer.request_render)

    def on_key(self, event: events.Key) -> None:
        event.stop()
        event.prevent_default()
        self.inputs.put_nowait(KeyInput(event.key, event.character))

    def on_resize(self, event: events.Resize) -> None:
        self.inputs.put_nowait(ResizeInput(event.size.width, event.size.height))

    def _paint(self, frame: Frame) -> None:
        self.query_one(TopBar).update(frame.top_bar)
        self.query_one(ViewPane).update(frame.body)
        self.query_one(StatusLine).update(frame.status)

    def on_unmount(self) -> None:
        logger.debug("ktx stopped with %d views open", len(self.core.stack))
