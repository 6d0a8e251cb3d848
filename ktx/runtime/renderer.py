"""Render loop coalescing render requests into single paints."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from rich.align import Align
from rich.console import RenderableType
from rich.panel import Panel
from rich.text import Text

from ktx.constants.enums import RenderSignal
from ktx.constants.timeouts import STATUS_MESSAGE_DISPLAY_SECONDS
from ktx.constants.values import COLOR_TOP_BAR, FILTER_TITLE
from ktx.models.state.app_state import AppState
from ktx.views.base_view import View
from ktx.views.styles import message_style

if TYPE_CHECKING:
    from ktx.runtime.core import KtxCore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Frame:
    """One painted screen: top bar, view body and status line."""

    top_bar: RenderableType
    body: RenderableType
    status: RenderableType


Painter = Callable[[Frame], None]


class RenderLoop:
    """Paints the focused view whenever a render is requested.

    Requests that pile up while a paint is in progress collapse into one
    paint. A stop request seen while draining is honoured after that paint.
    """

    def __init__(
        self,
        core: KtxCore,
        painter: Painter,
        on_stop: Callable[[], None] | None = None,
        *,
        status_window: float = STATUS_MESSAGE_DISPLAY_SECONDS,
    ) -> None:
        self._core = core
        self._painter = painter
        self._on_stop = on_stop
        self.status_window = status_window
        self._signals: asyncio.Queue[RenderSignal] = asyncio.Queue()
        self.paint_count = 0

    def request_render(self) -> None:
        self._signals.put_nowait(RenderSignal.RENDER)

    def stop(self) -> None:
        self._signals.put_nowait(RenderSignal.STOP)

    def _drain(self) -> bool:
        """Discard queued signals; return True if a stop was among them."""
        stop_requested = False
        while True:
            try:
                signal = self._signals.get_nowait()
            except asyncio.QueueEmpty:
                return stop_requested
            if signal is RenderSignal.STOP:
                stop_requested = True

    async def run(self) -> None:
        while True:
            signal = await self._signals.get()
            if signal is RenderSignal.STOP:
                break
            stop_requested = self._drain()
            await self.render_once()
            if stop_requested:
                break
        logger.debug("Render loop stopped after %d paints", self.paint_count)
        if self._on_stop is not None:
            self._on_stop()

    async def render_once(self) -> Frame:
        """Build and paint one frame under the state lock and the view lock."""
        state = self._core.state
        async with state.lock:
            view = self._core.stack.top()
            async with view.lock:
                frame = self.build_frame(view, state)
                self._painter(frame)
        self.paint_count += 1
        return frame

    def build_frame(self, view: View, state: AppState) -> Frame:
        if state.is_filter_on:
            top_bar: RenderableType = Panel(
                Text(view.filter_text(view.view_state), style=COLOR_TOP_BAR),
                title=FILTER_TITLE,
                title_align="left",
            )
        else:
            top_bar = Panel(Align.center(view.key_help(state)), style=COLOR_TOP_BAR)

        message = state.visible_message(window=self.status_window)
        if message is None:
            status = Text("")
        else:
            status = Text(message.text, style=message_style(message.kind))

        return Frame(top_bar=top_bar, body=view.render(state, view.view_state), status=status)


__all__ = ["Frame", "Painter", "RenderLoop"]
