"""Base class of every view held by the view stack."""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, TypeVar

from rich.console import RenderableType
from rich.text import Text

from ktx.models.events.events import Event, SemanticEvent

if TYPE_CHECKING:
    from ktx.models.state.app_state import AppState
    from ktx.runtime.bus import EventBus

logger = logging.getLogger(__name__)

ViewStateT = TypeVar("ViewStateT", bound="ViewState")


@dataclass
class ViewState:
    """Private, mutable state of one view, guarded by the view's lock."""

    @classmethod
    def from_view_state(cls: type[ViewStateT], view_state: ViewState) -> ViewStateT:
        """Return view_state if it belongs to this view variant.

        Raises:
            TypeError: If another variant's state is passed in.
        """
        if not isinstance(view_state, cls):
            raise TypeError(
                f"{cls.__name__} expected, got {type(view_state).__name__}"
            )
        return view_state


class View(ABC):
    """A screen-sized view: renders itself and turns input into events.

    Views never touch the stack or the configuration directly. They emit
    semantic events on the bus, or return an event from :meth:`handle_event`
    to let the orchestrator handle it.
    """

    title: ClassVar[str] = ""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self.lock = asyncio.Lock()
        self.view_state = self.create_state()

    @abstractmethod
    def create_state(self) -> ViewState:
        """Create the initial view state."""
        ...

    @abstractmethod
    def render(self, state: AppState, view_state: ViewState) -> RenderableType:
        """Render the body. Called with the state lock and the view lock held."""
        ...

    @abstractmethod
    def key_help(self, state: AppState) -> Text:
        """Render the top-bar key help line."""
        ...

    @abstractmethod
    async def _handle(
        self,
        event: Event,
        state: AppState,
        view_state: ViewState,
    ) -> Event | None: ...

    async def handle_event(self, event: Event, state: AppState) -> Event | None:
        """Handle event under the view lock.

        Returns:
            None when the event was consumed, otherwise the event to bubble
            up to the orchestrator.
        """
        async with self.lock:
            return await self._handle(event, state, self.view_state)

    def _emit(self, event: SemanticEvent) -> None:
        self._bus.emit(event)

    # Filter ---------------------------------------------------------------

    def filter_text(self, view_state: ViewState) -> str:
        """Current filter of view_state; views without filtering return ''."""
        return ""

    def set_filter(self, view_state: ViewState, text: str, state: AppState) -> None:
        """Replace the filter; views without filtering ignore it."""

    async def get_filter(self) -> str:
        async with self.lock:
            return self.filter_text(self.view_state)

    async def update_filter(self, text: str, state: AppState) -> None:
        async with self.lock:
            self.set_filter(self.view_state, text, state)


__all__ = ["View", "ViewState"]
