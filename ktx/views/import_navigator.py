"""Cloud import navigator: drill down one provider hierarchy level per view.

Each level is its own view instance on the stack, so Esc walks back up the
hierarchy one level at a time.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ktx.constants.values import (
    COLOR_HIGHLIGHT,
    COLOR_UNKNOWN,
    HIGHLIGHT_SYMBOL,
    IMPORT_VIEW_TITLE,
    NO_IMPORT_OPTIONS,
)
from ktx.controllers.cloud.controller import CloudImportController
from ktx.keyboard.navigation import IMPORT_CLUSTERS_KEY_HELP, IMPORT_KEY_HELP
from ktx.models.core.import_path import ImportPath, ImportSegment
from ktx.models.events.events import (
    Event,
    KeyInput,
    PopView,
    RefreshConfig,
    ShowImportView,
)
from ktx.models.state.app_state import AppState
from ktx.runtime.bus import EventBus
from ktx.views.base_view import View, ViewState
from ktx.views.list_navigation import (
    ListNavigationState,
    apply_navigation_event,
    clamp_selection,
    handle_navigation_key,
    visible_window,
)
from ktx.views.styles import key_help_line

logger = logging.getLogger(__name__)


@dataclass
class ImportNavigatorState(ListNavigationState):
    options: list[ImportSegment] = field(default_factory=list)

    def filtered_options(self) -> list[ImportSegment]:
        """Options whose label contains the filter, ignoring case."""
        needle = self.filter.lower()
        return [option for option in self.options if needle in option.label.lower()]


class ImportNavigatorView(View):
    """Lists the options below ``path``; Enter descends or imports."""

    title = IMPORT_VIEW_TITLE

    def __init__(
        self,
        bus: EventBus,
        importer: CloudImportController,
        path: ImportPath,
    ) -> None:
        self.path = path
        self._importer = importer
        super().__init__(bus)

    def create_state(self) -> ImportNavigatorState:
        return ImportNavigatorState()

    async def load_options(self) -> None:
        """Fetch the options for this level; must succeed before the view is pushed."""
        options = await self._importer.load_options(self.path)
        async with self.lock:
            nav = ImportNavigatorState.from_view_state(self.view_state)
            nav.options = options
            nav.selected = clamp_selection(None, len(options))
        logger.debug("Loaded %d import options at %s", len(options), self.path.labels)

    def key_help(self, state: AppState) -> Text:
        if self.path.is_listing_clusters:
            return key_help_line(IMPORT_CLUSTERS_KEY_HELP)
        return key_help_line(IMPORT_KEY_HELP)

    def filter_text(self, view_state: ViewState) -> str:
        return ImportNavigatorState.from_view_state(view_state).filter

    def set_filter(self, view_state: ViewState, text: str, state: AppState) -> None:
        nav = ImportNavigatorState.from_view_state(view_state)
        nav.filter = text
        nav.selected = clamp_selection(nav.selected, len(nav.filtered_options()))

    async def _handle(
        self,
        event: Event,
        state: AppState,
        view_state: ViewState,
    ) -> Event | None:
        nav = ImportNavigatorState.from_view_state(view_state)
        if isinstance(event, KeyInput):
            return await self._handle_key(event, state, nav)
        if apply_navigation_event(event, nav, len(nav.filtered_options())):
            return None
        return event

    async def _handle_key(
        self,
        key: KeyInput,
        state: AppState,
        nav: ImportNavigatorState,
    ) -> Event | None:
        remaining = handle_navigation_key(key, nav, self._bus)
        if remaining is None:
            return None

        name = remaining.name
        if name == "escape":
            self._emit(PopView())
        elif name == "a":
            if self.path.is_listing_clusters:
                self._importer.import_all(
                    self.path, nav.filtered_options(), state.config_lock
                )
        elif name == "enter":
            await self._handle_enter(state, nav)
        else:
            return remaining
        return None

    async def _handle_enter(self, state: AppState, nav: ImportNavigatorState) -> None:
        options = nav.filtered_options()
        nav.selected = clamp_selection(nav.selected, len(options))
        if nav.selected is None:
            return

        target = self.path.append(options[nav.selected])
        if target.is_terminal:
            await self._importer.import_cluster(target, state.config_lock)
            self._emit(RefreshConfig())
        else:
            self._emit(ShowImportView(target))

    def render(self, state: AppState, view_state: ViewState) -> RenderableType:
        nav = ImportNavigatorState.from_view_state(view_state)
        options = nav.filtered_options()
        selected = clamp_selection(nav.selected, len(options))
        subtitle = " / ".join(self.path.labels) or None

        if not options:
            return Panel(
                Text(NO_IMPORT_OPTIONS, style=COLOR_UNKNOWN),
                title=self.title,
                title_align="left",
                subtitle=subtitle,
            )

        table = Table.grid(expand=True, padding=(0, 1))
        table.add_column("marker", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
        table.add_column("label", ratio=1, no_wrap=True, overflow="ellipsis")
        start, end = visible_window(selected, len(options), state.list_rows)
        for index in range(start, end):
            is_selected = index == selected
            table.add_row(
                HIGHLIGHT_SYMBOL if is_selected else "",
                options[index].label,
                style=COLOR_HIGHLIGHT if is_selected else None,
            )
        return Panel(table, title=self.title, title_align="left", subtitle=subtitle)


__all__ = ["ImportNavigatorState", "ImportNavigatorView"]
