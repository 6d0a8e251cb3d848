"""Profile list: the base view showing every kubeconfig context."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ktx.constants.values import (
    COLOR_CURRENT_PROFILE,
    COLOR_HIGHLIGHT,
    HIGHLIGHT_SYMBOL,
    PROFILE_LIST_TITLE,
)
from ktx.keyboard.navigation import PROFILE_LIST_KEY_HELP
from ktx.models.core.connectivity import ConnectivityStatus
from ktx.models.core.import_path import ImportPath
from ktx.models.core.profile import Profile
from ktx.models.events.events import (
    DeleteProfile,
    Event,
    KeyInput,
    PopView,
    SetProfile,
    ShowImportView,
    TestConnections,
)
from ktx.models.state.app_state import AppState
from ktx.views.base_view import View, ViewState
from ktx.views.list_navigation import (
    ListNavigationState,
    apply_navigation_event,
    clamp_selection,
    handle_navigation_key,
    visible_window,
)
from ktx.views.styles import health_style, key_help_line

Row = tuple[Profile, ConnectivityStatus]


@dataclass
class ProfileListState(ListNavigationState):
    pass


class ProfileListView(View):
    """Filtered list of profiles with their connectivity status.

    Filtering only narrows what is shown; the configuration is never touched.
    """

    title = PROFILE_LIST_TITLE

    def create_state(self) -> ProfileListState:
        return ProfileListState(selected=0)

    def key_help(self, state: AppState) -> Text:
        return key_help_line(PROFILE_LIST_KEY_HELP)

    def filter_text(self, view_state: ViewState) -> str:
        return ProfileListState.from_view_state(view_state).filter

    def set_filter(self, view_state: ViewState, text: str, state: AppState) -> None:
        nav = ProfileListState.from_view_state(view_state)
        nav.filter = text
        nav.selected = clamp_selection(nav.selected, len(state.filtered_profiles(text)))

    async def _handle(
        self,
        event: Event,
        state: AppState,
        view_state: ViewState,
    ) -> Event | None:
        nav = ProfileListState.from_view_state(view_state)
        rows = state.filtered_profiles(nav.filter)
        if isinstance(event, KeyInput):
            return self._handle_key(event, nav, rows)
        if apply_navigation_event(event, nav, len(rows)):
            return None
        return event

    def _handle_key(self, key: KeyInput, nav: ProfileListState, rows: list[Row]) -> Event | None:
        remaining = handle_navigation_key(key, nav, self._bus)
        if remaining is None:
            return None

        nav.selected = clamp_selection(nav.selected, len(rows))
        selected = rows[nav.selected][0] if nav.selected is not None else None
        name = remaining.name
        if name == "enter":
            if selected is not None:
                self._emit(SetProfile(selected.name))
        elif name in ("escape", "q"):
            self._emit(PopView())
        elif name == "d":
            if selected is not None:
                self._emit(DeleteProfile(selected.name))
        elif name == "t":
            self._emit(TestConnections())
        elif name == "i":
            self._emit(ShowImportView(ImportPath()))
        else:
            return remaining
        return None

    def render(self, state: AppState, view_state: ViewState) -> RenderableType:
        nav = ProfileListState.from_view_state(view_state)
        rows = state.filtered_profiles(nav.filter)
        selected = clamp_selection(nav.selected, len(rows))

        table = Table.grid(expand=True, padding=(0, 1))
        table.add_column("marker", width=len(HIGHLIGHT_SYMBOL), no_wrap=True)
        table.add_column("name", ratio=1, no_wrap=True, overflow="ellipsis")
        table.add_column("status", justify="right", no_wrap=True)

        start, end = visible_window(selected, len(rows), state.list_rows)
        for index in range(start, end):
            profile, status = rows[index]
            is_selected = index == selected
            name_style = COLOR_CURRENT_PROFILE if state.is_current(profile.name) else ""
            table.add_row(
                HIGHLIGHT_SYMBOL if is_selected else "",
                Text(profile.name, style=name_style),
                Text(status.label, style=health_style(status.state)),
                style=COLOR_HIGHLIGHT if is_selected else None,
            )

        return Panel(table, title=self.title, title_align="left")


__all__ = ["ProfileListState", "ProfileListView"]
