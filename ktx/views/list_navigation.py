"""List navigation shared by the profile list and the import navigator.

Navigation is two-phase: key input is turned into ``List*`` events on the
bus, and the view applies those events to its selection when they come back
through dispatch, against the filtered length at that moment.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ktx.constants.limits import LIST_PAGE_SIZE
from ktx.keyboard.navigation import FILTER_KEY, LIST_NAVIGATION_KEYS, TOP_CHORD_KEY
from ktx.models.events.events import (
    EnterFilterMode,
    Event,
    KeyInput,
    ListBottom,
    ListOneDown,
    ListOneUp,
    ListPageDown,
    ListPageUp,
    ListSelect,
    ListTop,
)
from ktx.views.base_view import ViewState

if TYPE_CHECKING:
    from ktx.runtime.bus import EventBus

NAVIGATION_EVENTS = (
    ListOneUp,
    ListOneDown,
    ListPageUp,
    ListPageDown,
    ListTop,
    ListBottom,
    ListSelect,
)


@dataclass
class ListNavigationState(ViewState):
    """Selection, pending ``g`` chord and filter of a list view."""

    selected: int | None = None
    remembered_g: bool = False
    filter: str = ""


def clamp_selection(selected: int | None, length: int) -> int | None:
    """Clamp selected into ``[0, length)``; None only for an empty list."""
    if length <= 0:
        return None
    if selected is None or selected < 0:
        return 0
    return min(selected, length - 1)


def visible_window(selected: int | None, length: int, rows: int) -> tuple[int, int]:
    """Return the ``[start, end)`` slice of a list that keeps selected in view."""
    rows = max(rows, 1)
    start = 0
    if selected is not None and selected >= rows:
        start = selected - rows + 1
    return start, min(start + rows, length)


def handle_navigation_key(
    key: KeyInput,
    nav: ListNavigationState,
    bus: EventBus,
) -> KeyInput | None:
    """Translate a navigation key into bus events.

    Returns:
        None if the key was a navigation key, otherwise the key itself.
    """
    name = key.name
    if name == TOP_CHORD_KEY:
        if nav.remembered_g:
            nav.remembered_g = False
            bus.emit(ListTop())
        else:
            nav.remembered_g = True
        return None

    nav.remembered_g = False
    event_type = LIST_NAVIGATION_KEYS.get(name)
    if event_type is not None:
        bus.emit(event_type())
        return None
    if name == FILTER_KEY:
        bus.emit(EnterFilterMode())
        return None
    return key


def apply_navigation_event(event: Event, nav: ListNavigationState, length: int) -> bool:
    """Apply a ``List*`` event to nav.selected.

    The selection is re-clamped to length first, since the filtered set may
    have shrunk since the last event.

    Returns:
        True if event was a navigation event.
    """
    nav.selected = clamp_selection(nav.selected, length)
    if not isinstance(event, NAVIGATION_EVENTS):
        return False
    if nav.selected is None:
        return True

    if isinstance(event, ListSelect):
        nav.selected = clamp_selection(event.index, length)
    elif isinstance(event, ListOneUp):
        nav.selected = max(nav.selected - 1, 0)
    elif isinstance(event, ListOneDown):
        nav.selected = min(nav.selected + 1, length - 1)
    elif isinstance(event, ListPageUp):
        nav.selected = max(nav.selected - LIST_PAGE_SIZE, 0)
    elif isinstance(event, ListPageDown):
        nav.selected = min(nav.selected + LIST_PAGE_SIZE, length - 1)
    elif isinstance(event, ListTop):
        nav.selected = 0
    elif isinstance(event, ListBottom):
        nav.selected = length - 1
    return True


__all__ = [
    "ListNavigationState",
    "apply_navigation_event",
    "clamp_selection",
    "handle_navigation_key",
    "visible_window",
]
