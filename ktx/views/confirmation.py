"""Modal yes/no dialog carrying one on-confirm event."""

from __future__ import annotations

from dataclasses import dataclass

from rich.align import Align
from rich.console import Group, RenderableType
from rich.padding import Padding
from rich.panel import Panel
from rich.text import Text

from ktx.constants.enums import ConfirmationSelection
from ktx.constants.values import CONFIRMATION_TITLE
from ktx.keyboard.navigation import CONFIRMATION_KEY_HELP
from ktx.models.events.events import (
    DialogConfirm,
    DialogReject,
    Event,
    InputEvent,
    KeyInput,
    SemanticEvent,
)
from ktx.models.state.app_state import AppState
from ktx.runtime.bus import EventBus
from ktx.views.base_view import View, ViewState
from ktx.views.styles import key_help_line, styled_button

BUTTON_GAP = " " * 12


@dataclass
class ConfirmationState(ViewState):
    selection: ConfirmationSelection = ConfirmationSelection.NONE


class ConfirmationDialogView(View):
    """Asks a question; accepting emits the on-confirm event then DialogConfirm.

    The dialog is modal: all input is consumed except Enter while no button
    is highlighted. Semantic events pass through to the orchestrator.
    """

    title = CONFIRMATION_TITLE

    def __init__(self, bus: EventBus, content: str, on_confirm_event: SemanticEvent) -> None:
        super().__init__(bus)
        self.content = content
        self.on_confirm_event = on_confirm_event

    def create_state(self) -> ConfirmationState:
        return ConfirmationState()

    def key_help(self, state: AppState) -> Text:
        return key_help_line(CONFIRMATION_KEY_HELP)

    async def _handle(
        self,
        event: Event,
        state: AppState,
        view_state: ViewState,
    ) -> Event | None:
        dialog = ConfirmationState.from_view_state(view_state)
        if not isinstance(event, InputEvent):
            return event
        if not isinstance(event, KeyInput):
            return None

        name = event.name
        if name == "y":
            self._accept(dialog)
        elif name in ("escape", "n"):
            self._reject(dialog)
        elif name in ("left", "h"):
            self._toggle(dialog, ConfirmationSelection.CONFIRM)
        elif name in ("right", "l"):
            self._toggle(dialog, ConfirmationSelection.REJECT)
        elif name == "enter":
            if dialog.selection == ConfirmationSelection.CONFIRM:
                self._accept(dialog)
            elif dialog.selection == ConfirmationSelection.REJECT:
                self._reject(dialog)
            else:
                return event
        return None

    @staticmethod
    def _toggle(dialog: ConfirmationState, default: ConfirmationSelection) -> None:
        if dialog.selection == ConfirmationSelection.CONFIRM:
            dialog.selection = ConfirmationSelection.REJECT
        elif dialog.selection == ConfirmationSelection.REJECT:
            dialog.selection = ConfirmationSelection.CONFIRM
        else:
            dialog.selection = default

    def _accept(self, dialog: ConfirmationState) -> None:
        dialog.selection = ConfirmationSelection.NONE
        self._emit(self.on_confirm_event)
        self._emit(DialogConfirm())

    def _reject(self, dialog: ConfirmationState) -> None:
        dialog.selection = ConfirmationSelection.NONE
        self._emit(DialogReject())

    def render(self, state: AppState, view_state: ViewState) -> RenderableType:
        dialog = ConfirmationState.from_view_state(view_state)
        buttons = Text.assemble(
            styled_button("Yes", dialog.selection == ConfirmationSelection.CONFIRM),
            BUTTON_GAP,
            styled_button("No", dialog.selection == ConfirmationSelection.REJECT),
        )
        body = Group(
            Padding(Text(self.content), (1, 1)),
            Panel(Align.center(buttons)),
        )
        width = max(state.terminal_size[0] * 2 // 5, 40)
        return Align.center(
            Panel(body, title=self.title, title_align="left", width=width),
            vertical="middle",
        )


__all__ = ["ConfirmationDialogView", "ConfirmationState"]
