"""Events flowing through the ktx runtime.

Two families share one base class:

- input events (:class:`KeyInput`, :class:`ResizeInput`) arrive from the
  terminal host through the input queue;
- semantic events travel on the event bus and are dispatched by the
  orchestrator in emission order.
"""

from __future__ import annotations

from dataclasses import dataclass

from ktx.models.core.connectivity import ConnectivityStatus
from ktx.models.core.import_path import ImportPath


@dataclass(frozen=True)
class Event:
    """Base class for every event."""


# =============================================================================
# Input events
# =============================================================================

@dataclass(frozen=True)
class InputEvent(Event):
    """Raw terminal input."""


@dataclass(frozen=True)
class KeyInput(InputEvent):
    """A key press as reported by the terminal host.

    ``key`` is the normalized key name (``"up"``, ``"ctrl+d"``, ``"j"``),
    ``character`` the printable character if any.
    """

    key: str
    character: str | None = None

    @property
    def is_printable(self) -> bool:
        return bool(self.character) and self.character.isprintable()

    @property
    def name(self) -> str:
        """The printable character if there is one, otherwise the key name.

        Textual spells some printable keys by name (``"slash"``) and may
        report shifted letters as ``"shift+g"``; the character is stable.
        """
        if self.is_printable and len(self.character) == 1:
            return self.character
        return self.key


@dataclass(frozen=True)
class ResizeInput(InputEvent):
    width: int
    height: int


# =============================================================================
# Semantic events
# =============================================================================

@dataclass(frozen=True)
class SemanticEvent(Event):
    """Event carried by the bus."""


@dataclass(frozen=True)
class ListOneUp(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListOneDown(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListPageUp(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListPageDown(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListTop(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListBottom(SemanticEvent):
    pass


@dataclass(frozen=True)
class ListSelect(SemanticEvent):
    """Jump to a row by index, clamped to the filtered length.

    No key produces it; it completes the ``List*`` family for callers that
    select a known row.
    """

    index: int


@dataclass(frozen=True)
class SetProfile(SemanticEvent):
    name: str


@dataclass(frozen=True)
class DeleteProfile(SemanticEvent):
    name: str


@dataclass(frozen=True)
class DeleteProfileConfirm(SemanticEvent):
    name: str


@dataclass(frozen=True)
class EnterFilterMode(SemanticEvent):
    pass


@dataclass(frozen=True)
class ExitFilterMode(SemanticEvent):
    pass


@dataclass(frozen=True)
class TestConnections(SemanticEvent):
    pass


@dataclass(frozen=True)
class ConnectivityResult(SemanticEvent):
    profile_name: str
    status: ConnectivityStatus


@dataclass(frozen=True)
class PopView(SemanticEvent):
    pass


@dataclass(frozen=True)
class ShowImportView(SemanticEvent):
    path: ImportPath


@dataclass(frozen=True)
class PushErrorMessage(SemanticEvent):
    text: str


@dataclass(frozen=True)
class PushInfoMessage(SemanticEvent):
    text: str


@dataclass(frozen=True)
class PushSuccessMessage(SemanticEvent):
    text: str


@dataclass(frozen=True)
class RefreshConfig(SemanticEvent):
    pass


@dataclass(frozen=True)
class DialogConfirm(SemanticEvent):
    pass


@dataclass(frozen=True)
class DialogReject(SemanticEvent):
    pass


@dataclass(frozen=True)
class Exit(SemanticEvent):
    pass


__all__ = [
    "ConnectivityResult",
    "DeleteProfile",
    "DeleteProfileConfirm",
    "DialogConfirm",
    "DialogReject",
    "EnterFilterMode",
    "Event",
    "Exit",
    "ExitFilterMode",
    "InputEvent",
    "KeyInput",
    "ListBottom",
    "ListOneDown",
    "ListOneUp",
    "ListPageDown",
    "ListPageUp",
    "ListSelect",
    "ListTop",
    "PopView",
    "PushErrorMessage",
    "PushInfoMessage",
    "PushSuccessMessage",
    "RefreshConfig",
    "ResizeInput",
    "SemanticEvent",
    "SetProfile",
    "ShowImportView",
    "TestConnections",
]
