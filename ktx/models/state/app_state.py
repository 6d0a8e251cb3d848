"""Shared application state."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field

from ktx.constants.enums import MessageKind
from ktx.constants.limits import (
    DEFAULT_TERMINAL_SIZE,
    MIN_LIST_ROWS,
    PANEL_BORDER_HEIGHT,
    STATUS_LINE_HEIGHT,
    TOP_BAR_HEIGHT,
)
from ktx.constants.timeouts import STATUS_MESSAGE_DISPLAY_SECONDS
from ktx.models.core.connectivity import ConnectivityStatus
from ktx.models.core.profile import Configuration, Profile


@dataclass(frozen=True)
class StatusMessage:
    """A transient status-line message."""

    kind: MessageKind
    text: str
    created_at: float = field(default_factory=time.monotonic)

    def is_visible(
        self,
        now: float | None = None,
        window: float = STATUS_MESSAGE_DISPLAY_SECONDS,
    ) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.created_at < window


class AppState:
    """State shared by the orchestrator, the views and the render loop.

    ``lock`` guards every attribute below. ``config_lock`` is the write guard
    serializing writers of the kubeconfig file (the store and the cloud CLIs).
    Lock order is state lock, then view-state lock, then write guard.
    """

    def __init__(self, configuration: Configuration) -> None:
        self.configuration = configuration
        self.connectivity: dict[str, ConnectivityStatus] = {}
        self.last_message: StatusMessage | None = None
        self.is_filter_on = False
        self.terminal_size: tuple[int, int] = DEFAULT_TERMINAL_SIZE
        self.lock = asyncio.Lock()
        self.config_lock = asyncio.Lock()

    @property
    def list_rows(self) -> int:
        """Number of list rows that fit in the body pane."""
        height = self.terminal_size[1]
        chrome = TOP_BAR_HEIGHT + STATUS_LINE_HEIGHT + PANEL_BORDER_HEIGHT
        return max(height - chrome, MIN_LIST_ROWS)

    def connectivity_for(self, name: str) -> ConnectivityStatus:
        return self.connectivity.get(name, ConnectivityStatus.unknown())

    def set_connectivity(self, name: str, status: ConnectivityStatus) -> None:
        self.connectivity[name] = status

    def filtered_profiles(
        self, filter_text: str = ""
    ) -> list[tuple[Profile, ConnectivityStatus]]:
        """Profiles matching filter_text, paired with their connectivity."""
        return [
            (profile, self.connectivity_for(profile.name))
            for profile in self.configuration.filtered(filter_text)
        ]

    def is_current(self, name: str) -> bool:
        return self.configuration.is_current(name)

    def push_message(self, kind: MessageKind, text: str) -> StatusMessage:
        self.last_message = StatusMessage(kind, text)
        return self.last_message

    def visible_message(
        self,
        now: float | None = None,
        window: float = STATUS_MESSAGE_DISPLAY_SECONDS,
    ) -> StatusMessage | None:
        """Return the last message while it is younger than window."""
        message = self.last_message
        if message is None or not message.is_visible(now, window):
            return None
        return message


__all__ = ["AppState", "StatusMessage"]
