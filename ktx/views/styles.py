"""Rich styling helpers shared by the views."""

from __future__ import annotations

from collections.abc import Iterable

from rich.text import Text

from ktx.constants.enums import HealthState, MessageKind
from ktx.constants.values import (
    COLOR_BUTTON,
    COLOR_BUTTON_SELECTED,
    COLOR_HEALTHY,
    COLOR_KEY,
    COLOR_MESSAGE_ERROR,
    COLOR_MESSAGE_INFO,
    COLOR_MESSAGE_SUCCESS,
    COLOR_UNHEALTHY,
    COLOR_UNKNOWN,
)

MESSAGE_STYLES = {
    MessageKind.ERROR: COLOR_MESSAGE_ERROR,
    MessageKind.INFO: COLOR_MESSAGE_INFO,
    MessageKind.SUCCESS: COLOR_MESSAGE_SUCCESS,
}

HEALTH_STYLES = {
    HealthState.HEALTHY: COLOR_HEALTHY,
    HealthState.UNHEALTHY: COLOR_UNHEALTHY,
    HealthState.UNKNOWN: COLOR_UNKNOWN,
}


def key_style(keys: str) -> Text:
    return Text(keys, style=COLOR_KEY)


def action_style(description: str) -> Text:
    return Text(description)


def key_help_line(entries: Iterable[tuple[str, str]]) -> Text:
    """Render ``(keys, description)`` pairs as ``jk - up/down, Enter - select``."""
    line = Text()
    for index, (keys, description) in enumerate(entries):
        if index:
            line.append(", ")
        line.append_text(key_style(keys))
        line.append_text(action_style(f" - {description}"))
    return line


def styled_button(label: str, selected: bool) -> Text:
    return Text(label, style=COLOR_BUTTON_SELECTED if selected else COLOR_BUTTON)


def message_style(kind: MessageKind) -> str:
    return MESSAGE_STYLES[kind]


def health_style(state: HealthState) -> str:
    return HEALTH_STYLES[state]
