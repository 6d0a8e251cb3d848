"""Unit tests for ViewStack."""

from __future__ import annotations

import pytest

from ktx.models.events.events import PopView
from ktx.runtime.bus import EventBus
from ktx.runtime.view_stack import ViewStack
from ktx.views.confirmation import ConfirmationDialogView
from ktx.views.profile_list import ProfileListView


@pytest.mark.unit
@pytest.mark.fast
class TestViewStack:
    """The base view can never be popped."""

    def test_top_of_empty_stack_raises(self) -> None:
        with pytest.raises(IndexError):
            ViewStack().top()

    def test_push_and_top(self, bus: EventBus) -> None:
        stack = ViewStack()
        base = ProfileListView(bus)
        dialog = ConfirmationDialogView(bus, "sure?", PopView())
        stack.push(base)
        stack.push(dialog)
        assert stack.top() is dialog
        assert len(stack) == 2

    def test_pop_keeps_base_view(self, bus: EventBus) -> None:
        stack = ViewStack()
        base = ProfileListView(bus)
        stack.push(base)
        stack.push(ConfirmationDialogView(bus, "sure?", PopView()))
        assert stack.pop() is True
        assert stack.pop() is False
        assert stack.top() is base
        assert len(stack) == 1

    def test_pop_empty_stack(self) -> None:
        assert ViewStack().pop() is False
