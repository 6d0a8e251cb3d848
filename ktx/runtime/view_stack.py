"""Stack of views; the top one receives input and is rendered."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ktx.views.base_view import View

logger = logging.getLogger(__name__)


class ViewStack:
    """LIFO of views that never drops its base view."""

    def __init__(self) -> None:
        self._views: list[View] = []

    def push(self, view: View) -> None:
        logger.debug("Push %s", type(view).__name__)
        self._views.append(view)

    def pop(self) -> bool:
        """Remove the top view unless it is the only one left.

        Returns:
            True if a view was removed, False if the stack holds one view
            or fewer.
        """
        if len(self._views) <= 1:
            return False
        view = self._views.pop()
        logger.debug("Pop %s", type(view).__name__)
        return True

    def top(self) -> View:
        """Return the focused view.

        Raises:
            IndexError: If the stack is empty.
        """
        if not self._views:
            raise IndexError("view stack is empty")
        return self._views[-1]

    def __len__(self) -> int:
        return len(self._views)

    def __bool__(self) -> bool:
        return bool(self._views)


__all__ = ["ViewStack"]
