"""
Drag position composition.

Pointer events arrive in absolute coordinates, but the controller expects the
drag position expressed relative to where the element's reference corner was
when the gesture started. :class:`DragTracker` performs that translation so
deltas compose with whatever geometry the controller has clamped to.
"""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QPointF


class DragTracker:
    """Tracks one press-drag-release gesture and yields origin-relative positions."""

    def __init__(self, origin_provider: Callable[[], QPointF]) -> None:
        """Initialize the tracker.

        Parameters
        ----------
        origin_provider:
            Callable returning the element's current ``(x, y)`` corner.
        """
        self._origin_provider = origin_provider
        self._press_pos: QPointF | None = None
        self._origin = QPointF()

    def is_dragging(self) -> bool:
        return self._press_pos is not None

    def press(self, pos: QPointF) -> None:
        self._press_pos = QPointF(pos)
        self._origin = QPointF(self._origin_provider())

    def drag_position(self, pos: QPointF) -> QPointF:
        """Return the origin shifted by the pointer's travel since the press."""
        if self._press_pos is None:
            return QPointF(pos)
        return self._origin + (pos - self._press_pos)

    def release(self) -> None:
        self._press_pos = None
