"""
Cursor display sinks.

The controller only ever talks to :class:`CursorHint`; the Qt classes here
translate CSS cursor names into ``Qt.CursorShape`` values.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from PySide6.QtCore import Qt
from PySide6.QtGui import QCursor, QGuiApplication
from PySide6.QtWidgets import QWidget

_CURSOR_SHAPES: dict[str, Qt.CursorShape] = {
    "move": Qt.CursorShape.SizeAllCursor,
    "n-resize": Qt.CursorShape.SizeVerCursor,
    "s-resize": Qt.CursorShape.SizeVerCursor,
    "e-resize": Qt.CursorShape.SizeHorCursor,
    "w-resize": Qt.CursorShape.SizeHorCursor,
    "nw-resize": Qt.CursorShape.SizeFDiagCursor,
    "se-resize": Qt.CursorShape.SizeFDiagCursor,
    "ne-resize": Qt.CursorShape.SizeBDiagCursor,
    "sw-resize": Qt.CursorShape.SizeBDiagCursor,
    "grab": Qt.CursorShape.OpenHandCursor,
    "grabbing": Qt.CursorShape.ClosedHandCursor,
    "pointer": Qt.CursorShape.PointingHandCursor,
    "default": Qt.CursorShape.ArrowCursor,
}


def cursor_shape_for_hint(hint: str) -> Qt.CursorShape:
    """Return the Qt cursor shape for a CSS cursor name."""
    return _CURSOR_SHAPES.get(hint, Qt.CursorShape.ArrowCursor)


class CursorHint(ABC):
    """Single-slot pointer icon shared by hover tracking and active drags."""

    @abstractmethod
    def set_hint(self, hint: str | None) -> None:
        """Show *hint*, or restore the default pointer when ``None``."""


class WidgetCursorHint(CursorHint):
    """Applies hints to one widget, e.g. the ``QGraphicsView`` viewport."""

    def __init__(self, widget: QWidget) -> None:
        self._widget = widget

    def set_hint(self, hint: str | None) -> None:
        if hint is None:
            self._widget.unsetCursor()
        else:
            self._widget.setCursor(cursor_shape_for_hint(hint))


class ApplicationCursorHint(CursorHint):
    """Applies hints process-wide through the application override cursor."""

    def __init__(self) -> None:
        self._installed = False

    @property
    def installed(self) -> bool:
        return self._installed

    def set_hint(self, hint: str | None) -> None:
        if hint is None:
            if self._installed:
                QGuiApplication.restoreOverrideCursor()
                self._installed = False
            return
        cursor = QCursor(cursor_shape_for_hint(hint))
        if self._installed:
            QGuiApplication.changeOverrideCursor(cursor)
        else:
            QGuiApplication.setOverrideCursor(cursor)
            self._installed = True
