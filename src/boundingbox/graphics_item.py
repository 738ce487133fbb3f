"""QGraphicsRectItem binding for :class:`InteractionController`."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import QRectF, Qt
from PySide6.QtWidgets import QGraphicsItem, QGraphicsRectItem, QGraphicsSceneHoverEvent, QGraphicsSceneMouseEvent

from .controller import InteractionController
from .gesture import DragTracker


class InteractiveRectItem(QGraphicsRectItem):
    """Rectangle item whose ``rect()`` is driven by an interaction controller.

    The item keeps its own position at the origin and exposes the rectangle
    through ``get_attribute``/``set_attribute``, so hover and drag positions
    (reported in item coordinates) share a space with the geometry.
    """

    def __init__(
        self,
        rect: QRectF,
        controller: InteractionController,
        *,
        datum: Any = None,
        index: Any = None,
        parent: QGraphicsItem | None = None,
    ) -> None:
        super().__init__(QRectF(rect), parent)
        self._controller = controller
        self._datum = datum
        self._index = index
        self._tracker = DragTracker(lambda: controller.origin(self))
        self.setAcceptHoverEvents(True)
        self.setAcceptedMouseButtons(Qt.MouseButton.LeftButton)
        controller.attach(self)

    # ------------------------------------------------------------------
    # Element accessors
    # ------------------------------------------------------------------
    def get_attribute(self, name: str) -> float:
        rect = self.rect()
        if name == "x":
            return rect.x()
        if name == "y":
            return rect.y()
        if name == "width":
            return rect.width()
        if name == "height":
            return rect.height()
        raise KeyError(name)

    def set_attribute(self, name: str, value: float) -> None:
        rect = QRectF(self.rect())
        value = float(value)
        if name == "x":
            rect.moveLeft(value)
        elif name == "y":
            rect.moveTop(value)
        elif name == "width":
            rect.setWidth(value)
        elif name == "height":
            rect.setHeight(value)
        else:
            raise KeyError(name)
        self.setRect(rect)

    # ------------------------------------------------------------------
    # Scene membership
    # ------------------------------------------------------------------
    def itemChange(self, change: QGraphicsItem.GraphicsItemChange, value: Any) -> Any:
        # Qt may report changes while a parented item is still being constructed.
        controller = getattr(self, "_controller", None)
        if controller is not None and change == QGraphicsItem.GraphicsItemChange.ItemSceneHasChanged:
            if self.scene() is None:
                self._tracker.release()
                controller.detach(self)
            else:
                controller.attach(self)
        return super().itemChange(change, value)

    # ------------------------------------------------------------------
    # Event handlers
    # ------------------------------------------------------------------
    def hoverMoveEvent(self, event: QGraphicsSceneHoverEvent) -> None:
        self._controller.handle_pointer_move(self, event.pos())

    def hoverLeaveEvent(self, event: QGraphicsSceneHoverEvent) -> None:
        self._controller.handle_pointer_leave(self)

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton:
            event.ignore()
            return
        self._tracker.press(event.pos())
        self._controller.handle_drag_start(self, event.pos(), self._datum, self._index)
        event.accept()

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if not self._tracker.is_dragging():
            return
        position = self._tracker.drag_position(event.pos())
        self._controller.handle_drag_move(self, position, self._datum, self._index)
        event.accept()

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent) -> None:
        if event.button() != Qt.MouseButton.LeftButton or not self._tracker.is_dragging():
            return
        self._tracker.release()
        self._controller.handle_drag_end(self, self._datum, self._index)
        event.accept()
