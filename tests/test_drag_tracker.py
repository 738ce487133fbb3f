"""Tests for origin-composed drag positions."""

from PySide6.QtCore import QPointF

from boundingbox.geometry import RectElement
from boundingbox.gesture import DragTracker
from boundingbox.utils import AxisFlags, Handle


def test_drag_position_is_origin_plus_travel():
    element = RectElement(10, 20, 50, 50)
    tracker = DragTracker(lambda: QPointF(element.get_attribute("x"), element.get_attribute("y")))

    tracker.press(QPointF(30, 40))
    element.set_attribute("x", 500)  # later geometry changes do not shift the origin

    assert tracker.is_dragging()
    assert tracker.drag_position(QPointF(35, 30)) == QPointF(15, 10)


def test_positions_pass_through_when_idle():
    tracker = DragTracker(lambda: QPointF(100, 100))

    assert not tracker.is_dragging()
    assert tracker.drag_position(QPointF(3, 4)) == QPointF(3, 4)

    tracker.press(QPointF(0, 0))
    tracker.release()
    assert not tracker.is_dragging()


def test_handle_from_flags_orders_vertical_first():
    assert Handle.from_flags(AxisFlags(vertical="s", horizontal="w")) is Handle.SW
    assert Handle.from_flags(AxisFlags()) is Handle.MOVE
    assert Handle.SW.axes == AxisFlags(vertical="s", horizontal="w")
