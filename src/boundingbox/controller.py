"""
Move/resize interaction controller.

This module acts as the coordinator: it classifies pointer positions with the
hit tester, latches a session per gesture, applies clamped geometry to the
element and dispatches user hooks.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from PySide6.QtCore import QPointF

from .config import HOOK_NAMES, MIN_SIZE
from .cursor import CursorHint
from .errors import UnknownHookError
from .geometry import ElementAccessor, RectGeometry
from .interaction_config import InteractionConfig
from .model import InteractionSession, SessionStore
from .utils import Extent, Handle, clamp

_LOGGER = logging.getLogger(__name__)

_UNSET: Any = object()

Hook = Callable[[ElementAccessor, Any, Any], Any]


class InteractionController:
    """Lets attached rectangles be dragged around and resized from their borders."""

    def __init__(
        self,
        config: InteractionConfig | None = None,
        *,
        cursor_hint: CursorHint | None = None,
    ) -> None:
        """Initialize the controller.

        Parameters
        ----------
        config:
            Interaction settings; defaults to unbounded extents, three unit
            handles, every direction and the standard cursor names.
        cursor_hint:
            Sink receiving cursor names (or ``None`` to reset). Without one,
            cursor feedback is skipped.
        """
        self._config = config if config is not None else InteractionConfig()
        self._cursor_hint = cursor_hint
        self._sessions = SessionStore()
        self._attached: dict[int, ElementAccessor] = {}
        self._hooks: dict[str, Hook | None] = dict.fromkeys(HOOK_NAMES)

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------
    def attach(self, element: ElementAccessor) -> ElementAccessor:
        """Enable hover and drag handling for *element* and return it."""
        self._attached[id(element)] = element
        return element

    def detach(self, element: ElementAccessor) -> None:
        """Stop handling events for *element*, dropping any gesture in flight."""
        self._attached.pop(id(element), None)
        if self._sessions.end(element) is not None:
            _LOGGER.debug("Dropped active session while detaching %r", element)
            self._set_cursor(None)

    def is_attached(self, element: ElementAccessor) -> bool:
        return id(element) in self._attached

    # ------------------------------------------------------------------
    # Fluent configuration
    # ------------------------------------------------------------------
    @property
    def config(self) -> InteractionConfig:
        return self._config

    def x_extent(self, extent: Iterable[float | None] = _UNSET):
        if extent is _UNSET:
            return self._config.x_extent
        self._config.set_x_extent(extent)
        return self

    def y_extent(self, extent: Iterable[float | None] = _UNSET):
        if extent is _UNSET:
            return self._config.y_extent
        self._config.set_y_extent(extent)
        return self

    def handle_size(self, size: float | Mapping[str, float] = _UNSET):
        if size is _UNSET:
            return dict(self._config.handle_size)
        self._config.set_handle_size(size)
        return self

    def cursors(self, cursors: Mapping[str | Handle, str] = _UNSET):
        if cursors is _UNSET:
            return None if self._config.cursors is None else dict(self._config.cursors)
        self._config.set_cursors(cursors)
        return self

    def directions(self, directions: Iterable[str | Handle] = _UNSET):
        if directions is _UNSET:
            return self._config.directions
        self._config.set_directions(directions)
        return self

    def with_no_extent(self) -> InteractionController:
        self._config.with_no_extent()
        return self

    def with_default_cursors(self) -> InteractionController:
        self._config.with_default_cursors()
        return self

    def without_cursors(self) -> InteractionController:
        self._config.without_cursors()
        return self

    def with_all_directions(self) -> InteractionController:
        self._config.with_all_directions()
        return self

    def on(self, name: str, callback: Hook | None = _UNSET):
        """Return the hook registered under *name*, or register *callback*."""
        if name not in self._hooks:
            raise UnknownHookError(f"unknown hook {name!r}; expected one of {', '.join(HOOK_NAMES)}")
        if callback is _UNSET:
            return self._hooks[name]
        self._hooks[name] = callback
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def origin(self, element: ElementAccessor) -> QPointF:
        """Return the element's reference corner, used to compose drag positions."""
        return QPointF(float(element.get_attribute("x")), float(element.get_attribute("y")))

    def classify(self, element: ElementAccessor, point: QPointF) -> Handle:
        return self._config.hit_tester().classify(point, RectGeometry.of(element))

    def session_for(self, element: ElementAccessor) -> InteractionSession | None:
        return self._sessions.get(element)

    # ------------------------------------------------------------------
    # Hover handlers
    # ------------------------------------------------------------------
    def handle_pointer_move(self, element: ElementAccessor, point: QPointF) -> None:
        """Update the cursor hint for the border under *point*."""
        if not self.is_attached(element) or self._config.cursors is None:
            return
        # The active gesture owns the cursor until it ends.
        if element in self._sessions:
            return
        self._set_cursor(self._config.cursor_for(self.classify(element, point)))

    def handle_pointer_leave(self, element: ElementAccessor) -> None:
        if not self.is_attached(element) or self._config.cursors is None:
            return
        if element in self._sessions:
            return
        self._set_cursor(None)

    # ------------------------------------------------------------------
    # Gesture handlers
    # ------------------------------------------------------------------
    def handle_drag_start(
        self, element: ElementAccessor, point: QPointF, datum: Any = None, index: Any = None
    ) -> Handle:
        """Latch the handle under *point* and notify the matching start hook."""
        if not self.is_attached(element):
            _LOGGER.debug("Ignoring drag start on unattached element %r", element)
            return Handle.NONE

        geometry = RectGeometry.of(element)
        handle = self._config.hit_tester().classify(point, geometry)
        session = self._sessions.begin(
            element,
            InteractionSession(
                handle=handle,
                original_width=geometry.width,
                original_height=geometry.height,
            ),
        )
        _LOGGER.debug("Drag started with handle %r on %r", handle.value, element)

        if session.is_move:
            self._invoke("dragstart", element, datum, index)
        elif session.is_resize:
            self._invoke("resizestart", element, datum, index)
        return handle

    def handle_drag_move(
        self, element: ElementAccessor, point: QPointF, datum: Any = None, index: Any = None
    ) -> bool:
        """Apply one drag step at the origin-composed *point*.

        Returns
        -------
        bool
            True when the element geometry was updated.
        """
        session = self._sessions.get(element)
        if session is None:
            _LOGGER.debug("Ignoring drag move without an active session on %r", element)
            return False

        if session.is_move:
            if self._invoke("dragmove", element, datum, index) is False:
                return False
            self._apply_move(element, session, point)
            return True

        if session.is_resize:
            if self._invoke("resizemove", element, datum, index) is False:
                return False
            self._apply_resize(element, session, point)
            return True

        return False

    def handle_drag_end(self, element: ElementAccessor, datum: Any = None, index: Any = None) -> None:
        session = self._sessions.get(element)
        if session is None:
            _LOGGER.debug("Ignoring drag end without an active session on %r", element)
            return

        try:
            if session.is_move:
                self._invoke("dragend", element, datum, index)
            elif session.is_resize:
                self._invoke("resizeend", element, datum, index)
        finally:
            self._sessions.end(element)
            _LOGGER.debug("Drag ended with handle %r on %r", session.handle.value, element)

            # The pointer may be off the element by now, so no leave will follow.
            if self._config.cursors is not None:
                self._set_cursor(None)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _invoke(self, name: str, element: ElementAccessor, datum: Any, index: Any) -> Any:
        callback = self._hooks[name]
        if callback is None:
            return None
        return callback(element, datum, index)

    def _set_cursor(self, hint: str | None) -> None:
        if self._cursor_hint is not None:
            self._cursor_hint.set_hint(hint)

    def _apply_move(self, element: ElementAccessor, session: InteractionSession, point: QPointF) -> None:
        x_extent = self._config.x_extent
        y_extent = self._config.y_extent
        # Clamping the far edge as well keeps the box pinned to the extent
        # even when the pointer jumps well past it between events.
        ow = session.original_width
        oh = session.original_height
        element.set_attribute("x", clamp(clamp(point.x(), x_extent) + ow, x_extent) - ow)
        element.set_attribute("y", clamp(clamp(point.y(), y_extent) + oh, y_extent) - oh)

    def _apply_resize(self, element: ElementAccessor, session: InteractionSession, point: QPointF) -> None:
        geometry = RectGeometry.of(element)
        axes = session.axes

        if axes.vertical == "n":
            bottom = geometry.bottom
            new_y = clamp(clamp(point.y(), self._config.y_extent), Extent(float("-inf"), bottom - MIN_SIZE))
            element.set_attribute("y", new_y)
            element.set_attribute("height", bottom - new_y)
        elif axes.vertical == "s":
            bottom = clamp(point.y() + session.original_height, self._config.y_extent)
            element.set_attribute("height", max(bottom - geometry.y, MIN_SIZE))

        if axes.horizontal == "w":
            right = geometry.right
            new_x = clamp(clamp(point.x(), self._config.x_extent), Extent(float("-inf"), right - MIN_SIZE))
            element.set_attribute("x", new_x)
            element.set_attribute("width", right - new_x)
        elif axes.horizontal == "e":
            right = clamp(point.x() + session.original_width, self._config.x_extent)
            element.set_attribute("width", max(right - geometry.x, MIN_SIZE))
