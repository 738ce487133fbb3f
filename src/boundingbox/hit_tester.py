"""
Hit testing logic for element borders.

This module contains pure geometric functions for detecting which border
handle (if any) is under a given point, with no dependencies on Qt events or
interaction state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from PySide6.QtCore import QPointF

from .config import ALL_DIRECTIONS, DEFAULT_HANDLE_SIZE
from .geometry import RectGeometry
from .utils import AxisFlags, Handle


class HitTester:
    """Pure-function classifier from pointer position to interaction handle."""

    def __init__(
        self,
        handle_size: Mapping[str, float] | None = None,
        directions: Iterable[Handle] | None = None,
    ) -> None:
        """Initialize hit tester.

        Parameters
        ----------
        handle_size:
            Hit-zone thickness per edge, keyed by ``n``, ``s``, ``e`` and ``w``.
        directions:
            Handles that may be returned. Anything else classifies as
            :attr:`Handle.NONE`.
        """
        if handle_size is None:
            handle_size = dict.fromkeys("nsew", DEFAULT_HANDLE_SIZE)
        self._handle_size = {edge: float(handle_size[edge]) for edge in "nsew"}
        if directions is None:
            directions = (Handle(code) for code in ALL_DIRECTIONS)
        self._directions = frozenset(directions)

    def axes_at(self, point: QPointF, geometry: RectGeometry) -> AxisFlags:
        """Return the raw per-axis border flags for *point*, ignoring directions."""
        px, py = point.x(), point.y()
        size = self._handle_size

        vertical = None
        if py < geometry.y + size["n"]:
            vertical = "n"
        elif py > geometry.bottom - size["s"]:
            vertical = "s"

        horizontal = None
        if px < geometry.x + size["w"]:
            horizontal = "w"
        elif px > geometry.right - size["e"]:
            horizontal = "e"

        return AxisFlags(vertical=vertical, horizontal=horizontal)

    def classify(self, point: QPointF, geometry: RectGeometry) -> Handle:
        """Determine which handle (if any) is under the pointer.

        Borders are tested before the interior, so when the handle zones
        overlap on a small element the border wins.

        Returns
        -------
        Handle:
            A border handle, :attr:`Handle.MOVE` for the interior, or
            :attr:`Handle.NONE` when the result is not an allowed direction.
        """
        handle = Handle.from_flags(self.axes_at(point, geometry))
        return handle if handle in self._directions else Handle.NONE
