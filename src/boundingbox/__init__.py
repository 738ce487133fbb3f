"""
Pointer-driven move and resize behavior for rectangles.

This package classifies pointer positions against an element's borders,
latches a gesture session per drag and converts drag motion into clamped
position and size updates.
"""

from .controller import InteractionController
from .cursor import ApplicationCursorHint, CursorHint, WidgetCursorHint, cursor_shape_for_hint
from .errors import BoundingBoxError, ConfigurationError, UnknownHookError
from .geometry import ElementAccessor, RectElement, RectGeometry
from .gesture import DragTracker
from .hit_tester import HitTester
from .interaction_config import InteractionConfig
from .model import InteractionSession, SessionStore
from .utils import AxisFlags, Extent, Handle, clamp

__all__ = [
    "ApplicationCursorHint",
    "AxisFlags",
    "BoundingBoxError",
    "ConfigurationError",
    "CursorHint",
    "DragTracker",
    "ElementAccessor",
    "Extent",
    "Handle",
    "HitTester",
    "InteractionConfig",
    "InteractionController",
    "InteractionSession",
    "RectElement",
    "RectGeometry",
    "SessionStore",
    "UnknownHookError",
    "WidgetCursorHint",
    "clamp",
    "cursor_shape_for_hint",
]
