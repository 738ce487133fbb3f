"""Default configuration values for boundingbox."""

from __future__ import annotations

from typing import Final

# Hit-zone thickness applied to every edge unless configured otherwise.
DEFAULT_HANDLE_SIZE: Final[float] = 3.0

# Resizes never shrink an element below this many units on either axis.
MIN_SIZE: Final[float] = 1.0

EDGE_NAMES: Final[tuple[str, ...]] = ("n", "s", "e", "w")

ALL_DIRECTIONS: Final[tuple[str, ...]] = ("n", "e", "s", "w", "nw", "ne", "se", "sw", "M")

# CSS cursor names, kept as plain strings so any display layer can map them.
DEFAULT_CURSORS: Final[dict[str, str]] = {
    "M": "move",
    "n": "n-resize",
    "e": "e-resize",
    "s": "s-resize",
    "w": "w-resize",
    "nw": "nw-resize",
    "ne": "ne-resize",
    "se": "se-resize",
    "sw": "sw-resize",
}

MOVE_HOOKS: Final[tuple[str, str, str]] = ("dragstart", "dragmove", "dragend")
RESIZE_HOOKS: Final[tuple[str, str, str]] = ("resizestart", "resizemove", "resizeend")
HOOK_NAMES: Final[tuple[str, ...]] = MOVE_HOOKS + RESIZE_HOOKS
