"""
Interaction handles and small numeric helpers.

This module contains pure data structures shared by the hit tester, the
session model and the controller, with no dependency on Qt event handling.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal, NamedTuple

from .errors import ConfigurationError

Vertical = Literal["n", "s"]
Horizontal = Literal["w", "e"]


@dataclass(frozen=True)
class AxisFlags:
    """Which edge, if any, a handle drives on each axis."""

    vertical: Vertical | None = None
    horizontal: Horizontal | None = None

    @property
    def is_empty(self) -> bool:
        return self.vertical is None and self.horizontal is None


class Handle(str, enum.Enum):
    """Enumeration of interaction modes, valued by their short codes."""

    NONE = ""
    MOVE = "M"
    N = "n"
    S = "s"
    E = "e"
    W = "w"
    NW = "nw"
    NE = "ne"
    SW = "sw"
    SE = "se"

    @classmethod
    def from_flags(cls, flags: AxisFlags) -> Handle:
        """Combine per-axis flags, vertical first, into a handle."""
        if flags.is_empty:
            return cls.MOVE
        return cls((flags.vertical or "") + (flags.horizontal or ""))

    @property
    def axes(self) -> AxisFlags:
        return _AXES[self]

    @property
    def is_border(self) -> bool:
        return self not in (Handle.NONE, Handle.MOVE)


_AXES: dict[Handle, AxisFlags] = {
    Handle.NONE: AxisFlags(),
    Handle.MOVE: AxisFlags(),
    Handle.N: AxisFlags(vertical="n"),
    Handle.S: AxisFlags(vertical="s"),
    Handle.E: AxisFlags(horizontal="e"),
    Handle.W: AxisFlags(horizontal="w"),
    Handle.NW: AxisFlags(vertical="n", horizontal="w"),
    Handle.NE: AxisFlags(vertical="n", horizontal="e"),
    Handle.SW: AxisFlags(vertical="s", horizontal="w"),
    Handle.SE: AxisFlags(vertical="s", horizontal="e"),
}


class Extent(NamedTuple):
    """Inclusive ``[low, high]`` range for a coordinate."""

    low: float
    high: float

    @classmethod
    def unbounded(cls) -> Extent:
        return cls(-math.inf, math.inf)

    @classmethod
    def coerce(cls, value: Sequence[float | None]) -> Extent:
        """Build an extent from any two-item sequence; ``None`` bounds are open."""
        try:
            low, high = value
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"extent must be a [min, max] pair, got {value!r}") from exc
        low = -math.inf if low is None else float(low)
        high = math.inf if high is None else float(high)
        return cls(low, high)


def clamp(value: float, extent: Sequence[float]) -> float:
    """Clamp *value* into the inclusive ``extent``."""
    return max(extent[0], min(value, extent[1]))


__all__ = ["AxisFlags", "Extent", "Handle", "Horizontal", "Vertical", "clamp"]
