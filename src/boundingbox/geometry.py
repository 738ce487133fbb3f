"""Rectangle geometry and the attribute interface elements expose."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

ATTRIBUTES = ("x", "y", "width", "height")


@runtime_checkable
class ElementAccessor(Protocol):
    """Anything whose ``x``, ``y``, ``width`` and ``height`` can be read and written."""

    def get_attribute(self, name: str) -> float: ...

    def set_attribute(self, name: str, value: float) -> None: ...


@dataclass(frozen=True)
class RectGeometry:
    """Snapshot of an element's rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @classmethod
    def of(cls, element: ElementAccessor) -> RectGeometry:
        """Read the current geometry of *element*, coercing each attribute to float."""
        return cls(*(float(element.get_attribute(name)) for name in ATTRIBUTES))


class RectElement:
    """Plain in-memory element, for canvases that keep geometry outside Qt."""

    def __init__(self, x: float = 0.0, y: float = 0.0, width: float = 1.0, height: float = 1.0) -> None:
        self._values: dict[str, float] = {
            "x": float(x),
            "y": float(y),
            "width": float(width),
            "height": float(height),
        }

    def get_attribute(self, name: str) -> float:
        return self._values[name]

    def set_attribute(self, name: str, value: float) -> None:
        if name not in self._values:
            raise KeyError(name)
        self._values[name] = float(value)

    def geometry(self) -> RectGeometry:
        return RectGeometry.of(self)

    def __repr__(self) -> str:
        g = self.geometry()
        return f"RectElement(x={g.x:g}, y={g.y:g}, width={g.width:g}, height={g.height:g})"
