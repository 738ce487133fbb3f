"""
Gesture session model.

Sessions live in a store keyed by element identity rather than on the
elements themselves, so a missing entry unambiguously means "not dragging".
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import ElementAccessor
from .utils import AxisFlags, Handle


@dataclass(frozen=True)
class InteractionSession:
    """State latched for one press-drag-release gesture."""

    handle: Handle
    original_width: float
    original_height: float
    axes: AxisFlags = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "axes", self.handle.axes)

    @property
    def is_move(self) -> bool:
        return self.handle is Handle.MOVE

    @property
    def is_resize(self) -> bool:
        return self.handle.is_border


class SessionStore:
    """Maps live elements to their active gesture session."""

    def __init__(self) -> None:
        # id() keys keep unhashable elements usable; the element itself is
        # held alongside so the id cannot be recycled mid-gesture.
        self._sessions: dict[int, tuple[ElementAccessor, InteractionSession]] = {}

    def begin(self, element: ElementAccessor, session: InteractionSession) -> InteractionSession:
        self._sessions[id(element)] = (element, session)
        return session

    def get(self, element: ElementAccessor) -> InteractionSession | None:
        entry = self._sessions.get(id(element))
        return entry[1] if entry is not None else None

    def end(self, element: ElementAccessor) -> InteractionSession | None:
        entry = self._sessions.pop(id(element), None)
        return entry[1] if entry is not None else None

    def __contains__(self, element: object) -> bool:
        return id(element) in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
