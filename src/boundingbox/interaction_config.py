"""Interaction settings with named presets and mapping import/export."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from jsonschema import ValidationError

from .config import ALL_DIRECTIONS, DEFAULT_CURSORS, DEFAULT_HANDLE_SIZE, EDGE_NAMES
from .errors import ConfigurationError
from .hit_tester import HitTester
from .schema import merge_with_defaults
from .utils import Extent, Handle

_LOGGER = logging.getLogger(__name__)


def _uniform(size: float) -> dict[str, float]:
    return dict.fromkeys(EDGE_NAMES, float(size))


def _default_directions() -> frozenset[Handle]:
    return frozenset(Handle(code) for code in ALL_DIRECTIONS)


def _default_cursors() -> dict[Handle, str]:
    return {Handle(code): cursor for code, cursor in DEFAULT_CURSORS.items()}


@dataclass
class InteractionConfig:
    """Extents, handle sizes, allowed directions and cursor hints for one controller."""

    x_extent: Extent = field(default_factory=Extent.unbounded)
    y_extent: Extent = field(default_factory=Extent.unbounded)
    handle_size: dict[str, float] = field(default_factory=lambda: _uniform(DEFAULT_HANDLE_SIZE))
    directions: frozenset[Handle] = field(default_factory=_default_directions)
    cursors: dict[Handle, str] | None = field(default_factory=_default_cursors)

    # ------------------------------------------------------------------
    # Presets
    # ------------------------------------------------------------------
    def with_no_extent(self) -> InteractionConfig:
        self.x_extent = Extent.unbounded()
        self.y_extent = Extent.unbounded()
        return self

    def with_default_cursors(self) -> InteractionConfig:
        self.cursors = _default_cursors()
        return self

    def without_cursors(self) -> InteractionConfig:
        self.cursors = None
        return self

    def with_all_directions(self) -> InteractionConfig:
        self.directions = _default_directions()
        return self

    # ------------------------------------------------------------------
    # Normalising setters
    # ------------------------------------------------------------------
    def set_x_extent(self, extent: Sequence[float | None]) -> None:
        self.x_extent = Extent.coerce(extent)

    def set_y_extent(self, extent: Sequence[float | None]) -> None:
        self.y_extent = Extent.coerce(extent)

    def set_handle_size(self, size: float | Mapping[str, float]) -> None:
        """Apply one thickness to every edge, or a full per-edge mapping."""
        if isinstance(size, Mapping):
            missing = [edge for edge in EDGE_NAMES if edge not in size]
            if missing:
                raise ConfigurationError(f"handle size mapping lacks edges: {', '.join(missing)}")
            self.handle_size = {edge: float(size[edge]) for edge in EDGE_NAMES}
        else:
            self.handle_size = _uniform(size)

    def set_directions(self, directions: Iterable[str | Handle]) -> None:
        """Restrict interaction to *directions*; unknown codes are dropped."""
        accepted: set[Handle] = set()
        for code in directions:
            try:
                handle = Handle(code)
            except ValueError:
                _LOGGER.warning("Ignoring unknown interaction direction %r", code)
                continue
            if handle is Handle.NONE:
                continue
            accepted.add(handle)
        self.directions = frozenset(accepted)

    def set_cursors(self, cursors: Mapping[str | Handle, str]) -> None:
        parsed: dict[Handle, str] = {}
        for code, cursor in cursors.items():
            try:
                parsed[Handle(code)] = str(cursor)
            except ValueError:
                _LOGGER.warning("Ignoring cursor for unknown direction %r", code)
        self.cursors = parsed

    # ------------------------------------------------------------------
    # Derived helpers
    # ------------------------------------------------------------------
    def hit_tester(self) -> HitTester:
        return HitTester(handle_size=self.handle_size, directions=self.directions)

    def cursor_for(self, handle: Handle) -> str | None:
        if self.cursors is None:
            return None
        return self.cursors.get(handle) or None

    # ------------------------------------------------------------------
    # Mapping form
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> InteractionConfig:
        """Build a config from a JSON-compatible mapping, validating it first."""
        try:
            merged = merge_with_defaults(dict(data) if data else None)
        except ValidationError as exc:
            raise ConfigurationError(exc.message) from exc

        config = cls()
        if merged["x_extent"] is not None:
            config.set_x_extent(merged["x_extent"])
        if merged["y_extent"] is not None:
            config.set_y_extent(merged["y_extent"])
        config.set_handle_size(merged["handle_size"])
        config.set_directions(merged["directions"])
        if merged["cursors"] is None or merged["cursors"] is False:
            config.without_cursors()
        else:
            config.set_cursors(merged["cursors"])
        return config

    def as_mapping(self) -> dict[str, Any]:
        """Export the config in the form accepted by :meth:`from_mapping`."""

        def _extent(extent: Extent) -> list[float | None] | None:
            low = None if math.isinf(extent.low) else extent.low
            high = None if math.isinf(extent.high) else extent.high
            if low is None and high is None:
                return None
            return [low, high]

        return {
            "x_extent": _extent(self.x_extent),
            "y_extent": _extent(self.y_extent),
            "handle_size": dict(self.handle_size),
            "directions": [code for code in ALL_DIRECTIONS if Handle(code) in self.directions],
            "cursors": (
                {handle.value: cursor for handle, cursor in self.cursors.items()}
                if self.cursors is not None
                else False
            ),
        }
