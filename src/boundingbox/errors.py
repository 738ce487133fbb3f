"""Custom exception hierarchy for boundingbox."""

from __future__ import annotations


class BoundingBoxError(Exception):
    """Base class for all custom errors raised by boundingbox."""


class ConfigurationError(BoundingBoxError):
    """Raised when interaction settings have an unusable shape."""


class UnknownHookError(ConfigurationError):
    """Raised when registering a callback under a name no gesture emits."""
