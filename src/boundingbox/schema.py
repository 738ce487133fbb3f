"""Schema helpers for interaction configuration mappings."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from .config import ALL_DIRECTIONS, DEFAULT_CURSORS, DEFAULT_HANDLE_SIZE, EDGE_NAMES

_BOUND = {"type": ["number", "null"]}
_EXTENT = {
    "oneOf": [
        {"type": "null"},
        {"type": "array", "prefixItems": [_BOUND, _BOUND], "minItems": 2, "maxItems": 2},
    ]
}

CONFIG_SCHEMA: dict[str, Any] = {
    "$id": "boundingbox/config.schema.json",
    "type": "object",
    "properties": {
        "x_extent": _EXTENT,
        "y_extent": _EXTENT,
        "handle_size": {
            "oneOf": [
                {"type": "number", "minimum": 0},
                {
                    "type": "object",
                    "properties": {edge: {"type": "number", "minimum": 0} for edge in EDGE_NAMES},
                    "required": list(EDGE_NAMES),
                    "additionalProperties": False,
                },
            ]
        },
        "directions": {
            "type": "array",
            "items": {"enum": list(ALL_DIRECTIONS)},
            "uniqueItems": True,
        },
        "cursors": {
            "oneOf": [
                {"const": False},
                {"type": "null"},
                {
                    "type": "object",
                    "propertyNames": {"enum": list(ALL_DIRECTIONS)},
                    "additionalProperties": {"type": "string"},
                },
            ]
        },
    },
    "additionalProperties": False,
}

DEFAULT_CONFIG: dict[str, Any] = {
    "x_extent": None,
    "y_extent": None,
    "handle_size": DEFAULT_HANDLE_SIZE,
    "directions": list(ALL_DIRECTIONS),
    "cursors": dict(DEFAULT_CURSORS),
}

_validator = Draft202012Validator(CONFIG_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_CONFIG` and validate the result."""

    merged = deepcopy(DEFAULT_CONFIG)
    if data:
        merged.update(data)
    _validator.validate(merged)
    return merged


def validate_config(data: dict[str, Any]) -> None:
    """Validate *data* against the configuration schema."""

    _validator.validate(data)


__all__ = ["CONFIG_SCHEMA", "DEFAULT_CONFIG", "merge_with_defaults", "validate_config"]
