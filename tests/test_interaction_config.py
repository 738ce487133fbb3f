"""Tests for interaction configuration presets and mapping validation."""

import logging
import math

import pytest
from jsonschema import ValidationError

from boundingbox.errors import ConfigurationError
from boundingbox.interaction_config import InteractionConfig
from boundingbox.schema import DEFAULT_CONFIG, merge_with_defaults, validate_config
from boundingbox.utils import Extent, Handle


def test_defaults():
    config = InteractionConfig()

    assert config.x_extent == Extent(-math.inf, math.inf)
    assert config.handle_size == {"n": 3.0, "s": 3.0, "e": 3.0, "w": 3.0}
    assert config.directions == frozenset(Handle) - {Handle.NONE}
    assert config.cursor_for(Handle.MOVE) == "move"
    assert config.cursor_for(Handle.NONE) is None


def test_presets_restore_defaults():
    config = InteractionConfig()
    config.set_x_extent((0, 10))
    config.set_directions(["n"])
    config.without_cursors()

    config.with_no_extent().with_all_directions().with_default_cursors()

    assert config == InteractionConfig()


def test_partial_handle_size_mapping_is_rejected():
    config = InteractionConfig()

    with pytest.raises(ConfigurationError, match="e, w"):
        config.set_handle_size({"n": 1, "s": 1})


def test_unknown_directions_are_dropped_with_warning(caplog):
    config = InteractionConfig()

    with caplog.at_level(logging.WARNING, logger="boundingbox.interaction_config"):
        config.set_directions(["n", "up", "M"])

    assert config.directions == {Handle.N, Handle.MOVE}
    assert "up" in caplog.text


def test_malformed_extent_is_rejected():
    with pytest.raises(ConfigurationError):
        Extent.coerce([1, 2, 3])


def test_from_mapping_applies_values():
    config = InteractionConfig.from_mapping(
        {
            "x_extent": [0, None],
            "y_extent": [None, 400],
            "handle_size": {"n": 1, "s": 2, "e": 3, "w": 4},
            "directions": ["n", "M"],
            "cursors": False,
        }
    )

    assert config.x_extent == Extent(0, math.inf)
    assert config.y_extent == Extent(-math.inf, 400)
    assert config.handle_size == {"n": 1.0, "s": 2.0, "e": 3.0, "w": 4.0}
    assert config.directions == {Handle.N, Handle.MOVE}
    assert config.cursors is None


def test_from_mapping_without_data_uses_defaults():
    assert InteractionConfig.from_mapping(None) == InteractionConfig()


@pytest.mark.parametrize(
    "data",
    [
        {"handle_size": -1},
        {"handle_size": {"n": 1}},
        {"x_extent": [0, 1, 2]},
        {"directions": ["north"]},
        {"cursors": {"middle": "move"}},
        {"colour": "red"},
    ],
)
def test_from_mapping_rejects_invalid_data(data):
    with pytest.raises(ConfigurationError):
        InteractionConfig.from_mapping(data)


def test_as_mapping_is_accepted_by_from_mapping():
    config = InteractionConfig()
    config.set_y_extent((0, 40))
    config.set_cursors({"M": "grab"})

    exported = config.as_mapping()

    assert exported["x_extent"] is None
    assert exported["y_extent"] == [0.0, 40.0]
    assert exported["cursors"] == {"M": "grab"}
    assert InteractionConfig.from_mapping(exported) == config


def test_merge_with_defaults_does_not_mutate_defaults():
    merged = merge_with_defaults({"directions": ["M"]})

    merged["cursors"]["M"] = "grab"
    assert DEFAULT_CONFIG["cursors"]["M"] == "move"
    assert DEFAULT_CONFIG["directions"] != ["M"]


def test_validate_config_accepts_exported_mapping():
    exported = InteractionConfig().as_mapping()

    validate_config(exported)


def test_validate_config_does_not_fill_defaults():
    validate_config({})

    with pytest.raises(ValidationError):
        validate_config({"handle_size": "wide"})
