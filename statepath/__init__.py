# statepath/__init__.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""statepath: conversions between the representations of a hierarchical state configuration.

A running statechart is not in a single flat state. Compound states nest regions and
parallel states keep several regions active at once, so "the current state" is one of:

    - a delimited string path, e.g. ``"a.b.c"``
    - a nested state value, e.g. ``{"a": {"b": "c"}, "x": "y"}``
    - a set of ordered paths, one per active branch

This package moves between them, and resolves nested values against a state-node tree.
"""

from statepath.config import DEFAULT_CONFIG, ParallelLabel, StatePathConfig
from statepath.core.errors import (
    ConfigurationError,
    InvalidEventError,
    InvalidPathError,
    InvalidStateValueError,
    StatePathError,
    TreeResolutionError,
)
from statepath.core.events import Event, get_event_type
from statepath.core.normalizer import to_state_value
from statepath.core.paths import to_state_path, to_string_path
from statepath.core.states import State, StateNode
from statepath.core.traversal import traverse_state_value
from statepath.core.utils import map_values, path
from statepath.core.validation import StateValueValidator
from statepath.core.values import (
    path_to_state_value,
    paths_to_state_value,
    state_value_to_paths,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ConfigurationError",
    "Event",
    "InvalidEventError",
    "InvalidPathError",
    "InvalidStateValueError",
    "ParallelLabel",
    "State",
    "StateNode",
    "StatePathConfig",
    "StatePathError",
    "StateValueValidator",
    "TreeResolutionError",
    "get_event_type",
    "map_values",
    "path",
    "path_to_state_value",
    "paths_to_state_value",
    "state_value_to_paths",
    "to_state_path",
    "to_state_value",
    "to_string_path",
    "traverse_state_value",
]
