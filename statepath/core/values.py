# statepath/core/values.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Conversions between nested state values and sets of state paths.

A nested state value is either a segment (the leaf is active directly) or a
mapping from region key to nested value. A mapping with several keys is a
parallel region, which flattens to several paths sharing the region's prefix.
"""

from typing import Any, Dict, Iterable, Mapping

from statepath.core.errors import InvalidPathError, InvalidStateValueError
from statepath.interfaces.types import PathSet, Segment, StatePath, StateValue


def path_to_state_value(state_path: StatePath) -> StateValue:
    """
    Build the nested value for a single branch.

    ``["a"]`` becomes ``"a"``; ``["a", "b", "c"]`` becomes ``{"a": {"b": "c"}}``.

    :param state_path: Ordered, non-empty segments.
    :raises InvalidPathError: If ``state_path`` is empty.
    """
    if not state_path:
        raise InvalidPathError("A state path needs at least one segment.", {"path": state_path})
    if len(state_path) == 1:
        return state_path[0]

    value: StateValue = state_path[-1]
    for segment in reversed(state_path[:-1]):
        value = {segment: value}
    return value


def state_value_to_paths(state_value: StateValue) -> PathSet:
    """
    Flatten a nested value into one path per active branch, in key order.

    :raises InvalidStateValueError: If a level is neither a segment nor a mapping.
    """
    if isinstance(state_value, str):
        return [[state_value]]
    if not isinstance(state_value, Mapping):
        raise InvalidStateValueError(
            f"State values must be strings or mappings, got {type(state_value).__name__}",
            {"value": state_value},
        )

    return [[key] + sub_path for key, child in state_value.items() for sub_path in state_value_to_paths(child)]


def _merge_path(target: Dict[Segment, Any], state_path: StatePath) -> None:
    head = state_path[0]
    if len(state_path) == 1:
        # Lone segment: the region is present but nothing below it is known.
        target.setdefault(head, {})
        return
    if len(state_path) == 2:
        target[head] = state_path[1]
        return

    child = target.get(head)
    if not isinstance(child, dict):
        child = {}
        target[head] = child
    _merge_path(child, state_path[1:])


def paths_to_state_value(paths: Iterable[StatePath]) -> StateValue:
    """
    Merge paths into one nested value.

    Paths sharing a prefix merge under that prefix, producing the multi-key
    mappings of parallel regions. A single one-segment path collapses to the
    bare segment. The last segment of each path is written as a leaf, so when
    two paths write the same leaf slot the later one wins, and a deeper path
    replaces a leaf it needs to descend through.
    """
    paths = [list(state_path) for state_path in paths]
    if len(paths) == 1 and len(paths[0]) == 1:
        return paths[0][0]

    result: Dict[Segment, Any] = {}
    for state_path in paths:
        if state_path:
            _merge_path(result, state_path)
    return result
