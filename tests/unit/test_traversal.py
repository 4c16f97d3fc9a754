# tests/unit/test_traversal.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""
Test suite for resolving nested state values against a state-node tree.

Sections covered:
- Single branch resolution
- Parallel regions
- Resolution failures
"""
import logging

import pytest

from statepath.config import ParallelLabel, StatePathConfig
from statepath.core.errors import InvalidStateValueError, TreeResolutionError
from statepath.core.states import StateNode
from statepath.core.traversal import resolve_child, traverse_state_value

# -----------------------------------------------------------------------------
# SINGLE BRANCH
# -----------------------------------------------------------------------------


def test_leaf_segment_wraps_child_id(simple_tree):
    assert traverse_state_value("a", simple_tree) == ["R", ["A"]]


def test_single_key_mapping_collapses(simple_tree):
    assert traverse_state_value({"a": "b"}, simple_tree) == ["R", ["A", ["B"]]]


def test_traversal_starts_at_any_node(simple_tree):
    assert traverse_state_value("b", simple_tree.states["a"]) == ["A", ["B"]]


def test_generated_ids():
    root = StateNode.from_config(
        "machine",
        {"states": {"on": {"states": {"bright": {}, "dim": {}}}, "off": {}}},
    )
    assert traverse_state_value({"on": "dim"}, root) == ["machine", ["machine.on", ["machine.on.dim"]]]


# -----------------------------------------------------------------------------
# PARALLEL REGIONS
# -----------------------------------------------------------------------------


def test_parallel_region_uses_node_key(parallel_tree):
    result = traverse_state_value({"a": "b", "c": "d"}, parallel_tree)
    assert result == ["r", [["A", ["B"]], ["C", ["D"]]]]


def test_parallel_region_keeps_key_order(parallel_tree):
    result = traverse_state_value({"c": "e", "a": "b"}, parallel_tree)
    assert result == ["r", [["C", ["E"]], ["A", ["B"]]]]


def test_parallel_region_labelled_by_id(parallel_tree):
    result = traverse_state_value({"a": "b", "c": "d"}, parallel_tree, ParallelLabel.ID)
    assert result == ["R", [["A", ["B"]], ["C", ["D"]]]]


def test_nested_parallel_region():
    root = StateNode.from_config(
        "m",
        {"states": {"p": {"states": {"x": {"states": {"x1": {}}}, "y": {"states": {"y1": {}}}}}}},
    )
    result = traverse_state_value({"p": {"x": "x1", "y": "y1"}}, root)
    assert result == ["m", ["p", [["m.p.x", ["m.p.x.x1"]], ["m.p.y", ["m.p.y.y1"]]]]]


def test_parallel_region_is_logged(parallel_tree, caplog):
    with caplog.at_level(logging.DEBUG, logger="statepath.core.traversal"):
        traverse_state_value({"a": "b", "c": "d"}, parallel_tree)
    assert "Parallel region 'r' with 2 active regions" in caplog.text


# -----------------------------------------------------------------------------
# FAILURES
# -----------------------------------------------------------------------------


def test_unknown_leaf_raises(simple_tree):
    with pytest.raises(TreeResolutionError) as exc_info:
        traverse_state_value("missing", simple_tree)
    assert exc_info.value.details == {"segment": "missing", "node": "R", "available": ["a"]}


def test_unknown_nested_key_raises(simple_tree):
    with pytest.raises(TreeResolutionError):
        traverse_state_value({"a": {"zzz": "b"}}, simple_tree)


def test_resolution_error_is_a_lookup_error(parallel_tree):
    with pytest.raises(KeyError):
        traverse_state_value({"a": "b", "nope": "d"}, parallel_tree)


def test_empty_mapping_raises(simple_tree):
    with pytest.raises(InvalidStateValueError):
        traverse_state_value({}, simple_tree)


def test_config_supplies_parallel_label(parallel_tree):
    config = StatePathConfig(parallel_label=ParallelLabel.ID)
    result = traverse_state_value({"a": "b", "c": "d"}, parallel_tree, config=config)
    assert result == ["R", [["A", ["B"]], ["C", ["D"]]]]


def test_explicit_label_overrides_config(parallel_tree):
    config = StatePathConfig(parallel_label=ParallelLabel.ID)
    result = traverse_state_value({"a": "b", "c": "d"}, parallel_tree, ParallelLabel.KEY, config)
    assert result[0] == "r"


def test_resolve_child(simple_tree):
    assert resolve_child(simple_tree, "a").id == "A"
    with pytest.raises(TreeResolutionError):
        resolve_child(simple_tree, "b")
