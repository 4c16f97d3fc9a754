# tests/unit/test_normalizer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
"""Unit tests for normalizing states, nested values and string paths."""
import logging
from types import SimpleNamespace

import pytest

from statepath.core.errors import InvalidPathError
from statepath.core.normalizer import to_state_value
from statepath.core.states import State


def test_state_value_is_returned_as_is():
    value = {"a": {"b": "c"}}
    assert to_state_value(State(value), ".") is value


def test_state_with_segment_value():
    assert to_state_value(State("idle")) == "idle"


def test_mapping_is_returned_unchanged():
    value = {"a": "b", "c": "d"}
    assert to_state_value(value) is value


def test_string_path_builds_single_branch():
    assert to_state_value("a.b.c") == {"a": {"b": "c"}}


def test_single_segment_string():
    assert to_state_value("idle") == "idle"


def test_segment_list_builds_single_branch():
    assert to_state_value(["a", "b"]) == {"a": "b"}


def test_custom_delimiter():
    assert to_state_value("a/b", "/") == {"a": "b"}


@pytest.mark.parametrize("source", [None, 7])
def test_unrecognized_sources_raise(source):
    with pytest.raises(InvalidPathError):
        to_state_value(source)


def test_debug_logging(caplog):
    with caplog.at_level(logging.DEBUG, logger="statepath.core.normalizer"):
        to_state_value("a.b")
    assert "2 segment(s)" in caplog.text


def test_duck_typed_state_value():
    value = {"a": "b"}
    assert to_state_value(SimpleNamespace(value=value)) is value
