# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from statepath.core.states import StateNode


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def simple_tree() -> StateNode:
    """Root 'r' (id 'R') -> 'a' (id 'A') -> 'b' (id 'B')."""
    leaf = StateNode(key="b", id="B")
    middle = StateNode(key="a", id="A", states={"b": leaf})
    return StateNode(key="r", id="R", states={"a": middle})


@pytest.fixture
def parallel_tree() -> StateNode:
    """Root 'r' with two regions, 'a' (containing 'b') and 'c' (containing 'd' and 'e')."""
    region_a = StateNode(key="a", id="A", states={"b": StateNode(key="b", id="B")})
    region_c = StateNode(
        key="c",
        id="C",
        states={"d": StateNode(key="d", id="D"), "e": StateNode(key="e", id="E")},
    )
    return StateNode(key="r", id="R", states={"a": region_a, "c": region_c})
