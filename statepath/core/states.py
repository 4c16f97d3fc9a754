# statepath/core/states.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from statepath.config import DEFAULT_CONFIG
from statepath.core.normalizer import to_state_value
from statepath.core.paths import path_prefixes, to_string_path
from statepath.core.traversal import resolve_child
from statepath.core.validation import StateValueValidator
from statepath.core.values import state_value_to_paths
from statepath.interfaces.types import PathSet, Segment, StateID, StateValue


class State:
    """
    A snapshot of a running machine: the nested value of its active states and
    an optional context object. Treated as read-only once created.
    """

    def __init__(self, value: StateValue, context: Any = None) -> None:
        """
        :param value: Nested state value of the active configuration.
        :param context: Extended state carried alongside the value.
        """
        self._value = value
        self._context = context

    @property
    def value(self) -> StateValue:
        """The nested state value."""
        return self._value

    @property
    def context(self) -> Any:
        return self._context

    @property
    def paths(self) -> PathSet:
        """One path per active branch."""
        return state_value_to_paths(self._value)

    def to_strings(self, delimiter: str = DEFAULT_CONFIG.delimiter) -> List[str]:
        """
        Every ancestor-or-self string path of the active branches, without duplicates.

        ``{"a": {"b": "c"}}`` gives ``["a", "a.b", "a.b.c"]``.
        """
        strings: List[str] = []
        for state_path in self.paths:
            for prefix in path_prefixes(state_path):
                joined = to_string_path(prefix, delimiter)
                if joined not in strings:
                    strings.append(joined)
        return strings

    def matches(self, parent_value: Any, delimiter: str = DEFAULT_CONFIG.delimiter) -> bool:
        """
        Check whether the given value is contained in this state's configuration.

        :param parent_value: A string path, nested value or State.
        :return: True if every branch of ``parent_value`` is a prefix of an active branch.
        :raises InvalidStateValueError: If ``parent_value`` is not a well-formed value.
        """
        parent = to_state_value(parent_value, delimiter)
        StateValueValidator().ensure_valid(parent)

        active = self.paths
        for parent_path in state_value_to_paths(parent):
            if not any(candidate[: len(parent_path)] == parent_path for candidate in active):
                return False
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return self._value == other._value and self._context == other._context

    def __repr__(self) -> str:
        return f"State(value={self._value!r})"


@dataclass(eq=False)
class StateNode:
    """
    Node of a state definition tree.

    Attributes:
        key: Segment naming this node within its parent.
        id: Stable identifier; defaults to the key.
        states: Child nodes by key.
    """

    key: Segment
    id: Optional[StateID] = None
    states: Dict[Segment, "StateNode"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.id is None:
            self.id = self.key

    def get_child(self, key: Segment) -> "StateNode":
        """
        Look up a direct child.

        :raises TreeResolutionError: If no child has that key.
        """
        return resolve_child(self, key)

    @classmethod
    def from_config(
        cls,
        key: Segment,
        config: Optional[Mapping[str, Any]] = None,
        parent: Optional["StateNode"] = None,
        delimiter: str = DEFAULT_CONFIG.delimiter,
    ) -> "StateNode":
        """
        Build a tree from nested ``{"states": {...}}`` mappings.

        Identifiers are the delimited path from the root unless the config
        provides an explicit ``"id"``.
        """
        config = config or {}
        node_id = config.get("id")
        if node_id is None:
            node_id = key if parent is None else f"{parent.id}{delimiter}{key}"

        node = cls(key=key, id=node_id)
        for child_key, child_config in (config.get("states") or {}).items():
            node.states[child_key] = cls.from_config(child_key, child_config, node, delimiter)
        return node
