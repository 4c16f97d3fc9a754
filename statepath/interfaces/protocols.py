# statepath/interfaces/protocols.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Mapping, Protocol, runtime_checkable

from statepath.interfaces.types import Segment, StateID


@runtime_checkable
class StateNodeLike(Protocol):
    """
    State-node tree protocol for type checking.

    Attributes:
        id: Stable identifier of the node.
        key: Segment used to reach this node from its parent.
        states: Mapping from child key to child node.

    Runtime Invariants:
    - The nodes form a tree (no cycles).
    - Child keys are unique per level.

    These invariants are assumed by traversal, never enforced.
    """

    @property
    def id(self) -> StateID: ...

    @property
    def key(self) -> Segment: ...

    @property
    def states(self) -> Mapping[Segment, "StateNodeLike"]: ...


@runtime_checkable
class EventLike(Protocol):
    """Event protocol: any object exposing a string ``type``."""

    @property
    def type(self) -> Any: ...


@runtime_checkable
class StateLike(Protocol):
    """Wrapped state protocol: any object exposing the nested ``value`` of its configuration."""

    @property
    def value(self) -> Any: ...
