# statepath/core/traversal.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import logging
from typing import Mapping, Optional

from statepath.config import DEFAULT_CONFIG, ParallelLabel, StatePathConfig
from statepath.core.errors import InvalidStateValueError, TreeResolutionError
from statepath.interfaces.protocols import StateNodeLike
from statepath.interfaces.types import Segment, StateValue, StateValueTraversal

logger = logging.getLogger(__name__)


def resolve_child(node: StateNodeLike, key: Segment) -> StateNodeLike:
    """
    Look up a direct child of ``node``.

    :raises TreeResolutionError: If no child has that key.
    """
    try:
        return node.states[key]
    except KeyError:
        raise TreeResolutionError(
            f"Child state '{key}' does not exist on '{node.id}'",
            {"segment": key, "node": node.id, "available": list(node.states)},
        ) from None


def traverse_state_value(
    state_value: StateValue,
    state_node: StateNodeLike,
    parallel_label: Optional[ParallelLabel] = None,
    config: StatePathConfig = DEFAULT_CONFIG,
) -> StateValueTraversal:
    """
    Resolve a nested value against a state-node tree.

    Each visited node is paired with the traversal of its active children:

    - a leaf segment ``s`` gives ``[node.id, [child_s.id]]``
    - a single-key mapping gives ``[node.id, <child traversal>]``
    - a multi-key mapping (parallel region) gives
      ``[node.key, [<child traversal>, ...]]`` in key order

    The parallel case is labelled by the node key unless the label policy is
    ``ParallelLabel.ID``.

    :param state_value: Nested value, interpreted relative to ``state_node``.
    :param state_node: Node whose children the top level of the value names.
    :param parallel_label: Attribute labelling parallel regions; overrides ``config``.
    :param config: Settings supplying the label policy when none is passed.
    :raises TreeResolutionError: If a segment is not a child key at its level.
    :raises InvalidStateValueError: If a level is neither a segment nor a non-empty mapping.
    """
    if parallel_label is None:
        parallel_label = config.parallel_label

    if isinstance(state_value, str):
        return [state_node.id, [resolve_child(state_node, state_value).id]]

    if not isinstance(state_value, Mapping) or not state_value:
        raise InvalidStateValueError(
            f"Cannot traverse state value {state_value!r} on '{state_node.id}'",
            {"value": state_value, "node": state_node.id},
        )

    if len(state_value) == 1:
        ((key, child_value),) = state_value.items()
        return [state_node.id, traverse_state_value(child_value, resolve_child(state_node, key), parallel_label)]

    label = state_node.id if parallel_label is ParallelLabel.ID else state_node.key
    logger.debug("Parallel region '%s' with %d active regions", label, len(state_value))
    return [
        label,
        [
            traverse_state_value(child_value, resolve_child(state_node, key), parallel_label)
            for key, child_value in state_value.items()
        ],
    ]
