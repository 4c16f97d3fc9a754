# statepath/core/validation.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from statepath.core.errors import InvalidStateValueError
from statepath.interfaces.protocols import StateNodeLike


class StateValueValidator:
    """
    Checks that nested state values are well formed and, when a root node is
    given, that every segment they name exists in the state-node tree.

    Runtime Invariants:
    - Validation never modifies the validated value or the tree.
    - Results are deterministic for a given value and tree.

    Example:
        validator = StateValueValidator(root)
        problems = validator.validate({"a": "b"})
    """

    def __init__(self, root: Optional[StateNodeLike] = None) -> None:
        """
        :param root: Optional node whose children the top level of a value names.
        """
        self._root = root

    def validate(self, state_value: Any) -> List[str]:
        """
        Collect every problem found in ``state_value``.

        :return: Human-readable problems; empty when the value is valid.
        """
        problems: List[str] = []
        self._check(state_value, self._root, [], problems)
        return problems

    def ensure_valid(self, state_value: Any) -> None:
        """
        :raises InvalidStateValueError: If :meth:`validate` reports any problem.
        """
        problems = self.validate(state_value)
        if problems:
            raise InvalidStateValueError(
                f"Invalid state value: {'; '.join(problems)}",
                {"value": state_value, "problems": problems},
            )

    def _check(self, value: Any, node: Optional[StateNodeLike], trail: List[str], problems: List[str]) -> None:
        where = ".".join(trail) or "<root>"

        if isinstance(value, str):
            if not value:
                problems.append(f"Empty leaf segment at {where}")
            else:
                self._check_child(node, value, where, problems)
            return

        if not isinstance(value, Mapping):
            problems.append(f"Expected a string or mapping at {where}, got {type(value).__name__}")
            return
        if not value:
            problems.append(f"Empty mapping at {where}")
            return

        for key, child_value in value.items():
            if not isinstance(key, str) or not key:
                problems.append(f"Invalid region key {key!r} at {where}")
                continue
            child = self._check_child(node, key, where, problems)
            if node is not None and child is None:
                continue
            self._check(child_value, child, trail + [key], problems)

    @staticmethod
    def _check_child(
        node: Optional[StateNodeLike], key: str, where: str, problems: List[str]
    ) -> Optional[StateNodeLike]:
        if node is None:
            return None
        child = node.states.get(key)
        if child is None:
            problems.append(f"Unknown state '{key}' under '{node.id}' at {where}")
        return child
