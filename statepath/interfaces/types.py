# statepath/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, List, Mapping, Sequence, Union

Segment = str
StateID = str
EventType = str

StatePath = Sequence[Segment]
PathSet = List[List[Segment]]

# A segment, or a mapping from region key to a nested value.
StateValue = Union[Segment, Mapping[Segment, Any]]

# [node_label, child] or [node_label, [child, child, ...]] for parallel regions.
StateValueTraversal = List[Any]
