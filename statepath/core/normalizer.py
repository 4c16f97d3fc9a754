# statepath/core/normalizer.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
import logging
from typing import Mapping, Union

from statepath.config import DEFAULT_CONFIG
from statepath.core.paths import to_state_path
from statepath.core.values import path_to_state_value
from statepath.interfaces.protocols import StateLike
from statepath.interfaces.types import StatePath, StateValue

logger = logging.getLogger(__name__)


def to_state_value(
    source: Union[StateLike, StateValue, StatePath],
    delimiter: str = DEFAULT_CONFIG.delimiter,
) -> StateValue:
    """
    Produce the nested state value for any accepted source.

    Three shapes are recognized, checked in order:
      - a wrapped state such as :class:`~statepath.core.states.State`, whose
        ``value`` is returned as-is
      - a mapping, taken to be a nested value already and returned unchanged
      - a string path or a sequence of segments, split and built into a
        single-branch value

    :raises InvalidPathError: If the source is none of the above.
    """
    if isinstance(source, StateLike) and not isinstance(source, (str, Mapping)):
        return source.value
    if isinstance(source, Mapping):
        return source

    state_path = to_state_path(source, delimiter)
    logger.debug("Normalized path %r to %d segment(s)", source, len(state_path))
    return path_to_state_value(state_path)
