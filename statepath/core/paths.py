# statepath/core/paths.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, List, Sequence, Union

from statepath.config import DEFAULT_CONFIG
from statepath.core.errors import InvalidPathError
from statepath.interfaces.types import Segment, StatePath


def _is_segment_sequence(source: Any) -> bool:
    return isinstance(source, (list, tuple)) and all(isinstance(segment, str) for segment in source)


def to_state_path(source: Union[str, StatePath], delimiter: str = DEFAULT_CONFIG.delimiter) -> StatePath:
    """
    Split a delimited string into its segments.

    A sequence of segments is returned unchanged. Consecutive delimiters yield
    empty segments. Only strings and sequences of strings are accepted; other
    values are not coerced.

    :param source: A string path such as ``"a.b.c"`` or a sequence of segments.
    :param delimiter: Separator between segments.
    :return: The ordered segments, root to leaf.
    :raises InvalidPathError: If ``source`` is not a string or a sequence of strings.
    """
    if _is_segment_sequence(source):
        return source
    if not isinstance(source, str):
        raise InvalidPathError(f"'{source}' is not a valid state path.", {"path": source})
    return source.split(delimiter)


def to_string_path(source: Union[str, Sequence[Segment]], delimiter: str = DEFAULT_CONFIG.delimiter) -> str:
    """
    Join segments back into a delimited string path. A string is returned unchanged.

    :raises InvalidPathError: If ``source`` is not a string or a sequence of strings.
    """
    if isinstance(source, str):
        return source
    if not _is_segment_sequence(source):
        raise InvalidPathError(f"'{source}' is not a valid state path.", {"path": source})
    return delimiter.join(source)


def path_prefixes(state_path: StatePath) -> List[List[Segment]]:
    """Every non-empty prefix of a path, shortest first."""
    return [list(state_path[: index + 1]) for index in range(len(state_path))]
