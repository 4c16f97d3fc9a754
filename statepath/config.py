# statepath/config.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from dataclasses import dataclass
from enum import Enum, auto

from statepath.core.errors import ConfigurationError


class ParallelLabel(Enum):
    """
    Which node attribute labels a parallel region in a traversal result.

    KEY reproduces the established output, where a branching node is labelled by
    its key while single-branch nodes are labelled by their identifier. ID labels
    every node by its identifier.
    """

    KEY = auto()
    ID = auto()


@dataclass(frozen=True)
class StatePathConfig:
    """
    Immutable settings shared by the conversion functions.

    Attributes:
        delimiter: Separator between segments of a string path.
        parallel_label: Label used for parallel regions during traversal.
    """

    delimiter: str = "."
    parallel_label: ParallelLabel = ParallelLabel.KEY

    def __post_init__(self) -> None:
        if not isinstance(self.delimiter, str) or not self.delimiter:
            raise ConfigurationError(
                f"delimiter must be a non-empty string, got {self.delimiter!r}",
                {"delimiter": self.delimiter},
            )
        if not isinstance(self.parallel_label, ParallelLabel):
            raise ConfigurationError(
                f"parallel_label must be a ParallelLabel, got {type(self.parallel_label)}",
                {"parallel_label": self.parallel_label},
            )


DEFAULT_CONFIG = StatePathConfig()
