# statepath/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Dict, Optional


class StatePathError(Exception):
    """
    Base exception class for errors raised while converting state configurations.

    :param message: Human-readable description of the failure.
    :param details: Optional structured data about the failure.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = details or {}

    def __str__(self) -> str:
        return self.message


class InvalidEventError(StatePathError):
    """
    Raised when an event is neither a primitive nor an object with a string ``type``.
    """


class InvalidPathError(StatePathError):
    """
    Raised when a state path source is neither a string nor a sequence of segments.
    """


class InvalidStateValueError(StatePathError):
    """
    Raised when a nested state value is malformed.
    """


class ConfigurationError(StatePathError):
    """
    Raised when a configuration object carries invalid settings.
    """


class TreeResolutionError(StatePathError, KeyError):
    """
    Raised when a state value references a key missing from the state-node tree.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        StatePathError.__init__(self, message, details)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message.
        return self.message
