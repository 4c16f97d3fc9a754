# statepath/core/events.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import math
from numbers import Number
from typing import Any, Dict, Mapping, Optional

from statepath.core.errors import InvalidEventError
from statepath.interfaces.types import EventType


class Event:
    """
    A signal sent to a running machine, identified by its type.
    """

    def __init__(self, type: EventType, payload: Optional[Dict[str, Any]] = None) -> None:
        """
        :param type: A string identifying this kind of event.
        :param payload: Optional data carried with the event.
        """
        self._type = type
        self._payload: Dict[str, Any] = dict(payload or {})

    @property
    def type(self) -> EventType:
        """The event type."""
        return self._type

    @property
    def payload(self) -> Dict[str, Any]:
        return self._payload

    def __repr__(self) -> str:
        return f"Event(type={self._type!r})"


def _number_to_event_type(number: Number) -> EventType:
    if isinstance(number, float):
        if math.isnan(number):
            return "NaN"
        if math.isinf(number):
            return "Infinity" if number > 0 else "-Infinity"
        # Integral floats below 1e21 are written without a fractional part.
        if number.is_integer() and abs(number) < 1e21:
            return str(int(number))
    return str(number)


def get_event_type(event: Any) -> EventType:
    """
    Extract the event type from a primitive event or an event object.

    Strings are returned as-is and numbers are stringified, integral floats
    without a fractional part (``1.0`` gives ``"1"``) and non-finite floats as
    ``"NaN"``, ``"Infinity"`` and ``"-Infinity"``. Objects must carry a
    string ``type`` attribute, mappings a string ``"type"`` key.

    :raises InvalidEventError: If the event has neither shape.
    """
    if isinstance(event, str):
        return event
    if isinstance(event, Number) and not isinstance(event, bool):
        return _number_to_event_type(event)

    if isinstance(event, Mapping):
        event_type = event.get("type")
    else:
        event_type = getattr(event, "type", None)
    if isinstance(event_type, str):
        return event_type

    raise InvalidEventError(
        "Events must be strings or objects with a string event.type property.",
        {"event": event},
    )
