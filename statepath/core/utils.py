# statepath/core/utils.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Any, Callable, Dict, Iterable, Mapping, Sequence, TypeVar

K = TypeVar("K")
T = TypeVar("T")
P = TypeVar("P")


def map_values(collection: Mapping[K, T], iteratee: Callable[[T, K, Mapping[K, T]], P]) -> Dict[K, P]:
    """Build a new dict with ``iteratee(value, key, collection)`` applied to every entry."""
    return {key: iteratee(value, key, collection) for key, value in collection.items()}


def _get(obj: Any, prop: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(prop)
    if isinstance(obj, Sequence) and not isinstance(obj, str):
        if isinstance(prop, str) and prop.isascii() and prop.isdigit():
            prop = int(prop)
        if not isinstance(prop, int) or isinstance(prop, bool) or prop < 0:
            return None
        try:
            return obj[prop]
        except IndexError:
            return None
    if isinstance(prop, str):
        return getattr(obj, prop, None)
    return None


def path(props: Iterable[Any]) -> Callable[[Any], Any]:
    """
    Curried deep accessor: ``path(["a", "b"])(obj)`` reads ``obj["a"]["b"]``.

    Mappings are read by key, sequences by index (``0`` or ``"0"``) and other
    objects by attribute. A missing step yields ``None``, which then propagates
    to the end of the chain.
    """
    props = list(props)

    def accessor(obj: Any) -> Any:
        result = obj
        for prop in props:
            result = _get(result, prop)
        return result

    return accessor
