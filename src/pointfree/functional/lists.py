"""Curried, data-last helpers for building point-free pipelines.

The data argument comes last so a helper given everything except the data
becomes a unary stage that ``pipe`` and ``compose`` can chain:

    >>> from pointfree.functional import pipe, filter_c, pluck, prop
    >>> active_names = pipe(filter_c(prop("active")), pluck("name"))
    >>> active_names([{"name": "ada", "active": True}, {"name": "bob", "active": False}])
    ['ada']
"""

import typing as tp
from collections.abc import Mapping

from pointfree.functional.curry import curry

__all__ = [
    "map_c",
    "filter_c",
    "prop",
    "prop_eq",
    "pluck",
]


@curry
def map_c(fn: tp.Callable[[tp.Any], tp.Any], items: tp.Iterable[tp.Any]) -> list:
    """Curried map returning a list."""
    return [fn(item) for item in items]


@curry
def filter_c(
    predicate: tp.Callable[[tp.Any], bool], items: tp.Iterable[tp.Any]
) -> list:
    """Curried filter returning a list."""
    return [item for item in items if predicate(item)]


@curry
def prop(key: tp.Any, record: tp.Any) -> tp.Any:
    """Read ``key`` from a mapping, or the attribute ``key`` from an object.

    Raises:
        KeyError: If a mapping has no such key.
        AttributeError: If an object has no such attribute.
    """
    if isinstance(record, Mapping):
        return record[key]
    return getattr(record, key)


@curry
def prop_eq(key: tp.Any, value: tp.Any, record: tp.Any) -> bool:
    """True when ``record``'s ``key`` equals ``value``."""
    return prop(key, record) == value


@curry
def pluck(key: tp.Any, records: tp.Iterable[tp.Any]) -> list:
    """Extract ``key`` from every record, in order."""
    return [prop(key, record) for record in records]
