"""Functional primitives for pointfree.

This module provides currying, composition and curried collection helpers.
Utilities are stateless and side-effect-free so they can be composed into
point-free pipelines.
"""

from pointfree.functional.curry import CurriedFunction, curry, infer_arity
from pointfree.functional.composition import compose, pipe
from pointfree.functional.lists import filter_c, map_c, pluck, prop, prop_eq
from pointfree.functional.records import select_where, to_records

__all__ = [
    "CurriedFunction",
    "curry",
    "infer_arity",
    "compose",
    "pipe",
    "filter_c",
    "map_c",
    "pluck",
    "prop",
    "prop_eq",
    "select_where",
    "to_records",
]
