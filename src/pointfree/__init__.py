"""pointfree: currying and composition for point-free Python."""

from pointfree.core import ExcessArgs, settings
from pointfree.functional import (
    CurriedFunction,
    compose,
    curry,
    filter_c,
    map_c,
    pipe,
    pluck,
    prop,
    prop_eq,
    select_where,
    to_records,
)

__version__ = "0.1.0"

__all__ = [
    "ExcessArgs",
    "settings",
    "CurriedFunction",
    "compose",
    "curry",
    "filter_c",
    "map_c",
    "pipe",
    "pluck",
    "prop",
    "prop_eq",
    "select_where",
    "to_records",
]
