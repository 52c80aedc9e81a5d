"""Bridges between tabular data and the record helpers."""

import typing as tp

import pandas as pd

from pointfree.functional.composition import pipe
from pointfree.functional.lists import filter_c, prop_eq

__all__ = [
    "to_records",
    "select_where",
]


def to_records(frame: pd.DataFrame) -> tp.List[tp.Dict[str, tp.Any]]:
    """Convert a DataFrame into a list of row dictionaries.

    Args:
        frame: The DataFrame to convert. The index is dropped.

    Returns:
        One dictionary per row, keyed by column name, in row order.

    Raises:
        TypeError: If ``frame`` is not a DataFrame.
    """
    if not isinstance(frame, pd.DataFrame):
        raise TypeError(f"Expected a pandas DataFrame, got {type(frame).__name__}")
    return frame.to_dict(orient="records")


def select_where(key: tp.Any, value: tp.Any) -> tp.Callable[[tp.Iterable], list]:
    """Stage keeping the records whose ``key`` equals ``value``.

    Accepts either an iterable of records or a DataFrame.
    """
    return pipe(_as_records, filter_c(prop_eq(key, value)))


def _as_records(data: tp.Any) -> tp.Iterable[tp.Any]:
    if isinstance(data, pd.DataFrame):
        return to_records(data)
    return data
