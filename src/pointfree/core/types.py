"""Reusable type definitions for pointfree.

Type Aliases:
    Arity: A non-negative integer count of positional parameters.

The ``validate_arity`` helper runs a value through the pydantic adapter so
callers get a ``ValidationError`` for negative or non-integer arities.
"""

from typing import Annotated

import annotated_types as at
from pydantic import Strict, TypeAdapter

__all__ = [
    "Arity",
    "validate_arity",
]

# Number of positional arguments a function is declared to accept
Arity = Annotated[int, Strict(), at.Ge(0)]

_arity_adapter = TypeAdapter(Arity)


def validate_arity(value: int) -> int:
    """Validate an arity value.

    Args:
        value: The candidate arity.
    Returns:
        int: The arity if validation passes.
    Raises:
        pydantic.ValidationError: If ``value`` is not a non-negative int.
    """
    return _arity_adapter.validate_python(value)
