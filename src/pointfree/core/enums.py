"""Enumerations shared across the functional helpers."""

from enum import Enum


class ExcessArgs(Enum):
    """What a curried function does with positional arguments past its arity."""

    FORWARD = "forward"
    TRUNCATE = "truncate"

    @classmethod
    def _missing_(cls, value):
        # Policy names are matched case-insensitively
        if isinstance(value, str):
            for member in cls:
                if member.value == value.lower():
                    return member
        return None

    def apply(self, args: tuple, arity: int) -> tuple:
        """Select the positional arguments handed to the wrapped function.

        Args:
            args: Every positional argument accumulated so far.
            arity: Declared arity of the wrapped function.

        Returns:
            ``args`` unchanged for FORWARD, the first ``arity`` items for TRUNCATE.
        """
        if self is ExcessArgs.TRUNCATE:
            return args[:arity]
        return args
