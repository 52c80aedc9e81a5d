"""Function composition.

``pipe`` runs functions left to right, ``compose`` right to left. The first
function may take any arguments; every later stage receives exactly one, the
previous stage's result. Exceptions raised by a stage abort the chain and
reach the caller unchanged.
"""

import functools
import typing as tp

from pointfree.logger.logger import logger

__all__ = [
    "pipe",
    "compose",
]


def _stage_name(fn: tp.Callable[..., tp.Any]) -> str:
    return getattr(fn, "__name__", type(fn).__name__)


def pipe(*functions: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Compose functions from left to right.

    ``pipe(f, g, h)(x)`` is ``h(g(f(x)))``.

    Args:
        *functions: One or more callables.

    Returns:
        A callable taking the arguments of the first function.

    Raises:
        ValueError: If no functions are given.
        TypeError: If any stage is not callable.
    """
    if not functions:
        raise ValueError("pipe requires at least one function")

    for position, fn in enumerate(functions):
        if not callable(fn):
            raise TypeError(
                f"Stage {position} is not callable: {type(fn).__name__}"
            )

    first, rest = functions[0], functions[1:]

    def piped(*args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        return functools.reduce(lambda value, f: f(value), rest, first(*args, **kwargs))

    piped.__name__ = "pipe(" + ", ".join(_stage_name(f) for f in functions) + ")"
    piped.__qualname__ = piped.__name__
    piped.functions = functions

    logger.debug(f"Built {piped.__name__}")
    return piped


def compose(*functions: tp.Callable[..., tp.Any]) -> tp.Callable[..., tp.Any]:
    """Compose functions from right to left.

    ``compose(h, g, f)(x)`` is ``h(g(f(x)))``, the same as ``pipe(f, g, h)``.
    """
    return pipe(*reversed(functions))
