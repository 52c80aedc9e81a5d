"""Currying for fixed-arity callables.

A curried function accepts its positional arguments across any number of
calls. Each call returns a fresh ``CurriedFunction`` holding the arguments
gathered so far until the arity threshold is met, at which point the wrapped
function runs and its result is returned.

Examples:
    >>> from pointfree.functional.curry import curry
    >>>
    >>> @curry
    ... def add3(a, b, c):
    ...     return a + b + c
    >>>
    >>> add3(2)(3)(4)
    9
    >>> add3(2, 3)(4)
    9
"""

import functools
import inspect
import typing as tp

from pointfree.core.config import settings
from pointfree.core.enums import ExcessArgs
from pointfree.core.types import validate_arity
from pointfree.logger.logger import logger

__all__ = [
    "CurriedFunction",
    "curry",
    "infer_arity",
]

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class CurriedFunction:
    """A callable that gathers positional arguments until ``arity`` is reached.

    Instances are immutable: calling one never changes it, so a partially
    applied function can be reused as the starting point for many calls.

    Attributes:
        func: The wrapped callable.
        arity: Positional arguments required before ``func`` runs.
        args: Positional arguments gathered so far.
        keywords: Keyword arguments gathered so far.
        excess: Policy for positional arguments beyond ``arity``.
    """

    def __init__(
        self,
        func: tp.Callable[..., tp.Any],
        arity: int,
        args: tp.Tuple[tp.Any, ...] = (),
        keywords: tp.Optional[tp.Dict[str, tp.Any]] = None,
        excess: ExcessArgs = ExcessArgs.FORWARD,
    ) -> None:
        functools.update_wrapper(self, func)
        self.func = func
        self.arity = arity
        self.args = tuple(args)
        self.keywords = dict(keywords or {})
        self.excess = excess

    @property
    def remaining(self) -> int:
        """Number of positional arguments still needed."""
        return max(self.arity - len(self.args), 0)

    def __call__(self, *args: tp.Any, **kwargs: tp.Any) -> tp.Any:
        gathered = self.args + args
        keywords = {**self.keywords, **kwargs}

        if len(gathered) >= self.arity:
            return self.func(*self.excess.apply(gathered, self.arity), **keywords)

        return CurriedFunction(self.func, self.arity, gathered, keywords, self.excess)

    def __get__(self, instance: tp.Any, owner: tp.Optional[type] = None) -> tp.Any:
        # Bind the instance as the first accumulated argument when used as a method
        if instance is None:
            return self
        return functools.partial(self, instance)

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return (
            f"CurriedFunction({name}, arity={self.arity}, args={self.args!r}, "
            f"keywords={self.keywords!r}, remaining={self.remaining})"
        )


def infer_arity(fn: tp.Callable[..., tp.Any]) -> int:
    """Count the required positional parameters of ``fn``.

    Parameters with defaults and keyword-only parameters are not counted.

    Args:
        fn: Callable to inspect.

    Returns:
        The number of positional parameters without a default.

    Raises:
        ValueError: If the signature cannot be read or accepts ``*args``.
    """
    if isinstance(fn, CurriedFunction):
        return fn.remaining

    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as e:
        raise ValueError(
            f"Cannot read the signature of {fn!r}; pass arity explicitly."
        ) from e

    arity = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            raise ValueError(
                f"{fn!r} accepts a variable number of arguments; pass arity explicitly."
            )
        if parameter.kind in _POSITIONAL and parameter.default is parameter.empty:
            arity += 1
    return arity


def curry(
    fn: tp.Optional[tp.Callable[..., tp.Any]] = None,
    *,
    arity: tp.Optional[int] = None,
    excess: tp.Optional[ExcessArgs] = None,
) -> tp.Any:
    """Curry ``fn`` so it accepts its positional arguments incrementally.

    Can be applied directly, ``curry(f)``, or used as a decorator with or
    without options, ``@curry`` / ``@curry(arity=2)``.

    Args:
        fn: The function to curry.
        arity: Positional arguments to gather before calling ``fn``. Read
            from the signature of ``fn`` when omitted.
        excess: What to do with positional arguments beyond ``arity``.
            Defaults to ``settings.EXCESS_ARGS``.

    Returns:
        A ``CurriedFunction``, or a decorator when ``fn`` is omitted.

    Raises:
        TypeError: If ``fn`` is not callable.
        ValueError: If the arity is invalid or cannot be inferred.
    """
    if fn is None:
        return functools.partial(curry, arity=arity, excess=excess)

    if not callable(fn):
        raise TypeError(f"curry expects a callable, got {type(fn).__name__}")

    arity = validate_arity(infer_arity(fn) if arity is None else arity)
    excess = ExcessArgs(excess) if excess is not None else settings.EXCESS_ARGS

    logger.debug(
        f"Currying {getattr(fn, '__qualname__', fn)!s} "
        f"(arity={arity}, excess={excess.value})"
    )
    return CurriedFunction(fn, arity, excess=excess)
