"""Small functional helpers: currying, composition, no-ops."""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def curry(fn: Callable[..., Any], arity: int | None = None) -> Callable[..., Any]:
    """Return a curried version of *fn*.

    Calling the result with fewer than *arity* positional arguments returns
    a function awaiting the rest; once enough are supplied, *fn* is called.
    *arity* defaults to the number of required positional parameters.

        >>> add = curry(lambda a, b, c: a + b + c)
        >>> add(1)(2)(3), add(1, 2)(3), add(1, 2, 3)
        (6, 6, 6)
    """
    if arity is None:
        arity = _required_positional(fn)

    @functools.wraps(fn)
    def curried(*args: Any) -> Any:
        if len(args) >= arity:
            return fn(*args)
        return curry(functools.partial(fn, *args), arity - len(args))

    return curried


def _required_positional(fn: Callable[..., Any]) -> int:
    params = inspect.signature(fn).parameters.values()
    return sum(1 for p in params if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty)


def identity(value: Any) -> Any:
    return value


def noop(*args: Any, **kwargs: Any) -> None:
    """Accept anything, do nothing."""


def compose(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions right to left: ``compose(f, g)(x) == f(g(x))``."""
    if not fns:
        return identity
    return pipe(*reversed(fns))


def pipe(*fns: Callable[..., Any]) -> Callable[..., Any]:
    """Compose functions left to right: ``pipe(f, g)(x) == g(f(x))``.

    The first function may take any arguments; the rest take one.
    """
    if not fns:
        return identity
    first, rest = fns[0], fns[1:]

    def piped(*args: Any, **kwargs: Any) -> Any:
        result = first(*args, **kwargs)
        for fn in rest:
            result = fn(result)
        return result

    return piped
