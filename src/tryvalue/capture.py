from __future__ import annotations

import functools
import inspect
import logging
from typing import Any, Callable, ParamSpec, TypeVar

from .result import Failure, Result, Success

log = logging.getLogger(__name__)

P = ParamSpec("P")
T = TypeVar("T")


def _name(func: Callable[..., Any]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)


def capture(thunk: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call ``thunk`` and wrap the outcome in a Result.

    A normal return becomes ``Success``; an ``Exception`` becomes ``Failure``
    holding the exception object. ``KeyboardInterrupt``, ``SystemExit``,
    ``GeneratorExit`` and ``asyncio.CancelledError`` are not exceptions in
    this sense and keep propagating.
    """
    try:
        value: T = thunk(*args, **kwargs)
    except Exception as exc:
        log.debug("captured %s from %s", type(exc).__name__, _name(thunk))
        return Failure(exc)
    return Success(value)


_NAMED = (inspect.Parameter.POSITIONAL_OR_KEYWORD, inspect.Parameter.KEYWORD_ONLY)


def _call_in_scope(make: Callable[..., Any], scope: dict[str, Any]) -> Any:
    try:
        params = inspect.signature(make).parameters.values()
    except ValueError:
        # builtins without a signature take nothing from the scope
        return make()
    if any(p.kind is inspect.Parameter.VAR_KEYWORD for p in params):
        return make(**scope)
    return make(**{p.name: scope[p.name] for p in params if p.kind in _NAMED and p.name in scope})


def capture_let(body: Callable[..., T], **bindings: Callable[..., Any]) -> Result[T, Exception]:
    """Evaluate ``bindings`` in order, then call ``body`` with them as keywords.

    A binding is a callable whose parameters name earlier bindings, so
    ``b=lambda a: a + 1`` sees the value bound to ``a``. Exceptions raised
    while evaluating a binding are captured the same way as those from
    ``body``.
    """

    def run() -> T:
        scope: dict[str, Any] = {}
        for name, make in bindings.items():
            scope[name] = _call_in_scope(make, scope)
        return body(**scope)

    run.__qualname__ = _name(body)
    return capture(run)


def captured(func: Callable[P, T]) -> Callable[P, Result[T, Exception]]:
    """Decorate ``func`` so that calling it returns a Result instead of raising."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
        return capture(func, *args, **kwargs)

    return wrapper
