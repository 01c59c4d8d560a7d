from __future__ import annotations

import copy
from collections.abc import Mapping, MutableMapping
from itertools import chain
from typing import Any, Callable, Iterable, TypeVar

from .result import Failure, Result, Success, ensure_result, succeed

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")
F = TypeVar("F")
C = TypeVar("C")


def map(f: Callable[[T], U], r: Result[T, E]) -> Result[U, E]:
    if isinstance(ensure_result(r), Success):
        return Success(f(r.value))
    return r


def map_failure(g: Callable[[E], F], r: Result[T, E]) -> Result[T, F]:
    if isinstance(ensure_result(r), Failure):
        return Failure(g(r.value))
    return r


def bimap(f: Callable[[T], U], g: Callable[[E], F], r: Result[T, E]) -> Result[U, F]:
    return map_failure(g, map(f, r))


def map_chain(r: Result[T, E], *fs: Callable[[Any], Any]) -> Result[Any, E]:
    # each step returns a plain value
    for f in fs:
        if not isinstance(ensure_result(r), Success):
            break
        r = map(f, r)
    return r


def map_failure_chain(r: Result[T, E], *gs: Callable[[Any], Any]) -> Result[T, Any]:
    for g in gs:
        if not isinstance(ensure_result(r), Failure):
            break
        r = map_failure(g, r)
    return r


def bind(r: Result[T, E], *fs: Callable[[Any], Result[Any, Any]]) -> Result[Any, Any]:
    """Feed a success value into each ``f`` in turn.

    Every ``f`` returns a Result which becomes the running value. The first
    failure, whether given or produced, is returned without calling the
    remaining functions.
    """
    for f in fs:
        if not isinstance(ensure_result(r), Success):
            break
        r = f(r.value)
    return ensure_result(r)


def apply(rf: Result[Callable[..., U], Any], *rs: Result[Any, Any]) -> Result[U, Any]:
    """Call the function held by ``rf`` with the values held by ``rs``.

    A failed ``rf`` wins over failed arguments, whatever their number. Among
    the arguments the leftmost failure is returned.
    """
    if isinstance(ensure_result(rf), Failure):
        return rf
    for r in rs:
        if isinstance(ensure_result(r), Failure):
            return r
    return succeed(rf.value(*(r.value for r in rs)))


def _gather(*values: T) -> list[T]:
    return list(values)


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    return apply(succeed(_gather), *results)


def _into(target: C, values: Iterable[object]) -> C:
    if isinstance(target, MutableMapping):
        merged = copy.copy(target)
        for key, value in values:
            merged[key] = value
        return merged
    if isinstance(target, Mapping):
        return type(target)(chain(target.items(), values))
    return type(target)(chain(target, values))


def collect(target: C, results: Iterable[Result[Any, Any]]) -> Result[C, C]:
    """Pour the results into a copy of ``target``.

    If every result is a success, their values are added to the copy and
    wrapped in ``Success``. Otherwise every failure value is added, in order,
    and the copy is wrapped in ``Failure``. ``target`` itself is never
    modified; mapping targets expect ``(key, value)`` pairs.
    """
    if isinstance(target, (str, bytes, bytearray)):
        raise TypeError(f"cannot collect into {type(target).__name__}")
    successes: list[object] = []
    failures: list[object] = []
    for r in results:
        if isinstance(ensure_result(r), Success):
            successes.append(r.value)
        else:
            failures.append(r.value)
    if failures:
        return Failure(_into(target, failures))
    if not successes:
        return Success(target)
    return Success(_into(target, successes))
