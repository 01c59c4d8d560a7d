from __future__ import annotations

from dataclasses import dataclass, field
from types import TracebackType
from typing import Callable, Generic, Literal, NoReturn, TypeVar, Union

from .errors import FailedResultError

T = TypeVar("T")
E = TypeVar("E")
D = TypeVar("D")

Tag = Literal["success", "failure"]


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    """A computed value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    @property
    def tag(self) -> Tag:
        return "success"

    def unwrap_or_raise(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    """A captured failure. The value is often, but not necessarily, an exception."""

    value: E
    _traceback: TracebackType | None = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # raising an exception grows its __traceback__; keep the one it had when wrapped
        object.__setattr__(self, "_traceback", getattr(self.value, "__traceback__", None))

    def __getstate__(self) -> tuple[E]:
        return (self.value,)

    def __setstate__(self, state: tuple[E]) -> None:
        object.__setattr__(self, "value", state[0])
        self.__post_init__()

    @property
    def ok(self) -> bool:
        return False

    @property
    def tag(self) -> Tag:
        return "failure"

    def unwrap_or_raise(self) -> NoReturn:
        if isinstance(self.value, BaseException):
            raise self.value.with_traceback(self._traceback)
        raise FailedResultError(self)


Result = Union[Success[T], Failure[E]]


def ensure_result(r: object) -> Result[object, object]:
    if isinstance(r, (Success, Failure)):
        return r
    raise TypeError(f"expected Success or Failure, got {type(r).__name__}")


def succeed(value: T) -> Success[T]:
    return Success(value)


def fail(value: E) -> Failure[E]:
    return Failure(value)


def is_success(r: object) -> bool:
    return isinstance(r, Success)


def is_failure(r: object) -> bool:
    return isinstance(r, Failure)


def value_of(r: Result[T, E]) -> T | E:
    return ensure_result(r).value


def value_or(r: Result[T, E], default: Callable[[], D]) -> T | D:
    """Return the success value, or call ``default`` for a failure.

    ``default`` is only called on the failure path, so it may be expensive
    or have side effects.
    """
    if isinstance(ensure_result(r), Success):
        return r.value
    return default()


def unwrap_or_raise(r: Result[T, E]) -> T:
    """Return the success value or raise.

    A failure holding an exception re-raises that exception object. Any
    other failure value is wrapped in :class:`FailedResultError`, which keeps
    the original result on ``.result``.
    """
    return ensure_result(r).unwrap_or_raise()
