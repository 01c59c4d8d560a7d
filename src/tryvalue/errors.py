from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import Failure


class FailedResultError(Exception):
    """Raised when a failure holding a non-exception value is unwrapped."""

    result: Failure[Any]

    def __init__(self, result: Failure[Any], message: str = "dereferenced failed result") -> None:
        super().__init__(message)
        self.result = result

    @property
    def data(self) -> dict[str, object]:
        return {"tag": self.result.tag, "value": self.result.value}

    def __reduce__(self) -> tuple[object, ...]:
        return (type(self), (self.result, str(self)))
