"""Exceptions as values: a Success/Failure result type and its combinators."""

from __future__ import annotations

import logging

from .capture import capture, capture_let, captured
from .combinators import (
    apply,
    bimap,
    bind,
    collect,
    map,
    map_chain,
    map_failure,
    map_failure_chain,
    sequence,
)
from .errors import FailedResultError
from .result import (
    Failure,
    Result,
    Success,
    fail,
    is_failure,
    is_success,
    succeed,
    unwrap_or_raise,
    value_of,
    value_or,
)

__version__ = "0.3.0"

# Stay silent unless the application configures logging.
logging.getLogger("tryvalue").addHandler(logging.NullHandler())

__all__ = [
    "FailedResultError",
    "Failure",
    "Result",
    "Success",
    "apply",
    "bimap",
    "bind",
    "capture",
    "capture_let",
    "captured",
    "collect",
    "fail",
    "is_failure",
    "is_success",
    "map",
    "map_chain",
    "map_failure",
    "map_failure_chain",
    "sequence",
    "succeed",
    "unwrap_or_raise",
    "value_of",
    "value_or",
]
