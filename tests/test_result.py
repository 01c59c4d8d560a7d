from __future__ import annotations

import pickle

import pytest
from hypothesis import given, strategies as st

from tryvalue.errors import FailedResultError
from tryvalue.result import (
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


@given(value=st.integers() | st.text() | st.none())
def test_predicates_are_exclusive(value: object) -> None:
    assert is_success(succeed(value))
    assert not is_failure(succeed(value))
    assert is_failure(fail(value))
    assert not is_success(fail(value))


@given(value=st.integers() | st.text() | st.lists(st.integers()))
def test_value_of_either_variant(value: object) -> None:
    assert value_of(succeed(value)) == value
    assert value_of(fail(value)) == value


def test_variants_never_compare_equal() -> None:
    assert succeed(1) == Success(1)
    assert fail(1) == Failure(1)
    assert succeed(1) != fail(1)


def test_results_are_immutable() -> None:
    r: Result[int, str] = succeed(1)
    with pytest.raises(AttributeError):
        r.value = 2  # type: ignore[misc]


def test_ok_and_tag() -> None:
    assert succeed(1).ok and succeed(1).tag == "success"
    assert not fail(1).ok and fail(1).tag == "failure"


def test_pattern_matching() -> None:
    def describe(r: Result[int, str]) -> str:
        match r:
            case Success(v):
                return f"got {v}"
            case Failure(e):
                return f"lost {e}"
        return "unreachable"

    assert describe(succeed(3)) == "got 3"
    assert describe(fail("x")) == "lost x"


def test_value_or_success_skips_default() -> None:
    calls: list[str] = []

    def default() -> str:
        calls.append("executed")
        return "default"

    assert value_or(succeed("some-val"), default) == "some-val"
    assert calls == []


def test_value_or_failure_uses_default() -> None:
    assert value_or(fail("some-val"), lambda: "default") == "default"


def test_unwrap_or_raise_success() -> None:
    assert unwrap_or_raise(succeed("some-val")) == "some-val"
    assert succeed("some-val").unwrap_or_raise() == "some-val"


def test_unwrap_or_raise_reraises_held_exception() -> None:
    err = ValueError("some exception")
    with pytest.raises(ValueError, match="some exception") as info:
        unwrap_or_raise(fail(err))
    assert info.value is err


def test_unwrap_or_raise_wraps_plain_value() -> None:
    r = fail("some-val")
    with pytest.raises(FailedResultError, match="dereferenced failed result") as info:
        unwrap_or_raise(r)
    assert info.value.result is r
    assert info.value.data == {"tag": "failure", "value": "some-val"}


def test_failed_result_error_pickles() -> None:
    err = FailedResultError(fail({"field": "name"}))
    clone: FailedResultError = pickle.loads(pickle.dumps(err))
    assert clone.result == err.result
    assert str(clone) == str(err)


def test_accessors_reject_non_results() -> None:
    with pytest.raises(TypeError, match="expected Success or Failure, got int"):
        value_of(3)  # type: ignore[arg-type]
    assert not is_success(3)
    assert not is_failure(None)


def _depth(exc: BaseException) -> int:
    tb = exc.__traceback__
    frames = 0
    while tb is not None:
        frames += 1
        tb = tb.tb_next
    return frames


def test_repeated_unwrap_keeps_traceback_bounded() -> None:
    try:
        raise KeyError("missing")
    except KeyError as exc:
        r = fail(exc)
    captured_depth = _depth(r.value)
    depths: list[int] = []
    for _ in range(3):
        with pytest.raises(KeyError) as info:
            unwrap_or_raise(r)
        assert info.value is r.value
        depths.append(_depth(info.value))
    assert depths[0] > captured_depth
    assert depths == [depths[0]] * 3


def test_failure_holding_exception_pickles() -> None:
    r = fail(ValueError("bad"))
    clone = pickle.loads(pickle.dumps(r))
    assert isinstance(clone, Failure)
    assert isinstance(clone.value, ValueError)
    assert clone.value.args == ("bad",)
