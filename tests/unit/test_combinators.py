"""Tests for the free-function combinators."""

from unittest.mock import Mock

import pytest
from hypothesis import given, strategies as st

from src.trycatch.combinators import (
    chain,
    flat_map,
    map,
    map_err,
    match,
    unwrap_or,
    unwrap_or_else,
)
from src.trycatch.result import Failure, Result, Success, failure, success
from src.trycatch.wrappers import try_catch_sync


def parse_int(text: str) -> Result[int, str]:
    try:
        return success(int(text))
    except ValueError:
        return failure("NaN")


class TestMap:
    def test_transforms_success(self) -> None:
        assert map(success(5), lambda x: x * 2) == Success(10)

    def test_type_transformation(self) -> None:
        assert map(success(42), str) == Success("42")

    def test_failure_passes_through_unchanged(self) -> None:
        error = ValueError("original")
        result = failure(error)
        fn = Mock()
        mapped = map(result, fn)
        assert mapped is result
        assert mapped.error is error
        fn.assert_not_called()

    def test_exceptions_in_fn_propagate(self) -> None:
        with pytest.raises(ZeroDivisionError):
            map(success(1), lambda x: x / 0)

    @given(st.integers())
    def test_map_applies_fn(self, value: int) -> None:
        assert map(success(value), lambda x: x + 1) == success(value + 1)


class TestMapErr:
    def test_transforms_failure(self) -> None:
        assert map_err(failure(404), lambda code: f"HTTP {code}") == Failure("HTTP 404")

    def test_success_passes_through(self) -> None:
        result = success("data")
        assert map_err(result, lambda e: e) is result


class TestFlatMap:
    def test_parses_number(self) -> None:
        assert flat_map(success("5"), parse_int) == Success(5)

    def test_failure_from_fn(self) -> None:
        assert flat_map(success("abc"), parse_int) == Failure("NaN")

    def test_no_double_wrapping(self) -> None:
        inner = success(3)
        assert flat_map(success(1), lambda _: inner) is inner

    def test_original_failure_skips_fn(self) -> None:
        result = failure("earlier")
        fn = Mock()
        assert flat_map(result, fn) is result
        fn.assert_not_called()

    def test_complex_chaining(self) -> None:
        def validate(n: int) -> Result[int, str]:
            return success(n) if n > 0 else failure("not positive")

        ok = flat_map(flat_map(success("7"), parse_int), validate)
        bad = flat_map(flat_map(success("-1"), parse_int), validate)
        assert ok == Success(7)
        assert bad == Failure("not positive")

    @given(st.integers())
    def test_left_identity(self, value: int) -> None:
        def fn(x: int) -> Result[int, str]:
            return success(x * 3) if x % 2 else failure("even")

        assert flat_map(success(value), fn) == fn(value)


class TestUnwrapOr:
    def test_success(self) -> None:
        assert unwrap_or(success("data"), "default") == "data"

    def test_failure_returns_default_verbatim(self) -> None:
        default: list[int] = []
        assert unwrap_or(failure("boom"), default) is default

    def test_none_payload_is_not_replaced(self) -> None:
        assert unwrap_or(success(None), "default") is None


class TestUnwrapOrElse:
    def test_success_skips_fn(self) -> None:
        fn = Mock()
        assert unwrap_or_else(success(1), fn) == 1
        fn.assert_not_called()

    def test_computes_from_error(self) -> None:
        result = failure({"code": 503, "retry_after": 5})
        assert unwrap_or_else(result, lambda e: e["retry_after"] * 2) == 10


class TestMatch:
    def test_success_handler(self) -> None:
        out = match(success(200), success=lambda d: f"ok:{d}", failure=lambda e: f"err:{e}")
        assert out == "ok:200"

    def test_failure_handler(self) -> None:
        out = match(failure(404), success=lambda d: f"ok:{d}", failure=lambda e: f"err:{e}")
        assert out == "err:404"

    def test_exactly_one_handler_runs(self) -> None:
        on_success, on_failure = Mock(return_value="s"), Mock(return_value="f")
        assert match(success(1), success=on_success, failure=on_failure) == "s"
        on_success.assert_called_once_with(1)
        on_failure.assert_not_called()

        on_success.reset_mock()
        assert match(failure(2), success=on_success, failure=on_failure) == "f"
        on_failure.assert_called_once_with(2)
        on_success.assert_not_called()

    def test_both_handlers_required(self) -> None:
        with pytest.raises(TypeError):
            match(success(1), success=lambda d: d)  # type: ignore[call-arg]


class TestChain:
    def test_raw_input_is_wrapped(self) -> None:
        result = chain(
            "5",
            lambda s: try_catch_sync(lambda: int(s)),
            lambda n: success(n * 2),
            lambda n: success(str(n)),
        )
        assert result == Success("10")

    def test_result_input_used_as_is(self) -> None:
        assert chain(success(2), lambda n: success(n + 1)) == Success(3)

    def test_failure_input_short_circuits(self) -> None:
        start = failure("bad input")
        step = Mock()
        assert chain(start, step) is start
        step.assert_not_called()

    def test_stops_at_first_failure(self) -> None:
        stop = failure("stop")
        later = Mock()
        result = chain(1, lambda n: success(n + 1), lambda _: stop, later)
        assert result is stop
        later.assert_not_called()

    def test_no_operations(self) -> None:
        assert chain(7) == Success(7)

    def test_raw_none_input(self) -> None:
        assert chain(None, lambda v: success(v is None)) == Success(True)

    def test_dict_input_is_data_not_result(self) -> None:
        payload = {"error": "this is data"}
        assert chain(payload) == Success(payload)
