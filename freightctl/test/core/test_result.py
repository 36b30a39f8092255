"""Tests for freightctl.core.result module."""

import pytest

from freightctl.core.result import Err, Ok, Partial, Result, is_err, is_ok


class TestOk:
    def test_unwrap(self) -> None:
        assert Ok(42).unwrap() == 42

    def test_unwrap_or_ignores_default(self) -> None:
        assert Ok(42).unwrap_or(0) == 42

    def test_map(self) -> None:
        assert Ok(21).map(lambda x: x * 2) == Ok(42)

    def test_map_err_is_noop(self) -> None:
        result = Ok(42)
        assert result.map_err(lambda e: f"wrapped: {e}") is result

    def test_flags(self) -> None:
        assert Ok(1).is_ok() is True
        assert Ok(1).is_err() is False


class TestErr:
    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or(7) == 7

    def test_map_err(self) -> None:
        assert Err("boom").map_err(lambda e: f"promote stage: {e}") == Err("promote stage: boom")

    def test_map_is_noop(self) -> None:
        result = Err("boom")
        assert result.map(lambda x: x * 2) is result


class TestTypeGuards:
    def test_is_ok(self) -> None:
        result: Result[int, str] = Ok(1)
        assert is_ok(result)
        assert not is_err(result)

    def test_is_err(self) -> None:
        result: Result[int, str] = Err("x")
        assert is_err(result)
        assert not is_ok(result)


class TestPartial:
    def test_value_and_error_coexist(self) -> None:
        partial = Partial(["promo-2"], "quota exceeded")
        assert partial.value == ["promo-2"]
        assert partial.error == "quota exceeded"

    def test_defaults_are_empty(self) -> None:
        assert Partial() == Partial(None, None)

    def test_map_keeps_error(self) -> None:
        partial = Partial([1, 2], "late failure").map(len)
        assert partial == Partial(2, "late failure")

    def test_map_without_value(self) -> None:
        partial: Partial[list[int], str] = Partial(None, "down")
        assert partial.map(len) == Partial(None, "down")
