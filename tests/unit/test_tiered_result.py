"""Tests for the TieredResult wrapper."""

import pytest
from hypothesis import given, strategies as st

from src.tiered.errors import UnwrapError
from src.tiered.outcome import Ok, SoftErr
from src.tiered.tiered_result import (
    Completed,
    Failed,
    complete,
    failed,
    ok,
    soft_err,
)


class TestCompleted:
    def test_is_completed(self) -> None:
        result = Completed(Ok(1))
        assert result.is_completed() is True
        assert result.is_failed() is False

    def test_unwrap_returns_outcome(self) -> None:
        assert Completed(SoftErr("nope")).unwrap() == SoftErr("nope")

    def test_pattern_match_two_levels(self) -> None:
        match Completed(SoftErr("missing")):
            case Completed(Ok(_)) | Failed(_):
                pytest.fail("matched the wrong variant")
            case Completed(SoftErr(error)):
                assert error == "missing"


class TestFailed:
    def test_is_failed(self) -> None:
        result = Failed("db down")
        assert result.is_failed() is True
        assert result.is_completed() is False

    def test_unwrap_raises(self) -> None:
        result = Failed("db down")
        with pytest.raises(UnwrapError, match="db down") as info:
            result.unwrap()
        assert info.value.result is result


class TestConstructors:
    def test_ok(self) -> None:
        assert ok(3) == Completed(Ok(3))

    def test_soft_err(self) -> None:
        assert soft_err("bad") == Completed(SoftErr("bad"))

    def test_failed(self) -> None:
        assert failed("boom") == Failed("boom")

    def test_complete(self) -> None:
        assert complete(SoftErr(1)) == Completed(SoftErr(1))


class TestValueSemantics:
    def test_tiers_are_distinct(self) -> None:
        assert Failed("e") != Completed(SoftErr("e"))
        assert Completed(Ok("e")) != Completed(SoftErr("e"))

    def test_completed_orders_before_failed(self) -> None:
        results = [Failed(0), Completed(SoftErr(0)), Completed(Ok(0))]
        assert sorted(results) == [
            Completed(Ok(0)),
            Completed(SoftErr(0)),
            Failed(0),
        ]

    def test_not_comparable_with_outcome(self) -> None:
        with pytest.raises(TypeError):
            Completed(Ok(1)) < Ok(1)  # noqa: B015

    def test_hashable(self) -> None:
        seen = {Completed(Ok(1)), Completed(Ok(1)), Failed(1)}
        assert seen == {Completed(Ok(1)), Failed(1)}

    def test_truth_value_is_refused(self) -> None:
        with pytest.raises(TypeError):
            bool(Failed("e"))

    @given(st.integers())
    def test_round_trip_equality(self, value: int) -> None:
        assert ok(value) == Completed(Ok(value))
        assert ok(value).unwrap().unwrap() == value
