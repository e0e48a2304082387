"""Tests for sized generation.

Critical Invariants:
- Output length equals the requested count for every non-negative count
- The producer is called exactly once per slot, in index order
- Invalid counts fail before the producer is ever called
"""

import pytest

from playkit import InvalidCountError, constant, counter, generate


def test_counter_results_land_in_call_order():
    """CRITICAL: The i-th producer call's result is stored at index i."""
    assert generate(5, counter()) == [0, 1, 2, 3, 4]


def test_constant_producer_repeats_value():
    assert generate(3, constant(42)) == [42, 42, 42]


@pytest.mark.parametrize("count", [0, 1, 2, 7, 100], ids=lambda n: f"n={n}")
def test_length_matches_count(count):
    calls: list[int] = []

    def produce() -> str:
        calls.append(len(calls))
        return "x"

    result = generate(count, produce)

    assert len(result) == count
    assert len(calls) == count


def test_zero_count_never_calls_producer():
    """generate(0, f) returns [] without touching f.

    Why: a producer may be expensive or have side effects (random draws).
    """

    def produce() -> int:
        raise AssertionError("producer must not be called")

    assert generate(0, produce) == []


def test_each_call_returns_fresh_list():
    first = generate(2, constant(1))
    second = generate(2, constant(1))

    first.append(99)

    assert second == [1, 1]
    assert first is not second


@pytest.mark.parametrize("count", [-1, -10], ids=["minus-one", "minus-ten"])
def test_negative_count_fails_fast(count):
    """Negative counts raise instead of silently returning an empty list."""
    calls: list[int] = []

    with pytest.raises(InvalidCountError, match="non-negative"):
        generate(count, lambda: calls.append(1))

    assert calls == []


def test_invalid_count_error_is_value_error():
    with pytest.raises(ValueError):
        generate(-3, constant(0))


@pytest.mark.parametrize("count", [2.0, "3", None, True], ids=["float", "str", "none", "bool"])
def test_non_int_count_raises_type_error(count):
    with pytest.raises(TypeError, match="count must be an int"):
        generate(count, constant(0))  # type: ignore[arg-type]


def test_producer_exception_propagates_unchanged():
    produced = counter()

    def flaky() -> int:
        value = produced()
        if value == 2:
            raise RuntimeError("boom")
        return value

    with pytest.raises(RuntimeError, match="boom"):
        generate(5, flaky)


class IndexLike:
    """Integer-like value in the style of numpy integer scalars."""

    def __init__(self, value: int) -> None:
        self._value = value

    def __index__(self) -> int:
        return self._value


def test_integer_like_count_is_accepted():
    assert generate(IndexLike(3), counter()) == [0, 1, 2]  # type: ignore[arg-type]


def test_negative_integer_like_count_fails_fast():
    with pytest.raises(InvalidCountError, match="got -2"):
        generate(IndexLike(-2), constant(0))  # type: ignore[arg-type]
