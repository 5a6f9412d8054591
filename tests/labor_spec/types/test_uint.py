"""Unsigned Integer Type Tests."""

from typing import Any, Type

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import ValidationError, create_model

from labor_spec.types import Balance, BaseUint, Perbill, StrictBaseModel, Uint8, Uint32, Uint64

ALL_UINT_TYPES = (Uint8, Uint32, Uint64, Balance)
"""A collection of all Uint types to test against."""


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_pydantic_validation_accepts_valid_int(uint_class: Type[BaseUint]) -> None:
    """Pydantic validation accepts a plain integer in lax mode."""
    model = create_model("Model", value=(uint_class, ...))

    instance: Any = model(value=10)
    assert isinstance(instance.value, uint_class)
    assert instance.value == uint_class(10)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
@pytest.mark.parametrize("invalid_value", [1.0, "1", True, False, None])
def test_pydantic_rejects_non_integers(uint_class: Type[BaseUint], invalid_value: Any) -> None:
    """Values that could be coerced to an int are still rejected."""
    model = create_model("Model", value=(uint_class, ...))

    with pytest.raises(ValidationError):
        model(value=invalid_value)


@pytest.mark.parametrize("uint_class", ALL_UINT_TYPES)
def test_range_is_enforced(uint_class: Type[BaseUint]) -> None:
    """Negative values and values of BITS + 1 bits overflow."""
    assert int(uint_class(2**uint_class.BITS - 1)) == 2**uint_class.BITS - 1

    with pytest.raises(OverflowError):
        uint_class(-1)
    with pytest.raises(OverflowError):
        uint_class(2**uint_class.BITS)


@pytest.mark.parametrize("invalid_value", [1.0, "1", True, None, b"\x01"])
def test_instantiation_from_non_int_raises(invalid_value: Any) -> None:
    """Only real integers are accepted. Booleans are ints in Python, but not counts."""
    with pytest.raises(TypeError, match="Expected int"):
        Uint32(invalid_value)


class TestArithmetic:
    """Arithmetic is closed over a single type."""

    def test_same_type_operations(self) -> None:
        """Operators return the operand type."""
        a, b = Balance(7), Balance(3)

        assert a + b == Balance(10)
        assert a - b == Balance(4)
        assert a * b == Balance(21)
        assert a // b == Balance(2)
        assert a % b == Balance(1)
        assert isinstance(a + b, Balance)

    def test_mixed_types_raise(self) -> None:
        """A Balance never silently combines with a counter or a plain int."""
        with pytest.raises(TypeError):
            Balance(1) + Uint32(1)
        with pytest.raises(TypeError):
            Balance(1) * 2
        with pytest.raises(TypeError):
            _ = Uint32(1) == 1

    def test_sum_starts_from_zero(self) -> None:
        """The builtin `sum` works without an explicit start value."""
        assert sum([Balance(1), Balance(2), Balance(3)]) == Balance(6)

    def test_subtraction_underflow(self) -> None:
        """Results below zero overflow instead of wrapping."""
        with pytest.raises(OverflowError):
            Balance(1) - Balance(2)

    @given(st.integers(0, 2**64 - 1), st.integers(0, 2**64 - 1))
    def test_balance_addition_matches_int(self, a: int, b: int) -> None:
        """128-bit balances hold the sum of any two 64-bit amounts exactly."""
        assert int(Balance(a) + Balance(b)) == a + b


class TestSerialization:
    """JSON encoding."""

    def test_json_round_trip_in_strict_model(self) -> None:
        """Strict models accept JSON integers and dump plain integers."""

        class Holder(StrictBaseModel):
            amount: Balance

        holder = Holder.model_validate_json('{"amount": 100000000000000000000}')
        assert holder.amount == Balance(10**20)
        assert holder.model_dump(mode="json") == {"amount": 10**20}

    def test_json_rejects_out_of_range(self) -> None:
        """A JSON value wider than the type is a validation error."""

        class Holder(StrictBaseModel):
            count: Uint8

        with pytest.raises(ValidationError):
            Holder.model_validate_json('{"count": 256}')


class TestPerbill:
    """Parts-per-billion fractions."""

    def test_from_percent(self) -> None:
        """Ten percent is one hundred million parts."""
        assert Perbill.from_percent(10) == Perbill(100_000_000)
        assert Perbill.from_percent(100) == Perbill(Perbill.ACCURACY)

    def test_above_one_whole_is_rejected(self) -> None:
        """Values above the accuracy are not fractions."""
        with pytest.raises(OverflowError):
            Perbill(Perbill.ACCURACY + 1)
        with pytest.raises(OverflowError):
            Perbill.from_percent(101)

    def test_repr_shows_percentage(self) -> None:
        """The repr is readable in assertion output."""
        assert repr(Perbill.from_percent(10)) == "Perbill(100000000 = 10.0%)"
