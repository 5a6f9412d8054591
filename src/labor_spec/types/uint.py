"""Bounded unsigned integer types used by genesis configuration values."""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self


class BaseUint(int):
    """
    A base class for unsigned integer types that inherits from `int`.

    Arithmetic and comparison are only defined between values of the same
    type. Mixing a `Balance` with a plain `int` (or with a `Uint32` counter)
    raises `TypeError`, which keeps unit mistakes out of balance math.
    """

    BITS: ClassVar[int]
    """The number of bits in the integer (overridden by subclasses)."""

    def __new__(cls, value: int) -> Self:
        """
        Create and validate a new Uint instance.

        Raises:
            TypeError: If `value` is not an int, or is a bool.
            OverflowError: If `value` is outside the allowed range [0, 2**BITS - 1].
        """
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        int_value = int(value)
        if not (0 <= int_value < (2**cls.BITS)):
            raise OverflowError(f"{int_value} is out of range for {cls.__name__}")
        return super().__new__(cls, int_value)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""

        def validate(value: Any) -> BaseUint:
            """Pydantic validation function that calls the class constructor."""
            try:
                return cls(value)
            except (OverflowError, TypeError) as e:
                raise ValueError(str(e)) from e

        return core_schema.json_or_python_schema(
            json_schema=core_schema.chain_schema(
                [
                    core_schema.int_schema(ge=0, lt=2**cls.BITS),
                    core_schema.no_info_plain_validator_function(validate),
                ]
            ),
            python_schema=core_schema.no_info_plain_validator_function(validate),
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda instance: int(instance)
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, core_schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Hook into Pydantic's JSON Schema generation system."""
        json_schema = handler(core_schema)
        json_schema.update(format=f"uint{cls.BITS}")
        return json_schema

    def _raise_type_error(self, other: Any, op_symbol: str) -> None:
        """Helper to raise a consistent TypeError."""
        raise TypeError(
            f"Unsupported operand type(s) for {op_symbol}: "
            f"'{type(self).__name__}' and '{type(other).__name__}'"
        )

    def __add__(self, other: Any) -> Self:
        """Handle the addition operator (`+`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "+")
        return type(self)(super().__add__(other))

    def __radd__(self, other: Any) -> Self:
        """Handle the reverse addition operator (`+`)."""
        # `sum()` starts from the int 0.
        if isinstance(other, int) and not isinstance(other, BaseUint) and other == 0:
            return self
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "+")
        return type(self)(int(other) + int(self))

    def __sub__(self, other: Any) -> Self:
        """Handle the subtraction operator (`-`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "-")
        return type(self)(super().__sub__(other))

    def __mul__(self, other: Any) -> Self:
        """Handle the multiplication operator (`*`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "*")
        return type(self)(super().__mul__(other))

    def __rmul__(self, other: Any) -> Self:
        """Handle the reverse multiplication operator (`*`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "*")
        return type(self)(int(other) * int(self))

    def __floordiv__(self, other: Any) -> Self:
        """Handle the floor division operator (`//`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "//")
        return type(self)(super().__floordiv__(other))

    def __mod__(self, other: Any) -> Self:
        """Handle the modulo operator (`%`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "%")
        return type(self)(super().__mod__(other))

    def __eq__(self, other: object) -> bool:
        """Handle the equality operator (`==`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "==")
        return super().__eq__(other)

    def __ne__(self, other: object) -> bool:
        """Handle the inequality operator (`!=`)"""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "!=")
        return super().__ne__(other)

    def __lt__(self, other: Any) -> bool:
        """Handle the less-than operator (`<`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<")
        return super().__lt__(other)

    def __le__(self, other: Any) -> bool:
        """Handle the less-than-or-equal-to operator (`<=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, "<=")
        return super().__le__(other)

    def __gt__(self, other: Any) -> bool:
        """Handle the greater-than operator (`>`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">")
        return super().__gt__(other)

    def __ge__(self, other: Any) -> bool:
        """Handle the greater-than-or-equal-to operator (`>=`)."""
        if not isinstance(other, type(self)):
            self._raise_type_error(other, ">=")
        return super().__ge__(other)

    def __repr__(self) -> str:
        """Return the official string representation of the object."""
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        """Return the informal, user-friendly string representation."""
        return str(int(self))

    def __hash__(self) -> int:
        """Return a distinct hash for the object."""
        return hash((type(self), int(self)))


class Uint8(BaseUint):
    """A type representing an 8-bit unsigned integer (u8)."""

    BITS = 8


class Uint32(BaseUint):
    """A type representing a 32-bit unsigned integer (u32)."""

    BITS = 32


class Uint64(BaseUint):
    """A type representing a 64-bit unsigned integer (u64)."""

    BITS = 64


class Balance(BaseUint):
    """
    An amount of the native token, in its smallest unit.

    128 bits wide, matching the ledger's balance type.
    """

    BITS = 128


class Perbill(Uint32):
    """
    A fraction expressed in parts per billion.

    1_000_000_000 is 100%. Used for the slash reward fraction.
    """

    ACCURACY: ClassVar[int] = 1_000_000_000
    """Parts that make up one whole."""

    def __new__(cls, value: int) -> Self:
        """Create a Perbill, rejecting anything above one whole."""
        instance = super().__new__(cls, value)
        if int(instance) > cls.ACCURACY:
            raise OverflowError(f"{int(instance)} exceeds {cls.__name__} accuracy {cls.ACCURACY}")
        return instance

    @classmethod
    def from_percent(cls, percent: int) -> Self:
        """Build from a whole percentage in [0, 100]."""
        if not 0 <= percent <= 100:
            raise OverflowError(f"{percent}% is not a valid {cls.__name__}")
        return cls(percent * (cls.ACCURACY // 100))

    def __repr__(self) -> str:
        """Show the value as a percentage as well."""
        return f"Perbill({int(self)} = {int(self) * 100 / self.ACCURACY}%)"
