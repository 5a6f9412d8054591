"""
Byte string types.

- `BaseBytes`: a fixed-length byte string of exactly `LENGTH` bytes.
- `HexBytes`: an arbitrary-length byte string.

Both serialize to `0x`-prefixed lowercase hex in JSON and accept the same
form (with or without the prefix) on input.
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        return bytes(bytearray(value))
    return bytes(value)


def _bytes_core_schema(cls: type) -> core_schema.CoreSchema:
    """Validation and serialization schema shared by all byte string types."""

    def validate(value: Any) -> Any:
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except TypeError as e:
            raise ValueError(str(e)) from e

    return core_schema.json_or_python_schema(
        json_schema=core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(validate),
            ]
        ),
        python_schema=core_schema.no_info_plain_validator_function(validate),
        serialization=core_schema.plain_serializer_function_ser_schema(lambda x: "0x" + x.hex()),
    )


class BaseBytes(bytes):
    """
    A base class for fixed-length byte types that inherits from `bytes`.

    Subclasses set:
      - `LENGTH`: exact number of bytes the instance must contain.

    Instances are immutable byte objects with strict length checking.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create and validate a new Bytes instance.

        Args:
            value: Any value coercible to bytes (see `_coerce_to_bytes`).

        Raises:
            ValueError: If the resulting byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = _coerce_to_bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""
        return _bytes_core_schema(cls)

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        tname = type(self).__name__
        return f"{tname}({self.hex()})"

    def __hash__(self) -> int:
        """Return the hash of the bytes."""
        return hash((type(self), bytes(self)))


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


class HexBytes(bytes):
    """A variable-length byte string, such as an opaque runtime code blob."""

    def __new__(cls, value: Any = b"") -> Self:
        """Create a new instance from anything `_coerce_to_bytes` accepts."""
        return super().__new__(cls, _coerce_to_bytes(value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Hook into Pydantic's validation system."""
        return _bytes_core_schema(cls)

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        return f"HexBytes({bytes(self).hex()})"
