"""
SCALE compact integer and string encoding.

Key derivation hashes SCALE-encoded values, so the exact bytes matter.

COMPACT INTEGERS
----------------
The two least significant bits of the first byte select the mode:

    0b00  single-byte mode   0 .. 2^6 - 1        [vvvvvv00]
    0b01  two-byte mode      2^6 .. 2^14 - 1     [vvvvvv01][vvvvvvvv]
    0b10  four-byte mode     2^14 .. 2^30 - 1    [vvvvvv10][...3 bytes]
    0b11  big-integer mode   2^30 .. 2^536 - 1   [llllll11][...n bytes]

All modes are little-endian. In big-integer mode the upper six bits of the
first byte hold `n - 4`, where `n` is the number of value bytes that follow.

Example: 300 = 0b1_0010_1100. Two-byte mode: (300 << 2) | 1 = 1201 = 0x04B1,
written little-endian as [0xB1, 0x04].

STRINGS
-------
A string is its compact-encoded UTF-8 byte length followed by the bytes.
"""

from __future__ import annotations


class ScaleError(ValueError):
    """Raised when a value cannot be SCALE-encoded."""


def encode_compact(value: int) -> bytes:
    """
    Encode a non-negative integer in SCALE compact form.

    Args:
        value: Integer to encode. Maximum: 2^536 - 1.

    Returns:
        Between 1 and 68 bytes.

    Raises:
        ScaleError: If value is negative or too large.
    """
    if value < 0:
        raise ScaleError("Compact integers must be non-negative")

    if value < 1 << 6:
        return bytes([value << 2])
    if value < 1 << 14:
        return ((value << 2) | 0b01).to_bytes(2, "little")
    if value < 1 << 30:
        return ((value << 2) | 0b10).to_bytes(4, "little")

    # Big-integer mode: minimal little-endian byte length, never below 4.
    length = max(4, (value.bit_length() + 7) // 8)
    if length > 4 + 0b111111:
        raise ScaleError(f"Compact integer too large: {value.bit_length()} bits")
    return bytes([((length - 4) << 2) | 0b11]) + value.to_bytes(length, "little")


def encode_str(text: str) -> bytes:
    """Encode a string as compact length prefix plus UTF-8 bytes."""
    data = text.encode("utf-8")
    return encode_compact(len(data)) + data
