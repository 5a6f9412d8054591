"""Tests for SCALE compact integer and string encoding."""

from __future__ import annotations

import pytest

from labor_spec.subspecs.keys.scale import ScaleError, encode_compact, encode_str


@pytest.mark.parametrize(
    "value, expected",
    [
        (0, "00"),
        (1, "04"),
        (63, "fc"),
        (64, "0101"),
        (300, "b104"),
        (16383, "fdff"),
        (16384, "02000100"),
        (2**30 - 1, "feffffff"),
        (2**30, "0300000040"),
        (2**32 - 1, "03ffffffff"),
        (2**32, "070000000001"),
    ],
)
def test_compact_known_vectors(value: int, expected: str) -> None:
    """Mode boundaries encode to the reference bytes."""
    assert encode_compact(value).hex() == expected


def test_compact_rejects_negative() -> None:
    """There is no signed compact form."""
    with pytest.raises(ScaleError):
        encode_compact(-1)


def test_compact_rejects_oversized() -> None:
    """Big-integer mode tops out at 67 value bytes."""
    encode_compact(2**536 - 1)
    with pytest.raises(ScaleError):
        encode_compact(2**536)


class TestEncodeStr:
    """Strings are length-prefixed UTF-8."""

    def test_ascii(self) -> None:
        """The derivation context string."""
        assert encode_str("Ed25519HDKD") == b"\x2cEd25519HDKD"

    def test_empty(self) -> None:
        """An empty string is a single zero length byte."""
        assert encode_str("") == b"\x00"

    def test_length_counts_bytes_not_characters(self) -> None:
        """Multi-byte characters count by their encoded size."""
        assert encode_str("é") == b"\x08" + "é".encode()
