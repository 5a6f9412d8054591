"""Tests for Base58 encoding."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from labor_spec.subspecs.keys.base58 import b58decode, b58encode


@pytest.mark.parametrize(
    "data, text",
    [
        (b"", ""),
        (b"\x00", "1"),
        (b"\x00\x00\x01", "112"),
        (b"hello world", "StV1DL6CwTryKyV"),
        (bytes.fromhex("0000287fb4cd"), "11233QC4"),
    ],
)
def test_known_vectors(data: bytes, text: str) -> None:
    """Reference vectors, including leading zero bytes."""
    assert b58encode(data) == text
    assert b58decode(text) == data


@given(st.binary(max_size=64))
def test_decode_inverts_encode(data: bytes) -> None:
    """Every byte string survives a round trip, leading zeros included."""
    assert b58decode(b58encode(data)) == data


@pytest.mark.parametrize("char", ["0", "O", "I", "l", "+"])
def test_ambiguous_characters_are_rejected(char: str) -> None:
    """Characters outside the alphabet do not decode."""
    with pytest.raises(ValueError, match="Invalid Base58 character"):
        b58decode("2" + char)
