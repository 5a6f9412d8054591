"""
SS58 account addresses.

An address is the Base58 encoding of::

    [network prefix (1 or 2 bytes)][public key (32 bytes)][checksum (2 bytes)]

The checksum is the first two bytes of BLAKE2b-512 over
`b"SS58PRE" + prefix + public key`.

Prefixes below 64 take one byte. Prefixes 64..16383 take two bytes with
the bits rearranged so the first byte always has bit 6 set::

    first  = 0b01000000 | (prefix & 0b11111100) >> 2
    second = (prefix >> 8) | (prefix & 0b11) << 6
"""

from __future__ import annotations

import hashlib
from typing import Final

from labor_spec.types import AddressError

from .base58 import b58decode, b58encode
from .types import AccountId

CHECKSUM_PREFIX: Final = b"SS58PRE"
"""Domain separator hashed in front of every checksum preimage."""

CHECKSUM_LENGTH: Final = 2
"""Checksum bytes carried by addresses of 32-byte keys."""

RESERVED_PREFIXES: Final = frozenset({46, 47})
"""Prefixes reserved by the address format and never valid for accounts."""

MAX_PREFIX: Final = 16383
"""Largest prefix the two-byte form can express."""

DEFAULT_SS58_PREFIX: Final = 42
"""Generic Substrate prefix, used when a network registers none of its own."""


def _checksum(payload: bytes) -> bytes:
    return hashlib.blake2b(CHECKSUM_PREFIX + payload, digest_size=64).digest()[:CHECKSUM_LENGTH]


def _encode_prefix(prefix: int) -> bytes:
    if prefix < 64:
        return bytes([prefix])
    first = ((prefix & 0b1111_1100) >> 2) | 0b0100_0000
    second = (prefix >> 8) | ((prefix & 0b11) << 6)
    return bytes([first, second])


def _decode_prefix(address: str, data: bytes) -> tuple[int, int]:
    """Return (prefix, bytes consumed)."""
    if not data:
        raise AddressError(address, "empty payload")
    if data[0] < 64:
        return data[0], 1
    if data[0] < 128:
        if len(data) < 2:
            raise AddressError(address, "truncated prefix")
        lower = ((data[0] << 2) | (data[1] >> 6)) & 0xFF
        upper = data[1] & 0b0011_1111
        return lower | (upper << 8), 2
    raise AddressError(address, f"invalid prefix byte 0x{data[0]:02x}")


def ss58_encode(account: bytes, prefix: int = DEFAULT_SS58_PREFIX) -> str:
    """
    Encode a 32-byte public key as an SS58 address for network `prefix`.

    Raises:
        AddressError: If the prefix is reserved or out of range.
    """
    if not 0 <= prefix <= MAX_PREFIX or prefix in RESERVED_PREFIXES:
        raise AddressError(f"<prefix {prefix}>", "prefix not allowed")
    payload = _encode_prefix(prefix) + bytes(account)
    return b58encode(payload + _checksum(payload))


def ss58_decode(address: str) -> tuple[int, AccountId]:
    """
    Decode an SS58 address into its network prefix and account.

    Raises:
        AddressError: On bad Base58, bad length, reserved prefix or checksum mismatch.
    """
    try:
        data = b58decode(address)
    except ValueError as e:
        raise AddressError(address, str(e)) from e

    prefix, offset = _decode_prefix(address, data)
    if prefix in RESERVED_PREFIXES:
        raise AddressError(address, f"reserved prefix {prefix}")

    expected_length = offset + AccountId.LENGTH + CHECKSUM_LENGTH
    if len(data) != expected_length:
        raise AddressError(address, f"expected {expected_length} bytes, got {len(data)}")

    payload, checksum = data[:-CHECKSUM_LENGTH], data[-CHECKSUM_LENGTH:]
    if _checksum(payload) != checksum:
        raise AddressError(address, "checksum mismatch")

    return prefix, AccountId(payload[offset:])
