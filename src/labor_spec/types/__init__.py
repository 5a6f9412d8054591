"""Reusable type definitions for the Labor genesis specification."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import BaseBytes, Bytes32, HexBytes
from .exceptions import (
    AddressError,
    GenesisConfigurationError,
    GenesisError,
    KeyDerivationError,
    SnapshotDecodeError,
)
from .uint import Balance, BaseUint, Perbill, Uint8, Uint32, Uint64

__all__ = [
    # Core types
    "Uint8",
    "Uint32",
    "Uint64",
    "Balance",
    "Perbill",
    "BaseUint",
    "BaseBytes",
    "Bytes32",
    "HexBytes",
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "GenesisError",
    "KeyDerivationError",
    "AddressError",
    "GenesisConfigurationError",
    "SnapshotDecodeError",
]
