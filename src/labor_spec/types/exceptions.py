"""Exception hierarchy for genesis composition."""

from __future__ import annotations


class GenesisError(Exception):
    """
    Base exception for all genesis composition errors.

    Every error in this hierarchy is fatal: genesis is composed once at
    startup and is never retried or partially applied.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class KeyDerivationError(GenesisError):
    """
    Raised when a secret URI cannot be turned into a key.

    Attributes:
        suri: The secret URI that was rejected.
        detail: What was wrong with it.
    """

    def __init__(self, suri: str, detail: str) -> None:
        self.suri = suri
        self.detail = detail
        super().__init__(f"Cannot derive key from {suri!r}: {detail}")


class AddressError(GenesisError):
    """
    Raised when an SS58 address is malformed.

    Attributes:
        address: The offending address text.
        detail: What was wrong with it.
    """

    def __init__(self, address: str, detail: str) -> None:
        self.address = address
        self.detail = detail
        super().__init__(f"Invalid SS58 address {address!r}: {detail}")


class GenesisConfigurationError(GenesisError):
    """
    Raised when genesis inputs violate a cross-subsystem invariant.

    Attributes:
        detail: Description of the violated invariant.
        field: The configuration field at fault, when one is identifiable.
    """

    def __init__(self, detail: str, *, field: str | None = None) -> None:
        self.detail = detail
        self.field = field

        msg = f"{field}: {detail}" if field else detail
        super().__init__(f"Invalid genesis configuration: {msg}")


class SnapshotDecodeError(GenesisError):
    """
    Raised when a serialized chain specification cannot be decoded.

    Attributes:
        source: Where the bytes came from (a path or "<bytes>").
        detail: Description of what went wrong.
    """

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Failed to decode chain spec from {source}: {detail}")
