"""Telemetry endpoints announced in a chain specification."""

from __future__ import annotations

from typing import Iterator, Sequence
from urllib.parse import urlsplit

from pydantic import RootModel, field_validator

from labor_spec.types import GenesisConfigurationError, Uint8

TELEMETRY_SCHEMES = frozenset({"ws", "wss"})
"""URL schemes a telemetry submission endpoint may use."""


def check_telemetry_address(address: str) -> str:
    """
    Validate a telemetry address and return it unchanged.

    Accepts `ws://` / `wss://` URLs with a host, or a multiaddr such as
    `/dns/telemetry.example/tcp/443/x-parity-wss/%2Fsubmit%2F`.

    Raises:
        ValueError: If the address is neither.
    """
    if address.startswith("/"):
        parts = address.strip("/").split("/")
        if len(parts) < 2 or not all(parts):
            raise ValueError(f"malformed telemetry multiaddr {address!r}")
        return address

    url = urlsplit(address)
    if url.scheme not in TELEMETRY_SCHEMES:
        raise ValueError(f"telemetry url {address!r} must use ws:// or wss://")
    if not url.hostname:
        raise ValueError(f"telemetry url {address!r} has no host")
    return address


class TelemetryEndpoints(RootModel[list[tuple[str, Uint8]]]):
    """
    Telemetry servers as (address, verbosity) pairs.

    Verbosity 0 sends only the most important events.
    """

    model_config = {"frozen": True}

    @field_validator("root", mode="after")
    @classmethod
    def check_addresses(cls, v: list[tuple[str, Uint8]]) -> list[tuple[str, Uint8]]:
        """Every address must be a ws(s) URL or a multiaddr."""
        for address, _ in v:
            check_telemetry_address(address)
        return v

    @classmethod
    def new(cls, endpoints: Sequence[tuple[str, int]]) -> TelemetryEndpoints:
        """
        Build and validate a set of endpoints.

        Raises:
            GenesisConfigurationError: If an address is malformed or a
                verbosity does not fit in a byte.
        """
        try:
            return cls([(address, Uint8(verbosity)) for address, verbosity in endpoints])
        except (ValueError, TypeError, OverflowError) as e:
            raise GenesisConfigurationError(str(e), field="telemetry_endpoints") from e

    def addresses(self) -> list[str]:
        """Endpoint addresses in order."""
        return [address for address, _ in self.root]

    def __iter__(self) -> Iterator[tuple[str, Uint8]]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)
