"""Tests for telemetry endpoint validation."""

from __future__ import annotations

import pytest

from labor_spec.subspecs.chain_spec import TelemetryEndpoints
from labor_spec.subspecs.chain_spec.telemetry import check_telemetry_address
from labor_spec.types import GenesisConfigurationError, Uint8


@pytest.mark.parametrize(
    "address",
    [
        "wss://telemetry.polkadot.io/submit/",
        "ws://127.0.0.1:8000/submit",
        "/dns/telemetry.example/tcp/443/x-parity-wss/%2Fsubmit%2F",
    ],
)
def test_valid_addresses(address: str) -> None:
    """WebSocket URLs and multiaddrs are accepted unchanged."""
    assert check_telemetry_address(address) == address


@pytest.mark.parametrize(
    "address",
    [
        "https://telemetry.polkadot.io/submit/",
        "wss://",
        "telemetry.polkadot.io",
        "/dns",
        "/dns//tcp",
        "",
    ],
)
def test_invalid_addresses(address: str) -> None:
    """Other schemes, missing hosts and malformed multiaddrs are refused."""
    with pytest.raises(ValueError):
        check_telemetry_address(address)


class TestTelemetryEndpoints:
    """The endpoint list."""

    def test_new(self) -> None:
        """Verbosity is stored as a byte."""
        endpoints = TelemetryEndpoints.new([("wss://telemetry.polkadot.io/submit/", 0)])

        assert len(endpoints) == 1
        assert endpoints.addresses() == ["wss://telemetry.polkadot.io/submit/"]
        assert list(endpoints) == [("wss://telemetry.polkadot.io/submit/", Uint8(0))]

    def test_bad_url(self) -> None:
        """Malformed URLs are configuration errors."""
        with pytest.raises(GenesisConfigurationError) as exc:
            TelemetryEndpoints.new([("https://example.com", 0)])
        assert exc.value.field == "telemetry_endpoints"

    def test_verbosity_out_of_range(self) -> None:
        """Verbosity must fit in a byte."""
        with pytest.raises(GenesisConfigurationError):
            TelemetryEndpoints.new([("wss://example.com", 256)])

    def test_json_shape(self) -> None:
        """Endpoints serialize as [address, verbosity] pairs."""
        endpoints = TelemetryEndpoints.new([("wss://example.com/submit", 1)])

        assert endpoints.model_dump(mode="json") == [["wss://example.com/submit", 1]]
        assert TelemetryEndpoints.model_validate_json('[["wss://example.com/submit", 1]]') == (
            endpoints
        )
