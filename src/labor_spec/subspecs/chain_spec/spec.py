"""
Chain specification: the genesis state plus network metadata.

A chain specification is what node operators exchange to join the same
network. Its JSON form looks like:

    {
      "name": "Labor Testnet",
      "id": "labor-testnet",
      "chainType": "Live",
      "bootNodes": [],
      "telemetryEndpoints": [["wss://telemetry.polkadot.io/submit/", 0]],
      "protocolId": "lbr",
      "properties": {"tokenDecimals": 6, "tokenSymbol": "LBR"},
      "extensions": {"forkBlocks": null, "badBlocks": null},
      "genesis": {"system": {...}, "balances": {...}, ...}
    }
"""

from __future__ import annotations

import logging
from enum import StrEnum
from pathlib import Path
from typing import Any, Callable

from pydantic import ValidationError

from labor_spec.subspecs.genesis import GenesisState
from labor_spec.types import (
    Bytes32,
    GenesisConfigurationError,
    SnapshotDecodeError,
    StrictBaseModel,
    Uint64,
)

from .telemetry import TelemetryEndpoints

logger = logging.getLogger(__name__)


class ChainType(StrEnum):
    """What kind of network a chain specification describes."""

    DEVELOPMENT = "Development"
    """A single-node chain for development."""

    LOCAL = "Local"
    """A multi-node chain on one machine or a private network."""

    LIVE = "Live"
    """A publicly reachable network."""


class Extensions(StrictBaseModel):
    """Operational overrides carried alongside the genesis state."""

    fork_blocks: list[tuple[Uint64, Bytes32]] | None = None
    """Block numbers pinned to known hashes."""

    bad_blocks: list[Bytes32] | None = None
    """Block hashes to reject."""


class ChainSpec(StrictBaseModel):
    """A genesis state wrapped with the metadata of its network."""

    name: str
    """Human-readable network name."""

    id: str
    """Machine identifier, used for the node's data directory."""

    chain_type: ChainType

    boot_nodes: list[str]
    """Multiaddrs of peers to dial first."""

    telemetry_endpoints: TelemetryEndpoints | None = None

    protocol_id: str | None = None
    """Networking protocol id, separating this network's gossip from others."""

    properties: dict[str, Any] | None = None
    """Free-form client hints such as token symbol and decimals."""

    extensions: Extensions = Extensions()

    genesis: GenesisState

    @classmethod
    def from_genesis(
        cls,
        name: str,
        id: str,
        chain_type: ChainType,
        constructor: Callable[[], GenesisState],
        boot_nodes: list[str],
        telemetry_endpoints: TelemetryEndpoints | None,
        protocol_id: str | None,
        properties: dict[str, Any] | None,
        extensions: Extensions | None = None,
    ) -> ChainSpec:
        """
        Build a chain specification from a genesis constructor.

        The constructor runs once, here. Any error it raises aborts the build.
        """
        genesis = constructor()

        # Diagnostic contract output on a public network is a misconfiguration.
        if chain_type is ChainType.LIVE and genesis.contracts.current_schedule.enable_println:
            raise GenesisConfigurationError(
                "debug execution must be disabled on a live network",
                field="contracts.current_schedule.enable_println",
            )

        spec = cls(
            name=name,
            id=id,
            chain_type=chain_type,
            boot_nodes=boot_nodes,
            telemetry_endpoints=telemetry_endpoints,
            protocol_id=protocol_id,
            properties=properties,
            extensions=extensions or Extensions(),
            genesis=genesis,
        )
        logger.info(
            "Built chain spec %s (%s), genesis 0x%s", id, chain_type, genesis.digest().hex()
        )
        return spec

    def to_json(self, pretty: bool = True) -> str:
        """Serialize with camelCase keys and hex-encoded bytes."""
        if pretty:
            return self.model_dump_json(by_alias=True, indent=2)
        return self.to_canonical_json()

    @classmethod
    def from_json_bytes(cls, data: bytes | str, source: str = "<bytes>") -> ChainSpec:
        """
        Load a previously serialized chain specification.

        The genesis state is taken as-is. It is not recomposed, but its
        invariants are still checked.

        Raises:
            SnapshotDecodeError: If the data is not a valid chain specification.
            GenesisConfigurationError: If the decoded genesis is inconsistent.
        """
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise SnapshotDecodeError(source, str(e)) from e

    @classmethod
    def from_json_file(cls, path: Path | str) -> ChainSpec:
        """Load a chain specification from a JSON file."""
        path = Path(path)
        return cls.from_json_bytes(path.read_bytes(), source=str(path))
