"""
Named chain specification profiles.

Each profile fixes the network metadata and the genesis inputs of one kind
of network. All profiles except custom ones are free of randomness: they
carry no nominators, so building one twice yields byte-identical output.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Callable

from pydantic import Field

from labor_spec.subspecs.genesis import GenesisParams, GenesisState, testnet_genesis
from labor_spec.subspecs.keys import authority_keys_from_seed, get_account_id_from_seed
from labor_spec.types import GenesisConfigurationError

from .spec import ChainSpec, ChainType
from .staging import load_staging_key_table
from .telemetry import TelemetryEndpoints

logger = logging.getLogger(__name__)

STAGING_TELEMETRY_URL = "wss://telemetry.polkadot.io/submit/"
"""Telemetry server of the public testnet."""

STAGING_PROPERTIES: dict[str, Any] = {"tokenSymbol": "LBR", "tokenDecimals": 6}
"""Client hints of the public testnet token."""


def _single_authority_genesis(enable_println: bool, code: bytes) -> GenesisState:
    return testnet_genesis(
        [authority_keys_from_seed("Alice")],
        [],
        get_account_id_from_seed("Alice"),
        None,
        enable_println,
        code=code,
    )


def _two_authority_genesis(code: bytes) -> GenesisState:
    return testnet_genesis(
        [authority_keys_from_seed("Alice"), authority_keys_from_seed("Bob")],
        [],
        get_account_id_from_seed("Alice"),
        None,
        False,
        code=code,
    )


def _staging_genesis(code: bytes) -> GenesisState:
    table = load_staging_key_table()
    return testnet_genesis(
        table.authority_keys(), [], table.root_key, [table.root_key], False, code=code
    )


def development_config(code: bytes = b"") -> ChainSpec:
    """Single validator Alice, development roster endowed, debug execution on."""
    return ChainSpec.from_genesis(
        "Labor Development",
        "labor-dev",
        ChainType.DEVELOPMENT,
        lambda: _single_authority_genesis(True, code),
        [],
        None,
        None,
        None,
    )


def local_testnet_config(code: bytes = b"") -> ChainSpec:
    """Validators Alice and Bob, development roster endowed."""
    return ChainSpec.from_genesis(
        "Local Labor Testnet",
        "local-labor-testnet",
        ChainType.LOCAL,
        lambda: _two_authority_genesis(code),
        [],
        None,
        None,
        None,
    )


def staging_testnet_config(code: bytes = b"") -> ChainSpec:
    """The public testnet: fixed authorities, only the root account endowed up front."""
    return ChainSpec.from_genesis(
        "Labor Testnet",
        "labor-testnet",
        ChainType.LIVE,
        lambda: _staging_genesis(code),
        [],
        TelemetryEndpoints.new([(STAGING_TELEMETRY_URL, 0)]),
        "lbr",
        dict(STAGING_PROPERTIES),
    )


def integration_test_config_with_single_authority(code: bytes = b"") -> ChainSpec:
    """Single validator Alice, for node integration tests."""
    return ChainSpec.from_genesis(
        "Labor Integration Test",
        "labor-test",
        ChainType.DEVELOPMENT,
        lambda: _single_authority_genesis(False, code),
        [],
        None,
        None,
        None,
    )


def integration_test_config_with_two_authorities(code: bytes = b"") -> ChainSpec:
    """Validators Alice and Bob, for node integration tests."""
    return ChainSpec.from_genesis(
        "Labor Integration Test",
        "labor-test",
        ChainType.DEVELOPMENT,
        lambda: _two_authority_genesis(code),
        [],
        None,
        None,
        None,
    )


class CustomChainParams(GenesisParams):
    """
    Genesis parameters plus the network metadata of a custom chain.

    The metadata keys sit at the top level of the same YAML document as
    the genesis parameters.
    """

    name: str = "Custom Labor Network"
    id: str = "labor-custom"
    chain_type: ChainType = ChainType.LOCAL
    boot_nodes: list[str] = Field(default_factory=list)
    telemetry_endpoints: list[tuple[str, int]] | None = None
    protocol_id: str | None = None
    properties: dict[str, Any] | None = None


def custom_config(params: CustomChainParams, code: bytes = b"") -> ChainSpec:
    """Build a chain specification for a YAML-described network."""
    telemetry = (
        TelemetryEndpoints.new(params.telemetry_endpoints)
        if params.telemetry_endpoints is not None
        else None
    )
    return ChainSpec.from_genesis(
        params.name,
        params.id,
        params.chain_type,
        lambda: params.create_state(code=code),
        list(params.boot_nodes),
        telemetry,
        params.protocol_id,
        params.properties,
    )


PROFILES: dict[str, Callable[[bytes], ChainSpec]] = {
    "dev": development_config,
    "local": local_testnet_config,
    "staging": staging_testnet_config,
}
"""Built-in profiles by their command-line name."""


def load_chain_spec(
    name_or_path: str, code: bytes = b"", rng_seed: int | None = None
) -> ChainSpec:
    """
    Resolve a profile name or a file into a chain specification.

    Files ending in `.json` are loaded as snapshots and taken as-is. Files
    ending in `.yaml` or `.yml` hold `CustomChainParams`. A `rng_seed`
    overrides the one given in a parameter file. Profiles and snapshots
    ignore it with a warning.

    Raises:
        GenesisConfigurationError: If the name is neither a profile nor a
            supported file type.
        SnapshotDecodeError: If a snapshot cannot be decoded.
        FileNotFoundError: If the file does not exist.
    """
    if name_or_path in PROFILES:
        logger.info("Using built-in profile %s", name_or_path)
        if rng_seed is not None:
            logger.warning("Ignoring random seed: built-in profiles have no nominators")
        return PROFILES[name_or_path](code)

    path = Path(name_or_path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        logger.info("Loading chain spec snapshot %s", path)
        if code:
            logger.warning("Ignoring runtime code: snapshots carry their own")
        if rng_seed is not None:
            logger.warning("Ignoring random seed: snapshots carry their own stakers")
        return ChainSpec.from_json_file(path)
    if suffix in (".yaml", ".yml"):
        logger.info("Composing custom chain from %s", path)
        params = CustomChainParams.from_yaml_file(path)
        if rng_seed is not None:
            params = params.model_copy(update={"rng_seed": rng_seed})
        return custom_config(params, code=code)

    raise GenesisConfigurationError(
        f"unknown chain {name_or_path!r}: expected one of {sorted(PROFILES)} "
        "or a .json/.yaml file",
        field="chain",
    )
