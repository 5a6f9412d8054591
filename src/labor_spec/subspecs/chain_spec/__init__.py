"""Chain specifications: genesis state plus network metadata, and the named profiles."""

from .profiles import (
    PROFILES,
    CustomChainParams,
    custom_config,
    development_config,
    integration_test_config_with_single_authority,
    integration_test_config_with_two_authorities,
    load_chain_spec,
    local_testnet_config,
    staging_testnet_config,
)
from .spec import ChainSpec, ChainType, Extensions
from .staging import StagingKeyTable, load_staging_key_table
from .telemetry import TelemetryEndpoints

__all__ = [
    "PROFILES",
    "ChainSpec",
    "ChainType",
    "CustomChainParams",
    "Extensions",
    "StagingKeyTable",
    "TelemetryEndpoints",
    "custom_config",
    "development_config",
    "integration_test_config_with_single_authority",
    "integration_test_config_with_two_authorities",
    "load_chain_spec",
    "load_staging_key_table",
    "local_testnet_config",
    "staging_testnet_config",
]
