"""Subspecifications of the Labor genesis composer."""

from .chain_spec import ChainSpec, load_chain_spec
from .genesis import GenesisParams, GenesisState

__all__ = [
    "ChainSpec",
    "GenesisParams",
    "GenesisState",
    "load_chain_spec",
]
