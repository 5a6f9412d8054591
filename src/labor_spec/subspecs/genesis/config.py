"""
Genesis parameter loader.

Custom networks describe their genesis inputs in YAML:

    validators:
    - Alice                      # development seed
    - stash: 0xdca1...           # explicit identity bundle
      controller: 0xd0c7...
      grandpa: 0xe67e...
      babe: 0xc29f...
      im_online: 0x780c...
      authority_discovery: 0x6296...
    nominators:
    - //Charlie                  # secret URI
    - 5GrwvaEF5zXb26Fz9rcQpDWS57CtERHpNehXCPcNoHGKutQY   # SS58 address
    root_key: //Alice
    endowed_accounts: null       # null endows the development roster
    enable_debug_execution: false
    rng_seed: 7                  # makes nomination targets reproducible
"""

from __future__ import annotations

import random
from pathlib import Path
from typing import Any

import yaml
from pydantic import ConfigDict, Field, field_validator

from labor_spec.subspecs.keys import (
    AccountId,
    AuthorityKeys,
    account_from_text,
    authority_keys_from_seed,
)
from labor_spec.types import CamelModel

from .state import GenesisState


class GenesisParams(CamelModel):
    """
    The explicit parameter record a custom genesis is composed from.

    Keys may be written in snake_case or camelCase.
    """

    model_config = CamelModel.model_config | ConfigDict(extra="forbid", frozen=True)

    validators: list[AuthorityKeys] = Field(min_length=1)
    """Genesis authorities, given as seeds or explicit bundles."""

    nominators: list[AccountId] = Field(default_factory=list)
    """Genesis nominators."""

    root_key: AccountId
    """The sudo account."""

    endowed_accounts: list[AccountId] | None = None
    """Accounts to endow. `None` endows the development roster."""

    enable_debug_execution: bool = False
    """Allow contract diagnostic output."""

    rng_seed: int | None = None
    """Seed for nomination target selection. Unset means not reproducible."""

    @field_validator("validators", mode="before")
    @classmethod
    def parse_validators(cls, v: Any) -> list[AuthorityKeys]:
        """
        Derive seed entries and validate explicit bundles.

        Explicit bundle fields may be YAML integers (unquoted `0x...`).
        """
        if not isinstance(v, list):
            raise ValueError(f"validators must be a list, got {type(v).__name__}")

        result = []
        for entry in v:
            if isinstance(entry, AuthorityKeys):
                result.append(entry)
            elif isinstance(entry, str):
                result.append(authority_keys_from_seed(entry))
            elif isinstance(entry, dict):
                fields = {
                    key: f"0x{value:064x}" if isinstance(value, int) else value
                    for key, value in entry.items()
                }
                result.append(AuthorityKeys.model_validate(fields, strict=False))
            else:
                raise ValueError(f"unsupported validator entry: {entry!r}")
        return result

    @field_validator("root_key", mode="before")
    @classmethod
    def parse_root_key(cls, v: Any) -> AccountId:
        """Accept hex, SS58 or a secret URI."""
        return v if isinstance(v, AccountId) else account_from_text(v)

    @field_validator("nominators", "endowed_accounts", mode="before")
    @classmethod
    def parse_accounts(cls, v: Any) -> list[AccountId] | None:
        """Accept hex, SS58 or secret URIs for every entry."""
        if v is None:
            return None
        if not isinstance(v, list):
            raise ValueError(f"expected a list of accounts, got {type(v).__name__}")
        return [a if isinstance(a, AccountId) else account_from_text(a) for a in v]

    def rng(self) -> random.Random | None:
        """Seeded random source for nominations, or None when no `rng_seed` is set."""
        return random.Random(self.rng_seed) if self.rng_seed is not None else None

    def create_state(self, code: bytes = b"") -> GenesisState:
        """Compose the genesis state these parameters describe."""
        return GenesisState.assemble(
            self.validators,
            self.nominators,
            self.root_key,
            self.endowed_accounts,
            self.enable_debug_execution,
            rng=self.rng(),
            code=code,
        )

    @classmethod
    def from_yaml_file(cls, path: Path | str) -> GenesisParams:
        """
        Load parameters from a YAML file.

        Raises:
            FileNotFoundError: If the file does not exist.
            yaml.YAMLError: If the file is not valid YAML.
            pydantic.ValidationError: If the data fails validation.
        """
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, content: str) -> GenesisParams:
        """Load parameters from a YAML string."""
        return cls.model_validate(yaml.safe_load(content))
