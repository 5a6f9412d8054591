"""
Staging network key material.

The public testnet starts from a fixed set of authorities whose keys were
generated offline. They live in `staging_authorities.yaml`, next to this
module, and are validated on load.
"""

from __future__ import annotations

from functools import cache
from pathlib import Path

import yaml

from labor_spec.subspecs.keys import AccountId, AuthorityKeys
from labor_spec.types import StrictBaseModel

STAGING_AUTHORITIES_FILE = Path(__file__).parent / "staging_authorities.yaml"
"""Location of the packaged staging key table."""


class NamedAuthority(StrictBaseModel):
    """An authority identity with the operator name it was issued to."""

    name: str
    keys: AuthorityKeys


class StagingKeyTable(StrictBaseModel):
    """The staging sudo account and its genesis authorities."""

    root_key: AccountId
    authorities: list[NamedAuthority]

    @classmethod
    def from_yaml_file(cls, path: Path) -> StagingKeyTable:
        """
        Load a key table from YAML.

        Raises:
            pydantic.ValidationError: If an entry is missing or malformed.
        """
        with path.open(encoding="utf-8") as f:
            return cls.model_validate(yaml.safe_load(f), strict=False)

    def authority_keys(self) -> list[AuthorityKeys]:
        return [entry.keys for entry in self.authorities]


@cache
def load_staging_key_table() -> StagingKeyTable:
    """The packaged staging key table. Parsed once per process."""
    return StagingKeyTable.from_yaml_file(STAGING_AUTHORITIES_FILE)
