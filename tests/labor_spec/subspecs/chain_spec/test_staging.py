"""Tests for the packaged staging key table."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from labor_spec.subspecs.chain_spec import StagingKeyTable, load_staging_key_table
from labor_spec.subspecs.keys import ImOnlineId, ss58_encode


class TestPackagedTable:
    """The table shipped with the package."""

    def test_root_key(self) -> None:
        """The sudo account of the public testnet."""
        table = load_staging_key_table()
        assert ss58_encode(table.root_key) == "5Fk6QsYKvDXxdXumGdHnNQ7V7FziREy6qn8WjDLEWF8WsbU3"

    def test_authorities(self) -> None:
        """Two named operators with their published stash addresses."""
        table = load_staging_key_table()

        assert [entry.name for entry in table.authorities] == [
            "Dysfunctional-ducks",
            "Happy-hyena",
        ]
        stashes = [ss58_encode(keys.stash) for keys in table.authority_keys()]
        assert stashes == [
            "5H3zGEK9bhxJ8j7vLbHRqVhTxiwwbvbVEoef2x1uREAQjawf",
            "5DXMntk2YmRPSVZQLQwXkvsxAWP2WMhnbbpTQJjMgHNpx7zH",
        ]
        assert table.authority_keys()[1].im_online == ImOnlineId(
            "0xa2d07e5543dfc05f5ed390e8d87c98d3d6f44e9cb3db49c0415fdce4a5dd437e"
        )

    def test_loaded_once(self) -> None:
        """Repeated lookups share one parsed table."""
        assert load_staging_key_table() is load_staging_key_table()


def test_malformed_table_is_rejected(tmp_path: Path) -> None:
    """A table with a short key does not load."""
    path = tmp_path / "bad.yaml"
    path.write_text('root_key: "0x1234"\nauthorities: []\n')

    with pytest.raises(ValidationError):
        StagingKeyTable.from_yaml_file(path)
