"""
Shared pytest fixtures for all labor_spec tests.

Development identities are derived once per session.
"""

from __future__ import annotations

import pytest

from labor_spec.subspecs.keys import (
    AccountId,
    AuthorityKeys,
    authority_keys_from_seed,
    get_account_id_from_seed,
)


@pytest.fixture(scope="session")
def alice() -> AuthorityKeys:
    """Alice's development authority bundle."""
    return authority_keys_from_seed("Alice")


@pytest.fixture(scope="session")
def bob() -> AuthorityKeys:
    """Bob's development authority bundle."""
    return authority_keys_from_seed("Bob")


@pytest.fixture(scope="session")
def alice_account() -> AccountId:
    """Alice's development account."""
    return get_account_id_from_seed("Alice")
