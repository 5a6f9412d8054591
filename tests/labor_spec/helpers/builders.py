"""
Builders for synthetic genesis inputs.

Real derivation stretches every phrase with PBKDF2. Property tests that
need many distinct identities use these hashed stand-ins instead.
"""

from __future__ import annotations

import hashlib

from labor_spec.subspecs.keys import (
    AccountId,
    AuthorityDiscoveryId,
    AuthorityKeys,
    BabeId,
    GrandpaId,
    ImOnlineId,
)


def _key_bytes(label: str) -> bytes:
    return hashlib.blake2b(label.encode(), digest_size=32).digest()


def make_account(index: int, role: str = "account") -> AccountId:
    """A distinct, stable account id per (role, index)."""
    return AccountId(_key_bytes(f"{role}-{index}"))


def make_authority(index: int) -> AuthorityKeys:
    """A synthetic authority with six distinct keys."""
    return AuthorityKeys(
        stash=make_account(index, "stash"),
        controller=make_account(index, "controller"),
        grandpa=GrandpaId(_key_bytes(f"grandpa-{index}")),
        babe=BabeId(_key_bytes(f"babe-{index}")),
        im_online=ImOnlineId(_key_bytes(f"imon-{index}")),
        authority_discovery=AuthorityDiscoveryId(_key_bytes(f"audi-{index}")),
    )


def make_authorities(count: int) -> list[AuthorityKeys]:
    """`count` synthetic authorities."""
    return [make_authority(i) for i in range(count)]
