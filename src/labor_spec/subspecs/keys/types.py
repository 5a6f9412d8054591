"""Account and session key identifier types."""

from __future__ import annotations

from enum import Enum

from labor_spec.types import Bytes32


class KeyTypeId(Enum):
    """
    Four-character identifiers of the session key roles.

    Each role key is derived from the same secret URI as the account key,
    separated by this identifier, so one seed yields five distinct keys.
    """

    GRANDPA = b"gran"
    """Block finality voting."""

    BABE = b"babe"
    """Block production."""

    IM_ONLINE = b"imon"
    """Liveness attestation (heartbeats)."""

    AUTHORITY_DISCOVERY = b"audi"
    """Publishing and finding authority network addresses."""


class AccountId(Bytes32):
    """A 32-byte account identifier (an Ed25519 public key)."""


class GrandpaId(Bytes32):
    """Finality voting public key."""


class BabeId(Bytes32):
    """Block production public key."""


class ImOnlineId(Bytes32):
    """Heartbeat signing public key."""


class AuthorityDiscoveryId(Bytes32):
    """Authority discovery public key."""
