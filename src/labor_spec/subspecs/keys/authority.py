"""
Validator identity bundles.

A validator is identified by two accounts and four session keys:

- Stash: holds the bonded funds.
- Controller: signs staking operations.
- GRANDPA, BABE, ImOnline, AuthorityDiscovery: one key per consensus role.

Development bundles are derived from a human seed such as "Alice". The
stash comes from `Alice//stash`, everything else from `Alice` itself.
"""

from __future__ import annotations

import logging

from labor_spec.types import StrictBaseModel

from .derivation import Ed25519Pair
from .ss58 import DEFAULT_SS58_PREFIX, ss58_decode, ss58_encode
from .types import (
    AccountId,
    AuthorityDiscoveryId,
    BabeId,
    GrandpaId,
    ImOnlineId,
    KeyTypeId,
)

logger = logging.getLogger(__name__)

STASH_SUFFIX = "//stash"
"""Junction appended to a seed to derive its economically separate stash account."""


class AuthorityKeys(StrictBaseModel):
    """One participant's full consensus identity. Immutable once built."""

    stash: AccountId
    """Account holding the bonded stake."""

    controller: AccountId
    """Account that controls staking operations for the stash."""

    grandpa: GrandpaId
    """Finality voting key."""

    babe: BabeId
    """Block production key."""

    im_online: ImOnlineId
    """Liveness attestation key."""

    authority_discovery: AuthorityDiscoveryId
    """Authority discovery key."""

    def session_key_set(self) -> set[bytes]:
        """The four role keys as plain bytes, for distinctness checks."""
        return {
            bytes(self.grandpa),
            bytes(self.babe),
            bytes(self.im_online),
            bytes(self.authority_discovery),
        }


def get_from_seed(seed: str, key_type: KeyTypeId | None = None) -> bytes:
    """
    Public key of the development seed `seed`, optionally for a session role.

    The seed is interpreted as the hard path `//{seed}` below the
    development phrase.

    Raises:
        KeyDerivationError: If the seed does not form a valid secret URI.
    """
    pair = Ed25519Pair.from_string(f"//{seed}")
    if key_type is not None:
        pair = pair.for_role(key_type)
    return pair.public()


def get_account_id_from_seed(seed: str) -> AccountId:
    """Account id of the development seed `seed`."""
    return AccountId(get_from_seed(seed))


def authority_keys_from_seed(seed: str) -> AuthorityKeys:
    """
    Derive the complete identity bundle of a development validator.

    Deterministic: equal seeds always produce equal bundles.

    Raises:
        KeyDerivationError: If the seed is rejected by key derivation.
    """
    keys = AuthorityKeys(
        stash=get_account_id_from_seed(f"{seed}{STASH_SUFFIX}"),
        controller=get_account_id_from_seed(seed),
        grandpa=GrandpaId(get_from_seed(seed, KeyTypeId.GRANDPA)),
        babe=BabeId(get_from_seed(seed, KeyTypeId.BABE)),
        im_online=ImOnlineId(get_from_seed(seed, KeyTypeId.IM_ONLINE)),
        authority_discovery=AuthorityDiscoveryId(
            get_from_seed(seed, KeyTypeId.AUTHORITY_DISCOVERY)
        ),
    )
    logger.debug("Derived authority %s: stash=%s", seed, ss58_encode(keys.stash))
    return keys


def account_from_text(text: str | int) -> AccountId:
    """
    Resolve an account written in any accepted notation.

    - `0x` followed by 64 hex digits: the raw account id.
    - Starting with `/`: a development secret URI such as `//Alice//stash`.
    - Anything else: an SS58 address.

    YAML loaders turn unquoted `0x...` values into integers. Those are
    converted back to 32-byte hex.

    Raises:
        KeyDerivationError: If a secret URI is rejected.
        AddressError: If an SS58 address is malformed.
        ValueError: If a hex account has the wrong length.
    """
    if isinstance(text, int):
        text = f"0x{text:064x}"
    if text.startswith("0x"):
        return AccountId(text)
    if text.startswith("/"):
        return AccountId(Ed25519Pair.from_string(text).public())
    _, account = ss58_decode(text)
    return account


def inspect_key(suri: str, prefix: int = DEFAULT_SS58_PREFIX) -> dict[str, str]:
    """
    Describe the key named by a secret URI.

    Returns the public key, its SS58 address and the four session keys
    derived from the same secret.

    Raises:
        KeyDerivationError: If the URI is rejected.
    """
    pair = Ed25519Pair.from_string(suri)
    public = pair.public()
    report = {
        "secretUri": suri,
        "publicKey": "0x" + public.hex(),
        "ss58Address": ss58_encode(public, prefix),
    }
    for key_type in KeyTypeId:
        role_public = pair.for_role(key_type).public()
        report[f"sessionKey.{key_type.value.decode()}"] = "0x" + role_public.hex()
    return report
