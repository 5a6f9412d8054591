"""Account keys, addresses and validator identity derivation."""

from .authority import (
    AuthorityKeys,
    account_from_text,
    authority_keys_from_seed,
    get_account_id_from_seed,
    get_from_seed,
    inspect_key,
)
from .derivation import DEV_PHRASE, Ed25519Pair, SecretUri
from .ss58 import DEFAULT_SS58_PREFIX, ss58_decode, ss58_encode
from .types import (
    AccountId,
    AuthorityDiscoveryId,
    BabeId,
    GrandpaId,
    ImOnlineId,
    KeyTypeId,
)

__all__ = [
    "AccountId",
    "account_from_text",
    "AuthorityDiscoveryId",
    "AuthorityKeys",
    "BabeId",
    "DEFAULT_SS58_PREFIX",
    "DEV_PHRASE",
    "Ed25519Pair",
    "GrandpaId",
    "ImOnlineId",
    "KeyTypeId",
    "SecretUri",
    "authority_keys_from_seed",
    "get_account_id_from_seed",
    "get_from_seed",
    "inspect_key",
    "ss58_decode",
    "ss58_encode",
]
