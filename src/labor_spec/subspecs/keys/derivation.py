"""
Secret URIs and hierarchical Ed25519 key derivation.

A secret URI (SURI) names a key as a root phrase plus a derivation path::

    <phrase>(//hard|/soft)*(///password)?

    "//Alice"                 development phrase, hard junction "Alice"
    "//Alice//stash"          two hard junctions
    "0x<64 hex>//validator"   raw 32-byte seed, one hard junction
    "some words///secret"     phrase with a password, no path

An empty phrase stands for the well-known development phrase, which is
what makes `//Alice` the same key on every machine.

DERIVATION
----------
1. Root seed: a `0x` phrase is taken as the raw 32-byte seed. Any other
   phrase is stretched BIP39-style with PBKDF2-HMAC-SHA512 (salt
   `"mnemonic" + password`, 2048 rounds), keeping the first 32 bytes.

2. Each junction becomes a 32-byte chain code. Numeric junctions encode as
   little-endian u64, other text as a SCALE string. Codes longer than 32
   bytes are BLAKE2b-256 hashed, shorter ones are zero-padded.

3. A hard junction replaces the seed with::

       BLAKE2b-256(SCALE("Ed25519HDKD") ++ seed ++ chain_code)

Ed25519 has no soft derivation. Soft junctions are rejected.

The derivation is one-way: knowing `//Alice//stash` reveals nothing about
the key of `//Alice`.
"""

from __future__ import annotations

import hashlib
import re
import unicodedata
from dataclasses import dataclass
from typing import Final

from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey
from cryptography.hazmat.primitives.serialization import Encoding, PublicFormat

from labor_spec.types import KeyDerivationError

from .scale import encode_str
from .types import KeyTypeId

DEV_PHRASE: Final = "bottom drive obey lake curtain smoke basket hold race lonely fit walk"
"""Publicly known phrase behind every development account. Never use on a live chain."""

JUNCTION_ID_LENGTH: Final = 32
"""Length of a junction chain code in bytes."""

HDKD_CONTEXT: Final = encode_str("Ed25519HDKD")
"""SCALE-encoded domain separator for hard derivation."""

PBKDF2_ROUNDS: Final = 2048
"""Phrase stretching rounds."""

SESSION_KEY_PERSONAL: Final = b"session-key-"
"""BLAKE2b personalization prefix for role keys, completed by the 4-byte key type id."""

_SURI_RE: Final = re.compile(
    r"^(?P<phrase>[\w ]+)?(?P<path>(//?[^/]+)*)(///(?P<password>.*))?$",
    re.UNICODE,
)
_JUNCTION_RE: Final = re.compile(r"/(/?[^/]+)")


@dataclass(frozen=True, slots=True)
class DeriveJunction:
    """One derivation step: a 32-byte chain code and whether it is hard."""

    chain_code: bytes
    hard: bool

    @classmethod
    def parse(cls, text: str) -> DeriveJunction:
        """
        Parse one path segment, as captured between slashes.

        A segment with a leading `/` (from `//name`) is hard.
        """
        hard = text.startswith("/")
        name = text[1:] if hard else text
        return cls(chain_code=cls.chain_code_of(name), hard=hard)

    @staticmethod
    def chain_code_of(name: str) -> bytes:
        """Compute the 32-byte chain code of a junction name."""
        if name.isascii() and name.isdigit() and int(name) < 2**64:
            encoded = int(name).to_bytes(8, "little")
        else:
            encoded = encode_str(name)

        if len(encoded) > JUNCTION_ID_LENGTH:
            return hashlib.blake2b(encoded, digest_size=JUNCTION_ID_LENGTH).digest()
        return encoded.ljust(JUNCTION_ID_LENGTH, b"\x00")


@dataclass(frozen=True, slots=True)
class SecretUri:
    """A parsed secret URI."""

    phrase: str
    """The root phrase, or a `0x` hex seed. Empty means the development phrase."""

    junctions: tuple[DeriveJunction, ...]
    """Derivation path, applied left to right."""

    password: str | None
    """Optional password mixed into phrase stretching."""

    @classmethod
    def parse(cls, suri: str) -> SecretUri:
        """
        Split a secret URI into phrase, path and password.

        Raises:
            KeyDerivationError: If the text does not match the SURI grammar.
        """
        match = _SURI_RE.match(suri)
        if match is None:
            raise KeyDerivationError(suri, "not a valid secret URI")

        junctions = tuple(
            DeriveJunction.parse(segment) for segment in _JUNCTION_RE.findall(match["path"])
        )
        return cls(
            phrase=(match["phrase"] or "").strip(),
            junctions=junctions,
            password=match["password"],
        )


@dataclass(frozen=True, slots=True)
class Ed25519Pair:
    """An Ed25519 key pair identified by its 32-byte secret seed."""

    seed: bytes

    @classmethod
    def from_phrase(cls, phrase: str, password: str | None = None) -> Ed25519Pair:
        """
        Build the root pair of a phrase.

        Raises:
            KeyDerivationError: If a `0x` seed is not 32 bytes of valid hex.
        """
        if not phrase:
            phrase = DEV_PHRASE

        if phrase.startswith("0x"):
            try:
                seed = bytes.fromhex(phrase[2:])
            except ValueError as e:
                raise KeyDerivationError(phrase, f"invalid hex seed: {e}") from e
            if len(seed) != 32:
                raise KeyDerivationError(phrase, f"hex seed must be 32 bytes, got {len(seed)}")
            return cls(seed)

        normalized = unicodedata.normalize("NFKD", phrase)
        salt = unicodedata.normalize("NFKD", "mnemonic" + (password or ""))
        stretched = hashlib.pbkdf2_hmac(
            "sha512", normalized.encode("utf-8"), salt.encode("utf-8"), PBKDF2_ROUNDS
        )
        return cls(stretched[:32])

    @classmethod
    def from_string(cls, suri: str) -> Ed25519Pair:
        """
        Derive the pair named by a secret URI.

        Raises:
            KeyDerivationError: If the URI is malformed or uses a soft junction.
        """
        parsed = SecretUri.parse(suri)
        root = cls.from_phrase(parsed.phrase, parsed.password)
        try:
            return root.derive(parsed.junctions)
        except KeyDerivationError as e:
            # Re-raise against the full URI rather than the bare junction.
            raise KeyDerivationError(suri, e.detail) from e

    def derive(self, junctions: tuple[DeriveJunction, ...]) -> Ed25519Pair:
        """Apply hard junctions in order."""
        seed = self.seed
        for junction in junctions:
            if not junction.hard:
                raise KeyDerivationError(
                    junction.chain_code.rstrip(b"\x00").hex(),
                    "soft derivation is not supported for Ed25519",
                )
            seed = hashlib.blake2b(
                HDKD_CONTEXT + seed + junction.chain_code, digest_size=32
            ).digest()
        return Ed25519Pair(seed)

    def for_role(self, key_type: KeyTypeId) -> Ed25519Pair:
        """
        Derive the session key pair for one role.

        Role keys are domain-separated from the account key and from each
        other, so the four session keys of a seed are pairwise distinct.
        """
        role_seed = hashlib.blake2b(
            self.seed, digest_size=32, person=SESSION_KEY_PERSONAL + key_type.value
        ).digest()
        return Ed25519Pair(role_seed)

    def public(self) -> bytes:
        """Raw 32-byte public key."""
        private_key = Ed25519PrivateKey.from_private_bytes(self.seed)
        return private_key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)
