"""
Genesis Constants

Currency units, endowments and the fixed parameters every genesis state of
the Labor network is composed with.
"""

from typing_extensions import Final

from labor_spec.types import Balance, Perbill, Uint32, Uint64

# --- Currency ---

MILLICENTS: Final = Balance(1_000_000_000)
"""One thousandth of a cent, in the smallest token unit."""

CENTS: Final = Balance(1_000) * MILLICENTS
"""One hundredth of a dollar."""

DOLLARS: Final = Balance(100) * CENTS
"""One whole token."""

# --- Endowments ---

ENDOWMENT: Final = Balance(10_000_000) * DOLLARS
"""Free balance given to every account in the participant set."""

STASH: Final = ENDOWMENT // Balance(1_000)
"""Amount bonded by every staker and by every elections member."""

# --- Staking ---

MAX_NOMINATIONS: Final = 16
"""Upper bound on the number of validators one nominator may back."""

SLASH_REWARD_FRACTION: Final = Perbill.from_percent(10)
"""Share of a slashed amount paid to the reporters."""

HISTORY_DEPTH: Final = Uint32(84)
"""Number of eras of staking history kept in state."""

# --- Society ---

SOCIETY_POT: Final = Balance(0)
"""Initial society pot."""

SOCIETY_MAX_MEMBERS: Final = Uint32(999)
"""Membership cap of the society pool."""

# --- Block production ---

PRIMARY_PROBABILITY: Final = (Uint64(1), Uint64(4))
"""Probability that a slot has a primary block author, as (numerator, denominator)."""

# --- Development identities ---

DEV_SEEDS: Final = ("Alice", "Bob", "Charlie", "Dave", "Eve", "Ferdie")
"""Well-known development seeds, in roster order."""
