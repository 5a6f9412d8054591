"""
Participant set construction.

Every account that receives a genesis balance appears in the participant
set exactly once. Order matters: committees are filled from the front of
the set, so two nodes must agree on it byte for byte.

The order is first-seen:

1. The root (sudo) account.
2. The explicit endowment list, or the development roster when none is given.
3. Validator stash accounts, then nominators.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from labor_spec.subspecs.keys import AccountId, get_account_id_from_seed

from .constants import DEV_SEEDS

logger = logging.getLogger(__name__)


class AccountSet:
    """
    An insertion-ordered set of accounts.

    Membership is keyed by the raw account bytes. Adding an account that
    is already present is a no-op and does not move it.
    """

    __slots__ = ("_accounts",)

    def __init__(self, accounts: Iterable[AccountId] = ()) -> None:
        self._accounts: dict[bytes, AccountId] = {}
        self.extend(accounts)

    def add(self, account: AccountId) -> bool:
        """Append `account` unless present. Returns True if it was added."""
        key = bytes(account)
        if key in self._accounts:
            return False
        self._accounts[key] = account
        return True

    def extend(self, accounts: Iterable[AccountId]) -> None:
        """Add each account in order, skipping those already present."""
        for account in accounts:
            self.add(account)

    def first_half(self) -> list[AccountId]:
        """The first ceil(n/2) accounts, in order."""
        return list(self)[: (len(self) + 1) // 2]

    def __contains__(self, account: object) -> bool:
        return isinstance(account, bytes) and bytes(account) in self._accounts

    def __iter__(self) -> Iterator[AccountId]:
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __repr__(self) -> str:
        return f"AccountSet({len(self)} accounts)"


def default_endowed_accounts() -> list[AccountId]:
    """
    The development roster: every development seed, then each seed's stash.

    Alice, Bob, Charlie, Dave, Eve, Ferdie, Alice//stash, ..., Ferdie//stash.
    """
    return [get_account_id_from_seed(seed) for seed in DEV_SEEDS] + [
        get_account_id_from_seed(f"{seed}//stash") for seed in DEV_SEEDS
    ]


def build_participant_set(
    root: AccountId,
    explicit: Sequence[AccountId] | None,
    implied: Iterable[AccountId],
) -> AccountSet:
    """
    Merge the root, the endowment list and the staking accounts.

    Args:
        root: The sudo account. Always present, always first.
        explicit: Accounts to endow. `None` selects the development roster.
        implied: Validator stashes followed by nominators.

    Returns:
        A deduplicated, first-seen-ordered participant set.
    """
    accounts = AccountSet([root])
    accounts.extend(default_endowed_accounts() if explicit is None else explicit)

    before = len(accounts)
    accounts.extend(implied)
    logger.debug(
        "Participant set: %d accounts (%d added for stakers)",
        len(accounts),
        len(accounts) - before,
    )
    return accounts
