"""Tests for participant set construction."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from labor_spec.subspecs.genesis import (
    AccountSet,
    build_participant_set,
    default_endowed_accounts,
)
from labor_spec.subspecs.keys import AccountId, get_account_id_from_seed
from tests.labor_spec.helpers import make_account

indices = st.lists(st.integers(0, 20), max_size=30)
"""Account indices with plenty of repeats."""


class TestAccountSet:
    """Insertion-ordered deduplication."""

    def test_first_occurrence_wins(self) -> None:
        """Re-adding an account neither duplicates nor moves it."""
        a, b = make_account(0), make_account(1)
        accounts = AccountSet([a, b])

        assert accounts.add(a) is False
        assert accounts.add(make_account(2)) is True
        assert list(accounts) == [a, b, make_account(2)]

    def test_contains(self) -> None:
        """Membership is by account bytes."""
        accounts = AccountSet([make_account(0)])

        assert make_account(0) in accounts
        assert make_account(1) not in accounts
        assert "not bytes" not in accounts

    def test_first_half_rounds_up(self) -> None:
        """Odd sizes keep the middle element."""
        for size, half in [(0, 0), (1, 1), (2, 1), (5, 3), (12, 6), (13, 7)]:
            accounts = AccountSet(make_account(i) for i in range(size))
            assert accounts.first_half() == [make_account(i) for i in range(half)]

    @given(indices)
    def test_no_duplicates_and_order_preserved(self, picks: list[int]) -> None:
        """Iteration yields each distinct account once, in first-seen order."""
        accounts = AccountSet(make_account(i) for i in picks)

        expected = [make_account(i) for i in dict.fromkeys(picks)]
        assert list(accounts) == expected
        assert len(accounts) == len(expected)


class TestDefaultEndowedAccounts:
    """The development roster."""

    def test_roster(self) -> None:
        """Six seed accounts followed by their six stashes."""
        roster = default_endowed_accounts()

        assert len(roster) == 12
        assert len(set(roster)) == 12
        assert roster[0] == get_account_id_from_seed("Alice")
        assert roster[5] == get_account_id_from_seed("Ferdie")
        assert roster[6] == get_account_id_from_seed("Alice//stash")
        assert roster[11] == get_account_id_from_seed("Ferdie//stash")


class TestBuildParticipantSet:
    """Merging root, endowment list and stakers."""

    def test_root_comes_first(self) -> None:
        """The root leads even when it is not in the explicit list."""
        root = make_account(99)
        accounts = build_participant_set(root, [make_account(0)], [make_account(1)])

        assert list(accounts) == [root, make_account(0), make_account(1)]

    def test_default_roster_absorbs_development_stakers(self, alice_account: AccountId) -> None:
        """Alice as root and Alice//stash as validator are already in the roster."""
        stash = get_account_id_from_seed("Alice//stash")
        accounts = build_participant_set(alice_account, None, [stash])

        assert len(accounts) == 12
        assert list(accounts) == default_endowed_accounts()

    @given(st.integers(0, 20), st.lists(st.integers(0, 20)), indices)
    def test_everything_is_endowed_exactly_once(
        self, root: int, explicit: list[int], implied: list[int]
    ) -> None:
        """Root, explicit and implied accounts all appear, none twice."""
        accounts = build_participant_set(
            make_account(root),
            [make_account(i) for i in explicit],
            [make_account(i) for i in implied],
        )
        everything = {root, *explicit, *implied}

        assert len(accounts) == len(everything)
        assert all(make_account(i) in accounts for i in everything)
