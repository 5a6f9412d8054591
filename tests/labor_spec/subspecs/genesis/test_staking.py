"""Tests for genesis staker assignment."""

from __future__ import annotations

import random

import pytest
from hypothesis import given
from hypothesis import strategies as st
from pydantic import TypeAdapter

from labor_spec.subspecs.genesis import (
    MAX_NOMINATIONS,
    STASH,
    NominatorStatus,
    StakerRecord,
    StakerStatus,
    ValidatorStatus,
    assign_stakers,
    total_stake,
)
from labor_spec.subspecs.genesis.staking import draw_nominations, nomination_limit
from labor_spec.types import Balance
from tests.labor_spec.helpers import make_account, make_authorities


class TestNominationDraw:
    """Random target selection for one nominator."""

    def test_limit(self) -> None:
        """The limit is the smaller of the cap and the validator count."""
        assert nomination_limit(0) == 0
        assert nomination_limit(3) == 3
        assert nomination_limit(100) == MAX_NOMINATIONS

    def test_no_validators_means_no_targets(self) -> None:
        """A zero limit yields an empty target list instead of failing."""
        assert draw_nominations([], random.Random(0)) == []

    def test_single_validator_never_nominated(self) -> None:
        """With one validator the count is drawn modulo 1, which is always 0."""
        stash = make_account(0, "stash")
        rng = random.Random(1)

        assert all(draw_nominations([stash], rng) == [] for _ in range(20))

    @given(st.integers(0, 40), st.integers(0, 2**32))
    def test_targets_are_bounded_distinct_validators(self, n: int, seed: int) -> None:
        """Targets are fewer than the limit, distinct, and all validator stashes."""
        stashes = [make_account(i, "stash") for i in range(n)]
        targets = draw_nominations(stashes, random.Random(seed))

        assert len(targets) < max(1, nomination_limit(n))
        assert len(set(targets)) == len(targets)
        assert set(targets) <= set(stashes)

    def test_seeded_draw_is_reproducible(self) -> None:
        """Equal seeds produce equal targets."""
        stashes = [make_account(i, "stash") for i in range(10)]

        first = draw_nominations(stashes, random.Random(7))
        second = draw_nominations(stashes, random.Random(7))
        assert first == second


class TestAssignStakers:
    """The complete staker list."""

    def test_validators_then_nominators(self) -> None:
        """Validators keep their order and come first."""
        validators = make_authorities(3)
        nominators = [make_account(i, "nominator") for i in range(2)]

        stakers = assign_stakers(validators, nominators, STASH, random.Random(0))

        assert [s.stash for s in stakers[:3]] == [v.stash for v in validators]
        assert [s.controller for s in stakers[:3]] == [v.controller for v in validators]
        assert all(isinstance(s.status, ValidatorStatus) for s in stakers[:3])
        assert [s.stash for s in stakers[3:]] == nominators
        assert all(isinstance(s.status, NominatorStatus) for s in stakers[3:])

    def test_nominator_controls_itself(self) -> None:
        """A nominator's controller is its own stash."""
        nominator = make_account(0, "nominator")
        (staker,) = assign_stakers([], [nominator], STASH, random.Random(0))

        assert staker.controller == nominator
        assert staker.status == NominatorStatus(targets=[])

    def test_unseeded_with_nominators_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        """Non-reproducible output is announced."""
        with caplog.at_level("WARNING"):
            assign_stakers(make_authorities(2), [make_account(0, "nominator")], STASH)

        assert "not reproducible" in caplog.text

    @given(st.integers(0, 20), st.integers(0, 20), st.integers(0, 2**32))
    def test_stake_is_conserved(self, v: int, n: int, seed: int) -> None:
        """Total bonded equals the stash amount times the number of stakers."""
        stakers = assign_stakers(
            make_authorities(v),
            [make_account(i, "nominator") for i in range(n)],
            STASH,
            random.Random(seed),
        )

        assert len(stakers) == v + n
        assert total_stake(stakers) == STASH * Balance(v + n)


class TestStakerStatusSerialization:
    """Staker roles are a tagged union."""

    def test_json_tag(self) -> None:
        """The `kind` field selects the variant on decode."""
        adapter: TypeAdapter[StakerStatus] = TypeAdapter(StakerStatus)
        target = make_account(0, "stash")

        decoded = adapter.validate_json(
            '{"kind": "nominator", "targets": ["0x' + target.hex() + '"]}'
        )
        assert decoded == NominatorStatus(targets=[target])
        assert adapter.validate_json('{"kind": "validator"}') == ValidatorStatus()

    def test_record_round_trip(self) -> None:
        """A record survives JSON."""
        record = StakerRecord(
            stash=make_account(0),
            controller=make_account(0),
            value=STASH,
            status=NominatorStatus(targets=[make_account(1)]),
        )

        assert StakerRecord.model_validate_json(record.model_dump_json()) == record
