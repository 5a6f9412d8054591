"""
Genesis staker assignment.

Every genesis validator bonds `STASH` and validates. Every genesis
nominator bonds `STASH` and backs a random subset of the validators.

NOMINATION DRAW
---------------
For each nominator:

    limit   = min(MAX_NOMINATIONS, number of validators)
    count   = random_u64 % limit            (0 when limit is 0)
    targets = `count` distinct validator stashes, sampled without replacement

The count draw takes a 64-bit value modulo `limit`. For limits that are
not a power of two this favours small counts by at most limit / 2^64,
which is far below anything observable.

The random source is an argument. Genesis with nominators is only
reproducible across machines when every operator passes an identically
seeded `random.Random`.
"""

from __future__ import annotations

import logging
import random
from typing import Annotated, Literal, Sequence, Union

from pydantic import Field

from labor_spec.subspecs.keys import AccountId, AuthorityKeys
from labor_spec.types import Balance, StrictBaseModel

from .constants import MAX_NOMINATIONS

logger = logging.getLogger(__name__)


class ValidatorStatus(StrictBaseModel):
    """The staker validates."""

    kind: Literal["validator"] = "validator"


class NominatorStatus(StrictBaseModel):
    """The staker nominates the listed validator stashes."""

    kind: Literal["nominator"] = "nominator"

    targets: list[AccountId]
    """Validator stashes backed by this nominator. Distinct."""


StakerStatus = Annotated[Union[ValidatorStatus, NominatorStatus], Field(discriminator="kind")]
"""Role of a staker. Only nominators carry targets."""


class StakerRecord(StrictBaseModel):
    """One bonded account at genesis."""

    stash: AccountId
    """Account holding the bond."""

    controller: AccountId
    """Account controlling the bond."""

    value: Balance
    """Bonded amount."""

    status: StakerStatus
    """Validator or nominator."""


def nomination_limit(validator_count: int) -> int:
    """Largest number of targets a nominator may draw."""
    return min(MAX_NOMINATIONS, validator_count)


def draw_nominations(validators: Sequence[AccountId], rng: random.Random) -> list[AccountId]:
    """Pick a random-size random subset of `validators`, without repeats."""
    limit = nomination_limit(len(validators))
    if limit == 0:
        return []
    count = rng.getrandbits(64) % limit
    return rng.sample(list(validators), count)


def assign_stakers(
    validators: Sequence[AuthorityKeys],
    nominators: Sequence[AccountId],
    stash_amount: Balance,
    rng: random.Random | None = None,
) -> list[StakerRecord]:
    """
    Build the staker list: validators first, then nominators.

    Args:
        validators: Genesis authorities. Their stashes become validators.
        nominators: Accounts that nominate. Each is its own controller.
        stash_amount: Bond of every staker.
        rng: Random source for nomination targets. A fresh, system-seeded
            generator is used when omitted.

    Returns:
        One record per validator followed by one record per nominator.
    """
    if rng is None:
        if nominators:
            logger.warning(
                "No random seed given: nomination targets of %d nominators are not reproducible",
                len(nominators),
            )
        rng = random.Random()

    stashes = [keys.stash for keys in validators]
    stakers = [
        StakerRecord(
            stash=keys.stash,
            controller=keys.controller,
            value=stash_amount,
            status=ValidatorStatus(),
        )
        for keys in validators
    ]

    for nominator in nominators:
        targets = draw_nominations(stashes, rng)
        logger.debug("Nominator %s backs %d validators", nominator.hex()[:16], len(targets))
        stakers.append(
            StakerRecord(
                stash=nominator,
                controller=nominator,
                value=stash_amount,
                status=NominatorStatus(targets=targets),
            )
        )

    return stakers


def total_stake(stakers: Sequence[StakerRecord]) -> Balance:
    """Sum of all bonds."""
    return sum((staker.value for staker in stakers), Balance(0))
