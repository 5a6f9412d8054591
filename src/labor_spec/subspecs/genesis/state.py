"""Composite genesis state of the Labor runtime."""

from __future__ import annotations

import logging
import random
from typing import Sequence

from pydantic import model_validator

from labor_spec.subspecs.keys import AccountId, AuthorityKeys
from labor_spec.types import Balance, GenesisConfigurationError, StrictBaseModel, Uint32

from .accounts import build_participant_set
from .configs import (
    AuthorityDiscoveryConfig,
    BabeConfig,
    BabeEpochConfiguration,
    BalancesConfig,
    CollectiveConfig,
    ContractsConfig,
    DemocracyConfig,
    ElectionsConfig,
    GiltConfig,
    GrandpaConfig,
    ImOnlineConfig,
    IndicesConfig,
    MembershipConfig,
    Schedule,
    SessionConfig,
    SessionKeys,
    SocietyConfig,
    StakingConfig,
    SudoConfig,
    SystemConfig,
    TreasuryConfig,
    VestingConfig,
)
from .constants import ENDOWMENT, SLASH_REWARD_FRACTION, SOCIETY_MAX_MEMBERS, SOCIETY_POT, STASH
from .staking import NominatorStatus, ValidatorStatus, assign_stakers

logger = logging.getLogger(__name__)


class GenesisState(StrictBaseModel):
    """
    The complete initial state, one section per runtime module.

    Every node of a network must compute this value identically. Sections
    cross-reference each other: stakers, session owners, committee members
    and the sudo key must all hold a genesis balance. Construction checks
    these invariants and refuses to produce an inconsistent state.
    """

    system: SystemConfig
    balances: BalancesConfig
    indices: IndicesConfig
    session: SessionConfig
    staking: StakingConfig
    democracy: DemocracyConfig
    elections: ElectionsConfig
    council: CollectiveConfig
    technical_committee: CollectiveConfig
    contracts: ContractsConfig
    sudo: SudoConfig
    babe: BabeConfig
    im_online: ImOnlineConfig
    authority_discovery: AuthorityDiscoveryConfig
    grandpa: GrandpaConfig
    technical_membership: MembershipConfig
    treasury: TreasuryConfig
    society: SocietyConfig
    vesting: VestingConfig
    gilt: GiltConfig

    @classmethod
    def assemble(
        cls,
        initial_authorities: Sequence[AuthorityKeys],
        initial_nominators: Sequence[AccountId],
        root_key: AccountId,
        endowed_accounts: Sequence[AccountId] | None,
        enable_println: bool,
        rng: random.Random | None = None,
        code: bytes = b"",
    ) -> GenesisState:
        """
        Compose the genesis state in one pass.

        Args:
            initial_authorities: Genesis validators. At least one is required.
            initial_nominators: Genesis nominators. Their targets are drawn from `rng`.
            root_key: The sudo account.
            endowed_accounts: Accounts to endow. `None` endows the development roster.
            enable_println: Allow contract diagnostic output. Development chains only.
            rng: Random source for nomination targets.
            code: Runtime code blob stored in the system section.

        Returns:
            A state satisfying every cross-module invariant.

        Raises:
            GenesisConfigurationError: If there are no authorities or an
                invariant does not hold.
        """
        if not initial_authorities:
            raise GenesisConfigurationError(
                "at least one validator is required", field="initial_authorities"
            )

        # Endow the root, the requested accounts, then every staker.
        stashes = [keys.stash for keys in initial_authorities]
        accounts = build_participant_set(
            root_key, endowed_accounts, [*stashes, *initial_nominators]
        )

        # Validators first, then nominators with random targets.
        stakers = assign_stakers(initial_authorities, initial_nominators, STASH, rng)

        # Governance bodies are seeded from the front half of the participants.
        committee = accounts.first_half()

        num_authorities = Uint32(len(initial_authorities))

        state = cls(
            system=SystemConfig(code=code),
            balances=BalancesConfig(balances=[(account, ENDOWMENT) for account in accounts]),
            indices=IndicesConfig(),
            # Stash doubles as the session key owner and the validator id.
            session=SessionConfig(
                keys=[
                    (
                        keys.stash,
                        keys.stash,
                        SessionKeys(
                            grandpa=keys.grandpa,
                            babe=keys.babe,
                            im_online=keys.im_online,
                            authority_discovery=keys.authority_discovery,
                        ),
                    )
                    for keys in initial_authorities
                ]
            ),
            staking=StakingConfig(
                validator_count=num_authorities * Uint32(2),
                minimum_validator_count=num_authorities,
                invulnerables=stashes,
                slash_reward_fraction=SLASH_REWARD_FRACTION,
                stakers=stakers,
            ),
            democracy=DemocracyConfig(),
            elections=ElectionsConfig(members=[(member, STASH) for member in committee]),
            council=CollectiveConfig(),
            technical_committee=CollectiveConfig(members=committee),
            contracts=ContractsConfig(current_schedule=Schedule(enable_println=enable_println)),
            sudo=SudoConfig(key=root_key),
            # Authority lists are filled by the first session rotation, not here.
            babe=BabeConfig(epoch_config=BabeEpochConfiguration()),
            im_online=ImOnlineConfig(),
            authority_discovery=AuthorityDiscoveryConfig(),
            grandpa=GrandpaConfig(),
            technical_membership=MembershipConfig(),
            treasury=TreasuryConfig(),
            society=SocietyConfig(
                members=committee, pot=SOCIETY_POT, max_members=SOCIETY_MAX_MEMBERS
            ),
            vesting=VestingConfig(),
            gilt=GiltConfig(),
        )

        logger.info(
            "Assembled genesis: %d accounts, %d validators, %d nominators, %d committee members",
            len(accounts),
            len(initial_authorities),
            len(initial_nominators),
            len(committee),
        )
        return state

    @model_validator(mode="after")
    def check_invariants(self) -> GenesisState:
        """
        Verify the cross-module invariants.

        Runs on every construction, including states decoded from a snapshot.
        """
        endowed = {bytes(account): amount for account, amount in self.balances.balances}
        if len(endowed) != len(self.balances.balances):
            raise GenesisConfigurationError("an account is endowed twice", field="balances")

        def require_endowed(account: AccountId, where: str) -> None:
            if bytes(account) not in endowed:
                raise GenesisConfigurationError(
                    f"account 0x{account.hex()} has no genesis balance", field=where
                )

        require_endowed(self.sudo.key, "sudo.key")
        if endowed[bytes(self.sudo.key)] == Balance(0):
            raise GenesisConfigurationError("root account has a zero balance", field="sudo.key")

        if not self.session.keys:
            raise GenesisConfigurationError("no session keys registered", field="session.keys")
        for owner, validator_id, _ in self.session.keys:
            require_endowed(owner, "session.keys")
            require_endowed(validator_id, "session.keys")

        staking = self.staking
        if staking.validator_count < staking.minimum_validator_count:
            raise GenesisConfigurationError(
                f"validator_count {staking.validator_count} is below "
                f"minimum_validator_count {staking.minimum_validator_count}",
                field="staking.validator_count",
            )
        for account in staking.invulnerables:
            require_endowed(account, "staking.invulnerables")

        validator_stashes = {
            bytes(staker.stash)
            for staker in staking.stakers
            if isinstance(staker.status, ValidatorStatus)
        }
        for staker in staking.stakers:
            # Controllers need no genesis balance. The staging ones hold none.
            require_endowed(staker.stash, "staking.stakers")
            if isinstance(staker.status, NominatorStatus):
                targets = [bytes(target) for target in staker.status.targets]
                if len(set(targets)) != len(targets):
                    raise GenesisConfigurationError(
                        f"nominator 0x{staker.stash.hex()} repeats a target",
                        field="staking.stakers",
                    )
                if not validator_stashes.issuperset(targets):
                    raise GenesisConfigurationError(
                        f"nominator 0x{staker.stash.hex()} targets a non-validator",
                        field="staking.stakers",
                    )

        for member, _ in self.elections.members:
            require_endowed(member, "elections.members")
        for member in self.technical_committee.members:
            require_endowed(member, "technical_committee.members")
        for member in self.society.members:
            require_endowed(member, "society.members")

        return self

    def total_issuance(self) -> Balance:
        """Sum of all genesis balances."""
        return sum((amount for _, amount in self.balances.balances), Balance(0))


def testnet_genesis(
    initial_authorities: Sequence[AuthorityKeys],
    initial_nominators: Sequence[AccountId],
    root_key: AccountId,
    endowed_accounts: Sequence[AccountId] | None,
    enable_println: bool,
    rng: random.Random | None = None,
    code: bytes = b"",
) -> GenesisState:
    """Compose a test network genesis. See `GenesisState.assemble`."""
    return GenesisState.assemble(
        initial_authorities,
        initial_nominators,
        root_key,
        endowed_accounts,
        enable_println,
        rng=rng,
        code=code,
    )
