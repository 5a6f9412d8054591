"""
Per-module genesis configurations.

Each runtime module reads its own section of the genesis state. Sections
that start empty still appear, so the serialized state always lists every
module.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from labor_spec.subspecs.keys import (
    AccountId,
    AuthorityDiscoveryId,
    BabeId,
    GrandpaId,
    ImOnlineId,
)
from labor_spec.types import Balance, HexBytes, Perbill, StrictBaseModel, Uint32, Uint64

from .constants import HISTORY_DEPTH, PRIMARY_PROBABILITY
from .staking import StakerRecord


class SystemConfig(StrictBaseModel):
    """Runtime code and storage options."""

    code: HexBytes = HexBytes()
    """Opaque runtime code blob. Empty unless a build supplies one."""

    changes_trie_config: None = None
    """Changes tries are not used."""


class BalancesConfig(StrictBaseModel):
    """Initial free balances."""

    balances: list[tuple[AccountId, Balance]]


class IndicesConfig(StrictBaseModel):
    """Pre-claimed account indices."""

    indices: list[tuple[Uint32, AccountId]] = Field(default_factory=list)


class SessionKeys(StrictBaseModel):
    """The four session keys registered for a validator."""

    grandpa: GrandpaId
    babe: BabeId
    im_online: ImOnlineId
    authority_discovery: AuthorityDiscoveryId


class SessionConfig(StrictBaseModel):
    """Session key registrations as (account, validator id, keys)."""

    keys: list[tuple[AccountId, AccountId, SessionKeys]]


class ForceEra(StrEnum):
    """Era forcing mode of the staking module."""

    NOT_FORCING = "NotForcing"
    FORCE_NEW = "ForceNew"
    FORCE_NONE = "ForceNone"
    FORCE_ALWAYS = "ForceAlways"


class StakingConfig(StrictBaseModel):
    """Validator election parameters and the genesis stakers."""

    history_depth: Uint32 = HISTORY_DEPTH
    validator_count: Uint32
    minimum_validator_count: Uint32
    invulnerables: list[AccountId]
    """Validators exempt from forced rotation and slashing-based removal."""

    force_era: ForceEra = ForceEra.NOT_FORCING
    slash_reward_fraction: Perbill
    canceled_payout: Balance = Balance(0)
    stakers: list[StakerRecord]
    min_nominator_bond: Balance = Balance(0)
    min_validator_bond: Balance = Balance(0)


class DemocracyConfig(StrictBaseModel):
    """Democracy starts with no proposals."""


class ElectionsConfig(StrictBaseModel):
    """Initial elected members with their bonds."""

    members: list[tuple[AccountId, Balance]]


class CollectiveConfig(StrictBaseModel):
    """Members of a governance collective."""

    members: list[AccountId] = Field(default_factory=list)


class MembershipConfig(StrictBaseModel):
    """Members of a membership set."""

    members: list[AccountId] = Field(default_factory=list)


class ScheduleLimits(StrictBaseModel):
    """Bounds enforced on uploaded contract code."""

    event_topics: Uint32 = Uint32(4)
    stack_height: Uint32 = Uint32(512)
    globals: Uint32 = Uint32(256)
    parameters: Uint32 = Uint32(128)
    memory_pages: Uint32 = Uint32(16)
    table_size: Uint32 = Uint32(4096)
    br_table_size: Uint32 = Uint32(256)
    subject_len: Uint32 = Uint32(32)
    code_size: Uint32 = Uint32(128 * 1024)


class Schedule(StrictBaseModel):
    """Contract execution cost schedule."""

    version: Uint32 = Uint32(0)
    enable_println: bool = False
    """Let contracts write diagnostic output. Development chains only."""

    limits: ScheduleLimits = ScheduleLimits()


class ContractsConfig(StrictBaseModel):
    """Contract execution parameters."""

    current_schedule: Schedule


class SudoConfig(StrictBaseModel):
    """The single account with unrestricted override authority."""

    key: AccountId


class AllowedSlots(StrEnum):
    """Which slot kinds may be authored."""

    PRIMARY_SLOTS = "PrimarySlots"
    PRIMARY_AND_SECONDARY_PLAIN_SLOTS = "PrimaryAndSecondaryPlainSlots"
    PRIMARY_AND_SECONDARY_VRF_SLOTS = "PrimaryAndSecondaryVRFSlots"


class BabeEpochConfiguration(StrictBaseModel):
    """Block production parameters of the first epoch."""

    c: tuple[Uint64, Uint64] = PRIMARY_PROBABILITY
    allowed_slots: AllowedSlots = AllowedSlots.PRIMARY_AND_SECONDARY_PLAIN_SLOTS


class BabeConfig(StrictBaseModel):
    """Block production authorities as (key, weight). Empty at genesis."""

    authorities: list[tuple[BabeId, Uint64]] = Field(default_factory=list)
    epoch_config: BabeEpochConfiguration | None = None


class ImOnlineConfig(StrictBaseModel):
    """Heartbeat keys. Empty at genesis."""

    keys: list[ImOnlineId] = Field(default_factory=list)


class AuthorityDiscoveryConfig(StrictBaseModel):
    """Discovery keys. Empty at genesis."""

    keys: list[AuthorityDiscoveryId] = Field(default_factory=list)


class GrandpaConfig(StrictBaseModel):
    """Finality authorities as (key, weight). Empty at genesis."""

    authorities: list[tuple[GrandpaId, Uint64]] = Field(default_factory=list)


class TreasuryConfig(StrictBaseModel):
    """Treasury starts empty."""


class SocietyConfig(StrictBaseModel):
    """Founding society members, pot and membership cap."""

    members: list[AccountId]
    pot: Balance
    max_members: Uint32


class VestingConfig(StrictBaseModel):
    """Vesting schedules as (account, begin, length, liquid)."""

    vesting: list[tuple[AccountId, Uint32, Uint32, Balance]] = Field(default_factory=list)


class GiltConfig(StrictBaseModel):
    """Gilt queues start empty."""
