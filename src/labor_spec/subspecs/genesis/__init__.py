"""Genesis state composition: participants, stakers and the composite state."""

from .accounts import AccountSet, build_participant_set, default_endowed_accounts
from .config import GenesisParams
from .configs import SessionKeys
from .constants import ENDOWMENT, MAX_NOMINATIONS, STASH
from .staking import (
    NominatorStatus,
    StakerRecord,
    StakerStatus,
    ValidatorStatus,
    assign_stakers,
    total_stake,
)
from .state import GenesisState, testnet_genesis

__all__ = [
    "AccountSet",
    "ENDOWMENT",
    "GenesisParams",
    "GenesisState",
    "MAX_NOMINATIONS",
    "NominatorStatus",
    "STASH",
    "SessionKeys",
    "StakerRecord",
    "StakerStatus",
    "ValidatorStatus",
    "assign_stakers",
    "build_participant_set",
    "default_endowed_accounts",
    "testnet_genesis",
    "total_stake",
]
