"""On-chain program interaction module for the Crowdfund SDK.

This module provides the account layouts, address derivation and
instruction builders for the crowdfunding program on Solana.
"""

from .accounts import deserialize_campaign
from .constants import (
    CAMPAIGN_DISCRIMINATOR,
    CAMPAIGN_SEED,
    INSTRUCTION_CREATE,
    INSTRUCTION_DONATE,
    INSTRUCTION_WITHDRAW,
    LAMPORTS_PER_SOL,
    MAX_DESCRIPTION_LEN,
    MAX_NAME_LEN,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
)
from .errors import (
    AccountNotFoundError,
    AddressDerivationError,
    CrowdfundError,
    InvalidAccountDataError,
    InvalidDiscriminatorError,
)
from .instructions import (
    build_create_instruction,
    build_donate_instruction,
    build_instruction,
    build_withdraw_instruction,
)
from .pda import derive_campaign_address, find_program_address, get_campaign_pda
from .types import (
    Campaign,
    CampaignAccount,
    CreateCampaign,
    Donate,
    MutatingInstruction,
    Withdraw,
)

__all__ = [
    # Constants
    "PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "CAMPAIGN_SEED",
    "CAMPAIGN_DISCRIMINATOR",
    "INSTRUCTION_CREATE",
    "INSTRUCTION_DONATE",
    "INSTRUCTION_WITHDRAW",
    "LAMPORTS_PER_SOL",
    "MAX_NAME_LEN",
    "MAX_DESCRIPTION_LEN",
    # Errors
    "CrowdfundError",
    "AccountNotFoundError",
    "AddressDerivationError",
    "InvalidAccountDataError",
    "InvalidDiscriminatorError",
    # Types
    "Campaign",
    "CampaignAccount",
    "CreateCampaign",
    "Donate",
    "Withdraw",
    "MutatingInstruction",
    # Account Deserialization
    "deserialize_campaign",
    # PDA Functions
    "find_program_address",
    "get_campaign_pda",
    "derive_campaign_address",
    # Instruction Builders
    "build_create_instruction",
    "build_donate_instruction",
    "build_withdraw_instruction",
    "build_instruction",
]
