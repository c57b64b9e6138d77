"""Instruction builders for the Crowdfund SDK.

This module provides functions to build all crowdfunding program instructions.
Each instruction kind has a fixed account list; callers only supply the
campaign, the signer and the arguments.
"""

from solders.instruction import AccountMeta, Instruction
from solders.pubkey import Pubkey

from .constants import (
    INSTRUCTION_CREATE,
    INSTRUCTION_DONATE,
    INSTRUCTION_WITHDRAW,
    MAX_DESCRIPTION_LEN,
    MAX_NAME_LEN,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
)
from .types import CreateCampaign, Donate, MutatingInstruction, Withdraw
from .utils import encode_string, encode_u64, validate_amount


def build_create_instruction(
    campaign: Pubkey,
    user: Pubkey,
    name: str,
    description: str,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the create instruction.

    Accounts:
    0. campaign (writable)
    1. user (signer, writable)
    2. system_program

    Data: [discriminator (8), name (string), description (string)]
    """
    data = bytearray()
    data.extend(INSTRUCTION_CREATE)
    data.extend(encode_string(name, MAX_NAME_LEN))
    data.extend(encode_string(description, MAX_DESCRIPTION_LEN))

    accounts = [
        AccountMeta(pubkey=campaign, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user, is_signer=True, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    return Instruction(program_id=program_id, accounts=accounts, data=bytes(data))


def build_donate_instruction(
    campaign: Pubkey,
    user: Pubkey,
    amount: int,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the donate instruction.

    Accounts:
    0. campaign (writable)
    1. user (signer, writable)
    2. system_program

    Data: [discriminator (8), amount (u64)]
    """
    validate_amount(amount)

    accounts = [
        AccountMeta(pubkey=campaign, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user, is_signer=True, is_writable=True),
        AccountMeta(pubkey=SYSTEM_PROGRAM_ID, is_signer=False, is_writable=False),
    ]

    data = INSTRUCTION_DONATE + encode_u64(amount)

    return Instruction(program_id=program_id, accounts=accounts, data=data)


def build_withdraw_instruction(
    campaign: Pubkey,
    user: Pubkey,
    amount: int,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the withdraw instruction.

    Lamports leave a program-owned account, so no system program is needed.

    Accounts:
    0. campaign (writable)
    1. user (signer, writable)

    Data: [discriminator (8), amount (u64)]
    """
    validate_amount(amount)

    accounts = [
        AccountMeta(pubkey=campaign, is_signer=False, is_writable=True),
        AccountMeta(pubkey=user, is_signer=True, is_writable=True),
    ]

    data = INSTRUCTION_WITHDRAW + encode_u64(amount)

    return Instruction(program_id=program_id, accounts=accounts, data=data)


def build_instruction(
    instruction: MutatingInstruction,
    program_id: Pubkey = PROGRAM_ID,
) -> Instruction:
    """Build the on-chain instruction for a mutating instruction variant."""
    if isinstance(instruction, CreateCampaign):
        return build_create_instruction(
            campaign=instruction.campaign,
            user=instruction.signer,
            name=instruction.name,
            description=instruction.description,
            program_id=program_id,
        )
    if isinstance(instruction, Donate):
        return build_donate_instruction(
            campaign=instruction.campaign,
            user=instruction.signer,
            amount=instruction.amount,
            program_id=program_id,
        )
    if isinstance(instruction, Withdraw):
        return build_withdraw_instruction(
            campaign=instruction.campaign,
            user=instruction.signer,
            amount=instruction.amount,
            program_id=program_id,
        )
    raise TypeError(f"Unknown instruction kind: {type(instruction).__name__}")
