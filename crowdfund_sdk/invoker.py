"""Submission of the create, donate and withdraw instructions."""

import logging
from typing import List, Optional, Tuple

from solana.exceptions import SolanaRpcException
from solana.rpc.async_api import AsyncClient
from solana.rpc.core import (
    RPCException,
    TransactionExpiredBlockheightExceededError,
    UnconfirmedTxError,
)
from solders.instruction import Instruction
from solders.message import Message
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from .config import DEFAULT_COMMITMENT
from .connection import resolve_commitment
from .errors import InstructionRejectedError, NotConnectedError
from .program.constants import CAMPAIGN_SEED, MAX_DESCRIPTION_LEN, MAX_NAME_LEN, PROGRAM_ID
from .program.instructions import build_instruction
from .program.pda import derive_campaign_address
from .program.types import CreateCampaign, Donate, MutatingInstruction, Withdraw
from .program.utils import validate_amount
from .wallet import WalletSession

logger = logging.getLogger(__name__)

SUBMISSION_ERRORS = (
    RPCException,
    SolanaRpcException,
    UnconfirmedTxError,
    TransactionExpiredBlockheightExceededError,
)


class InstructionInvoker:
    """Builds, signs and confirms the program's mutating instructions.

    Every operation waits for confirmation before returning. None of them
    refresh the campaign listing; sequencing a refresh is up to the caller.
    """

    def __init__(
        self,
        session: WalletSession,
        connection: AsyncClient,
        program_id: Pubkey = PROGRAM_ID,
        namespace_tag: bytes = CAMPAIGN_SEED,
        commitment: Optional[str] = DEFAULT_COMMITMENT,
    ):
        self.session = session
        self.connection = connection
        self.program_id = program_id
        self.namespace_tag = namespace_tag
        self.commitment = resolve_commitment(commitment)

    def campaign_address(self, owner: Pubkey) -> Pubkey:
        """Get the campaign PDA for an owner."""
        return derive_campaign_address(owner, self.namespace_tag, self.program_id)

    async def create(self, name: str, description: str) -> Tuple[Pubkey, Signature]:
        """Create the connected signer's campaign.

        Returns:
            The campaign address and the confirmed transaction signature

        Raises:
            NotConnectedError: If no wallet is connected
            ValueError: If name or description is too long
            InstructionRejectedError: If signing, sending or execution fails
        """
        signer = self.session.require_signer()
        _validate_text("name", name, MAX_NAME_LEN)
        _validate_text("description", description, MAX_DESCRIPTION_LEN)

        campaign = self.campaign_address(signer.pubkey)
        signature = await self._submit(
            CreateCampaign(
                campaign=campaign,
                signer=signer.pubkey,
                name=name,
                description=description,
            )
        )
        logger.info(f"Created a new campaign with address: {campaign}")
        return campaign, signature

    async def donate(self, campaign: Pubkey, amount: int) -> Signature:
        """Donate lamports to a campaign.

        Raises:
            NotConnectedError: If no wallet is connected
            ValueError: If amount is not a positive u64
            InstructionRejectedError: If signing, sending or execution fails
        """
        signer = self.session.require_signer()
        validate_amount(amount)

        signature = await self._submit(
            Donate(campaign=campaign, signer=signer.pubkey, amount=amount)
        )
        logger.info(f"Donated {amount} lamports to: {campaign}")
        return signature

    async def withdraw(self, campaign: Pubkey, amount: int) -> Signature:
        """Withdraw lamports from a campaign the signer administers.

        Raises:
            NotConnectedError: If no wallet is connected
            ValueError: If amount is not a positive u64
            InstructionRejectedError: If signing, sending or execution fails
        """
        signer = self.session.require_signer()
        validate_amount(amount)

        signature = await self._submit(
            Withdraw(campaign=campaign, signer=signer.pubkey, amount=amount)
        )
        logger.info(f"Withdrew {amount} lamports from: {campaign}")
        return signature

    # =========================================================================
    # Internal Helpers
    # =========================================================================

    async def _submit(self, instruction: MutatingInstruction) -> Signature:
        kind = _kind(instruction)
        ix = build_instruction(instruction, self.program_id)

        try:
            transaction, last_valid_block_height = await self._build_transaction(
                [ix], instruction.signer
            )
        except SUBMISSION_ERRORS as e:
            raise InstructionRejectedError(kind, str(e)) from e

        try:
            signature = await self.session.sign_and_send(transaction, self.connection)
        except NotConnectedError:
            raise
        except Exception as e:
            raise InstructionRejectedError(kind, str(e)) from e

        try:
            response = await self.connection.confirm_transaction(
                signature,
                self.commitment,
                last_valid_block_height=last_valid_block_height,
            )
        except SUBMISSION_ERRORS as e:
            raise InstructionRejectedError(kind, str(e)) from e

        status = response.value[0] if response.value else None
        if status is None:
            raise InstructionRejectedError(kind, f"transaction {signature} not found")
        if status.err is not None:
            raise InstructionRejectedError(kind, f"transaction {signature} failed: {status.err}")

        return signature

    async def _build_transaction(
        self, instructions: List[Instruction], payer: Pubkey
    ) -> Tuple[Transaction, int]:
        """Build an unsigned transaction paid for by the signer."""
        response = await self.connection.get_latest_blockhash()
        blockhash = response.value.blockhash

        message = Message.new_with_blockhash(instructions, payer, blockhash)

        return Transaction.new_unsigned(message), response.value.last_valid_block_height


def _kind(instruction: MutatingInstruction) -> str:
    if isinstance(instruction, CreateCampaign):
        return "create"
    if isinstance(instruction, Donate):
        return "donate"
    return "withdraw"


def _validate_text(field_name: str, value: str, max_len: int) -> None:
    encoded = value.encode("utf-8")
    if len(encoded) > max_len:
        raise ValueError(f"Campaign {field_name} too long: {len(encoded)} > {max_len}")
