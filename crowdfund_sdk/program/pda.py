"""PDA (Program Derived Address) derivation functions for the Crowdfund SDK."""

from typing import List, Tuple

from solders.pubkey import Pubkey

from .constants import CAMPAIGN_SEED, MAX_SEED_LEN, MAX_SEEDS, PROGRAM_ID
from .errors import AddressDerivationError


def _validate_seeds(seeds: List[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise AddressDerivationError(
            f"too many seeds: {len(seeds)} (maximum: {MAX_SEEDS})"
        )
    for i, seed in enumerate(seeds):
        if len(seed) > MAX_SEED_LEN:
            raise AddressDerivationError(
                f"seed {i} is {len(seed)} bytes (maximum: {MAX_SEED_LEN})"
            )


def find_program_address(
    seeds: List[bytes],
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Find a program address and its bump seed.

    Raises:
        AddressDerivationError: If the seeds can never produce an address
    """
    _validate_seeds(seeds)
    return Pubkey.find_program_address(seeds, program_id)


def get_campaign_pda(
    owner: Pubkey,
    namespace_tag: bytes = CAMPAIGN_SEED,
    program_id: Pubkey = PROGRAM_ID,
) -> Tuple[Pubkey, int]:
    """Derive the campaign PDA for an owner.

    Seeds: [namespace_tag, owner]
    """
    return find_program_address([namespace_tag, bytes(owner)], program_id)


def derive_campaign_address(
    owner: Pubkey,
    namespace_tag: bytes = CAMPAIGN_SEED,
    program_id: Pubkey = PROGRAM_ID,
) -> Pubkey:
    """Derive only the campaign address, dropping the bump."""
    pda, _ = get_campaign_pda(owner, namespace_tag, program_id)
    return pda
