"""Type definitions for the crowdfunding program module."""

from dataclasses import dataclass
from typing import Union

from solders.pubkey import Pubkey

from .constants import LAMPORTS_PER_SOL


@dataclass
class CampaignAccount:
    """Campaign account data as stored on-chain."""

    admin: Pubkey
    name: str
    description: str
    amount_donated: int


@dataclass
class Campaign:
    """A campaign together with the address it lives at."""

    address: Pubkey
    name: str
    description: str
    amount_raised: int
    owner: Pubkey

    @classmethod
    def from_account(cls, address: Pubkey, account: CampaignAccount) -> "Campaign":
        """Create from decoded account data."""
        return cls(
            address=address,
            name=account.name,
            description=account.description,
            amount_raised=account.amount_donated,
            owner=account.admin,
        )

    @property
    def amount_raised_sol(self) -> float:
        """Amount raised in SOL, for display."""
        return self.amount_raised / LAMPORTS_PER_SOL


# ============================================================================
# MUTATING INSTRUCTIONS
# ============================================================================


@dataclass(frozen=True)
class CreateCampaign:
    """Create a campaign at the signer's derived address."""

    campaign: Pubkey
    signer: Pubkey
    name: str
    description: str


@dataclass(frozen=True)
class Donate:
    """Move lamports from the signer into a campaign."""

    campaign: Pubkey
    signer: Pubkey
    amount: int


@dataclass(frozen=True)
class Withdraw:
    """Move lamports from a campaign back to its admin."""

    campaign: Pubkey
    signer: Pubkey
    amount: int


MutatingInstruction = Union[CreateCampaign, Donate, Withdraw]
