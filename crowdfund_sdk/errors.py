"""Session and submission error types for the Crowdfund SDK."""

from dataclasses import dataclass
from typing import List

from solders.pubkey import Pubkey

from .program.errors import CrowdfundError


class WalletUnavailableError(CrowdfundError):
    """No signing capability is present."""

    def __init__(self):
        super().__init__("Wallet not found: no signing capability is available")


class WalletRejectedError(CrowdfundError):
    """The wallet refused to connect or to sign."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"Wallet rejected request: {message}")


class NotConnectedError(CrowdfundError):
    """Operation requires a connected wallet session."""

    def __init__(self):
        super().__init__("Not connected: connect a wallet first")


class EndpointUnreachableError(CrowdfundError):
    """The RPC endpoint or commitment level is malformed."""

    def __init__(self, endpoint: str, message: str):
        self.endpoint = endpoint
        self.message = message
        super().__init__(f"Endpoint unreachable: {endpoint!r} ({message})")


class InstructionRejectedError(CrowdfundError):
    """A mutating instruction was declined, rejected or failed on-chain."""

    def __init__(self, instruction: str, reason: str):
        self.instruction = instruction
        self.reason = reason
        super().__init__(f"Instruction {instruction} rejected: {reason}")


@dataclass
class SkippedAccount:
    """A program-owned account left out of a campaign listing."""

    address: Pubkey
    reason: str


class PartialListingError(CrowdfundError):
    """Some accounts could not be decoded while listing campaigns."""

    def __init__(self, skipped: List[SkippedAccount]):
        self.skipped = skipped
        super().__init__(
            f"Skipped {len(skipped)} undecodable account(s): "
            + ", ".join(str(s.address) for s in skipped)
        )
