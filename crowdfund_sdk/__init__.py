"""Crowdfund SDK - Python client for a crowdfunding program on Solana.

This SDK provides:
- `program`: account layouts, PDA derivation and instruction builders
- a wallet session, campaign registry and instruction invoker on top of it

Example:
    from crowdfund_sdk import CrowdfundClient, KeypairWallet

    # Or import from specific modules
    from crowdfund_sdk.program import get_campaign_pda, PROGRAM_ID
"""

__version__ = "0.1.0"

# ============================================================================
# MODULE IMPORTS
# ============================================================================

from . import program

# ============================================================================
# CONVENIENCE RE-EXPORTS FROM PROGRAM MODULE
# ============================================================================

from .program import (
    # Constants
    CAMPAIGN_SEED,
    LAMPORTS_PER_SOL,
    PROGRAM_ID,
    SYSTEM_PROGRAM_ID,
    # Errors
    AccountNotFoundError,
    AddressDerivationError,
    CrowdfundError,
    InvalidAccountDataError,
    InvalidDiscriminatorError,
    # Types
    Campaign,
    CampaignAccount,
    CreateCampaign,
    Donate,
    MutatingInstruction,
    Withdraw,
    # Functions
    build_create_instruction,
    build_donate_instruction,
    build_instruction,
    build_withdraw_instruction,
    derive_campaign_address,
    deserialize_campaign,
    get_campaign_pda,
)

# ============================================================================
# ORCHESTRATION
# ============================================================================

from .client import CrowdfundClient
from .config import DEFAULT_CLUSTER, DEFAULT_COMMITMENT, CrowdfundConfig
from .connection import cluster_api_url, create_connection
from .errors import (
    EndpointUnreachableError,
    InstructionRejectedError,
    NotConnectedError,
    PartialListingError,
    SkippedAccount,
    WalletRejectedError,
    WalletUnavailableError,
)
from .invoker import InstructionInvoker
from .registry import CampaignRegistry, CampaignRegistryClient, list_campaigns
from .reporter import (
    CollectingErrorReporter,
    ErrorReport,
    ErrorReporter,
    LoggingErrorReporter,
    NullErrorReporter,
)
from .wallet import (
    KeypairWallet,
    SessionState,
    SignerIdentity,
    WalletAdapter,
    WalletSession,
)

__all__ = [
    "__version__",
    "program",
    # Constants
    "PROGRAM_ID",
    "SYSTEM_PROGRAM_ID",
    "CAMPAIGN_SEED",
    "LAMPORTS_PER_SOL",
    "DEFAULT_CLUSTER",
    "DEFAULT_COMMITMENT",
    # Errors
    "CrowdfundError",
    "AccountNotFoundError",
    "AddressDerivationError",
    "InvalidAccountDataError",
    "InvalidDiscriminatorError",
    "WalletUnavailableError",
    "WalletRejectedError",
    "NotConnectedError",
    "EndpointUnreachableError",
    "InstructionRejectedError",
    "PartialListingError",
    "SkippedAccount",
    # Types
    "Campaign",
    "CampaignAccount",
    "CreateCampaign",
    "Donate",
    "Withdraw",
    "MutatingInstruction",
    "SignerIdentity",
    "SessionState",
    # Program functions
    "deserialize_campaign",
    "get_campaign_pda",
    "derive_campaign_address",
    "build_create_instruction",
    "build_donate_instruction",
    "build_withdraw_instruction",
    "build_instruction",
    # Orchestration
    "CrowdfundClient",
    "CrowdfundConfig",
    "create_connection",
    "cluster_api_url",
    "WalletAdapter",
    "KeypairWallet",
    "WalletSession",
    "CampaignRegistry",
    "CampaignRegistryClient",
    "list_campaigns",
    "InstructionInvoker",
    "ErrorReporter",
    "ErrorReport",
    "LoggingErrorReporter",
    "CollectingErrorReporter",
    "NullErrorReporter",
]
