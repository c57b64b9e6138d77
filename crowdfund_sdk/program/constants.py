"""Constants for the crowdfunding program."""

from solders.pubkey import Pubkey

from .utils import anchor_discriminator

# ============================================================================
# PROGRAM IDS
# ============================================================================

PROGRAM_ID = Pubkey.from_string("Fg6PaFpoGXkYsidMpWTK6W2BeZ7FEfcYkg476zPFsLnS")
SYSTEM_PROGRAM_ID = Pubkey.from_string("11111111111111111111111111111111")

# ============================================================================
# PDA SEEDS
# ============================================================================

CAMPAIGN_SEED = b"CAMPAIGN_DEMO"

MAX_SEED_LEN = 32
MAX_SEEDS = 16

# ============================================================================
# DISCRIMINATORS
# ============================================================================

CAMPAIGN_DISCRIMINATOR = anchor_discriminator("account", "Campaign")

INSTRUCTION_CREATE = anchor_discriminator("global", "create")
INSTRUCTION_DONATE = anchor_discriminator("global", "donate")
INSTRUCTION_WITHDRAW = anchor_discriminator("global", "withdraw")

# ============================================================================
# ACCOUNT LAYOUT
# ============================================================================

MAX_NAME_LEN = 64
MAX_DESCRIPTION_LEN = 512

# discriminator + admin + two empty strings + amount
CAMPAIGN_MIN_SIZE = 8 + 32 + 4 + 4 + 8

# ============================================================================
# UNITS
# ============================================================================

LAMPORTS_PER_SOL = 1_000_000_000
