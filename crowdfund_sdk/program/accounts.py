"""Account deserialization for the Crowdfund SDK."""

from .constants import (
    CAMPAIGN_DISCRIMINATOR,
    CAMPAIGN_MIN_SIZE,
    MAX_DESCRIPTION_LEN,
    MAX_NAME_LEN,
)
from .errors import InvalidAccountDataError, InvalidDiscriminatorError
from .types import CampaignAccount
from .utils import decode_pubkey, decode_string, decode_u64


def _validate_discriminator(data: bytes, expected: bytes, name: str) -> None:
    """Validate account discriminator."""
    if len(data) < 8:
        raise InvalidAccountDataError(f"{name} data too short: {len(data)} bytes")
    actual = bytes(data[:8])
    if actual != expected:
        raise InvalidDiscriminatorError(expected, actual)


def deserialize_campaign(data: bytes) -> CampaignAccount:
    """Deserialize a Campaign account.

    Layout (variable, Borsh):
    - [0..8]: discriminator (sha256("account:Campaign")[:8])
    - [8..40]: admin (Pubkey)
    - name (u32 LE length + utf-8)
    - description (u32 LE length + utf-8)
    - amount_donated (u64 LE)
    - trailing bytes are allocation padding and ignored
    """
    _validate_discriminator(data, CAMPAIGN_DISCRIMINATOR, "Campaign")

    if len(data) < CAMPAIGN_MIN_SIZE:
        raise InvalidAccountDataError(
            f"Campaign data too short: {len(data)} bytes (expected at least {CAMPAIGN_MIN_SIZE})"
        )

    try:
        admin = decode_pubkey(data, 8)
        name, offset = decode_string(data, 40, MAX_NAME_LEN)
        description, offset = decode_string(data, offset, MAX_DESCRIPTION_LEN)
    except ValueError as e:
        raise InvalidAccountDataError(f"Campaign {e}") from e

    if offset + 8 > len(data):
        raise InvalidAccountDataError(
            f"Campaign data too short for amount_donated at offset {offset}"
        )

    return CampaignAccount(
        admin=admin,
        name=name,
        description=description,
        amount_donated=decode_u64(data, offset),
    )
