"""Utility functions for the crowdfunding program module."""

import struct
from typing import Tuple

from Crypto.Hash import SHA256
from solders.pubkey import Pubkey

U64_MAX = 18446744073709551615


def sha256(data: bytes) -> bytes:
    """Compute sha256 hash of data."""
    h = SHA256.new()
    h.update(data)
    return h.digest()


def anchor_discriminator(namespace: str, name: str) -> bytes:
    """Compute an Anchor discriminator.

    discriminator = sha256("{namespace}:{name}")[:8]

    Accounts use the "account" namespace with the struct name, instructions
    use the "global" namespace with the snake_case handler name.
    """
    return sha256(f"{namespace}:{name}".encode("utf-8"))[:8]


def encode_u32(value: int) -> bytes:
    """Encode an unsigned 32-bit integer (little-endian).

    Raises:
        ValueError: If value is out of range [0, 4294967295]
    """
    if not 0 <= value <= 4294967295:
        raise ValueError(f"u32 value out of range: {value} (must be 0-4294967295)")
    return struct.pack("<I", value)


def encode_u64(value: int) -> bytes:
    """Encode an unsigned 64-bit integer (little-endian).

    Raises:
        ValueError: If value is out of range [0, 2^64-1]
    """
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"u64 value out of range: {value} (must be 0-{U64_MAX})")
    return struct.pack("<Q", value)


def decode_u32(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 32-bit integer (little-endian)."""
    return struct.unpack_from("<I", data, offset)[0]


def decode_u64(data: bytes, offset: int = 0) -> int:
    """Decode an unsigned 64-bit integer (little-endian)."""
    return struct.unpack_from("<Q", data, offset)[0]


def decode_pubkey(data: bytes, offset: int = 0) -> Pubkey:
    """Decode a Pubkey from 32 bytes.

    Raises:
        ValueError: If not enough bytes available for Pubkey
    """
    if offset + 32 > len(data):
        raise ValueError(
            f"Not enough bytes for Pubkey at offset {offset}: "
            f"need 32 bytes, have {len(data) - offset}"
        )
    return Pubkey.from_bytes(data[offset : offset + 32])


def encode_string(s: str, max_len: int) -> bytes:
    """Encode a string the way Borsh does.

    Format: [length (4 bytes LE)][utf-8 bytes]
    """
    encoded = s.encode("utf-8")
    if len(encoded) > max_len:
        raise ValueError(f"String too long: {len(encoded)} > {max_len}")
    return encode_u32(len(encoded)) + encoded


def decode_string(data: bytes, offset: int, max_len: int) -> Tuple[str, int]:
    """Decode a Borsh string.

    Returns the string and the offset just past it.

    Raises:
        ValueError: If the length prefix or body runs past the data, the
            length exceeds max_len, or the body is not valid UTF-8
    """
    if offset + 4 > len(data):
        raise ValueError(f"Not enough bytes for string length at offset {offset}")
    length = decode_u32(data, offset)
    if length > max_len:
        raise ValueError(f"String too long: {length} > {max_len}")
    start = offset + 4
    end = start + length
    if end > len(data):
        raise ValueError(
            f"Not enough bytes for string at offset {start}: "
            f"need {length} bytes, have {len(data) - start}"
        )
    return bytes(data[start:end]).decode("utf-8"), end


def validate_amount(amount: int) -> None:
    """Validate that an amount is a strictly positive u64."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise ValueError(f"Amount must be an integer number of lamports, got {amount!r}")
    if amount <= 0:
        raise ValueError(f"Amount must be positive: {amount}")
    if amount > U64_MAX:
        raise ValueError(f"Amount exceeds u64 range: {amount}")

