"""Pytest configuration and shared fixtures."""

import os
import struct
from dataclasses import dataclass
from typing import Dict, List, Optional

import pytest
from solana.rpc.core import RPCException
from solders.hash import Hash
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.transaction import Transaction

from crowdfund_sdk import (
    CAMPAIGN_SEED,
    PROGRAM_ID,
    CollectingErrorReporter,
    KeypairWallet,
    WalletSession,
    deserialize_campaign,
    get_campaign_pda,
)
from crowdfund_sdk.program import (
    CAMPAIGN_DISCRIMINATOR,
    INSTRUCTION_CREATE,
    INSTRUCTION_DONATE,
    INSTRUCTION_WITHDRAW,
    MAX_DESCRIPTION_LEN,
    MAX_NAME_LEN,
)
from crowdfund_sdk.program.utils import decode_string, decode_u64


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (run offline)")
    config.addinivalue_line("markers", "devnet: Integration tests against devnet")


def pytest_collection_modifyitems(config, items):
    """Skip devnet tests unless explicitly requested."""
    run_devnet = config.getoption("-k", default="") and "devnet" in config.getoption("-k", default="")

    for item in items:
        if "test_devnet" in str(item.fspath):
            if not run_devnet and "DEVNET_TESTS" not in os.environ:
                item.add_marker(pytest.mark.skip(reason="Devnet tests skipped by default. Set DEVNET_TESTS=1 or use -k devnet"))


def build_campaign_data(
    admin: Pubkey,
    name: str,
    description: str,
    amount_donated: int,
    padding: int = 0,
) -> bytes:
    """Build Campaign account data for testing."""
    data = bytearray()
    data.extend(CAMPAIGN_DISCRIMINATOR)
    data.extend(bytes(admin))
    for text in (name, description):
        encoded = text.encode("utf-8")
        data.extend(struct.pack("<I", len(encoded)))
        data.extend(encoded)
    data.extend(struct.pack("<Q", amount_donated))
    data.extend(bytes(padding))
    return bytes(data)


# ============================================================================
# MOCK RPC
# ============================================================================


class MockResponse:
    def __init__(self, value):
        self.value = value


@dataclass
class MockAccount:
    data: bytes


@dataclass
class MockKeyedAccount:
    pubkey: Pubkey
    account: MockAccount


@dataclass
class MockBlockhash:
    blockhash: Hash
    last_valid_block_height: int


@dataclass
class MockSignatureStatus:
    err: Optional[str] = None


class FakeLedger:
    """In-memory stand-in for AsyncClient that runs the crowdfunding program.

    Signed transactions are decoded and applied the way the deployed program
    would, so balances change only through donate and withdraw.
    """

    def __init__(self, program_id: Pubkey = PROGRAM_ID):
        self.program_id = program_id
        self.accounts: Dict[Pubkey, bytes] = {}
        self.sent: List[Transaction] = []
        self.calls: List[str] = []
        self.query_error: Optional[Exception] = None
        self.confirm_error: Optional[str] = None
        self.closed = False

    async def get_program_accounts(self, pubkey, commitment=None, encoding="base64", data_slice=None, filters=None):
        self.calls.append("get_program_accounts")
        if self.query_error is not None:
            raise self.query_error
        return MockResponse(
            [MockKeyedAccount(k, MockAccount(v)) for k, v in self.accounts.items()]
        )

    async def get_account_info(self, pubkey, commitment=None, encoding="base64", data_slice=None):
        self.calls.append("get_account_info")
        data = self.accounts.get(pubkey)
        return MockResponse(None if data is None else MockAccount(data))

    async def get_latest_blockhash(self, commitment=None):
        self.calls.append("get_latest_blockhash")
        return MockResponse(MockBlockhash(Hash.default(), 1000))

    async def send_raw_transaction(self, txn, opts=None):
        self.calls.append("send_raw_transaction")
        tx = Transaction.from_bytes(bytes(txn))
        self._execute(tx)
        self.sent.append(tx)
        return MockResponse(tx.signatures[0])

    async def confirm_transaction(self, tx_sig, commitment=None, sleep_seconds=0.5, last_valid_block_height=None):
        self.calls.append("confirm_transaction")
        return MockResponse([MockSignatureStatus(err=self.confirm_error)])

    async def close(self):
        self.closed = True

    def _execute(self, tx: Transaction) -> None:
        keys = tx.message.account_keys
        for ix in tx.message.instructions:
            if keys[ix.program_id_index] != self.program_id:
                raise RPCException("Attempt to load a program that does not exist")
            accounts = [keys[i] for i in bytes(ix.accounts)]
            data = bytes(ix.data)
            campaign, user = accounts[0], accounts[1]

            if data[:8] == INSTRUCTION_CREATE:
                expected, _ = get_campaign_pda(user, CAMPAIGN_SEED, self.program_id)
                if campaign != expected:
                    raise RPCException("A seeds constraint was violated")
                if campaign in self.accounts:
                    raise RPCException("Allocate: account already in use")
                name, offset = decode_string(data, 8, MAX_NAME_LEN)
                description, _ = decode_string(data, offset, MAX_DESCRIPTION_LEN)
                self.accounts[campaign] = build_campaign_data(user, name, description, 0, padding=64)
            elif data[:8] == INSTRUCTION_DONATE:
                state = self._load(campaign)
                state.amount_donated += decode_u64(data, 8)
                self._store(campaign, state)
            elif data[:8] == INSTRUCTION_WITHDRAW:
                state = self._load(campaign)
                amount = decode_u64(data, 8)
                if state.admin != user:
                    raise RPCException("custom program error: unauthorized")
                if amount > state.amount_donated:
                    raise RPCException("custom program error: insufficient funds")
                state.amount_donated -= amount
                self._store(campaign, state)
            else:
                raise RPCException("custom program error: InstructionFallbackNotFound")

    def _load(self, campaign: Pubkey):
        if campaign not in self.accounts:
            raise RPCException("AccountNotInitialized")
        return deserialize_campaign(self.accounts[campaign])

    def _store(self, campaign: Pubkey, state) -> None:
        self.accounts[campaign] = build_campaign_data(
            state.admin, state.name, state.description, state.amount_donated, padding=64
        )


# ============================================================================
# FIXTURES
# ============================================================================


@pytest.fixture
def ledger():
    return FakeLedger()


@pytest.fixture
def keypair():
    return Keypair()


@pytest.fixture
def wallet(keypair):
    return KeypairWallet(keypair)


@pytest.fixture
def session(wallet):
    return WalletSession(wallet)


@pytest.fixture
def reporter():
    return CollectingErrorReporter()
