"""Wallet capability and the session that owns the connected signer."""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol

from solana.rpc.async_api import AsyncClient
from solders.keypair import Keypair
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.transaction import Transaction

from .errors import NotConnectedError, WalletRejectedError, WalletUnavailableError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SignerIdentity:
    """Public identity of the connected signer."""

    pubkey: Pubkey

    def __str__(self) -> str:
        return str(self.pubkey)

    def __bytes__(self) -> bytes:
        return bytes(self.pubkey)


class SessionState(Enum):
    """Lifecycle of a wallet session."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"


class WalletAdapter(Protocol):
    """Signing capability a session connects through."""

    async def connect(self, only_if_trusted: bool = False) -> Pubkey:
        """Connect and return the signer's public key.

        With only_if_trusted the wallet must not prompt; it fails instead.
        """
        ...

    async def disconnect(self) -> None:
        ...

    async def sign_and_send(
        self, transaction: Transaction, connection: AsyncClient
    ) -> Signature:
        """Sign a transaction and send it, returning its signature.

        A declined signature should raise WalletRejectedError. Any other
        exception is treated as a rejection of the instruction as well.
        """
        ...


class KeypairWallet:
    """Wallet backed by a local keypair.

    Behaves like a browser wallet extension: the first connect is the
    interactive approval, after which the wallet trusts this application and
    silent connects succeed.
    """

    def __init__(self, keypair: Keypair, trusted: bool = False):
        self._keypair = keypair
        self._trusted = trusted
        self._connected = False

    @classmethod
    def from_file(cls, path: str, trusted: bool = False) -> "KeypairWallet":
        """Load a keypair from a Solana CLI JSON file."""
        with open(path, "r") as f:
            secret = json.load(f)
        return cls(Keypair.from_bytes(bytes(secret)), trusted=trusted)

    @property
    def pubkey(self) -> Pubkey:
        return self._keypair.pubkey()

    @property
    def is_trusted(self) -> bool:
        return self._trusted

    async def connect(self, only_if_trusted: bool = False) -> Pubkey:
        if only_if_trusted and not self._trusted:
            raise WalletRejectedError("application is not trusted")
        self._trusted = True
        self._connected = True
        return self.pubkey

    async def disconnect(self) -> None:
        self._connected = False

    async def sign_and_send(
        self, transaction: Transaction, connection: AsyncClient
    ) -> Signature:
        if not self._connected:
            raise WalletRejectedError("wallet is not connected")
        transaction.sign([self._keypair], transaction.message.recent_blockhash)
        response = await connection.send_raw_transaction(bytes(transaction))
        return response.value


class WalletSession:
    """The connected-signer state for one process.

    Only this object changes the session state; every other component reads
    it through the session it was handed.
    """

    def __init__(self, wallet: Optional[WalletAdapter] = None):
        """Create a disconnected session.

        Args:
            wallet: Signing capability, or None if no wallet is installed
        """
        self._wallet = wallet
        self._state = SessionState.DISCONNECTED
        self._identity: Optional[SignerIdentity] = None
        self._attempt = 0

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def identity(self) -> Optional[SignerIdentity]:
        return self._identity

    @property
    def is_connected(self) -> bool:
        return self._state == SessionState.CONNECTED

    @property
    def has_wallet(self) -> bool:
        return self._wallet is not None

    async def connect(self) -> SignerIdentity:
        """Connect interactively.

        Raises:
            WalletUnavailableError: If no wallet is installed
            WalletRejectedError: If the user declines the connection
        """
        if self._wallet is None:
            raise WalletUnavailableError()
        identity = await self._open(only_if_trusted=False)
        logger.info(f"Connected with public key: {identity}")
        return identity

    async def try_reconnect_silently(self) -> Optional[SignerIdentity]:
        """Reconnect without prompting, if the wallet already trusts us.

        Failure is an expected outcome: the session stays disconnected and
        None is returned.
        """
        if self._wallet is None:
            logger.debug("No wallet installed, skipping silent reconnect")
            return None
        try:
            identity = await self._open(only_if_trusted=True)
        except Exception as e:
            logger.debug(f"Silent reconnect declined: {e}")
            return None
        logger.info(f"Reconnected with public key: {identity}")
        return identity

    async def disconnect(self) -> None:
        """Drop the connected identity. Does nothing if already disconnected."""
        if self._state == SessionState.DISCONNECTED:
            return
        try:
            if self._wallet is not None:
                await self._wallet.disconnect()
        finally:
            self._state = SessionState.DISCONNECTED
            self._identity = None
            logger.info("Disconnected")

    def require_signer(self) -> SignerIdentity:
        """Get the connected identity.

        Raises:
            NotConnectedError: If the session is not connected
        """
        if self._state != SessionState.CONNECTED or self._identity is None:
            raise NotConnectedError()
        return self._identity

    async def sign_and_send(
        self, transaction: Transaction, connection: AsyncClient
    ) -> Signature:
        """Have the connected wallet sign and send a transaction."""
        self.require_signer()
        return await self._wallet.sign_and_send(transaction, connection)

    async def _open(self, only_if_trusted: bool) -> SignerIdentity:
        if self._state == SessionState.CONNECTED and self._identity is not None:
            return self._identity

        self._attempt += 1
        attempt = self._attempt
        self._state = SessionState.CONNECTING
        try:
            pubkey = await self._wallet.connect(only_if_trusted=only_if_trusted)
        except BaseException:
            # Only the latest attempt may roll back, and only from CONNECTING.
            if attempt == self._attempt and self._state == SessionState.CONNECTING:
                self._state = SessionState.DISCONNECTED
                self._identity = None
            raise

        if self._state != SessionState.CONNECTED:
            self._identity = SignerIdentity(pubkey)
            self._state = SessionState.CONNECTED
        return self._identity
