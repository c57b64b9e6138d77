"""Main client for the Crowdfund SDK."""

from typing import Optional, Tuple

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey
from solders.signature import Signature

from .config import CrowdfundConfig
from .connection import create_connection
from .errors import InstructionRejectedError
from .invoker import InstructionInvoker
from .registry import CampaignRegistry, CampaignRegistryClient
from .reporter import ErrorReporter, LoggingErrorReporter
from .wallet import SignerIdentity, WalletAdapter, WalletSession


class CrowdfundClient:
    """Async client wiring a wallet session to the crowdfunding program.

    Example:
        ```python
        wallet = KeypairWallet.from_file("id.json")
        async with CrowdfundClient(wallet) as client:
            await client.connect()
            address, _ = await client.create_campaign("Roof Fund", "Repair roof")
            _, registry = await client.donate(address, 200_000_000)
            print(registry.get(address).amount_raised)
        ```
    """

    def __init__(
        self,
        wallet: Optional[WalletAdapter] = None,
        config: Optional[CrowdfundConfig] = None,
        connection: Optional[AsyncClient] = None,
        reporter: Optional[ErrorReporter] = None,
    ):
        """Create a client.

        Args:
            wallet: Signing capability, or None if no wallet is installed
            config: Endpoint, commitment and program settings
            connection: Pre-built RPC client (skips create_connection)
            reporter: Where faults are reported (defaults to logging)
        """
        self.config = config or CrowdfundConfig.default()
        self.reporter = reporter or LoggingErrorReporter()
        self.session = WalletSession(wallet)
        if connection is None:
            connection = create_connection(self.config.endpoint, self.config.commitment)
        self.connection = connection
        self.registry = CampaignRegistryClient(
            self.connection, self.config.program_id, self.reporter
        )
        self.invoker = InstructionInvoker(
            self.session,
            self.connection,
            program_id=self.config.program_id,
            namespace_tag=self.config.namespace_tag,
            commitment=self.config.commitment,
        )
        self._campaigns = CampaignRegistry()

    async def __aenter__(self) -> "CrowdfundClient":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def campaigns(self) -> CampaignRegistry:
        """The registry from the most recent refresh."""
        return self._campaigns

    @property
    def identity(self) -> Optional[SignerIdentity]:
        return self.session.identity

    async def start(self) -> Optional[SignerIdentity]:
        """Reconnect silently if the wallet already trusts this application."""
        return await self.session.try_reconnect_silently()

    async def close(self) -> None:
        """Close the RPC connection."""
        await self.connection.close()

    # =========================================================================
    # Session
    # =========================================================================

    async def connect(self) -> SignerIdentity:
        """Connect the wallet interactively."""
        return await self.session.connect()

    async def disconnect(self) -> None:
        """Disconnect the wallet."""
        await self.session.disconnect()

    # =========================================================================
    # Campaigns
    # =========================================================================

    async def refresh_campaigns(self) -> CampaignRegistry:
        """Rebuild the campaign registry from the chain."""
        self._campaigns = await self.registry.list_campaigns()
        return self._campaigns

    async def create_campaign(
        self, name: str, description: str
    ) -> Tuple[Pubkey, Signature]:
        """Create the connected signer's campaign."""
        try:
            return await self.invoker.create(name, description)
        except InstructionRejectedError as e:
            self.reporter.report("create_campaign", e)
            raise

    async def donate(
        self, campaign: Pubkey, amount: int
    ) -> Tuple[Signature, CampaignRegistry]:
        """Donate, then refresh the registry so it shows the new balance."""
        try:
            signature = await self.invoker.donate(campaign, amount)
        except InstructionRejectedError as e:
            self.reporter.report("donate", e)
            raise
        return signature, await self.refresh_campaigns()

    async def withdraw(self, campaign: Pubkey, amount: int) -> Signature:
        """Withdraw from a campaign. The registry is not refreshed."""
        try:
            return await self.invoker.withdraw(campaign, amount)
        except InstructionRejectedError as e:
            self.reporter.report("withdraw", e)
            raise
