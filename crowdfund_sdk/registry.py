"""Campaign listing across all program-owned accounts."""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from solana.rpc.async_api import AsyncClient
from solders.pubkey import Pubkey

from .errors import PartialListingError, SkippedAccount
from .program.accounts import deserialize_campaign
from .program.constants import PROGRAM_ID
from .program.errors import AccountNotFoundError, CrowdfundError
from .program.types import Campaign
from .reporter import ErrorReporter, LoggingErrorReporter

logger = logging.getLogger(__name__)


@dataclass
class CampaignRegistry:
    """Campaigns in the order the RPC node returned them."""

    campaigns: List[Campaign] = field(default_factory=list)
    skipped: List[SkippedAccount] = field(default_factory=list)

    def __iter__(self) -> Iterator[Campaign]:
        return iter(self.campaigns)

    def __len__(self) -> int:
        return len(self.campaigns)

    def get(self, address: Pubkey) -> Optional[Campaign]:
        """Find a campaign by address."""
        for campaign in self.campaigns:
            if campaign.address == address:
                return campaign
        return None

    def addresses(self) -> List[Pubkey]:
        return [c.address for c in self.campaigns]


class CampaignRegistryClient:
    """Reads campaign accounts owned by the program."""

    def __init__(
        self,
        connection: AsyncClient,
        program_id: Pubkey = PROGRAM_ID,
        reporter: Optional[ErrorReporter] = None,
    ):
        """Initialize the client.

        Args:
            connection: Solana RPC async client
            program_id: Crowdfunding program ID
            reporter: Where listing faults go (defaults to logging)
        """
        self.connection = connection
        self.program_id = program_id
        self.reporter = reporter or LoggingErrorReporter()

    async def list_campaigns(self) -> CampaignRegistry:
        """Fetch and decode every campaign owned by the program.

        Never raises. Accounts that fail to decode are skipped and reported
        together once; if the query itself fails the registry is empty and
        the failure is reported.
        """
        try:
            response = await self.connection.get_program_accounts(
                self.program_id, encoding="base64"
            )
            keyed_accounts = list(response.value)
        except Exception as e:
            self._report("list_campaigns", e)
            return CampaignRegistry()

        registry = CampaignRegistry()
        for keyed in keyed_accounts:
            try:
                account = deserialize_campaign(bytes(keyed.account.data))
            except CrowdfundError as e:
                logger.warning(f"Skipping account {keyed.pubkey}: {e}")
                registry.skipped.append(SkippedAccount(address=keyed.pubkey, reason=str(e)))
                continue
            registry.campaigns.append(Campaign.from_account(keyed.pubkey, account))

        if registry.skipped:
            self._report("list_campaigns", PartialListingError(registry.skipped))

        return registry

    async def get_campaign(self, address: Pubkey) -> Campaign:
        """Fetch and decode a single campaign account.

        Raises:
            AccountNotFoundError: If no account exists at the address
            InvalidAccountDataError: If the account is not a campaign
        """
        response = await self.connection.get_account_info(address, encoding="base64")

        if response.value is None:
            raise AccountNotFoundError(str(address))

        account = deserialize_campaign(bytes(response.value.data))
        return Campaign.from_account(address, account)

    def _report(self, context: str, error: Exception) -> None:
        try:
            self.reporter.report(context, error)
        except Exception as e:
            logger.error(f"Error reporter failed for {context}: {e}")


async def list_campaigns(
    connection: AsyncClient,
    program_id: Pubkey = PROGRAM_ID,
    reporter: Optional[ErrorReporter] = None,
) -> CampaignRegistry:
    """List all campaigns owned by a program."""
    return await CampaignRegistryClient(connection, program_id, reporter).list_campaigns()
