"""Tests for the client module."""

import pytest
from solders.pubkey import Pubkey

from crowdfund_sdk import (
    PROGRAM_ID,
    CrowdfundClient,
    CrowdfundConfig,
    InstructionRejectedError,
    KeypairWallet,
    NotConnectedError,
    SessionState,
    WalletUnavailableError,
)


@pytest.fixture
def client(wallet, ledger, reporter):
    return CrowdfundClient(wallet, connection=ledger, reporter=reporter)


class TestClientInit:
    def test_default_config(self, wallet, ledger):
        client = CrowdfundClient(wallet, connection=ledger)

        assert client.config.program_id == PROGRAM_ID
        assert client.registry.program_id == PROGRAM_ID
        assert client.invoker.program_id == PROGRAM_ID

    def test_custom_program_id(self, wallet, ledger):
        program_id = Pubkey.new_unique()
        config = CrowdfundConfig().with_program_id(program_id)

        client = CrowdfundClient(wallet, config=config, connection=ledger)

        assert client.registry.program_id == program_id
        assert client.invoker.program_id == program_id

    def test_builds_connection_from_config(self, wallet):
        client = CrowdfundClient(wallet, config=CrowdfundConfig().with_endpoint("http://127.0.0.1:8899"))

        assert client.connection is not None


class TestStartup:
    @pytest.mark.asyncio
    async def test_silent_reconnect_without_trust(self, client, reporter):
        identity = await client.start()

        assert identity is None
        assert client.session.state == SessionState.DISCONNECTED
        assert reporter.reports == []

    @pytest.mark.asyncio
    async def test_silent_reconnect_with_trust(self, keypair, ledger, reporter):
        client = CrowdfundClient(KeypairWallet(keypair, trusted=True), connection=ledger, reporter=reporter)

        identity = await client.start()

        assert identity.pubkey == keypair.pubkey()
        assert client.identity == identity

    @pytest.mark.asyncio
    async def test_context_manager_closes_connection(self, wallet, ledger):
        async with CrowdfundClient(wallet, connection=ledger) as client:
            assert client.session.state == SessionState.DISCONNECTED

        assert ledger.closed

    @pytest.mark.asyncio
    async def test_no_wallet(self, ledger, reporter):
        client = CrowdfundClient(None, connection=ledger, reporter=reporter)

        assert await client.start() is None
        with pytest.raises(WalletUnavailableError):
            await client.connect()
        assert reporter.reports == []


class TestCampaignLifecycle:
    @pytest.mark.asyncio
    async def test_create_donate_withdraw(self, client, keypair, reporter):
        await client.connect()

        address, _ = await client.create_campaign("Roof Fund", "Repair roof")
        registry = await client.refresh_campaigns()
        campaign = registry.get(address)
        assert campaign is not None
        assert campaign.name == "Roof Fund"
        assert campaign.description == "Repair roof"
        assert campaign.owner == keypair.pubkey()
        assert campaign.amount_raised == 0

        signature, registry = await client.donate(address, 200_000_000)
        assert registry.get(address).amount_raised == 200_000_000
        assert client.campaigns is registry
        assert signature == client.connection.sent[-1].signatures[0]

        await client.withdraw(address, 200_000_000)
        registry = await client.refresh_campaigns()
        assert registry.get(address).amount_raised == 0

        assert reporter.reports == []

    @pytest.mark.asyncio
    async def test_withdraw_does_not_refresh(self, client, ledger):
        await client.connect()
        address, _ = await client.create_campaign("Roof Fund", "Repair roof")
        await client.donate(address, 10)
        ledger.calls.clear()

        await client.withdraw(address, 5)

        assert "get_program_accounts" not in ledger.calls
        assert client.campaigns.get(address).amount_raised == 10

    @pytest.mark.asyncio
    async def test_rejection_is_reported_and_raised(self, client, reporter):
        await client.connect()
        address, _ = await client.create_campaign("Roof Fund", "Repair roof")

        with pytest.raises(InstructionRejectedError):
            await client.withdraw(address, 1)

        assert len(reporter.reports) == 1
        assert reporter.reports[0].context == "withdraw"

    @pytest.mark.asyncio
    async def test_failed_donate_skips_refresh(self, client, ledger):
        await client.connect()
        ledger.calls.clear()

        with pytest.raises(InstructionRejectedError):
            await client.donate(Pubkey.new_unique(), 10)

        assert "get_program_accounts" not in ledger.calls

    @pytest.mark.asyncio
    async def test_disconnected_operations(self, client, ledger):
        with pytest.raises(NotConnectedError):
            await client.create_campaign("Roof Fund", "Repair roof")
        with pytest.raises(NotConnectedError):
            await client.donate(Pubkey.new_unique(), 1)
        with pytest.raises(NotConnectedError):
            await client.withdraw(Pubkey.new_unique(), 1)

        assert ledger.calls == []

    @pytest.mark.asyncio
    async def test_disconnect(self, client):
        await client.connect()

        await client.disconnect()

        assert client.identity is None
        assert client.session.state == SessionState.DISCONNECTED

    @pytest.mark.asyncio
    async def test_refresh_survives_transport_failure(self, client, ledger, reporter):
        ledger.query_error = ConnectionError("connection refused")

        registry = await client.refresh_campaigns()

        assert len(registry) == 0
        assert len(reporter.reports) == 1
