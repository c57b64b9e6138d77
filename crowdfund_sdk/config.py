"""Configuration for the Crowdfund SDK client."""

import os
from dataclasses import dataclass

from solders.pubkey import Pubkey

from .program.constants import CAMPAIGN_SEED, PROGRAM_ID

DEFAULT_CLUSTER = "devnet"
DEFAULT_COMMITMENT = "processed"


@dataclass
class CrowdfundConfig:
    """Where to find the program and how to talk to the cluster."""

    endpoint: str = DEFAULT_CLUSTER
    commitment: str = DEFAULT_COMMITMENT
    program_id: Pubkey = PROGRAM_ID
    namespace_tag: bytes = CAMPAIGN_SEED

    @classmethod
    def default(cls) -> "CrowdfundConfig":
        """Create default config (devnet, processed commitment)."""
        return cls()

    @classmethod
    def from_env(cls) -> "CrowdfundConfig":
        """Create config from CROWDFUND_* environment variables.

        Unset variables fall back to the defaults.
        """
        config = cls()
        if "CROWDFUND_RPC_URL" in os.environ:
            config.endpoint = os.environ["CROWDFUND_RPC_URL"]
        if "CROWDFUND_COMMITMENT" in os.environ:
            config.commitment = os.environ["CROWDFUND_COMMITMENT"]
        if "CROWDFUND_PROGRAM_ID" in os.environ:
            config.program_id = Pubkey.from_string(os.environ["CROWDFUND_PROGRAM_ID"])
        if "CROWDFUND_NAMESPACE" in os.environ:
            config.namespace_tag = os.environ["CROWDFUND_NAMESPACE"].encode("utf-8")
        return config

    def with_endpoint(self, endpoint: str) -> "CrowdfundConfig":
        """Set the RPC endpoint or cluster name."""
        self.endpoint = endpoint
        return self

    def with_commitment(self, commitment: str) -> "CrowdfundConfig":
        """Set the commitment level."""
        self.commitment = commitment
        return self

    def with_program_id(self, program_id: Pubkey) -> "CrowdfundConfig":
        """Set the program ID."""
        self.program_id = program_id
        return self

    def with_namespace_tag(self, namespace_tag: bytes) -> "CrowdfundConfig":
        """Set the campaign PDA namespace tag."""
        self.namespace_tag = namespace_tag
        return self
