"""RPC connection factory."""

from typing import Optional
from urllib.parse import urlparse

from solana.rpc.async_api import AsyncClient
from solana.rpc.commitment import Commitment, Confirmed, Finalized, Processed

from .config import DEFAULT_COMMITMENT
from .errors import EndpointUnreachableError

CLUSTER_URLS = {
    "devnet": "https://api.devnet.solana.com",
    "testnet": "https://api.testnet.solana.com",
    "mainnet-beta": "https://api.mainnet-beta.solana.com",
}

COMMITMENTS = {
    "processed": Processed,
    "confirmed": Confirmed,
    "finalized": Finalized,
}


def cluster_api_url(cluster: str = "devnet") -> str:
    """Get the public RPC URL for a cluster name."""
    try:
        return CLUSTER_URLS[cluster]
    except KeyError:
        raise EndpointUnreachableError(cluster, "unknown cluster") from None


def resolve_endpoint(endpoint: str) -> str:
    """Resolve a cluster name or validate an http(s) URL.

    Raises:
        EndpointUnreachableError: If the endpoint is neither
    """
    if endpoint in CLUSTER_URLS:
        return CLUSTER_URLS[endpoint]

    parsed = urlparse(endpoint)
    if parsed.scheme not in ("http", "https"):
        raise EndpointUnreachableError(endpoint, "expected an http(s) URL or cluster name")
    if not parsed.netloc:
        raise EndpointUnreachableError(endpoint, "missing host")
    return endpoint


def resolve_commitment(commitment: Optional[str]) -> Commitment:
    """Map a commitment name to a solana-py Commitment."""
    name = commitment or DEFAULT_COMMITMENT
    try:
        return COMMITMENTS[name]
    except KeyError:
        raise EndpointUnreachableError(
            name, f"unknown commitment (expected one of {', '.join(COMMITMENTS)})"
        ) from None


def create_connection(
    endpoint: str,
    commitment: Optional[str] = DEFAULT_COMMITMENT,
) -> AsyncClient:
    """Create a new RPC client bound to an endpoint and commitment level.

    Every call returns a fresh client; nothing is cached. Network failures
    surface later, when the client is used.

    Args:
        endpoint: http(s) URL or cluster name ("devnet", "testnet", "mainnet-beta")
        commitment: "processed", "confirmed" or "finalized"

    Raises:
        EndpointUnreachableError: If the endpoint or commitment is malformed
    """
    url = resolve_endpoint(endpoint)
    return AsyncClient(url, commitment=resolve_commitment(commitment))
