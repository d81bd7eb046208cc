"""
Base network table and endpoint selection.

The active network is chosen by ``BASE_NETWORK`` (``mainnet`` or
``testnet``); ``BASE_RPC_URL`` overrides the endpoint of whichever network
is selected.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .errors import InvalidInput


@dataclass(frozen=True)
class NetworkConfig:
    key: str
    name: str
    chain_id: int
    rpc_url: str
    explorer_url: str
    bridge_url: str = "https://bridge.base.org"
    multicall_address: str = "0xcA11bde05977b3631167028862bE2a173976CA11"


NETWORKS: dict[str, NetworkConfig] = {
    "mainnet": NetworkConfig(
        key="mainnet",
        name="Base",
        chain_id=8453,
        rpc_url="https://mainnet.base.org",
        explorer_url="https://basescan.org",
    ),
    "testnet": NetworkConfig(
        key="testnet",
        name="Base Sepolia",
        chain_id=84532,
        rpc_url="https://sepolia.base.org",
        explorer_url="https://sepolia.basescan.org",
    ),
}

DEFAULT_NETWORK = "mainnet"


def get_network(key: str) -> NetworkConfig:
    """Look up a network by key.

    Raises:
        InvalidInput: If the key is not in ``NETWORKS``.
    """
    try:
        return NETWORKS[key]
    except KeyError:
        known = ", ".join(sorted(NETWORKS))
        raise InvalidInput(f"Unknown network {key!r} (expected one of: {known})") from None


def resolve_network(key: Optional[str] = None) -> NetworkConfig:
    """Get the network from an explicit key or ``BASE_NETWORK``."""
    return get_network(key or os.environ.get("BASE_NETWORK", DEFAULT_NETWORK))


def get_rpc_url(network: Optional[NetworkConfig] = None) -> str:
    """Get the RPC URL from environment or the network default."""
    network = network or resolve_network()
    return os.environ.get("BASE_RPC_URL") or network.rpc_url


def tx_url(tx_hash: str, network: Optional[NetworkConfig] = None) -> str:
    network = network or resolve_network()
    return f"{network.explorer_url}/tx/{tx_hash}"


def address_url(address: str, network: Optional[NetworkConfig] = None) -> str:
    network = network or resolve_network()
    return f"{network.explorer_url}/address/{address}"
