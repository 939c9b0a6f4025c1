"""
Network resolution for XRP Ledger endpoints.

Known aliases map to fixed websocket URLs; any other string is used
verbatim as a custom endpoint.  Only test networks may be funded from a
faucet.  A custom endpoint counts as a test network when a faucet host is
configured for it.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Endpoint:
    """
    A resolved ledger endpoint.

    Attributes:
        name: "Devnet", "Testnet", "Mainnet" or "Custom"
        url: Websocket URL of the node
        is_test: Whether faucet funding is allowed
        faucet_host: Faucet host override (custom endpoints only)
    """
    name: str
    url: str
    is_test: bool
    faucet_host: Optional[str] = None


DEVNET = Endpoint("Devnet", "wss://s.devnet.rippletest.net:51233", is_test=True)
TESTNET = Endpoint("Testnet", "wss://s.altnet.rippletest.net:51233", is_test=True)
MAINNET = Endpoint("Mainnet", "wss://xrplcluster.com/", is_test=False)

KNOWN_ENDPOINTS: dict[str, Endpoint] = {
    e.name.lower(): e for e in (DEVNET, TESTNET, MAINNET)
}

DEFAULT_NETWORK = "Devnet"


def resolve_endpoint(network: str, faucet_host: Optional[str] = None) -> Endpoint:
    """
    Resolve a network alias or custom URL to an Endpoint.

    Args:
        network: Alias (case-insensitive) or a literal websocket URL
        faucet_host: Faucet host for a custom endpoint; ignored for aliases

    Returns:
        The resolved Endpoint

    Raises:
        ValueError: If network is empty
    """
    if not network or not network.strip():
        raise ValueError("Network must be an alias or an endpoint URL")

    known = KNOWN_ENDPOINTS.get(network.strip().lower())
    if known is not None:
        return known

    return Endpoint(
        name="Custom",
        url=network.strip(),
        is_test=faucet_host is not None,
        faucet_host=faucet_host,
    )


def get_network() -> str:
    """Get the network selector from environment or default."""
    return os.environ.get("XRPL_NETWORK", DEFAULT_NETWORK)


def get_faucet_host() -> Optional[str]:
    """Get the faucet host for custom endpoints from environment."""
    return os.environ.get("XRPL_FAUCET_HOST") or None
