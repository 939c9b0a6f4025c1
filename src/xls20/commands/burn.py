"""
Burn - Destroy an XLS-20 NFT.

Burns a token held by the stored wallet, or, with --owner, a burnable
token the wallet issued that another account now holds.
"""

from __future__ import annotations

from typing import Optional

import click

from ._common import connected_client, echo_outcome, network_option


@click.command()
@click.argument("token_id")
@click.option(
    "--owner",
    default=None,
    help="Holder of the NFT, when burning a token held by another account",
)
@network_option
def burn(token_id: str, owner: Optional[str], network: str) -> None:
    """Burn an NFT."""
    with connected_client(network) as client:
        echo_outcome(client.burn(token_id, owner=owner))
